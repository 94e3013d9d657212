"""Errors raised by the engine."""

from __future__ import annotations


class EngineError(Exception):
    """An operation of an engine component failed."""

    def __init__(
        self, component: str, operation: str, cause: BaseException | None = None
    ) -> None:
        self.component = component
        self.operation = operation
        self.cause = cause
        message = f"engine {component}: {operation} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.__cause__ = cause