"""The graphics calls a shader needs, behind an interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

VERTEX_SHADER = 0x8B31
FRAGMENT_SHADER = 0x8B30
COMPILE_STATUS = 0x8B81
LINK_STATUS = 0x8B82
INFO_LOG_LENGTH = 0x8B84
GL_FALSE = 0
GL_TRUE = 1


class OpenGLBackend(ABC):
    """Shader, program and uniform operations of an OpenGL-style API."""

    @abstractmethod
    def create_shader(self, shader_type: int) -> int:
        """Create a shader object; 0 on failure."""

    @abstractmethod
    def shader_source(self, shader: int, source: str) -> None:
        """Set the source code of a shader."""

    @abstractmethod
    def compile_shader(self, shader: int) -> None:
        """Compile a shader."""

    @abstractmethod
    def get_shader_iv(self, shader: int, pname: int) -> int:
        """Query a shader parameter."""

    @abstractmethod
    def get_shader_info_log(self, shader: int) -> str:
        """The compile log of a shader."""

    @abstractmethod
    def delete_shader(self, shader: int) -> None:
        """Delete a shader object."""

    @abstractmethod
    def create_program(self) -> int:
        """Create a program object; 0 on failure."""

    @abstractmethod
    def attach_shader(self, program: int, shader: int) -> None:
        """Attach a shader to a program."""

    @abstractmethod
    def detach_shader(self, program: int, shader: int) -> None:
        """Detach a shader from a program."""

    @abstractmethod
    def link_program(self, program: int) -> None:
        """Link a program."""

    @abstractmethod
    def get_program_iv(self, program: int, pname: int) -> int:
        """Query a program parameter."""

    @abstractmethod
    def get_program_info_log(self, program: int) -> str:
        """The link log of a program."""

    @abstractmethod
    def use_program(self, program: int) -> None:
        """Make a program current."""

    @abstractmethod
    def delete_program(self, program: int) -> None:
        """Delete a program object."""

    @abstractmethod
    def get_uniform_location(self, program: int, name: str) -> int:
        """Location of a uniform, or -1 if there is none."""

    @abstractmethod
    def uniform_matrix4fv(self, location: int, matrix: Sequence[float]) -> None:
        """Set a 4x4 matrix uniform from 16 values."""

    @abstractmethod
    def uniform3fv(self, location: int, vector: Sequence[float]) -> None:
        """Set a three-component vector uniform."""

    @abstractmethod
    def uniform1f(self, location: int, value: float) -> None:
        """Set a float uniform."""

    @abstractmethod
    def uniform1i(self, location: int, value: int) -> None:
        """Set an integer uniform."""