import pytest

from tinyengine.errors import EngineError


def test_message_without_cause():
    error = EngineError("core", "application not set")
    assert str(error) == "engine core: application not set failed"
    assert error.cause is None


def test_message_with_cause():
    cause = RuntimeError("boom")
    error = EngineError("core", "application initialization", cause)
    assert str(error) == "engine core: application initialization failed: boom"


def test_fields_are_kept():
    cause = ValueError("bad")
    error = EngineError("renderer", "draw", cause)
    assert error.component == "renderer"
    assert error.operation == "draw"
    assert error.cause is cause
    assert error.__cause__ is cause


def test_message_contains_operation_and_cause():
    error = EngineError("audio", "play", OSError("missing file"))
    text = str(error)
    assert "audio" in text
    assert "play" in text
    assert text.endswith("missing file")


def test_raised_error_keeps_message_and_fields():
    error = EngineError("core", "application not set")
    with pytest.raises(EngineError) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == "engine core: application not set failed"
    assert excinfo.value.component == "core"
    assert excinfo.value.operation == "application not set"