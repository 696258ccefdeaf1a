import json
from pathlib import Path

import pytest

from transmute.errors import (
    DenoExecutionError,
    DenoNonZeroExit,
    DenoNotFound,
    DenoStartFailed,
    DeserializationError,
    GenericParseError,
    InvalidAst,
    IoError,
    JsonError,
    ParseError,
    ParseRuntimeError,
    ParseTimeout,
    SerializationError,
    SourceFileNotFound,
    SourceSyntaxError,
    Unimplemented,
)


def test_error_display():
    assert str(SourceFileNotFound(Path("test.ts"))) == "File not found: test.ts"
    assert "Deno binary not found" in str(DenoNotFound())
    err = SourceSyntaxError(10, 5, "Unexpected token")
    assert str(err) == "Syntax error at 10:5: Unexpected token"
    assert (err.line, err.column, err.detail) == (10, 5, "Unexpected token")


def test_error_constructors():
    assert str(InvalidAst("missing field")) == "Invalid AST structure: missing field"
    assert str(SerializationError("test error")) == (
        "MessagePack serialization error: test error"
    )
    assert str(DeserializationError("test error")) == (
        "MessagePack deserialization error: test error"
    )
    assert str(GenericParseError("something went wrong")) == (
        "Parse error: something went wrong"
    )


def test_io_error_conversion():
    cause = OSError("test")
    err = IoError(cause)
    assert err.cause is cause
    assert str(err) == "I/O error: test"


def test_json_error_conversion():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("invalid json")
    err = JsonError(info.value)
    assert err.cause is info.value
    assert str(err).startswith("JSON parsing error: ")


@pytest.mark.parametrize(
    "err, text",
    [
        (DenoStartFailed("boom"), "Failed to start Deno subprocess: boom"),
        (DenoExecutionError("boom"), "Deno subprocess error: boom"),
        (DenoNonZeroExit(2, "bad"), "Deno exited with code 2: bad"),
        (ParseTimeout(30), "Deno process timeout after 30 seconds"),
        (Unimplemented("decorators"), "Feature not implemented: decorators"),
        (ParseRuntimeError("no loop"), "Runtime error: no loop"),
    ],
)
def test_messages(err, text):
    assert str(err) == text


def test_all_are_parse_errors():
    exit_err = DenoNonZeroExit(1, "x")
    assert isinstance(exit_err, ParseError)
    assert str(exit_err) == "Deno exited with code 1: x"
    assert exit_err.code == 1

    missing = SourceFileNotFound("a.ts")
    assert isinstance(missing, ParseError)
    assert str(missing) == "File not found: a.ts"


def test_non_zero_exit_fields():
    err = DenoNonZeroExit(3, "stderr text")
    assert err.code == 3
    assert err.detail == "stderr text"