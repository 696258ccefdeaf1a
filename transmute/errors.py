"""Errors raised while parsing TypeScript source."""

from __future__ import annotations

import os


class ParseError(Exception):
    """Base class for every error raised by the parser."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IoError(ParseError):
    """Reading a source file failed."""

    def __init__(self, cause):
        super().__init__(f"I/O error: {cause}")
        self.cause = cause


class SourceFileNotFound(ParseError):
    """A source file or helper script does not exist."""

    def __init__(self, path):
        self.path = os.fspath(path)
        super().__init__(f"File not found: {self.path}")


class DenoStartFailed(ParseError):
    """The Deno subprocess could not be started."""

    def __init__(self, detail):
        super().__init__(f"Failed to start Deno subprocess: {detail}")
        self.detail = detail


class DenoExecutionError(ParseError):
    """The Deno subprocess failed while running."""

    def __init__(self, detail):
        super().__init__(f"Deno subprocess error: {detail}")
        self.detail = detail


class DenoNonZeroExit(ParseError):
    """The Deno subprocess exited with a non-zero status."""

    def __init__(self, code, detail):
        super().__init__(f"Deno exited with code {code}: {detail}")
        self.code = code
        self.detail = detail


class DenoNotFound(ParseError):
    """No usable Deno binary was found."""

    def __init__(self):
        super().__init__("Deno binary not found. Please install Deno")


class SerializationError(ParseError):
    """Encoding a request as MessagePack failed."""

    def __init__(self, detail):
        super().__init__(f"MessagePack serialization error: {detail}")
        self.detail = str(detail)


class DeserializationError(ParseError):
    """Decoding a MessagePack response failed."""

    def __init__(self, detail):
        super().__init__(f"MessagePack deserialization error: {detail}")
        self.detail = str(detail)


class JsonError(ParseError):
    """Decoding JSON failed."""

    def __init__(self, cause):
        super().__init__(f"JSON parsing error: {cause}")
        self.cause = cause


class SourceSyntaxError(ParseError):
    """The TypeScript source contains a syntax error."""

    def __init__(self, line, column, detail):
        super().__init__(f"Syntax error at {line}:{column}: {detail}")
        self.line = line
        self.column = column
        self.detail = detail


class InvalidAst(ParseError):
    """The AST received from the backend is malformed."""

    def __init__(self, detail):
        super().__init__(f"Invalid AST structure: {detail}")
        self.detail = detail


class ParseTimeout(ParseError):
    """The Deno subprocess did not finish in time."""

    def __init__(self, seconds):
        super().__init__(f"Deno process timeout after {seconds} seconds")
        self.seconds = seconds


class Unimplemented(ParseError):
    """A language feature is not supported yet."""

    def __init__(self, feature):
        super().__init__(f"Feature not implemented: {feature}")
        self.feature = feature


class GenericParseError(ParseError):
    """A parse error that fits no other category."""

    def __init__(self, detail):
        super().__init__(f"Parse error: {detail}")
        self.detail = detail


class ParseRuntimeError(ParseError):
    """The runtime needed for parsing could not be set up."""

    def __init__(self, detail):
        super().__init__(f"Runtime error: {detail}")
        self.detail = detail