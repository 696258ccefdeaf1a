"""Parser backends that turn TypeScript source into a JSON syntax tree."""

from __future__ import annotations

import abc
import asyncio
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import msgpack

from .errors import (
    DenoExecutionError,
    DenoNonZeroExit,
    DenoNotFound,
    DenoStartFailed,
    DeserializationError,
    InvalidAst,
    IoError,
    ParseTimeout,
    SerializationError,
    SourceFileNotFound,
    SourceSyntaxError,
)


class ParserBackend(abc.ABC):
    """Interface of a backend that parses TypeScript source."""

    @abc.abstractmethod
    async def parse_raw(self, source):
        """Parse source text and return the syntax tree as JSON data."""

    async def parse_file_raw(self, path):
        """Read a file and parse its contents."""
        file_path = Path(path)
        try:
            source = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise SourceFileNotFound(file_path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise IoError(exc) from exc
        return await self.parse_raw(source)


def _default_deno_args() -> list:
    return ["run", "--allow-read", "--allow-env"]


@dataclass
class DenoBackendConfig:
    """Settings of the Deno subprocess."""

    deno_path: str = "deno"
    script_path: str = "deno-bridge/deno_parser.ts"
    timeout: int = 30
    deno_args: list = field(default_factory=_default_deno_args)


class DenoBackend(ParserBackend):
    """Parses TypeScript by running a Deno script, exchanging MessagePack over stdio."""

    def __init__(self, config: Optional[DenoBackendConfig] = None) -> None:
        config = config if config is not None else DenoBackendConfig()
        if not os.path.exists(config.script_path):
            raise SourceFileNotFound(config.script_path)
        self.config = config

    async def check_deno_available(self) -> None:
        """Raise unless the configured Deno binary runs and reports its version."""
        try:
            process = await asyncio.create_subprocess_exec(
                self.config.deno_path,
                "--version",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise DenoNotFound() from exc
        except OSError as exc:
            raise DenoStartFailed(str(exc)) from exc
        await process.communicate()
        if process.returncode != 0:
            raise DenoNotFound()

    async def parse_raw(self, source):
        await self.check_deno_available()

        try:
            payload = msgpack.packb({"source": source}, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as exc:
            raise SerializationError(exc) from exc

        try:
            process = await asyncio.create_subprocess_exec(
                self.config.deno_path,
                *self.config.deno_args,
                self.config.script_path,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise DenoStartFailed(str(exc)) from exc

        if process.stdin is None:
            raise DenoStartFailed("Failed to open stdin")
        try:
            process.stdin.write(payload)
            await process.stdin.drain()
            process.stdin.close()
        except (BrokenPipeError, ConnectionResetError) as exc:
            raise DenoExecutionError(f"Failed to write to stdin: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.config.timeout
            )
        except asyncio.TimeoutError as exc:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise ParseTimeout(self.config.timeout) from exc
        except OSError as exc:
            raise DenoExecutionError(str(exc)) from exc

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace")
            if process.returncode < 0:
                raise DenoExecutionError(f"Process terminated by signal: {message}")
            raise DenoNonZeroExit(process.returncode, message)

        response = _decode_response(stdout)

        if not response["success"]:
            raise DenoExecutionError(
                response.get("error") or "Unknown error from Deno parser"
            )
        errors = response.get("errors") or []
        if errors:
            raise SourceSyntaxError(1, 1, "\n".join(str(e) for e in errors))
        ast = response.get("ast")
        if ast is None:
            raise InvalidAst("Missing AST in response")
        return ast


def _decode_response(data: bytes) -> dict:
    try:
        response = msgpack.unpackb(data, raw=False)
    except Exception as exc:  # msgpack raises several unrelated types on bad input
        raise DeserializationError(exc) from exc
    if not isinstance(response, dict):
        raise DeserializationError("response is not a map")
    if not isinstance(response.get("success"), bool):
        raise DeserializationError("missing field `success`")
    errors = response.get("errors")
    if errors is not None and not isinstance(errors, list):
        raise DeserializationError("field `errors` is not a sequence")
    error = response.get("error")
    if error is not None and not isinstance(error, str):
        raise DeserializationError("field `error` is not a string")
    return response