"""Entry points that parse TypeScript into a syntax tree arena."""

from __future__ import annotations

import asyncio

from .backend import DenoBackend
from .errors import ParseRuntimeError
from .nodes import AstArena


def _ensure_no_running_loop() -> None:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return
    raise ParseRuntimeError(
        "Failed to create event loop: cannot block inside a running event loop"
    )


def parse_source(source):
    """Parse TypeScript source text with the default Deno backend."""
    _ensure_no_running_loop()
    backend = DenoBackend()
    ast_json = asyncio.run(backend.parse_raw(source))
    return AstArena.from_json(ast_json)


def parse_file(path):
    """Parse a TypeScript file with the default Deno backend."""
    _ensure_no_running_loop()
    backend = DenoBackend()
    ast_json = asyncio.run(backend.parse_file_raw(path))
    return AstArena.from_json(ast_json)


async def parse_source_async(source):
    """Parse TypeScript source text without blocking the event loop."""
    backend = DenoBackend()
    ast_json = await backend.parse_raw(source)
    return AstArena.from_json(ast_json)


async def parse_file_async(path):
    """Parse a TypeScript file without blocking the event loop."""
    backend = DenoBackend()
    ast_json = await backend.parse_file_raw(path)
    return AstArena.from_json(ast_json)