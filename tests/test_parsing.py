import json
import os
import stat
import sys

import msgpack
import pytest

from transmute.errors import (
    DenoExecutionError,
    DenoNonZeroExit,
    ParseRuntimeError,
    SourceFileNotFound,
    SourceSyntaxError,
)
from transmute.parsing import (
    parse_file,
    parse_file_async,
    parse_source,
    parse_source_async,
)

SIMPLE_TS = """
function add(a: number, b: number): number {
    return a + b;
}

const result = add(2, 3);
"""

SAMPLE_AST = {"kind": "SourceFile", "statements": []}

_FAKE_DENO = """#!{python}
import json
import sys

if sys.argv[1:] == ["--version"]:
    print("deno 1.0.0")
    sys.exit(0)
data = sys.stdin.buffer.read()
with open({request_path!r}, "wb") as handle:
    handle.write(data)
with open({argv_path!r}, "w") as handle:
    json.dump(sys.argv[1:], handle)
sys.stderr.write({stderr!r})
sys.stdout.buffer.write(bytes.fromhex({payload!r}))
sys.exit({code})
"""


class FakeDeno:
    def __init__(self, root):
        self.root = root
        self.request_path = root / "request.bin"
        self.argv_path = root / "argv.json"

    def install(self, response, code=0, stderr=""):
        bin_dir = self.root / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / "deno"
        script.write_text(
            _FAKE_DENO.format(
                python=sys.executable,
                request_path=str(self.request_path),
                argv_path=str(self.argv_path),
                stderr=stderr,
                payload=msgpack.packb(response, use_bin_type=True).hex(),
                code=code,
            )
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def request(self):
        return msgpack.unpackb(self.request_path.read_bytes(), raw=False)

    def argv(self):
        return json.loads(self.argv_path.read_text())


@pytest.fixture
def fake_deno(tmp_path, monkeypatch):
    bridge = tmp_path / "deno-bridge"
    bridge.mkdir()
    (bridge / "deno_parser.ts").write_text("// parser script\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PATH", str(tmp_path / "bin") + os.pathsep + os.environ.get("PATH", ""))
    return FakeDeno(tmp_path)


def test_parse_source_returns_arena_with_ast(fake_deno):
    fake_deno.install({"success": True, "ast": SAMPLE_AST, "errors": []})
    arena = parse_source(SIMPLE_TS)
    assert arena.source_json == SAMPLE_AST
    assert arena.root is None
    assert len(arena) == 0


def test_parse_source_sends_source_and_arguments(fake_deno):
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    parse_source(SIMPLE_TS)
    assert fake_deno.request() == {"source": SIMPLE_TS}
    assert fake_deno.argv() == [
        "run",
        "--allow-read",
        "--allow-env",
        "deno-bridge/deno_parser.ts",
    ]


def test_parse_file_reads_fixture(fake_deno, tmp_path):
    fixture = tmp_path / "simple.ts"
    fixture.write_text(SIMPLE_TS)
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    arena = parse_file(fixture)
    assert arena.source_json["kind"] == "SourceFile"
    assert fake_deno.request() == {"source": SIMPLE_TS}


def test_parse_file_accepts_string_path(fake_deno, tmp_path):
    fixture = tmp_path / "simple.ts"
    fixture.write_text("const x: number = 42;")
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    arena = parse_file(str(fixture))
    assert arena.source_json == SAMPLE_AST


def test_parse_file_missing_file(fake_deno, tmp_path):
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    missing = tmp_path / "missing.ts"
    with pytest.raises(SourceFileNotFound) as info:
        parse_file(missing)
    assert str(info.value) == f"File not found: {missing}"


def test_parse_source_without_script(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SourceFileNotFound) as info:
        parse_source("const x = 1;")
    assert "deno_parser.ts" in str(info.value)


def test_parse_source_reports_syntax_errors(fake_deno):
    fake_deno.install(
        {"success": True, "ast": SAMPLE_AST, "errors": ["')' expected.", "bad token"]}
    )
    with pytest.raises(SourceSyntaxError) as info:
        parse_source('function broken( { return "this is invalid"; }')
    assert info.value.line == 1
    assert info.value.column == 1
    assert info.value.detail == "')' expected.\nbad token"


def test_parse_source_reports_backend_failure(fake_deno):
    fake_deno.install({"success": False, "error": "parser crashed"})
    with pytest.raises(DenoExecutionError) as info:
        parse_source("const x = 1;")
    assert str(info.value) == "Deno subprocess error: parser crashed"


def test_parse_source_reports_nonzero_exit(fake_deno):
    fake_deno.install({"success": True, "ast": SAMPLE_AST}, code=3, stderr="boom")
    with pytest.raises(DenoNonZeroExit) as info:
        parse_source("const x = 1;")
    assert info.value.code == 3
    assert info.value.detail == "boom"


@pytest.mark.asyncio
async def test_parse_source_inside_running_loop_is_rejected():
    with pytest.raises(ParseRuntimeError) as info:
        parse_source("const x = 1;")
    assert str(info.value).startswith("Runtime error: ")


@pytest.mark.asyncio
async def test_parse_source_async(fake_deno):
    source = """
    async function fetchData(url: string): Promise<string> {
        const response = await fetch(url);
        return response.text();
    }
    """
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    arena = await parse_source_async(source)
    assert arena.source_json == SAMPLE_AST
    assert fake_deno.request() == {"source": source}


@pytest.mark.asyncio
async def test_parse_file_async(fake_deno, tmp_path):
    fixture = tmp_path / "simple.ts"
    fixture.write_text(SIMPLE_TS)
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    arena = await parse_file_async(fixture)
    assert arena.source_json == SAMPLE_AST
    assert arena.root is None


@pytest.mark.asyncio
async def test_parse_file_async_missing_file(fake_deno, tmp_path):
    fake_deno.install({"success": True, "ast": SAMPLE_AST})
    with pytest.raises(SourceFileNotFound):
        await parse_file_async(tmp_path / "nope.ts")