# transmute

Building blocks for working with TypeScript source code in Python:

- **Source locations** (`transmute.span`): `Span` for half-open byte ranges and `LineMap` for turning byte offsets into 1-based line and column numbers.
- **Syntax tree kinds** (`transmute.syntax`): dataclasses for statements, expressions, declarations, patterns and types, along with the operator enums (`BinaryOperator`, `UnaryOperator`, `AssignmentOperator`), `Literal`, `NodeId` and the supporting records such as `Parameter` and `VariableDeclaration`.
- **Tree containers** (`transmute.nodes`): `AstNode`, `NodeBuilder` and `AstArena`.
- **Traversal** (`transmute.visitor`): a `Visitor` base class with one hook per node kind, and three ready-made visitors: `NodeCounter`, `DepthCalculator` and `CollectIdentifiers`.
- **Parsing** (`transmute.backend`, `transmute.parsing`): `DenoBackend` runs a Deno script as a subprocess and exchanges MessagePack with it over stdin and stdout. The helpers `parse_source`, `parse_file`, `parse_source_async` and `parse_file_async` build on it.
- **Errors** (`transmute.errors`): every failure is a subclass of `ParseError`.

## Installation

```
pip install .
```

To parse, you need a `deno` executable on your `PATH` and a bridge script at `deno-bridge/deno_parser.ts`, relative to the working directory. You can point to other locations with `DenoBackendConfig`.

## Spans and line maps

```python
from transmute.span import Span, LineMap

span = Span(10, 20)
assert span.contains(15) and not span.contains(20)
assert span.extend(Span(30, 40)) == Span(10, 40)
assert len(Span.point(5)) == 0

lines = LineMap.from_source("line 1\nline 2\nline 3")
assert lines.line_col(7) == (2, 1)
assert lines.line_start(3) == 14
assert lines.line_start(4) is None
```

`Span(start, end)` raises `ValueError` when `end < start`. `LineMap.line_col` counts offsets in UTF-8 bytes. It clamps any offset that lies past the end of the source.

## Building and visiting trees

```python
from transmute.nodes import AstArena
from transmute.syntax import Binary, BinaryOperator, Identifier, NodeId
from transmute.visitor import CollectIdentifiers, DepthCalculator, NodeCounter

arena = AstArena()
builder = arena.builder()
left = builder.alloc(Identifier(name="a"))
right = builder.alloc(Identifier(name="b"))
root = builder.alloc_with_children(
    Binary(operator=BinaryOperator.ADD, left=NodeId(0), right=NodeId(1)),
    [left, right],
)
arena.set_root(root)

assert len(arena) == 3
assert NodeCounter.count_nodes(root) == 3
assert DepthCalculator.depth(root) == 2
assert CollectIdentifiers.collect(root) == ["a", "b"]
```

The builder records every node it creates in its arena, in creation order. Iterating an `AstArena` yields those nodes. `NodeBuilder` also provides `alloc_with_span` and `alloc_complete`, which attach a `Span` to the new node.

To write your own pass, subclass `Visitor` and override the hooks you need, such as `visit_identifier` or `visit_function_declaration`. Each hook visits the node's children by default. To keep descending from an overridden hook, call `default_visit_node`. `visit_node` raises `TypeError` for a node whose kind it does not know.

## Parsing TypeScript

```python
from transmute.errors import ParseError
from transmute.parsing import parse_source

try:
    arena = parse_source("const x: number = 42;")
    print(arena.source_json)
except ParseError as exc:
    print(f"parse failed: {exc}")
```

`DenoBackend` first checks that `deno --version` runs. It then starts `deno run --allow-read --allow-env <script>` and writes the request `{"source": ...}` to the script's stdin. It expects a map in reply, holding `success`, `ast`, `errors` and `error`. A reply with a non-empty `errors` list raises `SourceSyntaxError` at position 1:1, with the messages joined by newlines. If the subprocess runs longer than `DenoBackendConfig.timeout` seconds (30 by default), it is killed and `ParseTimeout` is raised.

The synchronous helpers `parse_source` and `parse_file` raise `ParseRuntimeError` when they are called from inside a running event loop. In that case, await `parse_source_async` or `parse_file_async` instead.

Other errors you may want to catch include `DenoNotFound`, `DenoStartFailed`, `SourceFileNotFound` (for a missing source file or bridge script), `DenoNonZeroExit`, `DenoExecutionError`, `DeserializationError` and `InvalidAst`.

## What this package does not do

- It does not contain the Deno bridge script. You must supply `deno_parser.ts` yourself.
- `AstArena.from_json` does not convert the backend's JSON into `AstNode` objects. The arena returned by the parsing helpers keeps the JSON unchanged in `source_json`, and it has no root node and no nodes.
- It has no semantic analysis, no code generation and no command-line tool. It is a library only.