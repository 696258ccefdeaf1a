"""TypeScript syntax tree kinds, source spans, tree containers, visitors and a Deno-backed parser."""

__version__ = "0.1.0"