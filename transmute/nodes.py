"""Syntax tree nodes and the arena that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .span import Span
from .syntax import NodeKind


@dataclass(eq=False)
class AstNode:
    """A syntax tree node: its kind, an optional source span and its children."""

    kind: NodeKind
    span: Optional[Span] = None
    children: list = field(default_factory=list)

    def add_child(self, child: AstNode) -> None:
        self.children.append(child)

    def extend_children(self, children) -> None:
        self.children.extend(children)


class NodeBuilder:
    """Creates nodes that belong to an arena."""

    def __init__(self, arena: AstArena) -> None:
        self.arena = arena

    def _register(self, node: AstNode) -> AstNode:
        self.arena._nodes.append(node)
        return node

    def alloc(self, kind: NodeKind) -> AstNode:
        return self._register(AstNode(kind))

    def alloc_with_span(self, kind: NodeKind, span: Span) -> AstNode:
        return self._register(AstNode(kind, span=span))

    def alloc_with_children(self, kind: NodeKind, children) -> AstNode:
        return self._register(AstNode(kind, children=list(children)))

    def alloc_complete(self, kind: NodeKind, span: Span, children) -> AstNode:
        return self._register(AstNode(kind, span=span, children=list(children)))


class AstArena:
    """Owns every node of one parsed source file, in creation order."""

    def __init__(self) -> None:
        self._nodes: list = []
        self.root: Optional[AstNode] = None
        self.source_json = None

    def builder(self) -> NodeBuilder:
        return NodeBuilder(self)

    def set_root(self, root: AstNode) -> None:
        self.root = root

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[AstNode]:
        return iter(self._nodes)

    @classmethod
    def from_json(cls, value) -> AstArena:
        """Create an arena for a backend's JSON syntax tree, kept as ``source_json``."""
        arena = cls()
        arena.source_json = value
        return arena