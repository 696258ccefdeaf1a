"""Traversal of syntax trees with overridable per-kind hooks."""

from __future__ import annotations

from . import syntax
from .nodes import AstNode

_DISPATCH = {
    # Statements
    syntax.Block: "visit_block",
    syntax.ExpressionStatement: "visit_expression_statement",
    syntax.If: "visit_if",
    syntax.For: "visit_for",
    syntax.ForOf: "visit_for_of",
    syntax.While: "visit_while",
    syntax.DoWhile: "visit_do_while",
    syntax.Return: "visit_return",
    syntax.Break: "visit_break",
    syntax.Continue: "visit_continue",
    syntax.Switch: "visit_switch",
    syntax.Try: "visit_try",
    syntax.Throw: "visit_throw",
    syntax.VariableStatement: "visit_variable_statement",
    # Expressions
    syntax.Identifier: "visit_identifier",
    syntax.LiteralExpression: "visit_literal",
    syntax.ArrayLiteral: "visit_array",
    syntax.ObjectLiteral: "visit_object",
    syntax.Binary: "visit_binary",
    syntax.Unary: "visit_unary",
    syntax.Assignment: "visit_assignment",
    syntax.Conditional: "visit_conditional",
    syntax.Call: "visit_call",
    syntax.Member: "visit_member",
    syntax.New: "visit_new",
    syntax.ArrowFunction: "visit_arrow_function",
    syntax.FunctionExpression: "visit_function_expression",
    syntax.This: "visit_this",
    syntax.Super: "visit_super",
    syntax.Template: "visit_template",
    syntax.Sequence: "visit_sequence",
    # Declarations
    syntax.FunctionDeclaration: "visit_function_declaration",
    syntax.ClassDeclaration: "visit_class_declaration",
    syntax.InterfaceDeclaration: "visit_interface_declaration",
    syntax.TypeAliasDeclaration: "visit_type_alias_declaration",
    syntax.EnumDeclaration: "visit_enum_declaration",
    syntax.ImportDeclaration: "visit_import_declaration",
    syntax.ExportDeclaration: "visit_export_declaration",
    # Patterns
    syntax.ObjectPattern: "visit_object_pattern",
    syntax.ArrayPattern: "visit_array_pattern",
    syntax.RestPattern: "visit_rest_pattern",
    # Types
    syntax.TypeReference: "visit_type_reference",
    syntax.ArrayType: "visit_array_type",
    syntax.UnionType: "visit_union_type",
    syntax.IntersectionType: "visit_intersection_type",
    syntax.TupleType: "visit_tuple_type",
    syntax.FunctionType: "visit_function_type",
    syntax.TypeParameter: "visit_type_parameter",
    syntax.TypeAnnotationNode: "visit_type_annotation",
    # Module
    syntax.SourceFile: "visit_source_file",
    syntax.ModuleDeclaration: "visit_module_declaration",
}


class Visitor:
    """Walks a syntax tree; every hook visits the node's children unless overridden."""

    def visit_node(self, node: AstNode) -> None:
        """Dispatch to the hook that matches the node's kind."""
        for cls in type(node.kind).__mro__:
            name = _DISPATCH.get(cls)
            if name is not None:
                getattr(self, name)(node)
                return
        raise TypeError(f"unknown node kind: {type(node.kind).__name__}")

    def default_visit_node(self, node: AstNode) -> None:
        """Visit every child of ``node`` in order."""
        for child in node.children:
            self.visit_node(child)

    # --- Statements ---

    def visit_block(self, node):
        self.default_visit_node(node)

    def visit_expression_statement(self, node):
        self.default_visit_node(node)

    def visit_if(self, node):
        self.default_visit_node(node)

    def visit_for(self, node):
        self.default_visit_node(node)

    def visit_for_of(self, node):
        self.default_visit_node(node)

    def visit_while(self, node):
        self.default_visit_node(node)

    def visit_do_while(self, node):
        self.default_visit_node(node)

    def visit_return(self, node):
        self.default_visit_node(node)

    def visit_break(self, node):
        self.default_visit_node(node)

    def visit_continue(self, node):
        self.default_visit_node(node)

    def visit_switch(self, node):
        self.default_visit_node(node)

    def visit_try(self, node):
        self.default_visit_node(node)

    def visit_throw(self, node):
        self.default_visit_node(node)

    def visit_variable_statement(self, node):
        self.default_visit_node(node)

    # --- Expressions ---

    def visit_identifier(self, node):
        self.default_visit_node(node)

    def visit_literal(self, node):
        self.default_visit_node(node)

    def visit_array(self, node):
        self.default_visit_node(node)

    def visit_object(self, node):
        self.default_visit_node(node)

    def visit_binary(self, node):
        self.default_visit_node(node)

    def visit_unary(self, node):
        self.default_visit_node(node)

    def visit_assignment(self, node):
        self.default_visit_node(node)

    def visit_conditional(self, node):
        self.default_visit_node(node)

    def visit_call(self, node):
        self.default_visit_node(node)

    def visit_member(self, node):
        self.default_visit_node(node)

    def visit_new(self, node):
        self.default_visit_node(node)

    def visit_arrow_function(self, node):
        self.default_visit_node(node)

    def visit_function_expression(self, node):
        self.default_visit_node(node)

    def visit_this(self, node):
        self.default_visit_node(node)

    def visit_super(self, node):
        self.default_visit_node(node)

    def visit_template(self, node):
        self.default_visit_node(node)

    def visit_sequence(self, node):
        self.default_visit_node(node)

    # --- Declarations ---

    def visit_function_declaration(self, node):
        self.default_visit_node(node)

    def visit_class_declaration(self, node):
        self.default_visit_node(node)

    def visit_interface_declaration(self, node):
        self.default_visit_node(node)

    def visit_type_alias_declaration(self, node):
        self.default_visit_node(node)

    def visit_enum_declaration(self, node):
        self.default_visit_node(node)

    def visit_import_declaration(self, node):
        self.default_visit_node(node)

    def visit_export_declaration(self, node):
        self.default_visit_node(node)

    # --- Patterns ---

    def visit_object_pattern(self, node):
        self.default_visit_node(node)

    def visit_array_pattern(self, node):
        self.default_visit_node(node)

    def visit_rest_pattern(self, node):
        self.default_visit_node(node)

    # --- Types ---

    def visit_type_reference(self, node):
        self.default_visit_node(node)

    def visit_array_type(self, node):
        self.default_visit_node(node)

    def visit_union_type(self, node):
        self.default_visit_node(node)

    def visit_intersection_type(self, node):
        self.default_visit_node(node)

    def visit_tuple_type(self, node):
        self.default_visit_node(node)

    def visit_function_type(self, node):
        self.default_visit_node(node)

    def visit_type_parameter(self, node):
        self.default_visit_node(node)

    def visit_type_annotation(self, node):
        self.default_visit_node(node)

    # --- Module ---

    def visit_source_file(self, node):
        self.default_visit_node(node)

    def visit_module_declaration(self, node):
        self.default_visit_node(node)


class NodeCounter(Visitor):
    """Counts every node reached in a traversal."""

    def __init__(self) -> None:
        self.count = 0

    @classmethod
    def count_nodes(cls, root: AstNode) -> int:
        """Total number of nodes visited from ``root``."""
        counter = cls()
        counter.visit_node(root)
        return counter.count

    def reset(self) -> None:
        self.count = 0

    def visit_node(self, node: AstNode) -> None:
        self.count += 1
        self.default_visit_node(node)


class DepthCalculator(Visitor):
    """Finds the maximum nesting depth of a tree."""

    def __init__(self) -> None:
        self.current_depth = 0
        self.max_depth = 0

    @classmethod
    def depth(cls, root: AstNode) -> int:
        calculator = cls()
        calculator.visit_node(root)
        return calculator.max_depth

    def visit_node(self, node: AstNode) -> None:
        self.current_depth += 1
        self.max_depth = max(self.max_depth, self.current_depth)
        try:
            self.default_visit_node(node)
        finally:
            self.current_depth -= 1


class CollectIdentifiers(Visitor):
    """Gathers the names of identifier nodes in traversal order."""

    def __init__(self) -> None:
        self.identifiers: list = []

    @classmethod
    def collect(cls, root: AstNode) -> list:
        collector = cls()
        collector.visit_node(root)
        return collector.identifiers

    def visit_identifier(self, node: AstNode) -> None:
        self.identifiers.append(node.kind.name)