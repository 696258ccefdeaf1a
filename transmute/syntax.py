"""Node kinds and supporting records of the TypeScript syntax tree."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

_U32_MAX = 0xFFFFFFFF


class BinaryOperator(Enum):
    """Operators of binary expressions."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    EXPONENT = "**"
    BITWISE_AND = "&"
    BITWISE_OR = "|"
    BITWISE_XOR = "^"
    LEFT_SHIFT = "<<"
    RIGHT_SHIFT = ">>"
    UNSIGNED_RIGHT_SHIFT = ">>>"
    EQUAL = "=="
    STRICT_EQUAL = "==="
    NOT_EQUAL = "!="
    NOT_STRICT_EQUAL = "!=="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    LOGICAL_AND = "&&"
    LOGICAL_OR = "||"
    NULLISH_COALESCING = "??"

    def __str__(self) -> str:
        return self.value


class UnaryOperator(Enum):
    """Operators of unary expressions; prefix and postfix forms share a symbol."""

    MINUS = ("minus", "-")
    PLUS = ("plus", "+")
    LOGICAL_NOT = ("logical_not", "!")
    BITWISE_NOT = ("bitwise_not", "~")
    INCREMENT_PREFIX = ("increment_prefix", "++")
    INCREMENT_POSTFIX = ("increment_postfix", "++")
    DECREMENT_PREFIX = ("decrement_prefix", "--")
    DECREMENT_POSTFIX = ("decrement_postfix", "--")
    TYPEOF = ("typeof", "typeof")
    VOID = ("void", "void")
    DELETE = ("delete", "delete")

    def __init__(self, key: str, symbol: str) -> None:
        self.symbol = symbol

    def __str__(self) -> str:
        return self.symbol


class AssignmentOperator(Enum):
    """Operators of assignment expressions."""

    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUBTRACT_ASSIGN = "-="
    MULTIPLY_ASSIGN = "*="
    DIVIDE_ASSIGN = "/="
    MODULO_ASSIGN = "%="
    LEFT_SHIFT_ASSIGN = "<<="
    RIGHT_SHIFT_ASSIGN = ">>="
    UNSIGNED_RIGHT_SHIFT_ASSIGN = ">>>="
    BITWISE_AND_ASSIGN = "&="
    BITWISE_OR_ASSIGN = "|="
    BITWISE_XOR_ASSIGN = "^="
    EXPONENT_ASSIGN = "**="

    def __str__(self) -> str:
        return self.value


class LiteralKind(Enum):
    """The kinds of literal value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    BIGINT = "bigint"


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class Literal:
    """A literal value: string, number, boolean, null, undefined or bigint."""

    kind: LiteralKind
    value: object = None

    @classmethod
    def string(cls, value):
        return cls(LiteralKind.STRING, str(value))

    @classmethod
    def number(cls, value):
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def boolean(cls, value):
        return cls(LiteralKind.BOOLEAN, bool(value))

    @classmethod
    def null(cls):
        return cls(LiteralKind.NULL)

    @classmethod
    def undefined(cls):
        return cls(LiteralKind.UNDEFINED)

    @classmethod
    def bigint(cls, digits):
        return cls(LiteralKind.BIGINT, str(digits))

    def __str__(self) -> str:
        if self.kind is LiteralKind.STRING:
            return f'"{self.value}"'
        if self.kind is LiteralKind.NUMBER:
            return _format_number(self.value)
        if self.kind is LiteralKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is LiteralKind.NULL:
            return "null"
        if self.kind is LiteralKind.UNDEFINED:
            return "undefined"
        return f"{self.value}n"


@dataclass(frozen=True)
class NodeId:
    """Index of a node, used to refer to nodes without holding them."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("NodeId index must be an int")
        if not 0 <= self.index <= _U32_MAX:
            raise ValueError(f"NodeId index out of range: {self.index}")

    def __int__(self) -> int:
        return self.index


class VariableKind(Enum):
    """The keyword a variable is declared with."""

    LET = "let"
    CONST = "const"
    VAR = "var"


class TypeAnnotation:
    """Base class of type annotations."""

    __slots__ = ()


@dataclass(kw_only=True)
class TypeReferenceAnnotation(TypeAnnotation):
    name: str
    type_params: Optional[list] = None


@dataclass
class ArrayTypeAnnotation(TypeAnnotation):
    element: TypeAnnotation


@dataclass
class UnionTypeAnnotation(TypeAnnotation):
    types: list = field(default_factory=list)


@dataclass(kw_only=True)
class FunctionTypeAnnotation(TypeAnnotation):
    params: list = field(default_factory=list)
    return_type: TypeAnnotation


@dataclass
class UnknownAnnotation(TypeAnnotation):
    pass


@dataclass(kw_only=True)
class Parameter:
    """A function parameter."""

    name: str
    type_annotation: Optional[TypeAnnotation] = None
    default_value: Optional[NodeId] = None
    is_rest: bool = False


@dataclass(kw_only=True)
class VariableDeclaration:
    """One declarator of a variable statement."""

    name: str
    kind: VariableKind
    initializer: Optional[NodeId] = None
    type_annotation: Optional[TypeAnnotation] = None


@dataclass
class ArrayElement:
    """An element of an array literal, possibly a spread."""

    value: NodeId
    spread: bool = False


class PropertyKeyKind(Enum):
    """How an object property key is written."""

    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    COMPUTED = "computed"


@dataclass(frozen=True)
class PropertyKey:
    """The key of an object property or pattern property."""

    kind: PropertyKeyKind
    value: Union[str, float, NodeId]

    def __post_init__(self) -> None:
        if self.kind is PropertyKeyKind.COMPUTED:
            if not isinstance(self.value, NodeId):
                raise TypeError("computed property key needs a NodeId")
        elif self.kind is PropertyKeyKind.NUMBER:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise TypeError("number property key needs a number")
            object.__setattr__(self, "value", float(self.value))
        elif not isinstance(self.value, str):
            raise TypeError(f"{self.kind.value} property key needs a string")


@dataclass(kw_only=True)
class ObjectProperty:
    key: PropertyKey
    value: NodeId
    is_shorthand: bool = False


@dataclass(frozen=True)
class MemberProperty:
    """Property of a member access: a name (obj.prop) or a node (obj[expr])."""

    value: Union[str, NodeId]

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, NodeId)):
            raise TypeError("member property must be a name or a NodeId")


@dataclass
class SwitchCase:
    """A case of a switch; ``test`` is None for the default case."""

    test: Optional[NodeId] = None
    consequent: list = field(default_factory=list)


@dataclass
class CatchClause:
    variable: Optional[NodeId]
    body: NodeId


class ClassMember:
    """Base class of class members."""

    __slots__ = ()


@dataclass(kw_only=True)
class PropertyMember(ClassMember):
    name: str
    value: Optional[NodeId] = None
    type_annotation: Optional[TypeAnnotation] = None
    is_static: bool = False
    is_readonly: bool = False


@dataclass(kw_only=True)
class MethodMember(ClassMember):
    name: str
    params: list = field(default_factory=list)
    return_type: Optional[TypeAnnotation] = None
    body: NodeId
    is_static: bool = False


@dataclass(kw_only=True)
class ConstructorMember(ClassMember):
    params: list = field(default_factory=list)
    body: NodeId


@dataclass(kw_only=True)
class GetterMember(ClassMember):
    name: str
    return_type: Optional[TypeAnnotation] = None
    body: NodeId


@dataclass(kw_only=True)
class SetterMember(ClassMember):
    name: str
    params: list = field(default_factory=list)
    body: NodeId


class ImportSpecifier:
    """Base class of import specifiers."""

    __slots__ = ()


@dataclass
class NamedImport(ImportSpecifier):
    name: str
    alias: Optional[str] = None


@dataclass
class NamespaceImport(ImportSpecifier):
    name: str


@dataclass
class DefaultImport(ImportSpecifier):
    name: str


class ExportSpecifier:
    """Base class of export specifiers."""

    __slots__ = ()


@dataclass
class NamedExport(ExportSpecifier):
    name: str
    alias: Optional[str] = None


@dataclass
class DefaultExport(ExportSpecifier):
    value: NodeId


@dataclass
class EnumMember:
    name: str
    value: Optional[Literal] = None


class TemplatePart:
    """Base class of template literal parts."""

    __slots__ = ()


@dataclass
class TemplateStatic(TemplatePart):
    text: str


@dataclass
class TemplateExpression(TemplatePart):
    expression: NodeId


@dataclass(kw_only=True)
class PatternProperty:
    key: PropertyKey
    pattern: NodeId
    is_shorthand: bool = False


@dataclass
class PatternElement:
    """An array pattern element; a hole has no node, a rest element must have one."""

    node: Optional[NodeId] = None
    rest: bool = False

    def __post_init__(self) -> None:
        if self.rest and self.node is None:
            raise ValueError("a rest pattern element needs a node")


class NodeKind:
    """Base class of every kind of syntax tree node."""

    __slots__ = ()


# --- Statements ---


@dataclass
class Block(NodeKind):
    statements: list = field(default_factory=list)


@dataclass
class ExpressionStatement(NodeKind):
    expression: NodeId


@dataclass(kw_only=True)
class If(NodeKind):
    condition: NodeId
    then_statement: NodeId
    else_statement: Optional[NodeId] = None


@dataclass(kw_only=True)
class For(NodeKind):
    initializer: Optional[NodeId] = None
    condition: Optional[NodeId] = None
    increment: Optional[NodeId] = None
    body: NodeId


@dataclass(kw_only=True)
class ForOf(NodeKind):
    variable: NodeId
    iterable: NodeId
    body: NodeId


@dataclass(kw_only=True)
class While(NodeKind):
    condition: NodeId
    body: NodeId


@dataclass(kw_only=True)
class DoWhile(NodeKind):
    body: NodeId
    condition: NodeId


@dataclass
class Return(NodeKind):
    value: Optional[NodeId] = None


@dataclass
class Break(NodeKind):
    label: Optional[str] = None


@dataclass
class Continue(NodeKind):
    label: Optional[str] = None


@dataclass(kw_only=True)
class Switch(NodeKind):
    expression: NodeId
    cases: list = field(default_factory=list)


@dataclass(kw_only=True)
class Try(NodeKind):
    try_block: NodeId
    catch_clause: Optional[CatchClause] = None
    finally_block: Optional[NodeId] = None


@dataclass
class Throw(NodeKind):
    expression: NodeId


@dataclass
class VariableStatement(NodeKind):
    declarations: list = field(default_factory=list)


# --- Expressions ---


@dataclass
class Identifier(NodeKind):
    name: str


@dataclass
class LiteralExpression(NodeKind):
    literal: Literal


@dataclass
class ArrayLiteral(NodeKind):
    elements: list = field(default_factory=list)


@dataclass
class ObjectLiteral(NodeKind):
    properties: list = field(default_factory=list)


@dataclass(kw_only=True)
class Binary(NodeKind):
    operator: BinaryOperator
    left: NodeId
    right: NodeId


@dataclass(kw_only=True)
class Unary(NodeKind):
    operator: UnaryOperator
    operand: NodeId


@dataclass(kw_only=True)
class Assignment(NodeKind):
    operator: AssignmentOperator
    target: NodeId
    value: NodeId


@dataclass(kw_only=True)
class Conditional(NodeKind):
    test: NodeId
    consequent: NodeId
    alternate: NodeId


@dataclass(kw_only=True)
class Call(NodeKind):
    callee: NodeId
    arguments: list = field(default_factory=list)


@dataclass(kw_only=True)
class Member(NodeKind):
    object: NodeId
    property: MemberProperty


@dataclass(kw_only=True)
class New(NodeKind):
    callee: NodeId
    arguments: list = field(default_factory=list)


@dataclass(kw_only=True)
class ArrowFunction(NodeKind):
    params: list = field(default_factory=list)
    return_type: Optional[TypeAnnotation] = None
    body: NodeId


@dataclass(kw_only=True)
class FunctionExpression(NodeKind):
    name: Optional[str] = None
    params: list = field(default_factory=list)
    return_type: Optional[TypeAnnotation] = None
    body: NodeId


@dataclass
class This(NodeKind):
    pass


@dataclass
class Super(NodeKind):
    pass


@dataclass
class Template(NodeKind):
    parts: list = field(default_factory=list)


@dataclass
class Sequence(NodeKind):
    expressions: list = field(default_factory=list)


# --- Declarations ---


@dataclass(kw_only=True)
class FunctionDeclaration(NodeKind):
    name: str
    params: list = field(default_factory=list)
    return_type: Optional[TypeAnnotation] = None
    body: NodeId


@dataclass(kw_only=True)
class ClassDeclaration(NodeKind):
    name: str
    extends: Optional[NodeId] = None
    members: list = field(default_factory=list)


@dataclass(kw_only=True)
class InterfaceDeclaration(NodeKind):
    name: str
    extends: list = field(default_factory=list)
    body: list = field(default_factory=list)


@dataclass(kw_only=True)
class TypeParameter(NodeKind):
    """A generic type parameter, both as a node and inside declarations."""

    name: str
    constraint: Optional[TypeAnnotation] = None
    default: Optional[TypeAnnotation] = None


@dataclass(kw_only=True)
class TypeAliasDeclaration(NodeKind):
    name: str
    type_params: Optional[list] = None
    type_annotation: TypeAnnotation


@dataclass(kw_only=True)
class EnumDeclaration(NodeKind):
    name: str
    members: list = field(default_factory=list)


@dataclass(kw_only=True)
class ImportDeclaration(NodeKind):
    specifiers: list = field(default_factory=list)
    source: str


@dataclass
class ExportDeclaration(NodeKind):
    specifiers: list = field(default_factory=list)


# --- Patterns ---


@dataclass
class ObjectPattern(NodeKind):
    properties: list = field(default_factory=list)


@dataclass
class ArrayPattern(NodeKind):
    elements: list = field(default_factory=list)


@dataclass
class RestPattern(NodeKind):
    argument: NodeId


# --- Types ---


@dataclass(kw_only=True)
class TypeReference(NodeKind):
    name: str
    type_params: Optional[list] = None


@dataclass
class ArrayType(NodeKind):
    element_type: TypeAnnotation


@dataclass
class UnionType(NodeKind):
    types: list = field(default_factory=list)


@dataclass
class IntersectionType(NodeKind):
    types: list = field(default_factory=list)


@dataclass
class TupleType(NodeKind):
    elements: list = field(default_factory=list)


@dataclass(kw_only=True)
class FunctionType(NodeKind):
    params: list = field(default_factory=list)
    return_type: TypeAnnotation


@dataclass
class TypeAnnotationNode(NodeKind):
    type_annotation: TypeAnnotation


# --- Module ---


@dataclass
class SourceFile(NodeKind):
    statements: list = field(default_factory=list)


@dataclass(kw_only=True)
class ModuleDeclaration(NodeKind):
    name: str
    body: list = field(default_factory=list)