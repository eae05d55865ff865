"""Syntax tree for Glimmer templates.

These mirror the nodes Glimmer's `preprocess()` produces, one dataclass per
node kind. The `type` class attribute carries the Glimmer kind name; fields
are the snake_case versions of Glimmer's camelCase keys. Source locations
are not kept: the printer never looks at them.
"""
import dataclasses
import typing

from .errors import UnsupportedNodeKind


@dataclasses.dataclass
class PathExpression:
    type: typing.ClassVar[str] = "PathExpression"

    original: str
    parts: list[str]


@dataclasses.dataclass
class StringLiteral:
    type: typing.ClassVar[str] = "StringLiteral"

    value: str


@dataclasses.dataclass
class NumberLiteral:
    type: typing.ClassVar[str] = "NumberLiteral"

    value: int | float


@dataclasses.dataclass
class BooleanLiteral:
    type: typing.ClassVar[str] = "BooleanLiteral"

    value: bool


@dataclasses.dataclass
class NullLiteral:
    type: typing.ClassVar[str] = "NullLiteral"


@dataclasses.dataclass
class HashPair:
    type: typing.ClassVar[str] = "HashPair"

    key: str
    value: "Expression"


@dataclasses.dataclass
class Hash:
    type: typing.ClassVar[str] = "Hash"

    pairs: list[HashPair] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class SubExpression:
    type: typing.ClassVar[str] = "SubExpression"

    path: PathExpression
    params: list["Expression"] = dataclasses.field(default_factory=list)
    hash: Hash = dataclasses.field(default_factory=Hash)


Expression = (
    PathExpression
    | SubExpression
    | StringLiteral
    | NumberLiteral
    | BooleanLiteral
    | NullLiteral
)


@dataclasses.dataclass
class TextNode:
    type: typing.ClassVar[str] = "TextNode"

    chars: str


@dataclasses.dataclass
class MustacheStatement:
    type: typing.ClassVar[str] = "MustacheStatement"

    path: PathExpression
    params: list[Expression] = dataclasses.field(default_factory=list)
    hash: Hash = dataclasses.field(default_factory=Hash)
    escaped: bool = True


@dataclasses.dataclass
class MustacheCommentStatement:
    type: typing.ClassVar[str] = "MustacheCommentStatement"

    value: str


@dataclasses.dataclass
class ElementModifierStatement:
    type: typing.ClassVar[str] = "ElementModifierStatement"

    path: PathExpression
    params: list[Expression] = dataclasses.field(default_factory=list)
    hash: Hash = dataclasses.field(default_factory=Hash)


@dataclasses.dataclass
class ConcatStatement:
    type: typing.ClassVar[str] = "ConcatStatement"

    parts: list[TextNode | MustacheStatement]


@dataclasses.dataclass
class AttrNode:
    type: typing.ClassVar[str] = "AttrNode"

    name: str
    value: TextNode | MustacheStatement | ConcatStatement


@dataclasses.dataclass
class Program:
    type: typing.ClassVar[str] = "Program"

    body: list["Statement"] = dataclasses.field(default_factory=list)
    block_params: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class BlockStatement:
    type: typing.ClassVar[str] = "BlockStatement"

    path: PathExpression
    params: list[Expression] = dataclasses.field(default_factory=list)
    hash: Hash = dataclasses.field(default_factory=Hash)
    program: Program = dataclasses.field(default_factory=Program)
    inverse: Program | None = None


@dataclasses.dataclass
class ElementNode:
    type: typing.ClassVar[str] = "ElementNode"

    tag: str
    attributes: list[AttrNode] = dataclasses.field(default_factory=list)
    modifiers: list[ElementModifierStatement] = dataclasses.field(default_factory=list)
    children: list["Statement"] = dataclasses.field(default_factory=list)
    block_params: list[str] = dataclasses.field(default_factory=list)


Statement = (
    ElementNode
    | BlockStatement
    | MustacheStatement
    | MustacheCommentStatement
    | TextNode
)

Node = (
    Program
    | Statement
    | ElementModifierStatement
    | AttrNode
    | ConcatStatement
    | Hash
    | HashPair
    | Expression
)


NODE_TYPES: dict[str, type] = {
    cls.type: cls
    for cls in (
        Program,
        ElementNode,
        AttrNode,
        TextNode,
        MustacheStatement,
        BlockStatement,
        ElementModifierStatement,
        MustacheCommentStatement,
        SubExpression,
        PathExpression,
        Hash,
        HashPair,
        ConcatStatement,
        StringLiteral,
        NumberLiteral,
        BooleanLiteral,
        NullLiteral,
    )
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _load_value(value: typing.Any) -> typing.Any:
    if isinstance(value, dict) and "type" in value:
        return load(value)
    elif isinstance(value, list):
        return [_load_value(item) for item in value]
    else:
        return value


def load(data: dict[str, typing.Any]) -> Node:
    """Build a syntax tree from the JSON shape Glimmer produces.

    Keys we don't model (`loc`, `strip`, ...) are ignored; a node of a kind
    we don't know raises UnsupportedNodeKind, same as the printer would.
    """
    kind = data.get("type")
    cls = NODE_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise UnsupportedNodeKind(str(kind))

    kwargs = {}
    for field in dataclasses.fields(cls):
        key = _camel(field.name)
        if key in data:
            kwargs[field.name] = _load_value(data[key])
        elif (
            field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        ):
            raise ValueError(f"{kind} is missing required key '{key}'")

    return cls(**kwargs)
