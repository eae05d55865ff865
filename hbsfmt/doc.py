# Documents: the layout vocabulary shared by the printer and the layout engine.
import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Text:
    text: str


@dataclasses.dataclass(frozen=True)
class Cons:
    docs: list["Document"]


@dataclasses.dataclass(frozen=True)
class NewLine:
    """A line break the layout engine may flatten.

    When the enclosing group is flat this renders as `replace` (a space for
    `line`, nothing for `softline`); when the group is broken it renders as a
    newline followed by the current indentation.
    """

    replace: str


@dataclasses.dataclass(frozen=True)
class HardLine:
    """Always a newline. Any group measured flat around one of these breaks."""


@dataclasses.dataclass(frozen=True)
class Indent:
    child: "Document"


@dataclasses.dataclass(frozen=True)
class Align:
    amount: int
    child: "Document"


@dataclasses.dataclass(frozen=True)
class Group:
    child: "Document"


@dataclasses.dataclass(frozen=True)
class Fill:
    """Alternating content and separator parts.

    parts[0], parts[2], ... are content; parts[1], parts[3], ... are the
    separators between them. Each separator breaks on its own, only when the
    content after it would not fit on the current line.
    """

    parts: list["Document"]


@dataclasses.dataclass(frozen=True)
class IfBreak:
    broken: "Document"
    flat: "Document"


Document = None | Text | Cons | NewLine | HardLine | Indent | Align | Group | Fill | IfBreak

line = NewLine(" ")
softline = NewLine("")
hardline = HardLine()


def _coerce(document: "Document | str") -> Document:
    if isinstance(document, str):
        if document == "":
            return None
        return Text(document)
    return document


def cons(*documents: "Document | str") -> Document:
    if len(documents) == 0:
        return None

    result = []
    for document in documents:
        document = _coerce(document)
        if isinstance(document, Cons):
            result.extend(document.docs)
        elif document is not None:
            result.append(document)

    if len(result) == 0:
        return None
    if len(result) == 1:
        return result[0]

    return Cons(result)


def group(document: "Document | str") -> Document:
    document = _coerce(document)

    # Nothing inside can break, so a group would never change anything.
    if document is None or isinstance(document, Text):
        return document

    return Group(document)


def indent(document: "Document | str") -> Document:
    document = _coerce(document)
    if document is None:
        return None
    return Indent(document)


def align(amount: int, document: "Document | str") -> Document:
    document = _coerce(document)
    if document is None:
        return None
    return Align(amount, document)


def join(separator: "Document | str", documents: typing.Iterable["Document | str"]) -> Document:
    result: list[Document | str] = []
    for i, document in enumerate(documents):
        if i > 0:
            result.append(separator)
        result.append(document)
    return cons(*result)


def fill(parts: typing.Iterable["Document | str"]) -> Fill:
    # Unlike cons, empty parts are kept: dropping one would shift every
    # content/separator pair after it.
    return Fill([_coerce(part) for part in parts])


def if_break(broken: "Document | str", flat: "Document | str" = None) -> IfBreak:
    return IfBreak(_coerce(broken), _coerce(flat))
