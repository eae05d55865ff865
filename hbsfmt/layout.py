# Lay out documents: decide, group by group, what breaks and what stays flat.
import dataclasses
import logging
import typing

from .doc import (
    Align,
    Cons,
    Document,
    Fill,
    Group,
    HardLine,
    IfBreak,
    Indent,
    NewLine,
    Text,
    cons,
)


layout_log = logging.getLogger("hbsfmt.layout")


class DocumentLayout:
    """A structure that is trivially convertable to a string; the result of
    laying out a document."""

    segments: list[str]

    def __init__(self, segments):
        self.segments = segments

    def text(self) -> str:
        return "".join(self.segments)


@dataclasses.dataclass
class Chunk:
    doc: Document
    indent: str
    flat: bool

    def with_document(self, doc: Document, and_indent: str = "") -> "Chunk":
        return Chunk(doc=doc, indent=self.indent + and_indent, flat=self.flat)


def fits(chunk: Chunk, rest: list[Chunk], remaining: int) -> bool:
    """Would `chunk` fit in `remaining` columns?

    `rest` is whatever follows the chunk on the stack; measuring carries on
    into it until the first real line break, so that a group is only kept
    flat if the rest of its line fits too.
    """
    stack = list(rest)
    stack.append(chunk)
    while len(stack) > 0:
        chunk = stack.pop()
        match chunk.doc:
            case None:
                pass

            case Text(text):
                remaining -= len(text)

            case NewLine(replace):
                if chunk.flat:
                    remaining -= len(replace)
                else:
                    # A real newline; everything up to here fit.
                    return True

            case HardLine():
                # Inside a flat candidate this forces the group to break;
                # outside one it simply ends the line.
                return not chunk.flat

            case Cons(docs):
                stack.extend(chunk.with_document(doc) for doc in reversed(docs))

            case Fill(parts):
                stack.extend(chunk.with_document(doc) for doc in reversed(parts))

            case Indent(child) | Align(_, child) | Group(child):
                stack.append(chunk.with_document(child))

            case IfBreak(broken, flat):
                stack.append(chunk.with_document(flat if chunk.flat else broken))

            case _:
                typing.assert_never(chunk.doc)

        if remaining < 0:
            return False

    return True  # Everything must fit, so great!


def _trim(output: list[str]) -> None:
    while len(output) > 0:
        trimmed = output[-1].rstrip(" \t")
        if len(trimmed) > 0:
            output[-1] = trimmed
            return
        output.pop()


def layout_document(
    doc: Document, width: int, indent: str, tab_width: int = 8
) -> DocumentLayout:
    """Lay out a document to fit within the given width.

    `indent` is the string one Indent adds; `tab_width` is only used to
    measure indentation that contains tabs.
    """
    ll = layout_log

    column = 0
    output: list[str] = []
    chunks: list[Chunk] = [Chunk(doc=doc, indent="", flat=False)]

    def newline(indentation: str) -> int:
        _trim(output)
        output.append("\n" + indentation)
        return len(indentation.expandtabs(tab_width))

    while len(chunks) > 0:
        chunk = chunks.pop()
        match chunk.doc:
            case None:
                pass

            case Text(text):
                output.append(text)
                column += len(text)

            case NewLine(replace):
                if chunk.flat:
                    output.append(replace)
                    column += len(replace)
                else:
                    column = newline(chunk.indent)

            case HardLine():
                column = newline(chunk.indent)

            case Cons(docs):
                chunks.extend(chunk.with_document(doc) for doc in reversed(docs))

            case Indent(child):
                chunks.append(chunk.with_document(child, and_indent=indent))

            case Align(amount, child):
                chunks.append(chunk.with_document(child, and_indent=" " * amount))

            case Group(child):
                candidate = Chunk(doc=child, indent=chunk.indent, flat=True)
                if chunk.flat or fits(candidate, chunks, width - column):
                    chunks.append(candidate)
                else:
                    if ll.isEnabledFor(logging.DEBUG):
                        ll.debug(f"breaking group at column {column}")
                    chunks.append(Chunk(doc=child, indent=chunk.indent, flat=False))

            case Fill(parts):
                chunks.extend(_layout_fill(chunk, parts, width - column))

            case IfBreak(broken, flat):
                chunks.append(chunk.with_document(flat if chunk.flat else broken))

            case _:
                typing.assert_never(chunk.doc)

    return DocumentLayout(output)


def _layout_fill(chunk: Chunk, parts: list[Document], remaining: int) -> list[Chunk]:
    """Decide the first content/separator pair of a fill.

    Returns the chunks to push, in stack order: whatever is left of the fill
    first, then the separator, then the content.
    """
    if len(parts) == 0:
        return []

    def flat(doc: Document) -> Chunk:
        return Chunk(doc=doc, indent=chunk.indent, flat=True)

    def broken(doc: Document) -> Chunk:
        return Chunk(doc=doc, indent=chunk.indent, flat=False)

    content = parts[0]
    content_fits = fits(flat(content), [], remaining)
    if len(parts) == 1:
        return [flat(content) if content_fits else broken(content)]

    separator = parts[1]
    if len(parts) == 2:
        if content_fits:
            return [flat(separator), flat(content)]
        return [broken(separator), broken(content)]

    rest = chunk.with_document(Fill(parts[2:]))
    if fits(flat(cons(content, separator, parts[2])), [], remaining):
        return [rest, flat(separator), flat(content)]
    elif content_fits:
        return [rest, broken(separator), flat(content)]
    else:
        return [rest, broken(separator), broken(content)]
