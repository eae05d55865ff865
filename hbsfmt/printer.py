# Turn Glimmer syntax trees into documents.
import logging

from . import ast
from .cursor import TreeCursor, kind_of
from .doc import (
    Document,
    align,
    cons,
    group,
    hardline,
    indent,
    join,
    line,
    softline,
)
from .errors import UnsupportedNodeKind
from .layout import layout_document
from .options import Options
from .reflow import word_wrap


print_log = logging.getLogger("hbsfmt.printer")


# http://w3c.github.io/html/single-page.html#void-elements
VOID_TAGS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)


def is_whitespace_text(node) -> bool:
    return isinstance(node, ast.TextNode) and node.chars.strip() == ""


def format_number(value: int | float) -> str:
    # Past 1e21 JavaScript switches to exponent form, as str() does.
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


class Printer:
    options: Options

    def __init__(self, options: Options | None = None):
        if options is None:
            options = Options()
        self.options = options

    def print_call(self, cursor: TreeCursor) -> Document:
        """The path, params and hash shared by mustaches, blocks, modifiers
        and subexpressions: `path param param key=value`."""
        n = cursor.current_value()
        return group(
            cons(
                cursor.into_field("path", self.print),
                group(cons(line, join(line, cursor.map_field("params", self.print))))
                if len(n.params) > 0
                else None,
                cons(line, cursor.into_field("hash", self.print))
                if n.hash is not None and len(n.hash.pairs) > 0
                else None,
            )
        )

    def print_children(self, cursor: TreeCursor, name: str) -> Document:
        children: list[Document] = []

        def visit(child_cursor: TreeCursor):
            child = child_cursor.current_value()
            if is_whitespace_text(child):
                return

            if len(children) > 0:
                if isinstance(child, ast.TextNode):
                    children.append(softline)
                else:
                    children.append(hardline)

            if isinstance(child, ast.TextNode):
                children.append(word_wrap(child.chars))
            else:
                children.append(self.print(child_cursor))

        cursor.each_field(name, visit)
        return cons(*children)

    def print(self, cursor: TreeCursor) -> Document | str:
        n = cursor.current_value()
        if n is None:
            return None

        pl = print_log
        if pl.isEnabledFor(logging.DEBUG):
            pl.debug(f"{'  ' * cursor.depth()}{kind_of(n)}")

        match n:
            case ast.AttrNode(name=name, value=value):
                quote = '"' if isinstance(value, ast.TextNode) else ""
                return cons(name, "=", quote, cursor.into_field("value", self.print), quote)

            case ast.BlockStatement(program=program, inverse=inverse):
                block_params = program.block_params
                header = group(
                    cons(
                        "{{#",
                        indent(
                            cons(
                                self.print_call(cursor),
                                cons(line, "as |", join(line, block_params), "|")
                                if len(block_params) > 0
                                else None,
                            )
                        ),
                        softline,
                        "}}",
                    )
                )

                body = None
                if len(program.body) > 0:
                    body = indent(cons(hardline, cursor.into_field("program", self.print)))

                otherwise = None
                if inverse is not None:
                    otherwise = cons(
                        hardline,
                        "{{else}}",
                        indent(cons(hardline, cursor.into_field("inverse", self.print)))
                        if len(inverse.body) > 0
                        else None,
                    )

                return group(
                    cons(
                        header,
                        body,
                        otherwise,
                        hardline,
                        "{{/",
                        cursor.into_field("path", self.print),
                        "}}",
                    )
                )

            case ast.BooleanLiteral(value=value):
                return "true" if value else "false"

            case ast.ConcatStatement():
                return group(cons('"', *cursor.map_field("parts", self.print), '"'))

            case ast.ElementModifierStatement():
                return group(cons("{{", self.print_call(cursor), "}}"))

            case ast.ElementNode(tag=tag, attributes=attributes, modifiers=modifiers, children=children):
                self_closing = tag in VOID_TAGS and len(children) == 0

                attrs = None
                if len(attributes) > 0:
                    attrs = cons(" ", join(line, cursor.map_field("attributes", self.print)))

                mods = None
                if len(modifiers) > 0:
                    mods = cons(
                        line if len(attributes) > 0 else " ",
                        join(line, cursor.map_field("modifiers", self.print)),
                    )

                opening = group(
                    cons(
                        "<",
                        tag,
                        align(len(tag) + 2, cons(attrs, mods)),
                        " />" if self_closing else ">",
                    )
                )

                return group(
                    cons(
                        opening,
                        indent(cons(softline, self.print_children(cursor, "children")))
                        if any(not is_whitespace_text(child) for child in children)
                        else None,
                        None if self_closing else cons(softline, "</", tag, ">"),
                    )
                )

            case ast.Hash():
                return join(line, cursor.map_field("pairs", self.print))

            case ast.HashPair(key=key):
                return cons(key, "=", cursor.into_field("value", self.print))

            case ast.MustacheCommentStatement(value=value):
                return group(cons("{{!", indent(cons(line, word_wrap(value))), line, "}}"))

            case ast.MustacheStatement(escaped=escaped):
                return group(
                    cons(
                        "{{" if escaped else "{{{",
                        indent(self.print_call(cursor)),
                        "}}" if escaped else "}}}",
                    )
                )

            case ast.NullLiteral():
                return "null"

            case ast.NumberLiteral(value=value):
                return format_number(value)

            case ast.PathExpression(parts=parts):
                return ".".join(parts)

            case ast.Program():
                return self.print_children(cursor, "body")

            case ast.StringLiteral(value=value):
                # Anything already holding a quote goes through untouched:
                # we don't escape.
                if '"' in value or "'" in value:
                    return value
                quote = "'" if self.options.single_quote else '"'
                return quote + value + quote

            case ast.SubExpression():
                return group(cons("(", indent(self.print_call(cursor)), softline, ")"))

            case ast.TextNode(chars=chars):
                return chars

            case _:
                pl.error(f"unknown glimmer node: {n!r}")
                raise UnsupportedNodeKind(kind_of(n))

    def convert_tree_to_document(self, tree: ast.Node) -> Document:
        return cons(self.print(TreeCursor(tree)))

    def format_tree(self, tree: ast.Node) -> str:
        doc = self.convert_tree_to_document(tree)
        options = self.options
        return layout_document(
            doc,
            options.print_width,
            options.indent_unit(),
            tab_width=options.tab_width,
        ).text()


def format_tree(tree: ast.Node, options: Options | None = None) -> str:
    return Printer(options).format_tree(tree)
