import typing

from hbsfmt import doc
from hbsfmt.doc import (
    align,
    cons,
    fill,
    group,
    hardline,
    if_break,
    indent,
    join,
    line,
    softline,
)
from hbsfmt.layout import layout_document


def flatten_document(document: doc.Document) -> list:
    match document:
        case doc.NewLine(replace):
            return [f"<newline {repr(replace)}>"]
        case doc.HardLine():
            return ["<hardline>"]
        case doc.Indent(child):
            return [["<indent>", flatten_document(child)]]
        case doc.Align(amount, child):
            return [[f"<align {amount}>", flatten_document(child)]]
        case doc.Text(text):
            return [text]
        case doc.Group(child):
            return [flatten_document(child)]
        case doc.Fill(parts):
            return [["<fill>"] + [p for part in parts for p in flatten_document(part)]]
        case doc.IfBreak(broken, flat):
            return [["<if-break>", flatten_document(broken), flatten_document(flat)]]
        case doc.Cons(docs):
            result = []
            for d in docs:
                result += flatten_document(d)
            return result
        case None:
            return []
        case _:
            typing.assert_never(document)


def _output(txt: str) -> str:
    return txt.strip().replace("*SPACE*", " ").replace("*NEWLINE*", "\n")


def _layout(document: doc.Document, width: int, indent: str = "  ") -> str:
    return layout_document(document, width, indent).text()


def _list(*items: str) -> doc.Document:
    return group(cons("[", indent(cons(softline, join(cons(",", line), items))), softline, "]"))


def test_flatten_document():
    assert flatten_document(_list("1", "2")) == [
        [
            "[",
            ["<indent>", ["<newline ''>", "1", ",", "<newline ' '>", "2"]],
            "<newline ''>",
            "]",
        ]
    ]


def test_layout_flat():
    assert _layout(_list("1", "2", "3"), 80) == "[1, 2, 3]"


def test_layout_broken():
    assert _layout(_list("1", "2", "3"), 5) == _output(
        """
[
  1,
  2,
  3
]
"""
    )


def test_layout_nested_groups_break_outside_in():
    document = _list("1", _list("2", "3"), "4")
    assert _layout(document, 12) == _output(
        """
[
  1,
  [2, 3],
  4
]
"""
    )


def test_layout_exact_fit():
    assert _layout(_list("1", "2"), 6) == "[1, 2]"
    assert _layout(_list("1", "2"), 5) != "[1, 2]"


def test_hardline_breaks_enclosing_group():
    document = group(cons("a", line, "b", hardline, "c"))
    assert _layout(document, 80) == "a\nb\nc"


def test_group_measures_rest_of_line():
    document = cons(group(cons("aaa", line, "bbb")), "cccc")
    assert _layout(document, 11) == "aaa bbbcccc"
    assert _layout(document, 10) == "aaa\nbbbcccc"


def test_rest_of_line_stops_at_break():
    document = cons(group(cons("aaa", line, "bbb")), hardline, "cccccccccccc")
    assert _layout(document, 10) == "aaa bbb\ncccccccccccc"


def test_if_break():
    document = group(cons("[", indent(cons(softline, "x", if_break(","))), softline, "]"))
    assert _layout(document, 80) == "[x]"
    assert _layout(document, 2) == "[\n  x,\n]"


def test_align():
    document = group(cons("<div", align(5, cons(" ", join(line, ["a=1", "b=2"]))), ">"))
    assert _layout(document, 80) == "<div a=1 b=2>"
    assert _layout(document, 8) == _output(
        """
<div a=1
     b=2>
"""
    )


def test_align_stacks_on_indent():
    document = indent(cons(hardline, group(cons("<p", align(3, cons(" ", join(line, ["a", "b"])))))))
    assert _layout(document, 4) == "\n  <p a\n     b"


def test_indent_with_tabs():
    document = group(cons("{", indent(cons(line, "x")), line, "}"))
    assert _layout(document, 2, indent="\t") == "{\n\tx\n}"


def test_tabs_count_as_tab_width():
    document = indent(indent(cons(hardline, group(cons("ab", line, "cd")))))
    assert layout_document(document, 9, "\t", tab_width=4).text() == "\n\t\tab\n\t\tcd"
    assert layout_document(document, 13, "\t", tab_width=4).text() == "\n\t\tab cd"


def test_trailing_whitespace_is_trimmed():
    document = cons("a", indent(hardline), hardline, "b")
    assert _layout(document, 80) == "a\n\nb"


def test_fill_breaks_only_where_needed():
    document = fill(["aa", line, "bb", line, "cc", line, "dd"])
    assert _layout(document, 80) == "aa bb cc dd"
    assert _layout(document, 5) == "aa bb\ncc dd"
    assert _layout(document, 8) == "aa bb cc\ndd"


def test_fill_keeps_overlong_content_alone():
    document = fill(["a", line, "bbbbbbbbbb", line, "c"])
    assert _layout(document, 4) == "a\nbbbbbbbbbb\nc"


def test_fill_inside_indent():
    document = cons("<p>", indent(cons(hardline, fill(["one", line, "two", line, "three"]))))
    assert _layout(document, 9) == _output(
        """
<p>
  one two
  three
"""
    )


def test_empty_document():
    assert _layout(None, 80) == ""
    assert _layout(fill([]), 80) == ""
