from hypothesis import given
from hypothesis.strategies import lists, sampled_from, text

from hbsfmt.doc import Fill, Text, line
from hbsfmt.reflow import word_wrap


def test_word_wrap():
    assert word_wrap("  hello   world\n\tfoo ") == Fill(
        [Text("hello"), line, Text("world"), line, Text("foo")]
    )


def test_word_wrap_single_word():
    assert word_wrap("hello") == Fill([Text("hello")])


def test_word_wrap_whitespace_only():
    assert word_wrap("") == Fill([])
    assert word_wrap(" \n\t  ") == Fill([])


words = lists(text(alphabet="abcxyz.,!'", min_size=1, max_size=8), min_size=1, max_size=20)
gaps = lists(sampled_from([" ", "  ", "\n", "\t", " \n  "]), min_size=21, max_size=21)


@given(words, gaps)
def test_word_wrap_keeps_words_in_order(ws, gs):
    """Whatever the whitespace between them, the words come back in order,
    one per content slot, with a line between each pair."""
    source = gs[0] + "".join(w + g for w, g in zip(ws, gs[1:]))
    result = word_wrap(source)

    assert result.parts[0::2] == [Text(w) for w in ws]
    assert result.parts[1::2] == [line] * (len(ws) - 1)
