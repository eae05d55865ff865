import re

from .doc import Fill, fill, line


_WHITESPACE = re.compile(r"\s+")


def word_wrap(text: str) -> Fill:
    """Turn a run of free text into a fill of words.

    The words come out in input order, separated by `line`, so the layout
    engine can break between any two of them and nowhere else. Text that is
    all whitespace gives an empty fill.
    """
    parts: list = []
    for word in _WHITESPACE.split(text):
        if word == "":
            continue
        if len(parts) > 0:
            parts.append(line)
        parts.append(word)
    return fill(parts)
