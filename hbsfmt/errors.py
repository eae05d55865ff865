class FormatError(Exception):
    """Base class for everything that can stop a formatting pass."""


class UnsupportedNodeKind(FormatError):
    """The printer (or the loader) met a node kind it has no rule for.

    This means the tree came from a parser that speaks a different dialect
    than we do; there is no sensible fallback, so the whole pass fails.
    """

    kind: str

    def __init__(self, kind: str):
        super().__init__(f"unknown glimmer type: {kind}")
        self.kind = kind


class FieldNotFound(FormatError):
    """The tree cursor was asked for a field the current node doesn't have."""

    kind: str
    field: str

    def __init__(self, kind: str, field: str):
        super().__init__(f"{kind} has no field '{field}'")
        self.kind = kind
        self.field = field
