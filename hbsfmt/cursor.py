import contextlib
import dataclasses
import functools
import logging
import typing

from .errors import FieldNotFound


cursor_log = logging.getLogger("hbsfmt.cursor")

T = typing.TypeVar("T")


@functools.cache
def _field_names(cls: type) -> frozenset[str]:
    if not dataclasses.is_dataclass(cls):
        return frozenset()
    return frozenset(f.name for f in dataclasses.fields(cls))


def kind_of(node: typing.Any) -> str:
    return getattr(node, "type", None) or type(node).__name__


class TreeCursor:
    """A position in a syntax tree, plus the path that led there.

    The printer never recurses by hand; it asks the cursor to step into a
    field (or each element of a list field), runs a callback there, and the
    cursor steps back out again afterwards, whether the callback returned or
    raised. The path is a stack of (name, value) pairs; names are field
    names for nodes and indices for list elements.
    """

    _stack: list[typing.Tuple[str | int | None, typing.Any]]

    def __init__(self, root: typing.Any):
        self._stack = [(None, root)]

    def current_value(self) -> typing.Any:
        return self._stack[-1][1]

    def current_name(self) -> str | int | None:
        return self._stack[-1][0]

    def depth(self) -> int:
        return len(self._stack) - 1

    def parent(self, level: int = 0) -> typing.Any:
        """The `level`th enclosing node, not counting list containers."""
        seen = 0
        for _, value in reversed(self._stack[:-1]):
            if isinstance(value, list):
                continue
            if seen == level:
                return value
            seen += 1
        return None

    @contextlib.contextmanager
    def _descend(self, name: str | int, value: typing.Any):
        self._stack.append((name, value))
        try:
            yield self
        finally:
            self._stack.pop()

    def _field(self, name: str) -> typing.Any:
        node = self.current_value()
        if name not in _field_names(type(node)):
            if cursor_log.isEnabledFor(logging.DEBUG):
                cursor_log.debug(f"no field {name!r} on {node!r}")
            raise FieldNotFound(kind_of(node), name)
        return getattr(node, name)

    def _list_field(self, name: str) -> list:
        value = self._field(name)
        if not isinstance(value, list):
            raise TypeError(
                f"{kind_of(self.current_value())}.{name} is not a list, it's {type(value).__name__}"
            )
        return value

    def into_field(self, name: str, fn: typing.Callable[["TreeCursor"], T]) -> T:
        """Call `fn` with the cursor positioned on field `name` of the
        current node; the position is restored afterwards."""
        value = self._field(name)
        with self._descend(name, value):
            return fn(self)

    def map_field(self, name: str, fn: typing.Callable[["TreeCursor"], T]) -> list[T]:
        """Call `fn` once per element of the list in field `name`, in order,
        with the cursor positioned on that element, and collect the results."""
        items = self._list_field(name)
        results = []
        with self._descend(name, items):
            for i, item in enumerate(items):
                with self._descend(i, item):
                    results.append(fn(self))
        return results

    def each_field(self, name: str, fn: typing.Callable[["TreeCursor"], None]) -> None:
        """Like map_field, but for callbacks that accumulate into something
        of their own instead of returning one result per element."""
        items = self._list_field(name)
        with self._descend(name, items):
            for i, item in enumerate(items):
                with self._descend(i, item):
                    fn(self)
