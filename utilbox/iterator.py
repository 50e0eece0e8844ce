"""A sequence iterator that converts items to a requested kind."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any, Callable

from .predicates import _as_int, _as_string, _as_time

__all__ = ["SliceIterator", "new_slice_iterator"]


_UNCONVERTED_KINDS = (object, None)

_CONVERTERS: dict[Any, Callable[[Any], Any]] = {
    str: _as_string,
    int: _as_int,
    datetime: _as_time,
}


class SliceIterator:
    """Walks a sequence, handing out items converted to a requested kind."""

    def __init__(self, items: Iterable[Any]) -> None:
        if isinstance(items, (str, bytes, bytearray)):
            raise TypeError(f"expected a sequence of items, got {type(items).__name__}")
        self._items = items if isinstance(items, Sequence) else list(items)
        self._index = 0

    def has_next(self) -> bool:
        """Return True if an item remains."""
        return self._index < len(self._items)

    def next_as(self, kind: Any = object) -> Any:
        """Return the next item converted to kind.

        str, int and datetime convert the item; object returns it unchanged.
        Any other kind returns the item if it is an instance of kind, or the
        kind's zero value for None, and raises TypeError otherwise.
        """
        if not self.has_next():
            raise StopIteration
        item = self._items[self._index]
        self._index += 1
        if kind in _UNCONVERTED_KINDS:
            return item
        converter = _CONVERTERS.get(kind)
        if converter is not None:
            return converter(item)
        if item is None:
            return kind()
        if isinstance(item, kind):
            return item
        raise TypeError(f"cannot assign {type(item).__name__} to {getattr(kind, '__name__', kind)}")

    def __iter__(self) -> SliceIterator:
        return self

    def __next__(self) -> Any:
        return self.next_as(object)


def new_slice_iterator(items: Iterable[Any]) -> SliceIterator:
    """Create an iterator over items."""
    return SliceIterator(items)