"""Ordered collection with a configurable duplicate policy."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class OrderedCollection(Generic[T]):
    """Insertion-ordered sequence; with `allow_duplicates=False` it has set semantics."""

    def __init__(self, *, allow_duplicates: bool = True) -> None:
        self._items: list[T] = []
        self._allow_duplicates = allow_duplicates

    @property
    def allow_duplicates(self) -> bool:
        return self._allow_duplicates

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"OrderedCollection({self._items!r}, allow_duplicates={self._allow_duplicates})"

    def size(self) -> int:
        return len(self._items)

    def includes(self, value: T) -> bool:
        return value in self._items

    def add(self, value: T) -> None:
        """Append `value`; a no-op for present values when duplicates are disallowed."""
        if not self._allow_duplicates and value in self._items:
            return
        self._items.append(value)

    def remove(self, value: T) -> None:
        """Remove the first occurrence of `value` if present."""
        try:
            self._items.remove(value)
        except ValueError:
            return

    def clear(self) -> None:
        self._items.clear()

    def get(self, index: int) -> T:
        return self._items[index]

    def for_each(self, action: Callable[[T], None]) -> None:
        for item in tuple(self._items):
            action(item)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)


def unique_collection() -> OrderedCollection[T]:
    """Return an ordered collection that suppresses duplicate inserts."""
    return OrderedCollection(allow_duplicates=False)
