"""Ordered in-memory store of records of one type.

The base abstraction every other store shape wraps. It enforces nothing:
duplicates are allowed and absence is reported as ``None`` or ``False``.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


class Store(Generic[T]):

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        self._items.append(item)

    def get_all(self) -> list[T]:
        """Return a copy of the stored records in insertion order."""
        return list(self._items)

    def find_first(self, predicate: Predicate[T]) -> T | None:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def remove_first(self, predicate: Predicate[T]) -> bool:
        """Remove the first matching record. Returns False if none matched."""
        for i, item in enumerate(self._items):
            if predicate(item):
                del self._items[i]
                return True
        return False

    def replace_first(self, predicate: Predicate[T], replacement: T) -> bool:
        """Swap the first matching record for ``replacement`` in place."""
        for i, item in enumerate(self._items):
            if predicate(item):
                self._items[i] = replacement
                return True
        return False

    def replace_all(self, items: Iterable[T]) -> None:
        self._items = list(items)
