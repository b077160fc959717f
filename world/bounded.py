"""
particle_life module: world/bounded.py

Ordered list with a hard maximum length. Appends past the limit are dropped
rather than raised.
"""

from __future__ import annotations
from typing import Callable, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class BoundedList(Generic[T]):
    def __init__(self, capacity: int, items: Iterable[T] = ()):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self.capacity = capacity
        self._items: List[T] = []
        for item in items:
            self.append(item)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    @property
    def free(self) -> int:
        return self.capacity - len(self._items)

    def append(self, item: T) -> bool:
        """
        Append ``item`` if there is room. Returns False (and drops it) when full.
        """
        if self.full:
            return False
        self._items.append(item)
        return True

    def compact(self, keep: Callable[[T], bool]) -> int:
        """
        Drop every item for which ``keep`` is false, preserving relative order.
        Returns the number of items removed.
        """
        before = len(self._items)
        self._items[:] = [item for item in self._items if keep(item)]
        return before - len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, idx: int) -> T:
        return self._items[idx]

    def __repr__(self) -> str:
        return f"BoundedList({len(self._items)}/{self.capacity})"
