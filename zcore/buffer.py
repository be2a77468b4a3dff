"""Fixed-capacity buffer."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")

__all__ = ["FixedBuffer"]


class FixedBuffer(Generic[T]):
    """A sequence that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: List[T] = []

    def append(self, item: T) -> None:
        """Add one item; raises OverflowError when the buffer is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("buffer is full")
        self._items.append(item)

    def extend(self, items: Iterable[T]) -> None:
        """Add several items at once; nothing is added if they do not all fit."""
        new_items = list(items)
        if len(self._items) + len(new_items) > self.capacity:
            raise OverflowError("items exceed buffer capacity")
        self._items.extend(new_items)

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty buffer")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def copy(self) -> "FixedBuffer[T]":
        """Return a new buffer with the same capacity and items."""
        duplicate: FixedBuffer[T] = FixedBuffer(self.capacity)
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedBuffer(capacity={self.capacity}, items={self._items!r})"