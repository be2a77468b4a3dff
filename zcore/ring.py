"""Fixed-size circular buffer that overwrites its oldest item when full."""

from __future__ import annotations

from itertools import islice
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

__all__ = ["RingBuffer"]


class RingBuffer(Generic[T]):
    """A FIFO queue holding at most ``max_size`` items.

    Appending to a full ring drops the oldest item.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self.capacity = max_size + 1
        self._slots: List[Optional[T]] = [None] * self.capacity
        self._head = 0
        self._tail = 0

    def full(self) -> bool:
        """Whether the next append will drop the oldest item."""
        return (self._head + 1) % self.capacity == self._tail

    def empty(self) -> bool:
        """Whether there is nothing to get."""
        return self._head == self._tail

    def append(self, item: T) -> None:
        """Add an item, dropping the oldest one if the ring is full."""
        self._slots[self._head] = item
        self._head = (self._head + 1) % self.capacity
        if self._head == self._tail:
            self._tail = (self._tail + 1) % self.capacity

    def extend(self, items: Iterable[T]) -> None:
        """Append every item in order."""
        for item in items:
            self.append(item)

    def get(self) -> Optional[T]:
        """Remove and return the oldest item, or None when the ring is empty."""
        if self.empty():
            return None
        item = self._slots[self._tail]
        self._tail = (self._tail + 1) % self.capacity
        return item

    def _drain(self) -> Iterator[T]:
        while not self.empty():
            yield self.get()  # type: ignore[misc]

    def get_array(self, max_size: int) -> List[T]:
        """Remove and return the oldest items in order.

        At most ``max_size - 1`` items are taken; a ``max_size`` of 0 takes
        everything.
        """
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        limit = max_size - 1 if max_size > 0 else None
        return list(islice(self._drain(), limit))

    def __len__(self) -> int:
        return (self._head - self._tail) % self.capacity

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity - 1}, size={len(self)})"