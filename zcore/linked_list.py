"""Doubly linked list nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional

__all__ = ["ListNode"]


class ListNode:
    """A node holding a value and links to its neighbours."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: Optional[ListNode] = None
        self.prev: Optional[ListNode] = None

    def add(self, item: "ListNode") -> "ListNode":
        """Insert ``item`` right after this node and return it."""
        item.next = self.next
        self.next = item
        item.prev = self
        return item

    def remove(self) -> Optional["ListNode"]:
        """Unlink this node from its predecessor and return the following node."""
        if self.prev is not None:
            self.prev.next = self.next
        return self.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"