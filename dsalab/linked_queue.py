"""A queue built on a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalab.errors import UnderflowError

__all__ = ["LinkedQueue"]


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedQueue:
    """A first-in, first-out queue with front and rear node references."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError if empty."""
        if self._front is None:
            raise UnderflowError("Queue Underflow (Empty).")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the front value without removing it; raise UnderflowError if empty."""
        if self._front is None:
            raise UnderflowError("Queue is Empty.")
        return self._front.data

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"