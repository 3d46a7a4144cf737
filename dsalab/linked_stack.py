"""A stack built on a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalab.errors import UnderflowError

__all__ = ["LinkedStack"]


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedStack:
    """A last-in, first-out stack whose storage grows one node at a time."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise UnderflowError if empty."""
        if self._top is None:
            raise UnderflowError("Stack Underflow (Empty).")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top value without removing it; raise UnderflowError if empty."""
        if self._top is None:
            raise UnderflowError("Stack is Empty.")
        return self._top.data

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"