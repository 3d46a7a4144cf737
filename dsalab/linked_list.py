"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalab.errors import InvalidPositionError, UnderflowError

__all__ = ["LinkedList"]


@dataclass(slots=True)
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        """Return the node at 1-based ``position``, which must be in range."""
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise InvalidPositionError(f"Position out of bounds: {position}")

    def insert_at_beginning(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            *_, last = self._nodes()
            last.next = node
        self._size += 1

    def insert_at_position(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Positions run from 1 to one past the last element.
        """
        if position < 1:
            raise InvalidPositionError(f"Invalid position: {position}")
        if position == 1:
            self.insert_at_beginning(value)
            return
        if position > self._size + 1:
            raise InvalidPositionError(f"Position out of bounds: {position}")
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_by_value(self, value: Any) -> None:
        """Remove the first element equal to ``value``.

        Raises UnderflowError if the list is empty and ValueError if no
        element equals ``value``.
        """
        if self._head is None:
            raise UnderflowError("List is empty. Nothing to delete.")
        if self._head.data == value:
            self._head = self._head.next
            self._size -= 1
            return
        for node in self._nodes():
            if node.next is not None and node.next.data == value:
                node.next = node.next.next
                self._size -= 1
                return
        raise ValueError(f"Value {value} not found in the list.")

    def delete_by_position(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        if self._head is None:
            raise UnderflowError("List is empty.")
        if position < 1:
            raise InvalidPositionError(f"Invalid position: {position}")
        if position == 1:
            node = self._head
            self._head = node.next
            self._size -= 1
            return node.data
        if position > self._size:
            raise InvalidPositionError(f"Position out of bounds: {position}")
        previous = self._node_at(position - 1)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from head to tail."""
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join([*(str(value) for value in self), "NULL"])

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"