"""A queue stored in a fixed-capacity array."""

from collections.abc import Iterator
from typing import Any

from dsalab.errors import OverflowFullError, UnderflowError

__all__ = ["ArrayQueue"]

DEFAULT_CAPACITY = 100


class ArrayQueue:
    """A first-in, first-out queue over an array of ``capacity`` slots.

    Slots freed by dequeueing are reused only once the queue has been emptied,
    so the queue reports overflow once ``capacity`` values have been enqueued
    since it was last empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowFullError if no slot is left."""
        if len(self._slots) >= self.capacity:
            raise OverflowFullError("Queue Overflow! (Queue is full)")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError if empty."""
        if not self:
            raise UnderflowError("Queue Underflow! (Queue is empty)")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def peek(self) -> Any:
        """Return the front value without removing it; raise UnderflowError if empty."""
        if not self:
            raise UnderflowError("Queue is Empty.")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self.capacity})"