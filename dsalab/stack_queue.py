"""A queue made from two stacks."""

from typing import Any

from dsalab.errors import UnderflowError

__all__ = ["StackQueue"]


class StackQueue:
    """A first-in, first-out queue backed by an input stack and an output stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise UnderflowError if empty."""
        if self.is_empty():
            raise UnderflowError("Queue Underflow (Empty).")
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        """Return the front value without removing it; raise UnderflowError if empty."""
        if self.is_empty():
            raise UnderflowError("Queue is Empty.")
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __repr__(self) -> str:
        return f"StackQueue({[*reversed(self._outbox), *self._inbox]!r})"