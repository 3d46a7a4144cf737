"""A fixed-capacity array with 1-based insertion and deletion."""

from collections.abc import Iterable, Iterator
from typing import Any

from dsalab.errors import InvalidPositionError, OverflowFullError, UnderflowError

__all__ = ["BoundedArray"]

DEFAULT_CAPACITY = 100


class BoundedArray:
    """An array that holds at most ``capacity`` values, addressed from position 1."""

    def __init__(self, values: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._items = list(values)
        if len(self._items) > capacity:
            raise OverflowFullError(
                f"{len(self._items)} values exceed the capacity of {capacity}"
            )

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if len(self._items) >= self.capacity:
            raise OverflowFullError("Array is full (Overflow).")
        if not 1 <= position <= len(self._items) + 1:
            raise InvalidPositionError(f"Invalid position: {position}")
        self._items.insert(position - 1, value)

    def delete(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        if not self._items:
            raise UnderflowError("Array is empty (Underflow).")
        if not 1 <= position <= len(self._items):
            raise InvalidPositionError(f"Invalid position: {position}")
        return self._items.pop(position - 1)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedArray({self._items!r}, capacity={self.capacity})"