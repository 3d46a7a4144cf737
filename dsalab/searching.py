"""Binary search over a sorted sequence."""

from collections.abc import Sequence
from typing import Any, Optional

__all__ = ["binary_search"]


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None