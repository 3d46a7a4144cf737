"""Building a max heap in place over a list."""

from typing import Any, MutableSequence

__all__ = ["heapify", "build_max_heap"]


def heapify(items: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``items[index]`` down so the subtree at ``index`` within ``size`` is a max heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(items: MutableSequence[Any]) -> None:
    """Rearrange ``items`` in place into a max heap."""
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)