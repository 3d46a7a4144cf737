"""Binary trees: an array-backed tree and linked nodes with traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalab.errors import InvalidPositionError

__all__ = [
    "ArrayBinaryTree",
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "level_order",
]

DEFAULT_CAPACITY = 100
EMPTY = -1


class ArrayBinaryTree:
    """A binary tree stored in an array; the children of slot i are 2i+1 and 2i+2.

    Every slot starts out holding ``EMPTY`` (-1).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self.capacity = capacity
        self._slots: list[Any] = [EMPTY] * capacity

    def insert(self, index: int, value: Any) -> None:
        """Store ``value`` in slot ``index``; raise InvalidPositionError if out of range."""
        if not 0 <= index < self.capacity:
            raise InvalidPositionError(
                f"Insertion failed! Index out of range: {index}"
            )
        self._slots[index] = value

    def nodes(self, count: int) -> list[Any]:
        """Return the values of the first ``count`` slots."""
        if not 0 <= count <= self.capacity:
            raise InvalidPositionError(
                f"Node count out of range: {count} (capacity {self.capacity})"
            )
        return self._slots[:count]

    def __repr__(self) -> str:
        return f"ArrayBinaryTree(capacity={self.capacity})"


@dataclass(slots=True)
class TreeNode:
    """A node of a linked binary tree."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values in root, left, right order."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values in left, root, right order."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values in left, right, root order."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data


def level_order(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values breadth first, level by level from left to right."""
    if root is None:
        return
    pending: deque[TreeNode] = deque([root])
    while pending:
        node = pending.popleft()
        yield node.data
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)