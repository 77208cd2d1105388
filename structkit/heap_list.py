"""Binary max-heap built from linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class HeapNode:
    """A node of a linked heap."""

    value: Any
    left: HeapNode | None = None
    right: HeapNode | None = None
    parent: HeapNode | None = field(default=None, repr=False)


class HeapListMax:
    """Max-heap kept as a complete binary tree of linked nodes."""

    def __init__(self) -> None:
        self._root: HeapNode | None = None
        self._size = 0

    def _level_order(self) -> Iterator[HeapNode]:
        if self._root is None:
            return
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _insert_parent(self) -> HeapNode:
        return next(
            node
            for node in self._level_order()
            if node.left is None or node.right is None
        )

    def _last_node(self) -> HeapNode:
        last = None
        for last in self._level_order():
            pass
        assert last is not None
        return last

    @staticmethod
    def _sift_down(node: HeapNode | None) -> None:
        while node is not None:
            largest = node
            if node.left is not None and node.left.value > largest.value:
                largest = node.left
            if node.right is not None and node.right.value > largest.value:
                largest = node.right
            if largest is node:
                return
            largest.value, node.value = node.value, largest.value
            node = largest

    @staticmethod
    def _sift_up(node: HeapNode) -> None:
        parent = node.parent
        while parent is not None and parent.value < node.value:
            node.value, parent.value = parent.value, node.value
            node = parent
            parent = node.parent

    def insert(self, value: Any) -> None:
        node = HeapNode(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        parent = self._insert_parent()
        node.parent = parent
        if parent.left is None:
            parent.left = node
        else:
            parent.right = node
        self._sift_up(node)

    def extract_root(self) -> Any:
        """Remove and return the largest element."""
        if self._root is None:
            raise IndexError("extract from an empty heap")
        top = self._root.value
        last = self._last_node()
        if last is self._root:
            self.clear()
            return top
        self._root.value = last.value
        parent = last.parent
        assert parent is not None
        if parent.left is last:
            parent.left = None
        else:
            parent.right = None
        last.parent = None
        self._size -= 1
        self._sift_down(self._root)
        return top

    def root(self) -> Any:
        """Return the largest element without removing it."""
        if self._root is None:
            raise IndexError("empty heap has no root")
        return self._root.value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def pre_order(self) -> list[Any]:
        """Values in pre-order: node, left subtree, right subtree."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result