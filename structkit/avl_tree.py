"""Balancing machinery shared by the AVL-based containers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; subclasses add payload fields."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


class AVLTree:
    """Base class holding a root and the AVL rotations.

    Subclasses implement insertion and deletion and pass each touched
    subtree through ``_balance_node``.
    """

    def __init__(self) -> None:
        self._root: AVLNode | None = None

    @staticmethod
    def _height(node: AVLNode | None) -> int:
        return node.height if node is not None else 0

    @classmethod
    def _balance_factor(cls, node: AVLNode | None) -> int:
        if node is None:
            return 0
        return cls._height(node.right) - cls._height(node.left)

    @classmethod
    def _update_height(cls, node: AVLNode) -> None:
        node.height = 1 + max(cls._height(node.left), cls._height(node.right))

    @classmethod
    def _rotate_left(cls, node: AVLNode) -> AVLNode:
        child = node.right
        assert child is not None
        node.right = child.left
        cls._update_height(node)
        child.left = node
        cls._update_height(child)
        return child

    @classmethod
    def _rotate_right(cls, node: AVLNode) -> AVLNode:
        child = node.left
        assert child is not None
        node.left = child.right
        cls._update_height(node)
        child.right = node
        cls._update_height(child)
        return child

    @classmethod
    def _balance_node(cls, node: AVLNode) -> AVLNode:
        """Restore the AVL property at node and return the new subtree root."""
        cls._update_height(node)
        balance = cls._balance_factor(node)
        if balance < -1:
            if cls._balance_factor(node.left) > 0:
                node.left = cls._rotate_left(node.left)  # type: ignore[arg-type]
            return cls._rotate_right(node)
        if balance > 1:
            if cls._balance_factor(node.right) < 0:
                node.right = cls._rotate_right(node.right)  # type: ignore[arg-type]
            return cls._rotate_left(node)
        return node

    @classmethod
    def _in_order(cls, node: AVLNode | None) -> Iterator[AVLNode]:
        if node is not None:
            yield from cls._in_order(node.left)
            yield node
            yield from cls._in_order(node.right)

    @classmethod
    def _pre_order(cls, node: AVLNode | None) -> Iterator[AVLNode]:
        if node is not None:
            yield node
            yield from cls._pre_order(node.left)
            yield from cls._pre_order(node.right)

    @classmethod
    def _post_order(cls, node: AVLNode | None) -> Iterator[AVLNode]:
        if node is not None:
            yield from cls._post_order(node.left)
            yield from cls._post_order(node.right)
            yield node

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return self._height(self._root)

    def is_balanced(self) -> bool:
        """True if every subtree's heights differ by at most one."""

        def measure(node: AVLNode | None) -> int | None:
            if node is None:
                return 0
            left = measure(node.left)
            if left is None:
                return None
            right = measure(node.right)
            if right is None or abs(right - left) > 1:
                return None
            return 1 + max(left, right)

        return measure(self._root) is not None