"""Ordered set kept balanced as an AVL tree."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structkit.avl_tree import AVLNode, AVLTree


class AVLSet(AVLTree):
    """Set of keys kept in sorted order inside an AVL tree."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        super().__init__()
        for item in items if items is not None else ():
            self.add(item)

    def _insert(self, node: AVLNode | None, key: Any) -> AVLNode:
        if node is None:
            return AVLNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        return self._balance_node(node)

    def _erase(self, node: AVLNode | None, key: Any) -> AVLNode | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._erase(node.left, key)
        elif key > node.key:
            node.right = self._erase(node.right, key)
        elif node.left is None:
            node = node.right
        elif node.right is None:
            node = node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right = self._erase(node.right, successor.key)
        if node is not None:
            node = self._balance_node(node)
        return node

    def add(self, key: Any) -> None:
        """Add key; adding a key already present changes nothing."""
        self._root = self._insert(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key < node.key:  # type: ignore[operator]
                node = node.left
            elif key > node.key:  # type: ignore[operator]
                node = node.right
            else:
                return True
        return False

    def discard(self, key: Any) -> None:
        """Remove key if present; do nothing otherwise."""
        self._root = self._erase(self._root, key)

    def in_order(self) -> list[Any]:
        """Keys in sorted order."""
        return [node.key for node in self._in_order(self._root)]

    def pre_order(self) -> list[Any]:
        """Keys in pre-order: node, left subtree, right subtree."""
        return [node.key for node in self._pre_order(self._root)]

    def post_order(self) -> list[Any]:
        """Keys in post-order: left subtree, right subtree, node."""
        return [node.key for node in self._post_order(self._root)]