"""Ordered key-value map kept balanced as an AVL tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from structkit.avl_tree import AVLNode, AVLTree


@dataclass(eq=False)
class _MapNode(AVLNode):
    value: Any = None


class AVLMap(AVLTree):
    """Map with keys kept in sorted order inside an AVL tree.

    With a ``default_factory``, reading a missing key through ``map[key]``
    stores and returns a fresh default value; without one it raises KeyError.
    """

    def __init__(self, default_factory: Callable[[], Any] | None = None) -> None:
        super().__init__()
        self._default_factory = default_factory

    def _insert(self, node: AVLNode | None, key: Any, value: Any) -> AVLNode:
        if node is None:
            return _MapNode(key, value=value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value  # type: ignore[attr-defined]
            return node
        return self._balance_node(node)

    def _search(self, key: Any) -> _MapNode | None:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node  # type: ignore[return-value]
        return None

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
            node.value = successor.value  # type: ignore[attr-defined]
            node.right = self._erase(node.right, successor.key)
        if node is not None:
            node = self._balance_node(node)
        return node

    def insert(self, key: Any, value: Any) -> None:
        """Store value under key, replacing any value already there."""
        self._root = self._insert(self._root, key, value)

    def __contains__(self, key: object) -> bool:
        return self._search(key) is not None

    def find(self, key: Any) -> Any:
        """Value stored under key, or None if the key is absent."""
        node = self._search(key)
        return node.value if node is not None else None

    def __getitem__(self, key: Any) -> Any:
        node = self._search(key)
        if node is not None:
            return node.value
        if self._default_factory is None:
            raise KeyError(key)
        value = self._default_factory()
        self.insert(key, value)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def erase(self, key: Any) -> None:
        """Remove key if present; do nothing otherwise."""
        self._root = self._erase(self._root, key)

    def in_order(self) -> list[Any]:
        """Values in key order."""
        return [node.value for node in self._in_order(self._root)]  # type: ignore[attr-defined]

    def pre_order(self) -> list[Any]:
        """Values in pre-order: node, left subtree, right subtree."""
        return [node.value for node in self._pre_order(self._root)]  # type: ignore[attr-defined]

    def post_order(self) -> list[Any]:
        """Values in post-order: left subtree, right subtree, node."""
        return [node.value for node in self._post_order(self._root)]  # type: ignore[attr-defined]