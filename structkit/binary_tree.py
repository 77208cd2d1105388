"""Unbalanced binary search tree with on-demand rebalancing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    key: Any
    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """Binary search tree mapping keys to values.

    Equal keys are kept and go to the right of existing ones.
    ``balance`` rebuilds the tree into a minimal-height shape.
    """

    def __init__(self) -> None:
        self._root: TreeNode | None = None

    def root(self) -> TreeNode | None:
        """The root node, or None when the tree is empty."""
        return self._root

    def _search(self, key: Any) -> tuple[TreeNode | None, TreeNode | None]:
        """Return the first node holding key and its parent."""
        parent = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        return node, parent

    def _replace_child(
        self, parent: TreeNode | None, old: TreeNode, new: TreeNode | None
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def insert(self, key: Any, value: Any) -> None:
        """Add a node for key; equal keys go to the right."""
        new = TreeNode(key, value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def insert_subtree(self, subtree: TreeNode | None) -> None:
        """Insert every node of subtree, visiting it in pre-order."""
        for node in self._pre_order_nodes(subtree):
            self.insert(node.key, node.value)

    def insert_at(self, parent_key: Any, key: Any, value: Any, left: bool) -> bool:
        """Attach a new node as a child of the node holding parent_key.

        Returns False if the parent is missing or the chosen slot is taken.
        The search-tree ordering is not checked.
        """
        parent, _ = self._search(parent_key)
        if parent is None:
            return False
        if left:
            if parent.left is not None:
                return False
            parent.left = TreeNode(key, value)
        else:
            if parent.right is not None:
                return False
            parent.right = TreeNode(key, value)
        return True

    def remove(self, key: Any) -> None:
        """Remove the first node holding key; do nothing if absent."""
        node, parent = self._search(key)
        if node is None:
            return
        if node.left is None:
            self._replace_child(parent, node, node.right)
        elif node.right is None:
            self._replace_child(parent, node, node.left)
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right

    def remove_subtree(self, key: Any) -> None:
        """Detach the node holding key together with all its descendants."""
        node, parent = self._search(key)
        if node is not None:
            self._replace_child(parent, node, None)

    def find(self, key: Any) -> bool:
        return self._search(key)[0] is not None

    def __contains__(self, key: object) -> bool:
        return self.find(key)

    def value(self, key: Any) -> Any:
        """Value of the first node holding key; raise KeyError if absent."""
        node, _ = self._search(key)
        if node is None:
            raise KeyError(key)
        return node.value

    @staticmethod
    def _pre_order_nodes(start: TreeNode | None) -> Iterator[TreeNode]:
        stack = [start] if start is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _in_order_nodes(self) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _post_order_nodes(self) -> Iterator[TreeNode]:
        # Reverse of a (node, right, left) pre-order walk.
        collected: list[TreeNode] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            collected.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(collected)

    def pre_order(self) -> list[Any]:
        """Values in pre-order: node, left subtree, right subtree."""
        return [node.value for node in self._pre_order_nodes(self._root)]

    def post_order(self) -> list[Any]:
        """Values in post-order: left subtree, right subtree, node."""
        return [node.value for node in self._post_order_nodes()]

    def in_order(self) -> list[Any]:
        """Values in key order."""
        return [node.value for node in self._in_order_nodes()]

    @staticmethod
    def _tree_to_vine(grand: TreeNode) -> int:
        count = 0
        tmp = grand.right
        while tmp is not None:
            if tmp.left is not None:
                old = tmp
                tmp = tmp.left
                old.left = tmp.right
                tmp.right = old
                grand.right = tmp
            else:
                count += 1
                grand = tmp
                tmp = tmp.right
        return count

    @staticmethod
    def _compress(grand: TreeNode, times: int) -> None:
        tmp = grand.right
        for _ in range(times):
            old = tmp
            tmp = tmp.right
            grand.right = tmp
            old.right = tmp.left
            tmp.left = old
            grand = tmp
            tmp = tmp.right

    def balance(self) -> None:
        """Rebuild the tree into minimal height, keeping key order."""
        grand = TreeNode(None, None, right=self._root)
        count = self._tree_to_vine(grand)
        height = (count + 1).bit_length() - 1
        full = (1 << height) - 1
        self._compress(grand, count - full)
        full //= 2
        while full > 0:
            self._compress(grand, full)
            full //= 2
        self._root = grand.right

    def swap_min_max(self) -> None:
        """Exchange the values of the smallest-key and largest-key nodes."""
        if self._root is None:
            return
        smallest = self._root
        while smallest.left is not None:
            smallest = smallest.left
        largest = self._root
        while largest.right is not None:
            largest = largest.right
        smallest.value, largest.value = largest.value, smallest.value

    def lowest_common_ancestor(self, key_1: Any, key_2: Any) -> Any:
        """Key of the deepest node whose subtree spans both keys."""
        node = self._root
        if node is None:
            raise ValueError("empty tree has no common ancestor")
        while True:
            if key_1 < node.key and key_2 < node.key and node.left is not None:
                node = node.left
            elif key_1 > node.key and key_2 > node.key and node.right is not None:
                node = node.right
            else:
                return node.key