"""Binary max-heap stored in a list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class HeapArrayMax:
    """Max-heap laid out as a complete binary tree in a list."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._heap: list[Any] = list(items) if items is not None else []
        for index in range(len(self._heap) // 2 - 1, -1, -1):
            self._sift_down(index)

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and heap[largest] < heap[left]:
                largest = left
            if right < size and heap[largest] < heap[right]:
                largest = right
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[parent] >= heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def insert(self, value: Any) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def extract_root(self) -> Any:
        """Remove and return the largest element."""
        if not self._heap:
            raise IndexError("extract from an empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def root(self) -> Any:
        """Return the largest element without removing it."""
        if not self._heap:
            raise IndexError("empty heap has no root")
        return self._heap[0]

    def remove(self, index: int) -> None:
        """Remove the element stored at position index of the layout."""
        if not 0 <= index < len(self._heap):
            raise IndexError("heap index out of range")
        heap = self._heap
        # Bubble the element all the way to the root, as if it were the maximum.
        while index > 0:
            parent = (index - 1) // 2
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent
        self.extract_root()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()

    def to_list(self) -> list[Any]:
        """Copy of the underlying layout."""
        return list(self._heap)