"""Indexed binary min-heap keyed by vertex, used for shortest-path searches."""

from __future__ import annotations

import math


class HeapError(Exception):
    """Raised when a heap operation cannot be carried out."""


class MinHeap:
    """A min-heap of ``(distance, vertex)`` pairs with O(1) vertex lookup.

    Vertices are integers in ``range(max_size)``; each may be present at
    most once, and its distance can be lowered in place.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self._entries: list[tuple[int, int]] = []
        self._positions: list[int] = [-1] * max_size

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and 0 <= vertex < len(self._positions)
            and self._positions[vertex] != -1
        )

    def is_empty(self) -> bool:
        """Return True when the heap holds no vertices."""
        return not self._entries

    def distance_of(self, vertex: int) -> float:
        """Return the stored distance of ``vertex``, or infinity if absent."""
        if vertex not in self:
            return math.inf
        return self._entries[self._positions[vertex]][0]

    def insert(self, vertex: int, distance: int) -> None:
        """Add ``vertex`` with ``distance``, or update it if already present."""
        if vertex in self:
            index = self._positions[vertex]
            previous = self._entries[index][0]
            self._entries[index] = (distance, vertex)
            if distance < previous:
                self._sift_up(index)
            else:
                self._sift_down(index)
            return
        if not 0 <= vertex < len(self._positions):
            raise HeapError(f"vertex {vertex} is outside the heap's range")
        self._entries.append((distance, vertex))
        self._positions[vertex] = len(self._entries) - 1
        self._sift_up(len(self._entries) - 1)

    def extract_min(self) -> tuple[int, int]:
        """Remove and return the ``(distance, vertex)`` pair with least distance."""
        if not self._entries:
            raise HeapError("Heap is empty")
        root = self._entries[0]
        last = self._entries.pop()
        self._positions[root[1]] = -1
        if self._entries:
            self._entries[0] = last
            self._positions[last[1]] = 0
            self._sift_down(0)
        return root

    def decrease_key(self, vertex: int, new_distance: int) -> None:
        """Lower the distance of a vertex already in the heap."""
        if vertex not in self:
            raise HeapError("Vertex not in heap")
        index = self._positions[vertex]
        if new_distance > self._entries[index][0]:
            raise HeapError("New distance is greater than current distance")
        self._entries[index] = (new_distance, vertex)
        self._sift_up(index)

    def _swap(self, i: int, j: int) -> None:
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self._positions[entries[i][1]] = i
        self._positions[entries[j][1]] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._entries[index][0] >= self._entries[parent][0]:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._entries)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._entries[child][0] < self._entries[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest