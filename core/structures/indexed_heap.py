"""
Indexed Min-Heap — decrease-key priority queue over dense integer ids.

Every element is a vertex id in ``0..capacity-1`` with a float key. The heap
keeps a position map so a queued vertex's key can be lowered in place.

Time Complexity: O(log V) push / pop_min / decrease, O(1) min lookup
Memory: O(V)
"""

from typing import List, Tuple


class IndexedMinHeap:
    """Binary min-heap keyed by vertex id, supporting decrease-key."""

    def __init__(self, capacity: int):
        self._keys: List[float] = []
        self._items: List[int] = []
        # Heap position + 1 per vertex; 0 means "not in the heap"
        self._pos: List[int] = [0] * capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, idx: int) -> bool:
        return self._pos[idx] != 0

    def clear(self) -> None:
        """Empty the heap, touching only the slots currently in use."""
        for idx in self._items:
            self._pos[idx] = 0
        self._items.clear()
        self._keys.clear()

    def push(self, idx: int, key: float) -> None:
        if self._pos[idx] != 0:
            raise KeyError(f"vertex {idx} is already in the heap")
        self._items.append(idx)
        self._keys.append(key)
        last = len(self._items) - 1
        self._pos[idx] = last + 1
        self._sift_up(last)

    def min_index(self) -> int:
        return self._items[0]

    def min_key(self) -> float:
        return self._keys[0]

    def pop_min(self) -> Tuple[int, float]:
        """Remove and return ``(vertex, key)`` with the smallest key."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        idx, key = self._items[0], self._keys[0]
        last = len(self._items) - 1
        self._swap(0, last)
        self._items.pop()
        self._keys.pop()
        self._pos[idx] = 0
        if self._items:
            self._sift_down(0)
        return idx, key

    def decrease(self, idx: int, key: float) -> None:
        """Lower the key of a queued vertex."""
        pos = self._pos[idx] - 1
        if pos < 0:
            raise KeyError(f"vertex {idx} is not in the heap")
        if key > self._keys[pos]:
            raise ValueError("new key is larger than the current key")
        self._keys[pos] = key
        self._sift_up(pos)

    def _swap(self, a: int, b: int) -> None:
        items, keys, pos = self._items, self._keys, self._pos
        items[a], items[b] = items[b], items[a]
        keys[a], keys[b] = keys[b], keys[a]
        pos[items[a]] = a + 1
        pos[items[b]] = b + 1

    def _sift_up(self, i: int) -> None:
        keys = self._keys
        while i > 0:
            parent = (i - 1) // 2
            if keys[i] >= keys[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        keys = self._keys
        size = len(keys)
        while True:
            left = 2 * i + 1
            if left >= size:
                break
            smallest = left
            right = left + 1
            if right < size and keys[right] < keys[left]:
                smallest = right
            if keys[smallest] >= keys[i]:
                break
            self._swap(i, smallest)
            i = smallest
