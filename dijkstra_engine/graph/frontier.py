"""Indexed min-priority frontier.

``heapq`` has no way to change the key of an entry already in the
heap. The usual workaround pushes duplicates and skips stale ones on
pop, which lets the heap grow with every relaxation. This frontier
instead keeps a position index (item -> heap slot), so an item can be
repositioned or removed in O(log n) and the heap never holds more
than one entry per item.

The sift loops are written out here instead of calling into
``heapq``: its public functions only push and pop at the ends of the
list, and its internal ``_siftdown``/``_siftup`` move entries without
reporting where they land, so the position index would go stale.
Ordering matches ``heapq`` (smallest tuple at slot 0, children of
slot ``i`` at ``2i + 1`` and ``2i + 2``).

Entries are ``(priority, sequence, item)`` tuples. The sequence
number breaks ties in insertion order and keeps items themselves
out of comparisons, so items only need to be hashable.
"""

from __future__ import annotations

import itertools
from typing import Dict, Generic, Hashable, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class VertexFrontier(Generic[T]):
    """Binary min-heap of items keyed by a float priority."""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._position: Dict[T, int] = {}
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._position

    def priority(self, item: T) -> float:
        """Return the current priority of ``item``.

        Raises:
            KeyError: If ``item`` is not in the frontier.
        """
        return self._heap[self._position[item]][0]

    def push(self, item: T, priority: float) -> None:
        """Insert ``item`` with the given priority.

        Raises:
            KeyError: If ``item`` is already in the frontier.
        """
        if item in self._position:
            raise KeyError(f"Item already in frontier: {item!r}")
        self._heap.append((priority, next(self._sequence), item))
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Tuple[T, float]:
        """Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        last = self._heap.pop()
        if self._heap:
            top = self._heap[0]
            self._heap[0] = last
            self._sift_down(0)
        else:
            top = last
        del self._position[top[2]]
        return top[2], top[0]

    def update(self, item: T, priority: float) -> None:
        """Reposition ``item`` under a new priority.

        Equivalent to removing the item and inserting it again, done
        in place along a single heap path.

        Raises:
            KeyError: If ``item`` is not in the frontier.
        """
        pos = self._position[item]
        self._heap[pos] = (priority, next(self._sequence), item)
        self._restore(pos)

    def remove(self, item: T) -> None:
        """Remove ``item`` from the frontier.

        Raises:
            KeyError: If ``item`` is not in the frontier.
        """
        pos = self._position.pop(item)
        last = self._heap.pop()
        if pos < len(self._heap):
            self._heap[pos] = last
            self._restore(pos)

    def _restore(self, pos: int) -> None:
        if pos > 0 and self._heap[pos] < self._heap[(pos - 1) >> 1]:
            self._sift_up(pos)
        else:
            self._sift_down(pos)

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        entry = heap[pos]
        while pos > 0:
            parent = (pos - 1) >> 1
            if entry < heap[parent]:
                heap[pos] = heap[parent]
                self._position[heap[pos][2]] = pos
                pos = parent
            else:
                break
        heap[pos] = entry
        self._position[entry[2]] = pos

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        entry = heap[pos]
        while True:
            child = 2 * pos + 1
            if child >= size:
                break
            right = child + 1
            if right < size and heap[right] < heap[child]:
                child = right
            if heap[child] < entry:
                heap[pos] = heap[child]
                self._position[heap[pos][2]] = pos
                pos = child
            else:
                break
        heap[pos] = entry
        self._position[entry[2]] = pos
