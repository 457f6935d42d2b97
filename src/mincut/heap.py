from heapq import heappop, heappush

from mincut.types import VertexId, Weight


class LazyMaxHeap:
    """Max-priority queue over vertices where priorities only ever go up. heapq is a min-heap, so priorities are stored
    negated. Increasing a priority pushes a fresh entry and leaves the old one in place; entries that no longer match
    the current priority of their vertex are skipped when popped.

    Ties go to the lowest vertex id.
    """

    def __init__(self):
        self._heap: list[tuple[Weight, VertexId]] = []
        self._priority: dict[VertexId, Weight] = {}

    def __len__(self):
        return len(self._priority)

    def __contains__(self, v):
        return v in self._priority

    def get(self, v: VertexId, default: Weight = 0) -> Weight:
        return self._priority.get(v, default)

    def insert_or_add(self, v: VertexId, delta: Weight):
        priority = self._priority.get(v, 0) + delta
        self._priority[v] = priority
        heappush(self._heap, (-priority, v))

    def extract_max(self) -> tuple[VertexId, Weight]:
        while self._heap:
            neg_priority, v = heappop(self._heap)
            # stale if v was already extracted or has since been increased
            if self._priority.get(v) == -neg_priority:
                del self._priority[v]
                return v, -neg_priority

        raise IndexError("extract_max from empty heap")


class ScanPriority:
    """Same interface as LazyMaxHeap, but every extraction scans all entries. O(n) per extraction, which for dense
    graphs is no worse than the heap."""

    def __init__(self):
        self._priority: dict[VertexId, Weight] = {}

    def __len__(self):
        return len(self._priority)

    def __contains__(self, v):
        return v in self._priority

    def get(self, v: VertexId, default: Weight = 0) -> Weight:
        return self._priority.get(v, default)

    def insert_or_add(self, v: VertexId, delta: Weight):
        self._priority[v] = self._priority.get(v, 0) + delta

    def extract_max(self) -> tuple[VertexId, Weight]:
        if not self._priority:
            raise IndexError("extract_max from empty heap")

        best_v = -1
        highest_wght = float("-inf")
        for v, wght in self._priority.items():
            if wght > highest_wght or (wght == highest_wght and v < best_v):
                best_v = v
                highest_wght = wght

        del self._priority[best_v]
        return best_v, highest_wght
