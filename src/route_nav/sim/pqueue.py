# sim/pqueue.py

import heapq
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-priority queue over (item, priority) pairs.

    The same item may sit in the queue several times with different priorities;
    consumers discard the stale copies on extraction. Equal priorities come out
    in insertion order.
    """

    def __init__(self):
        self._q: list[tuple[float, int, T]] = []
        self._seq = 0

    def insert(self, item: T, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, item))

    def extract_min(self) -> tuple[T, float]:
        if not self._q:
            raise IndexError("extract_min from an empty PriorityQueue")
        priority, _, item = heapq.heappop(self._q)
        return item, priority

    def is_empty(self) -> bool:
        return not self._q

    def __len__(self) -> int:
        return len(self._q)
