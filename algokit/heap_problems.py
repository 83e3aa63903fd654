"""Problems solved with binary heaps."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from algokit.list_problems import ListNode

__all__ = ["kth_smallest", "running_medians", "merge_k_sorted", "top_k_frequent"]


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest value; a ``k`` past the end gives the largest."""
    if k < 1:
        raise ValueError("k must be at least 1")
    smallest = heapq.nsmallest(k, values)
    if not smallest:
        raise ValueError("values must not be empty")
    return smallest[-1]


def running_medians(values: Iterable[float]) -> list[float]:
    """Return the median of each prefix of ``values``."""
    lower: list[float] = []  # max-heap of the smaller half, stored negated
    upper: list[float] = []
    medians: list[float] = []
    for value in values:
        heapq.heappush(lower, -value)
        heapq.heappush(upper, -heapq.heappop(lower))
        if len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) > len(upper):
            medians.append(float(-lower[0]))
        else:
            medians.append((-lower[0] + upper[0]) / 2)
    return medians


def merge_k_sorted(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Splice sorted lists into one, always taking the smallest head next."""
    order = itertools.count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next


def top_k_frequent(nums: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` most frequent values, least frequent of them first."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(nums)
    most = heapq.nlargest(k, counts.items(), key=lambda item: item[1])
    return [value for value, _ in reversed(most)]