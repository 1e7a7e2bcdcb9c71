"""Heap, interval and greedy-choice algorithms."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from typing import List, Optional, Sequence


def k_closest(points: Sequence[Sequence[int]], k: int) -> List[List[int]]:
    """Return the ``k`` points nearest the origin, farthest of them first."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    # Min-heap on negated keys acts as a max-heap on (distance, x, y).
    heap: list = []
    for point in points:
        x, y = point[0], point[1]
        key = (-(x * x + y * y), -x, -y)
        if len(heap) < k:
            heapq.heappush(heap, (key, list(point)))
        elif -heap[0][0][0] > -key[0]:
            heapq.heapreplace(heap, (key, list(point)))
    return [point for _, point in sorted(heap)]


def max_events(events: Sequence[Sequence[int]]) -> int:
    """Return the most events attendable, one per day, within their day ranges."""
    ordered = sorted((start, end) for start, end in events)
    ending: List[int] = []
    attended = 0
    index = 0
    day = ordered[0][0] if ordered else 0
    while ending or index < len(ordered):
        if not ending and ordered[index][0] > day:
            day = ordered[index][0]
        while index < len(ordered) and ordered[index][0] == day:
            heapq.heappush(ending, ordered[index][1])
            index += 1
        if ending:
            heapq.heappop(ending)
            attended += 1
        day += 1
        while ending and ending[0] < day:
            heapq.heappop(ending)
    return attended


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must lie between 1 and {len(nums)}")
    return heapq.nlargest(k, nums)[-1]


def top_k_frequent(nums: Sequence[int], k: int) -> List[int]:
    """Return the ``k`` most frequent values, most frequent first."""
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must lie between 0 and {len(counts)}")
    ranked = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in ranked]


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> List[List[int]]:
    """Return the ``k`` pairs across two sorted lists with the smallest sums."""
    if not nums1 or not nums2 or k <= 0:
        return []
    heap = [(nums1[0] + nums2[0], 0, 0)]
    seen = {(0, 0)}
    pairs: List[List[int]] = []
    while heap and len(pairs) < k:
        _, i, j = heapq.heappop(heap)
        pairs.append([nums1[i], nums2[j]])
        for ni, nj in ((i, j + 1), (i + 1, j)):
            if ni < len(nums1) and nj < len(nums2) and (ni, nj) not in seen:
                heapq.heappush(heap, (nums1[ni] + nums2[nj], ni, nj))
                seen.add((ni, nj))
    return pairs


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest intervals to drop so the rest do not overlap."""
    removed = 0
    last_end: Optional[int] = None
    for start, end in sorted((s, e) for s, e in intervals):
        if last_end is None or start >= last_end:
            last_end = end
            continue
        removed += 1
        last_end = min(last_end, end)
    return removed


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every balloon span."""
    arrows = 0
    current_end = -math.inf
    for start, end in sorted((s, e) for s, e in points):
        if arrows and start <= current_end:
            current_end = min(current_end, end)
        else:
            arrows += 1
            current_end = end
    return arrows


def _merge_into(result: List[List[int]], interval: Sequence[int]) -> None:
    if result and result[-1][1] >= interval[0]:
        result[-1][1] = max(result[-1][1], interval[1])
    else:
        result.append([interval[0], interval[1]])


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> List[List[int]]:
    """Insert an interval into sorted disjoint intervals, merging overlaps."""
    result: List[List[int]] = []
    placed = False
    for start, end in intervals:
        if not placed and start >= new_interval[0]:
            _merge_into(result, new_interval)
            placed = True
        if placed:
            _merge_into(result, (start, end))
        else:
            result.append([start, end])
    if not placed:
        _merge_into(result, new_interval)
    return result


def min_cost(basket1: Sequence[int], basket2: Sequence[int]) -> int:
    """Return the least cost of swaps that make two baskets equal, or -1."""
    balance: Counter = Counter(basket1)
    balance.subtract(basket2)
    surplus: List[int] = []
    for value, count in balance.items():
        if count % 2:
            return -1
        surplus.extend([value] * (abs(count) // 2))
    if not surplus:
        return 0
    cheapest = min(min(basket1, default=math.inf), min(basket2, default=math.inf))
    surplus.sort()
    return sum(min(value, 2 * cheapest) for value in surplus[: len(surplus) // 2])


def num_of_unplaced_fruits(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Place each fruit in the leftmost free basket that holds it; count misfits."""
    free: List[Optional[int]] = list(baskets)
    unplaced = 0
    for fruit in fruits:
        for index, capacity in enumerate(free):
            if capacity is not None and capacity >= fruit:
                free[index] = None
                break
        else:
            unplaced += 1
    return unplaced


class _MaxTree:
    """Segment tree over capacities that finds and claims the leftmost fit."""

    def __init__(self, values: Sequence[int]) -> None:
        size = 1
        while size < len(values):
            size *= 2
        self._size = size
        self._tree: List[float] = [-math.inf] * (2 * size)
        self._tree[size:size + len(values)] = values
        for node in reversed(range(1, size)):
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def claim(self, need: int) -> bool:
        tree = self._tree
        if tree[1] < need:
            return False
        node = 1
        while node < self._size:
            node = 2 * node if tree[2 * node] >= need else 2 * node + 1
        tree[node] = -math.inf
        node //= 2
        while node:
            tree[node] = max(tree[2 * node], tree[2 * node + 1])
            node //= 2
        return True


def num_of_unplaced_fruits_fast(fruits: Sequence[int], baskets: Sequence[int]) -> int:
    """Same as :func:`num_of_unplaced_fruits`, in logarithmic time per fruit."""
    if not baskets:
        return len(fruits)
    tree = _MaxTree(baskets)
    return sum(1 for fruit in fruits if not tree.claim(fruit))