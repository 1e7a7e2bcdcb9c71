"""Binary search algorithms over arrays and matrices."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from typing import List, Sequence


class MountainArray:
    """Read-only access to a strictly rising then strictly falling array."""

    def __init__(self, values: Sequence[int]) -> None:
        self._values = list(values)

    def get(self, index: int) -> int:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)


def find_in_mountain_array(target: int, mountain: MountainArray) -> int:
    """Return the smallest index holding ``target``, or -1."""
    lo, hi = 0, len(mountain) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if mountain.get(mid) < mountain.get(mid + 1):
            lo = mid + 1
        else:
            hi = mid
    peak = lo

    lo, hi = 0, peak
    while lo <= hi:
        mid = (lo + hi) // 2
        value = mountain.get(mid)
        if value == target:
            return mid
        if value < target:
            lo = mid + 1
        else:
            hi = mid - 1

    lo, hi = peak + 1, len(mountain) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = mountain.get(mid)
        if value == target:
            return mid
        if value > target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours, or -1."""
    if not nums:
        raise ValueError("nums is empty")
    n = len(nums)
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    lo, hi = 1, n - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid - 1] < nums[mid] < nums[mid + 1]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_matrix_rows(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows are each sorted, one row at a time."""
    for row in matrix:
        if not row or not row[0] <= target <= row[-1]:
            continue
        index = bisect_left(row, target)
        if index < len(row) and row[index] == target:
            return True
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted array, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] <= nums[hi]:
            if nums[mid] < target <= nums[hi]:
                lo = mid + 1
            else:
                hi = mid - 1
        elif nums[lo] <= target < nums[mid]:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


def search_range(nums: Sequence[int], target: int) -> List[int]:
    """Return the first and last index of ``target`` in sorted ``nums``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted arrays."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("both arrays are empty")
    half = (m + n + 1) // 2
    lo, hi = 0, m
    while lo <= hi:
        px = (lo + hi) // 2
        qx = half - px
        left1 = nums1[px - 1] if px > 0 else -math.inf
        left2 = nums2[qx - 1] if qx > 0 else -math.inf
        right1 = nums1[px] if px < m else math.inf
        right2 = nums2[qx] if qx < n else math.inf
        if left1 <= right2 and left2 <= right1:
            if (m + n) % 2 == 0:
                return (max(left1, left2) + min(right1, right2)) / 2
            return float(max(left1, left2))
        if left1 > right2:
            hi = px - 1
        else:
            lo = px + 1
    raise ValueError("arrays are not sorted")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix sorted along rows and columns from its top-right corner."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest eating speed that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("piles is empty")
    if h < len(piles):
        raise ValueError("no speed finishes the piles in time")
    lo, hi = 1, max(max(piles), 1)
    while lo < hi:
        mid = (lo + hi) // 2
        if _hours_needed(piles, mid) <= h:
            hi = mid
        else:
            lo = mid + 1
    return lo