"""Array, string and combinatorial search algorithms."""

from __future__ import annotations

import random
from bisect import bisect_left, bisect_right
from collections import deque
from itertools import accumulate, pairwise, permutations
from typing import Iterator, List, Optional, Sequence

_EPSILON = 1e-6
_TARGET = 24


class WeightedPicker:
    """Pick indices at random, each in proportion to its weight."""

    def __init__(
        self, weights: Sequence[float], rng: Optional[random.Random] = None
    ) -> None:
        if not weights:
            raise ValueError("weights is empty")
        if any(weight < 0 for weight in weights):
            raise ValueError("weights must not be negative")
        self._cumulative = list(accumulate(weights))
        if self._cumulative[-1] <= 0:
            raise ValueError("at least one weight must be positive")
        self._indices = range(len(weights))
        self._rng = rng if rng is not None else random.Random()

    def pick_index(self) -> int:
        """Return a random index, weighted by the weights given."""
        return self._rng.choices(self._indices, cum_weights=self._cumulative)[0]


def generate_pascal(num_rows: int) -> List[List[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: List[List[int]] = []
    for _ in range(num_rows):
        if rows:
            rows.append([1, *(a + b for a, b in pairwise(rows[-1])), 1])
        else:
            rows.append([1])
    return rows


def generate_parenthesis(n: int) -> List[str]:
    """Return every balanced string of ``n`` parenthesis pairs."""

    def extend(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened == n and closed == n:
            yield prefix
            return
        if opened < n:
            yield from extend(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from extend(prefix + ")", opened, closed + 1)

    return list(extend("", 0, 0))


def largest_good_integer(num: str) -> str:
    """Return the largest run of three equal digits in ``num``, or ``""``."""
    best = max(
        (a for a, b, c in zip(num, num[1:], num[2:]) if a == b == c),
        default="",
    )
    return best * 3


def _is_power_of(n: int, base: int) -> bool:
    if n < 1:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is an integer power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is an integer power of four."""
    return _is_power_of(n, 4)


def _reaches_target(nums: List[float]) -> bool:
    if len(nums) == 1:
        return abs(nums[0] - _TARGET) <= _EPSILON
    for i, j in permutations(range(len(nums)), 2):
        rest = [value for k, value in enumerate(nums) if k not in (i, j)]
        a, b = nums[i], nums[j]
        candidates = [a + b, a - b, b - a, a * b]
        if b != 0:
            candidates.append(a / b)
        if a != 0:
            candidates.append(b / a)
        if any(_reaches_target(rest + [value]) for value in candidates):
            return True
    return False


def judge_point_24(cards: Sequence[int]) -> bool:
    """Tell whether the cards combine with + - * / into 24."""
    return _reaches_target([float(card) for card in cards])


def longest_subarray_within_limit(nums: Sequence[int], limit: int) -> int:
    """Return the longest run whose largest and smallest differ by at most ``limit``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    highs: deque = deque()
    lows: deque = deque()
    start = 0
    best = 0
    for end, value in enumerate(nums):
        while highs and highs[-1] < value:
            highs.pop()
        highs.append(value)
        while lows and lows[-1] > value:
            lows.pop()
        lows.append(value)
        while highs[0] - lows[0] > limit:
            leaving = nums[start]
            if highs[0] == leaving:
                highs.popleft()
            if lows[0] == leaving:
                lows.popleft()
            start += 1
        best = max(best, end - start + 1)
    return best


def longest_ones_after_deletion(nums: Sequence[int]) -> int:
    """Return the longest run of ones left after deleting exactly one element."""
    if not nums:
        return 0
    runs = [0]
    for value in nums:
        if value:
            runs[-1] += 1
        else:
            runs.append(0)
    if len(runs) <= 2:
        return len(nums) - 1
    return max(a + b for a, b in pairwise(runs))


def max_total_fruits(
    fruits: Sequence[Sequence[int]], start_pos: int, k: int
) -> int:
    """Return the most fruit gathered walking at most ``k`` steps from ``start_pos``.

    ``fruits`` holds ``[position, amount]`` pairs sorted by position.
    """
    positions = [position for position, _ in fruits]
    prefix = [0, *accumulate(amount for _, amount in fruits)]

    def gathered(low: int, high: int) -> int:
        return prefix[bisect_right(positions, high)] - prefix[bisect_left(positions, low)]

    best = 0
    for back in range(k // 2 + 1):
        forth = k - 2 * back
        best = max(
            best,
            gathered(start_pos - back, start_pos + forth),
            gathered(start_pos - forth, start_pos + back),
        )
    return best


def maximize_win(nums: Sequence[int], k: int) -> int:
    """Return the most prizes covered by two segments of length ``k`` on sorted ``nums``."""
    best_until: List[int] = []
    start = 0
    best = 0
    for end, value in enumerate(nums):
        while value - nums[start] > k:
            start += 1
        window = end - start + 1
        earlier = best_until[start - 1] if start else 0
        best = max(best, window + earlier)
        best_until.append(max(window, best_until[-1] if best_until else 0))
    return best


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the longest run holding at most two kinds of fruit."""
    last_seen: dict = {}
    start = 0
    best = 0
    for index, kind in enumerate(fruits):
        if kind not in last_seen and len(last_seen) == 2:
            dropped = min(last_seen, key=last_seen.__getitem__)
            start = last_seen.pop(dropped) + 1
        last_seen[kind] = index
        best = max(best, index - start + 1)
    return best