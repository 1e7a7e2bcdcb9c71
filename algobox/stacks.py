"""Monotonic-stack and expression-evaluation algorithms."""

from __future__ import annotations

import math
import re
from itertools import accumulate
from typing import Dict, List, Sequence

_OPERATORS = frozenset("+-*/")
_LEXEME_PATTERN = re.compile(r"\s*(?:(\d+)|([-+*/]))")


def _apply(left: int, right: int, op: str) -> int:
    """Apply an arithmetic operator, truncating division toward zero."""
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _previous_smaller(values: Sequence[int]) -> List[int]:
    """Index of the nearest strictly smaller value to the left, or -1."""
    result = []
    stack: List[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def _next_smaller(values: Sequence[int], *, or_equal: bool) -> List[int]:
    """Index of the nearest smaller value to the right, or ``len(values)``.

    With ``or_equal`` an equal value also stops the search.
    """
    n = len(values)
    result = [n] * n
    stack: List[int] = []
    for i in reversed(range(n)):
        value = values[i]
        while stack and (
            values[stack[-1]] > value
            if or_equal
            else values[stack[-1]] >= value
        ):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def can_see_persons_count(heights: Sequence[int]) -> List[int]:
    """For each person, count the people to the right they can see."""
    counts = [0] * len(heights)
    stack: List[int] = []
    for i in reversed(range(len(heights))):
        height = heights[i]
        seen = 0
        while stack and stack[-1] <= height:
            stack.pop()
            seen += 1
        if stack:
            seen += 1
        counts[i] = seen
        stack.append(height)
    return counts


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation."""
    stack: List[int] = []
    for item in tokens:
        if item in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {item!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(left, right, item))
        else:
            stack.append(int(item))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def calculate(s: str) -> int:
    """Evaluate ``+ - * /`` over non-negative integers, honouring precedence."""
    values: List[int] = []
    ops: List[str] = []
    pending: str | None = None
    position = 0
    stripped_end = len(s.rstrip())
    while position < stripped_end:
        match = _LEXEME_PATTERN.match(s, position)
        if match is None:
            raise ValueError(f"unexpected character at position {position}")
        position = match.end()
        number, op = match.groups()
        if number is not None:
            value = int(number)
            if pending is not None:
                values[-1] = _apply(values[-1], value, pending)
                pending = None
            else:
                values.append(value)
        elif pending is not None:
            raise ValueError(f"operator {op!r} follows {pending!r}")
        elif op in "*/":
            if not values:
                raise ValueError(f"operator {op!r} lacks a left operand")
            pending = op
        else:
            ops.append(op)
    if pending is not None or not values or len(values) != len(ops) + 1:
        raise ValueError(f"malformed expression: {s!r}")
    result = values[0]
    for op, value in zip(ops, values[1:]):
        result = _apply(result, value, op)
    return result


def remove_duplicate_letters(s: str) -> str:
    """Keep one of each letter, giving the smallest such subsequence."""
    remaining: Dict[str, int] = {}
    for ch in s:
        remaining[ch] = remaining.get(ch, 0) + 1
    stack: List[str] = []
    included = set()
    for ch in s:
        remaining[ch] -= 1
        if ch in included:
            continue
        while stack and stack[-1] > ch and remaining[stack[-1]] > 0:
            included.discard(stack.pop())
        stack.append(ch)
        included.add(ch)
    return "".join(stack)


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    matched = [False] * len(s)
    openings: List[int] = []
    for i, ch in enumerate(s):
        if ch == "(":
            openings.append(i)
        elif openings:
            matched[openings.pop()] = True
            matched[i] = True
    best = run = 0
    for flag in matched:
        run = run + 1 if flag else 0
        best = max(best, run)
    return best


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    third = -math.inf
    stack: List[int] = []
    for value in reversed(nums):
        if value < third:
            return True
        while stack and stack[-1] < value:
            third = max(third, stack.pop())
        stack.append(value)
    return False


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> List[int]:
    """For each value of ``nums1``, its next greater value in ``nums2`` or -1."""
    greater: Dict[int, int] = {}
    stack: List[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] < value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]!r} does not occur in nums2") from None


def daily_temperatures(temperatures: Sequence[int]) -> List[int]:
    """Days to wait for a warmer temperature, 0 where none comes."""
    waits = [0] * len(temperatures)
    stack: List[int] = []
    for i in reversed(range(len(temperatures))):
        while stack and temperatures[stack[-1]] <= temperatures[i]:
            stack.pop()
        if stack:
            waits[i] = stack[-1] - i
        stack.append(i)
    return waits


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in a histogram."""
    left = _previous_smaller(heights)
    right = _next_smaller(heights, or_equal=False)
    return max(
        (h * (r - l - 1) for h, l, r in zip(heights, left, right)),
        default=0,
    )


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest all-``'1'`` rectangle in a grid."""
    if not matrix or not matrix[0]:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def _count_bottom_aligned(heights: Sequence[int]) -> int:
    left = _previous_smaller(heights)
    right = _next_smaller(heights, or_equal=True)
    return sum(
        h * (r - i) * (i - l)
        for i, (h, l, r) in enumerate(zip(heights, left, right))
        if h
    )


def num_submat(mat: Sequence[Sequence[int]]) -> int:
    """Count the submatrices whose cells are all ones."""
    if not mat or not mat[0]:
        return 0
    heights = [0] * len(mat[0])
    total = 0
    for row in mat:
        heights = [h + cell if cell else 0 for h, cell in zip(heights, row)]
        total += _count_bottom_aligned(heights)
    return total


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        max(0, min(lm, rm) - h)
        for h, lm, rm in zip(height, left_max, right_max)
    )