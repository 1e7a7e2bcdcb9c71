"""Dynamic-programming algorithms over sequences, strings and grids."""

from __future__ import annotations

import math
from typing import Iterator, List, Sequence, Tuple

MOD = 1_000_000_007

_KNIGHT_MOVES = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, 2), (1, -2), (2, 1), (2, -1),
)


def _neighbours(rows: int, cols: int, r: int, c: int) -> Iterator[Tuple[int, int]]:
    for dr, dc in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _cells_by_value_descending(grid: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    cells = [(r, c) for r, row in enumerate(grid) for c in range(len(row))]
    cells.sort(key=lambda cell: grid[cell[0]][cell[1]], reverse=True)
    return cells


def min_score_triangulation(values: Sequence[int]) -> int:
    """Return the least total of vertex products over triangulations of a polygon."""
    n = len(values)
    if n < 2:
        raise ValueError("a polygon needs at least two vertices")
    best = [[0] * n for _ in range(n)]
    for gap in range(2, n):
        for i in range(n - gap):
            j = i + gap
            best[i][j] = min(
                values[i] * values[j] * values[k] + best[i][k] + best[k][j]
                for k in range(i + 1, j)
            )
    return best[0][n - 1]


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Return the best profit from at most ``k`` buy-then-sell transactions."""
    k = min(k, len(prices) // 2)
    if k <= 0:
        return 0
    holding = [-math.inf] * (k + 1)
    cash = [0] * (k + 1)
    for price in prices:
        for j in range(1, k + 1):
            holding[j] = max(holding[j], cash[j - 1] - price)
            cash[j] = max(cash[j], holding[j] + price)
    return max(cash)


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Return the best profit from at most two transactions."""
    return max_profit_k_transactions(2, prices)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Return the best profit when each sale forces a one-day rest before buying."""
    holding = -math.inf
    cash = 0
    cash_two_days_ago = 0
    for price in prices:
        new_holding = max(holding, cash_two_days_ago - price)
        cash_two_days_ago = cash
        cash = max(cash, holding + price)
        holding = new_holding
    return cash


def min_cut(s: str) -> int:
    """Return the fewest cuts splitting ``s`` into palindromes (-1 for ``""``)."""
    n = len(s)
    is_palindrome = [[False] * n for _ in range(n)]
    for i in reversed(range(n)):
        for j in range(i, n):
            if s[i] == s[j] and (j - i < 2 or is_palindrome[i + 1][j - 1]):
                is_palindrome[i][j] = True
    cuts = [0] * (n + 1)
    cuts[n] = -1
    for i in reversed(range(n)):
        cuts[i] = min(
            1 + cuts[j + 1] for j in range(i, n) if is_palindrome[i][j]
        )
    return cuts[0]


def count_texts(pressed_keys: str) -> int:
    """Count the messages a sequence of phone key presses could spell, modulo 10**9+7."""
    n = len(pressed_keys)
    ways = [0] * (n + 1)
    ways[n] = 1
    for i in reversed(range(n)):
        key = pressed_keys[i]
        if not key.isdigit():
            raise ValueError(f"not a key: {key!r}")
        if key in "01":
            continue
        longest = 4 if key in "79" else 3
        total = 0
        for length in range(1, longest + 1):
            end = i + length
            if end > n or pressed_keys[end - 1] != key:
                break
            total += ways[end]
        ways[i] = total % MOD
    return ways[0]


def count_increasing_paths(grid: Sequence[Sequence[int]]) -> int:
    """Count strictly increasing paths of any length in a grid, modulo 10**9+7."""
    if not grid or not grid[0]:
        return 0
    rows, cols = len(grid), len(grid[0])
    paths = [[0] * cols for _ in range(rows)]
    total = 0
    for r, c in _cells_by_value_descending(grid):
        count = 1 + sum(
            paths[nr][nc]
            for nr, nc in _neighbours(rows, cols, r, c)
            if grid[nr][nc] > grid[r][c]
        )
        paths[r][c] = count % MOD
        total = (total + paths[r][c]) % MOD
    return total


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Return the length of the longest strictly increasing path in a matrix."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])
    longest = [[0] * cols for _ in range(rows)]
    for r, c in _cells_by_value_descending(matrix):
        longest[r][c] = 1 + max(
            (
                longest[nr][nc]
                for nr, nc in _neighbours(rows, cols, r, c)
                if matrix[nr][nc] > matrix[r][c]
            ),
            default=0,
        )
    return max(max(row) for row in longest)


def number_of_ways(n: int, x: int) -> int:
    """Count sets of distinct positive integers whose ``x``-th powers sum to ``n``."""
    if x < 1:
        raise ValueError("the exponent must be positive")
    if n < 0:
        return 0
    ways = [1] + [0] * n
    base = 1
    while base ** x <= n:
        power = base ** x
        for total in range(n, power - 1, -1):
            ways[total] = (ways[total] + ways[total - power]) % MOD
        base += 1
    return ways[n]


def max_coins(nums: Sequence[int]) -> int:
    """Return the most coins gained by bursting every balloon."""
    padded = [1, *nums, 1]
    m = len(padded)
    best = [[0] * m for _ in range(m)]
    for gap in range(2, m):
        for i in range(m - gap):
            j = i + gap
            best[i][j] = max(
                padded[i] * padded[k] * padded[j] + best[i][k] + best[k][j]
                for k in range(i + 1, j)
            )
    return best[0][m - 1]


def count_numbers_with_unique_digits(n: int) -> int:
    """Count the integers in ``[0, 10**n)`` whose digits are all different."""
    if n < 0:
        raise ValueError("n must not be negative")
    return 1 + sum(9 * math.perm(9, digits - 1) for digits in range(1, n + 1))


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        return 0
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths that avoid cells marked 1."""
    if not grid or not grid[0]:
        return 0
    ways = [1] + [0] * (len(grid[0]) - 1)
    for row in grid:
        for j, cell in enumerate(row):
            if cell:
                ways[j] = 0
            elif j > 0:
                ways[j] += ways[j - 1]
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the least sum along a right/down path from corner to corner."""
    if not grid or not grid[0]:
        raise ValueError("the grid is empty")
    best: List[float] = [math.inf] * len(grid[0])
    best[0] = 0
    for row in grid:
        for j, cell in enumerate(row):
            from_left = best[j - 1] if j > 0 else math.inf
            best[j] = min(best[j], from_left) + cell
    return int(best[-1])


def knight_probability(n: int, k: int, row: int, column: int) -> float:
    """Return the chance a knight making ``k`` random moves stays on an ``n`` board."""
    if n < 1:
        raise ValueError("the board must have at least one square")
    if k < 0:
        raise ValueError("the number of moves must not be negative")
    if not (0 <= row < n and 0 <= column < n):
        raise ValueError("the knight must start on the board")
    stay = [[1.0] * n for _ in range(n)]
    for _ in range(k):
        stay = [
            [
                sum(
                    stay[r + dr][c + dc]
                    for dr, dc in _KNIGHT_MOVES
                    if 0 <= r + dr < n and 0 <= c + dc < n
                ) / 8
                for c in range(n)
            ]
            for r in range(n)
        ]
    return stay[row][column]


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Return the chance of ending with at most ``n`` points, drawing until ``k``."""
    if max_pts < 1:
        raise ValueError("max_pts must be positive")
    if n < 0:
        raise ValueError("n must not be negative")
    probs = [0.0] * (n + 1)
    probs[0] = 1.0
    window = 1.0 if k > 0 else 0.0
    for i in range(1, n + 1):
        probs[i] = window / max_pts
        if i < k:
            window += probs[i]
        if 0 <= i - max_pts < k:
            window -= probs[i - max_pts]
    return sum(probs[k:])


def num_decodings(s: str) -> int:
    """Count the ways to decode a digit string where 1..26 stand for letters."""
    n = len(s)
    ways = [0] * (n + 1)
    ways[n] = 1
    for i in reversed(range(n)):
        if s[i] == "0":
            continue
        total = ways[i + 1]
        if i + 1 < n and (s[i] == "1" or (s[i] == "2" and s[i + 1] <= "6")):
            total += ways[i + 2]
        ways[i] = total
    return ways[0]


def num_trees(n: int) -> int:
    """Count the structurally distinct binary search trees on ``n`` keys."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1] * (n + 1)
    for size in range(2, n + 1):
        counts[size] = sum(
            counts[left] * counts[size - 1 - left] for left in range(size)
        )
    return counts[n]


def find_all_concatenated_words(words: Sequence[str]) -> List[str]:
    """Return the words that are made of other words of the list, in order."""
    vocabulary = set(words)
    found = []
    for word in words:
        vocabulary.discard(word)
        try:
            reachable = [True] + [False] * len(word)
            for end in range(1, len(word) + 1):
                reachable[end] = any(
                    reachable[start] and word[start:end] in vocabulary
                    for start in range(end)
                )
            if reachable[-1]:
                found.append(word)
        finally:
            vocabulary.add(word)
    return found