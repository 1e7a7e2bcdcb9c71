"""Breadth-first, shortest-path and grid-covering algorithms."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

EMPTY, FRESH, ROTTEN = 0, 1, 2

_Box = Tuple[int, int, int, int]


def _neighbours(grid: Sequence[Sequence[int]], r: int, c: int) -> Iterator[Tuple[int, int]]:
    for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
        if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]):
            yield nr, nc


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if some never rot.

    The input grid is left untouched.
    """
    cells = [list(row) for row in grid]
    queue = deque(
        (r, c)
        for r, row in enumerate(cells)
        for c, value in enumerate(row)
        if value == ROTTEN
    )
    fresh = sum(row.count(FRESH) for row in cells)
    minutes = 0
    while queue and fresh:
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(cells, r, c):
                if cells[nr][nc] == FRESH:
                    cells[nr][nc] = ROTTEN
                    fresh -= 1
                    queue.append((nr, nc))
        minutes += 1
    return -1 if fresh else minutes


def _one_apart(first: str, second: str) -> bool:
    if len(first) != len(second):
        return False
    differences = 0
    for a, b in zip(first, second):
        if a != b:
            differences += 1
            if differences > 1:
                return False
    return differences == 1


def ladder_length(begin_word: str, end_word: str, word_list: Sequence[str]) -> int:
    """Return the word count of the shortest one-letter-change ladder, or 0."""
    remaining = set(word_list)
    if end_word not in remaining:
        return 0
    frontier = [begin_word]
    length = 1
    while frontier:
        length += 1
        following: List[str] = []
        for word in frontier:
            adjacent = [other for other in remaining if _one_apart(word, other)]
            if end_word in adjacent:
                return length
            remaining.difference_update(adjacent)
            following.extend(adjacent)
        frontier = following
    return 0


def find_the_city(
    n: int, edges: Sequence[Sequence[int]], distance_threshold: int
) -> int:
    """Return the city reaching the fewest others within the threshold.

    Ties go to the city with the largest index; -1 when there are no cities.
    """
    adjacency: Dict[int, List[Tuple[int, int]]] = {city: [] for city in range(n)}
    for src, dst, weight in edges:
        adjacency[src].append((dst, weight))
        adjacency[dst].append((src, weight))

    def reachable_from(source: int) -> int:
        distance = [math.inf] * n
        distance[source] = 0
        heap = [(0, source)]
        while heap:
            d, city = heapq.heappop(heap)
            if d > distance[city]:
                continue
            for neighbour, weight in adjacency[city]:
                candidate = d + weight
                if candidate < distance[neighbour] and candidate <= distance_threshold:
                    distance[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        return sum(
            1
            for city, d in enumerate(distance)
            if city != source and d <= distance_threshold
        )

    counts = [reachable_from(city) for city in range(n)]
    return min(range(n), key=lambda city: (counts[city], -city), default=-1)


def _bounding_box(
    grid: Sequence[Sequence[int]], rows: range, cols: range
) -> Optional[_Box]:
    hits = [(r, c) for r in rows for c in cols if grid[r][c] == 1]
    if not hits:
        return None
    row_indices = [r for r, _ in hits]
    col_indices = [c for _, c in hits]
    return min(row_indices), max(row_indices), min(col_indices), max(col_indices)


def _box_area(box: _Box) -> int:
    top, bottom, left, right = box
    return (bottom - top + 1) * (right - left + 1)


def minimum_area(grid: Sequence[Sequence[int]]) -> int:
    """Return the area of the smallest rectangle holding every 1 in the grid."""
    if not grid or not grid[0]:
        raise ValueError("the grid is empty")
    box = _bounding_box(grid, range(len(grid)), range(len(grid[0])))
    if box is None:
        raise ValueError("the grid holds no 1")
    return _box_area(box)


def _region_area(
    grid: Sequence[Sequence[int]], rows: range, cols: range
) -> int:
    # A region without ones costs the whole grid's area, so it never wins.
    box = _bounding_box(grid, rows, cols)
    if box is None:
        return len(grid) * len(grid[0])
    return _box_area(box)


def _best_split(grid: Sequence[Sequence[int]]) -> float:
    m, n = len(grid), len(grid[0])
    best: float = math.inf
    for row_split in range(1, m):
        upper, lower = range(row_split), range(row_split, m)
        for col_split in range(1, n):
            west, east = range(col_split), range(col_split, n)
            best = min(
                best,
                _region_area(grid, upper, range(n))
                + _region_area(grid, lower, west)
                + _region_area(grid, lower, east),
                _region_area(grid, upper, west)
                + _region_area(grid, upper, east)
                + _region_area(grid, lower, range(n)),
            )
    for first in range(1, m):
        for second in range(first + 1, m):
            best = min(
                best,
                _region_area(grid, range(first), range(n))
                + _region_area(grid, range(first, second), range(n))
                + _region_area(grid, range(second, m), range(n)),
            )
    return best


def _rotate_clockwise(grid: Sequence[Sequence[int]]) -> List[List[int]]:
    return [list(column) for column in zip(*reversed(grid))]


def minimum_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total area of three disjoint rectangles covering every 1."""
    if not grid or not grid[0]:
        raise ValueError("the grid is empty")
    best = min(_best_split(grid), _best_split(_rotate_clockwise(grid)))
    if math.isinf(best):
        raise ValueError("the grid cannot be split into three rectangles")
    return int(best)


def find_diagonal_order(mat: Sequence[Sequence[int]]) -> List[int]:
    """Return the matrix values read along anti-diagonals in zigzag order."""
    if not mat or not mat[0]:
        return []
    m, n = len(mat), len(mat[0])
    order: List[int] = []
    for d in range(m + n - 1):
        first_row = max(0, d - n + 1)
        last_row = min(d, m - 1)
        rows = range(first_row, last_row + 1)
        if d % 2 == 0:
            rows = reversed(rows)
        order.extend(mat[r][d - r] for r in rows)
    return order