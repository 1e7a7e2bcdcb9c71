import random

import pytest

from algobox.greedy import (
    erase_overlap_intervals,
    find_kth_largest,
    find_min_arrow_shots,
    insert_interval,
    k_closest,
    k_smallest_pairs,
    max_events,
    min_cost,
    num_of_unplaced_fruits,
    num_of_unplaced_fruits_fast,
    top_k_frequent,
)


def _dist(point):
    return point[0] ** 2 + point[1] ** 2


def test_k_closest_example():
    assert k_closest([[1, 3], [-2, 2]], 1) == [[-2, 2]]


def test_k_closest_invariants():
    rng = random.Random(7)
    points = [[rng.randint(-20, 20), rng.randint(-20, 20)] for _ in range(40)]
    chosen = k_closest(points, 10)
    assert len(chosen) == 10
    dists = [_dist(p) for p in chosen]
    assert dists == sorted(dists, reverse=True)
    remaining = list(points)
    for p in chosen:
        remaining.remove(p)
    assert all(_dist(r) >= max(dists) for r in remaining)


def test_k_closest_zero_and_negative():
    assert k_closest([[1, 1]], 0) == []
    with pytest.raises(ValueError):
        k_closest([[1, 1]], -1)


def test_max_events_sequential():
    events = [[1, 2], [2, 3], [3, 4]]
    assert max_events(events) == len(events)


def test_max_events_same_day():
    assert max_events([[1, 1], [1, 1], [1, 1]]) == 1


def test_max_events_gap_between_events():
    events = [[1, 1], [100, 100]]
    assert max_events(events) == len(events)


@pytest.mark.parametrize("k", [1, 2, 4, 6])
def test_find_kth_largest_matches_sorted(k):
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    assert find_kth_largest(nums, k) == sorted(nums, reverse=True)[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [1, 2]


def test_top_k_frequent_all_and_too_many():
    assert sorted(top_k_frequent([5, 6, 7], 3)) == [5, 6, 7]
    with pytest.raises(ValueError):
        top_k_frequent([1, 1], 2)


def test_k_smallest_pairs_example():
    assert k_smallest_pairs([1, 7, 11], [2, 4, 6], 3) == [[1, 2], [1, 4], [1, 6]]


def test_k_smallest_pairs_invariants():
    nums1, nums2 = [1, 1, 2], [1, 2, 3]
    pairs = k_smallest_pairs(nums1, nums2, 100)
    assert len(pairs) == len(nums1) * len(nums2)
    sums = [a + b for a, b in pairs]
    assert sums == sorted(sums)
    assert k_smallest_pairs([], [1], 3) == []


def test_erase_overlap_intervals_duplicates():
    intervals = [[1, 2], [1, 2], [1, 2]]
    assert erase_overlap_intervals(intervals) == len(intervals) - 1


def test_erase_overlap_intervals_touching():
    assert erase_overlap_intervals([[1, 2], [2, 3]]) == 0
    assert erase_overlap_intervals([]) == 0


def test_find_min_arrow_shots_example():
    assert find_min_arrow_shots([[10, 16], [2, 8], [1, 6], [7, 12]]) == 2


def test_find_min_arrow_shots_disjoint_and_empty():
    points = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert find_min_arrow_shots(points) == len(points)
    assert find_min_arrow_shots([]) == 0


def test_insert_interval_merges():
    assert insert_interval([[1, 3], [6, 9]], [2, 5]) == [[1, 5], [6, 9]]
    assert insert_interval(
        [[1, 2], [3, 5], [6, 7], [8, 10], [12, 16]], [4, 8]
    ) == [[1, 2], [3, 10], [12, 16]]


def test_insert_interval_edges():
    assert insert_interval([], [5, 7]) == [[5, 7]]
    assert insert_interval([[1, 2]], [5, 6]) == [[1, 2], [5, 6]]
    assert insert_interval([[5, 6]], [1, 2]) == [[1, 2], [5, 6]]


def test_insert_interval_leaves_input_alone():
    intervals = [[1, 3], [6, 9]]
    insert_interval(intervals, [2, 7])
    assert intervals == [[1, 3], [6, 9]]


def test_min_cost_example():
    assert min_cost([4, 2, 2, 2], [1, 4, 1, 2]) == 1


def test_min_cost_impossible_and_equal():
    assert min_cost([2, 3, 4, 1], [3, 2, 5, 1]) == -1
    assert min_cost([3, 1, 2], [2, 3, 1]) == 0


def test_fruit_placement_all_fit_or_none_fit():
    fruits = [1, 2, 3]
    assert num_of_unplaced_fruits(fruits, [10, 10, 10]) == 0
    assert num_of_unplaced_fruits_fast(fruits, [10, 10, 10]) == 0
    assert num_of_unplaced_fruits(fruits, [0, 0, 0]) == len(fruits)
    assert num_of_unplaced_fruits_fast(fruits, [0, 0, 0]) == len(fruits)


def test_fruit_placement_does_not_mutate():
    baskets = [3, 5, 4]
    num_of_unplaced_fruits([4, 2, 5], baskets)
    num_of_unplaced_fruits_fast([4, 2, 5], baskets)
    assert baskets == [3, 5, 4]


@pytest.mark.parametrize("seed", range(5))
def test_fast_placement_agrees_with_simple(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 30)
    fruits = [rng.randint(1, 20) for _ in range(n)]
    baskets = [rng.randint(1, 20) for _ in range(n)]
    assert num_of_unplaced_fruits_fast(fruits, baskets) == num_of_unplaced_fruits(
        fruits, baskets
    )


def test_fast_placement_without_baskets():
    assert num_of_unplaced_fruits_fast([1, 2], []) == 2