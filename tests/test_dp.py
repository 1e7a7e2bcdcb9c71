import math

import pytest

from algobox.dp import (
    count_increasing_paths,
    count_numbers_with_unique_digits,
    count_texts,
    find_all_concatenated_words,
    knight_probability,
    longest_increasing_path,
    max_coins,
    max_profit_k_transactions,
    max_profit_two_transactions,
    max_profit_with_cooldown,
    min_cut,
    min_path_sum,
    min_score_triangulation,
    new21_game,
    num_decodings,
    num_trees,
    number_of_ways,
    unique_paths,
    unique_paths_with_obstacles,
)


def _unlimited_profit(prices):
    return sum(max(0, b - a) for a, b in zip(prices, prices[1:]))


# min_score_triangulation

def test_triangulation_two_vertices_is_zero():
    assert min_score_triangulation([5, 7]) == 0


def test_triangulation_rotation_invariant():
    values = [3, 7, 4, 5, 2, 6]
    expected = min_score_triangulation(values)
    for shift in range(1, len(values)):
        assert min_score_triangulation(values[shift:] + values[:shift]) == expected


def test_triangulation_all_ones_counts_triangles():
    for n in range(3, 8):
        assert min_score_triangulation([1] * n) == n - 2


def test_triangulation_too_few_vertices():
    with pytest.raises(ValueError):
        min_score_triangulation([4])


# stock profits

def test_two_transactions_matches_k_version():
    prices = [3, 3, 5, 0, 0, 3, 1, 4]
    assert max_profit_two_transactions(prices) == max_profit_k_transactions(2, prices)


def test_profit_rising_prices_single_trade():
    prices = [1, 2, 3, 4, 5]
    assert max_profit_two_transactions(prices) == prices[-1] - prices[0]
    assert max_profit_k_transactions(1, prices) == prices[-1] - prices[0]


def test_profit_falling_prices_is_zero():
    prices = [7, 6, 4, 3, 1]
    assert max_profit_two_transactions(prices) == 0
    assert max_profit_with_cooldown(prices) == 0


def test_k_profit_monotonic_and_bounded():
    prices = [3, 2, 6, 5, 0, 3, 8, 1, 9]
    profits = [max_profit_k_transactions(k, prices) for k in range(0, 8)]
    assert profits[0] == 0
    assert profits == sorted(profits)
    assert profits[-1] == _unlimited_profit(prices)


def test_k_profit_negative_k_is_zero():
    assert max_profit_k_transactions(-1, [1, 5]) == 0


def test_cooldown_between_single_and_unlimited():
    prices = [1, 2, 3, 0, 2, 5, 1, 7]
    result = max_profit_with_cooldown(prices)
    assert max_profit_k_transactions(1, prices) <= result <= _unlimited_profit(prices)


def test_cooldown_rising_prices():
    prices = [2, 4, 6, 9]
    assert max_profit_with_cooldown(prices) == prices[-1] - prices[0]


# min_cut

def test_min_cut_palindrome_needs_none():
    assert min_cut("racecar") == 0


def test_min_cut_distinct_letters():
    assert min_cut("abcde") == len("abcde") - 1


def test_min_cut_empty_string():
    assert min_cut("") == -1


def test_min_cut_two_palindromes():
    assert min_cut("abba" + "xyzyx") <= 1
    assert min_cut("abab") < len("abab") - 1


# count_texts

def test_count_texts_zero_and_one_keys():
    assert count_texts("203") == 0
    assert count_texts("21") == 0


def test_count_texts_distinct_keys_single_reading():
    assert count_texts("23456") == 1


def test_count_texts_runs_multiply():
    assert count_texts("22233") == count_texts("222") * count_texts("33")


def test_count_texts_seven_allows_longer_runs():
    assert count_texts("7777") > count_texts("2222")


def test_count_texts_reduced_modulo():
    assert 0 <= count_texts("2" * 2000) < 1_000_000_007


def test_count_texts_rejects_non_digits():
    with pytest.raises(ValueError):
        count_texts("2a")


# increasing paths

def test_count_increasing_paths_equal_values():
    grid = [[4, 4, 4], [4, 4, 4]]
    assert count_increasing_paths(grid) == 6


def test_count_increasing_paths_pair():
    assert count_increasing_paths([[1, 2]]) == 3


def test_count_increasing_paths_transpose_invariant():
    grid = [[1, 1, 3], [3, 4, 2], [5, 0, 7]]
    transposed = [list(col) for col in zip(*grid)]
    assert count_increasing_paths(grid) == count_increasing_paths(transposed)


def test_longest_increasing_path_equal_values():
    assert longest_increasing_path([[2, 2], [2, 2]]) == 1


def test_longest_increasing_path_snake():
    matrix = [[1, 2, 3], [6, 5, 4], [7, 8, 9]]
    assert longest_increasing_path(matrix) == 9


def test_longest_increasing_path_empty():
    assert longest_increasing_path([]) == 0


# number_of_ways

def test_number_of_ways_example():
    assert number_of_ways(10, 2) == 1


def test_number_of_ways_zero_target():
    assert number_of_ways(0, 3) == 1


def test_number_of_ways_unreachable():
    assert number_of_ways(2, 3) == 0


def test_number_of_ways_bad_exponent():
    with pytest.raises(ValueError):
        number_of_ways(5, 0)


# max_coins

def test_max_coins_empty_and_single():
    assert max_coins([]) == 0
    assert max_coins([9]) == 9


def test_max_coins_reverse_invariant():
    nums = [3, 1, 5, 8]
    assert max_coins(nums) == max_coins(nums[::-1])


# unique digits

def test_unique_digits_small():
    assert count_numbers_with_unique_digits(0) == 1
    assert count_numbers_with_unique_digits(1) == 10


def test_unique_digits_saturates_after_ten():
    assert count_numbers_with_unique_digits(11) == count_numbers_with_unique_digits(10)
    values = [count_numbers_with_unique_digits(n) for n in range(11)]
    assert values == sorted(values)
    assert all(v <= 10 ** n for n, v in enumerate(values))


def test_unique_digits_negative():
    with pytest.raises(ValueError):
        count_numbers_with_unique_digits(-1)


# grid paths

def test_unique_paths_binomial():
    for m in range(1, 6):
        for n in range(1, 6):
            assert unique_paths(m, n) == math.comb(m + n - 2, n - 1)
            assert unique_paths(m, n) == unique_paths(n, m)


def test_unique_paths_degenerate():
    assert unique_paths(1, 9) == 1
    assert unique_paths(0, 3) == 0


def test_obstacles_none_matches_unique_paths():
    grid = [[0] * 4 for _ in range(3)]
    assert unique_paths_with_obstacles(grid) == unique_paths(3, 4)


def test_obstacles_blocked_end_or_start():
    assert unique_paths_with_obstacles([[0, 0], [0, 1]]) == 0
    assert unique_paths_with_obstacles([[1, 0], [0, 0]]) == 0
    assert unique_paths_with_obstacles([[1]]) == 0


def test_obstacles_fewer_paths_than_free_grid():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert 0 < unique_paths_with_obstacles(grid) < unique_paths(3, 3)


def test_min_path_sum_line_grids():
    row = [4, 1, 7, 2]
    assert min_path_sum([row]) == sum(row)
    assert min_path_sum([[v] for v in row]) == sum(row)


def test_min_path_sum_bounds():
    grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
    result = min_path_sum(grid)
    assert grid[0][0] + grid[-1][-1] <= result <= sum(grid[0]) + sum(r[-1] for r in grid[1:])


def test_min_path_sum_empty():
    with pytest.raises(ValueError):
        min_path_sum([])


# knight_probability

def test_knight_no_moves_certain():
    assert knight_probability(3, 0, 1, 1) == 1.0


def test_knight_one_square_board():
    assert knight_probability(1, 1, 0, 0) == 0.0


def test_knight_example():
    assert knight_probability(3, 2, 0, 0) == pytest.approx(0.0625)


def test_knight_symmetry_and_decay():
    probs = [knight_probability(6, k, 0, 1) for k in range(5)]
    assert all(0.0 <= p <= 1.0 for p in probs)
    assert probs == sorted(probs, reverse=True)
    assert knight_probability(6, 3, 0, 1) == pytest.approx(knight_probability(6, 3, 5, 4))


def test_knight_off_board():
    with pytest.raises(ValueError):
        knight_probability(4, 1, 4, 0)


# new21_game

def test_new21_no_draws():
    assert new21_game(0, 0, 1) == 1.0


def test_new21_certain_when_n_large():
    assert new21_game(10, 1, 10) == pytest.approx(1.0)
    assert new21_game(30, 10, 15) == pytest.approx(1.0)


def test_new21_probability_bounds_and_monotonic():
    values = [new21_game(n, 17, 10) for n in range(17, 27)]
    assert all(0.0 <= v <= 1.0 + 1e-9 for v in values)
    assert values == sorted(values)


def test_new21_bad_max_pts():
    with pytest.raises(ValueError):
        new21_game(5, 3, 0)


# num_decodings

def test_decodings_leading_zero():
    assert num_decodings("0") == 0
    assert num_decodings("06") == 0


def test_decodings_empty():
    assert num_decodings("") == 1


def test_decodings_ones_fibonacci():
    for n in range(2, 12):
        assert num_decodings("1" * n) == num_decodings("1" * (n - 1)) + num_decodings("1" * (n - 2))


def test_decodings_large_pair_not_joined():
    assert num_decodings("27") == num_decodings("2") * num_decodings("7")


# num_trees

def test_num_trees_catalan():
    for n in range(0, 15):
        assert num_trees(n) == math.comb(2 * n, n) // (n + 1)


def test_num_trees_negative():
    with pytest.raises(ValueError):
        num_trees(-2)


# concatenated words

def test_concatenated_words_example():
    words = ["cat", "cats", "catsdogcats", "dog", "dogcatsdog",
             "hippopotamuses", "rat", "ratcatdogcat"]
    assert find_all_concatenated_words(words) == ["catsdogcats", "dogcatsdog", "ratcatdogcat"]


def test_concatenated_word_cannot_use_itself():
    assert find_all_concatenated_words(["a"]) == []
    assert find_all_concatenated_words(["a", "aa", "aaa"]) == ["aa", "aaa"]


def test_concatenated_words_leaves_input_untouched():
    words = ["ab", "a", "b", "abab"]
    snapshot = list(words)
    assert find_all_concatenated_words(words) == ["ab", "abab"]
    assert words == snapshot