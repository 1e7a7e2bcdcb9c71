# algobox

Plain-Python solutions to well-known algorithm problems, grouped by technique.
Everything is a function or a small class in one of seven modules, and nothing
beyond the standard library is needed.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algobox.trees`

- `TreeNode(val, left, right)` and `GraphNode(val, neighbors)`: node types.
- `build_tree(values)`: builds a binary tree from level-order values, `None` marking a gap.
- `min_camera_cover(root)`: fewest cameras that watch every node.
- `level_order(root)`: values level by level.
- `path_sum(root, target_sum)`: root-to-leaf paths adding up to the target.
- `max_path_sum(root)`: largest sum of any path; raises `ValueError` on an empty tree.
- `binary_tree_paths(root)`: root-to-leaf paths written as `"1->2->5"`.
- `rob(root)`: largest sum with no two chosen nodes adjacent.
- `clone_graph(node)`: deep copy of the graph reachable from a node.

### `algobox.search`

- `MountainArray(values)` with `get(index)` and `len()`, and
  `find_in_mountain_array(target, mountain)`: smallest index holding the target, or -1.
- `find_peak_element(nums)`, `search_rotated(nums, target)`, `search_range(nums, target)`.
- `search_matrix(matrix, target)` for a matrix sorted along rows and columns, and
  `search_matrix_rows(matrix, target)`, which searches each sorted row in turn.
- `find_median_sorted_arrays(nums1, nums2)`: median as a float.
- `min_eating_speed(piles, h)`: smallest speed finishing all piles in `h` hours;
  raises `ValueError` when `h` is shorter than the number of piles.

### `algobox.stacks`

- `eval_rpn(tokens)` and `calculate(s)`: integer arithmetic with `+ - * /`,
  division truncating toward zero; malformed input raises `ValueError`.
- `can_see_persons_count(heights)`, `next_greater_element(nums1, nums2)`,
  `daily_temperatures(temperatures)`, `find_132_pattern(nums)`.
- `remove_duplicate_letters(s)`, `longest_valid_parentheses(s)`.
- `largest_rectangle_area(heights)`, `maximal_rectangle(matrix)` (cells `"0"`/`"1"`),
  `num_submat(mat)`, `trap(height)`.

### `algobox.dp`

- Stock trading: `max_profit_two_transactions(prices)`,
  `max_profit_k_transactions(k, prices)`, `max_profit_with_cooldown(prices)`.
- Intervals and strings: `min_score_triangulation(values)`, `max_coins(nums)`,
  `min_cut(s)` (returns -1 for `""`), `num_decodings(s)`, `count_texts(pressed_keys)`,
  `find_all_concatenated_words(words)`.
- Grids: `unique_paths(m, n)`, `unique_paths_with_obstacles(grid)`,
  `min_path_sum(grid)`, `longest_increasing_path(matrix)`,
  `count_increasing_paths(grid)`.
- Counting and probability: `number_of_ways(n, x)`,
  `count_numbers_with_unique_digits(n)`, `num_trees(n)`,
  `knight_probability(n, k, row, column)`, `new21_game(n, k, max_pts)`.

Counts that can grow large (`count_texts`, `count_increasing_paths`,
`number_of_ways`) are taken modulo `MOD = 1_000_000_007`.

### `algobox.greedy`

- `k_closest(points, k)`: the `k` points nearest the origin, farthest of them first.
- `find_kth_largest(nums, k)`, `top_k_frequent(nums, k)` (most frequent first),
  `k_smallest_pairs(nums1, nums2, k)`.
- `max_events(events)`, `erase_overlap_intervals(intervals)`,
  `find_min_arrow_shots(points)`, `insert_interval(intervals, new_interval)`.
- `min_cost(basket1, basket2)`: least cost to make two baskets equal, or -1.
- `num_of_unplaced_fruits(fruits, baskets)` and `num_of_unplaced_fruits_fast(fruits, baskets)`:
  the same count, the second using a segment tree.

### `algobox.graphs`

- `oranges_rotting(grid)`: minutes until no fresh orange is left, or -1; the grid is not changed.
- `ladder_length(begin_word, end_word, word_list)`: words in the shortest ladder, or 0.
- `find_the_city(n, edges, distance_threshold)`: city reaching the fewest others,
  ties going to the largest index.
- `minimum_area(grid)` and `minimum_sum(grid)`: area of one, and least total area of
  three, rectangles covering every 1.
- `find_diagonal_order(mat)`: values along anti-diagonals in zigzag order.

### `algobox.arrays`

- `WeightedPicker(weights, rng=None)` with `pick_index()`: random indices in
  proportion to the weights; pass a `random.Random` for repeatable picks.
- `generate_pascal(num_rows)`, `generate_parenthesis(n)`, `largest_good_integer(num)`.
- `is_power_of_three(n)`, `is_power_of_four(n)`, `judge_point_24(cards)`.
- `longest_subarray_within_limit(nums, limit)`, `longest_ones_after_deletion(nums)`,
  `max_total_fruits(fruits, start_pos, k)`, `maximize_win(nums, k)`, `total_fruit(fruits)`.

## Examples

```python
import random

from algobox.trees import build_tree, level_order
from algobox.stacks import eval_rpn
from algobox.dp import unique_paths
from algobox.arrays import WeightedPicker, generate_pascal

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                      # [[3], [9, 20], [15, 7]]

eval_rpn(["2", "1", "+", "3", "*"])    # 9
unique_paths(3, 7)                     # 28
generate_pascal(3)                     # [[1], [1, 1], [1, 2, 1]]

picker = WeightedPicker([1, 3], rng=random.Random(0))
picker.pick_index()                    # 1 about three times in four
```

## What it does not do

algobox is a library only: it has no command-line program, and it reads no
input files. Call its functions from your own code.