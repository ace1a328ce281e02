# puzzlealgos

Small Python solutions to well-known algorithm puzzles. They use only the
standard library. The functions are grouped by topic.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlealgos.integers` covers number puzzles: `maximum_69_number`,
  `is_power_of_two`, `is_power_of_three`, `is_power_of_four`, `is_palindrome`,
  `reordered_power_of_2`, `my_pow`, `count_and_say`, `product_queries` and
  `number_of_ways`. Results of `product_queries` and `number_of_ways` are taken
  modulo 1,000,000,007.
- `puzzlealgos.text` covers strings: `make_fancy_string`,
  `is_valid_parentheses`, `largest_good_integer`, `remove_pairs` and
  `maximum_gain`.
- `puzzlealgos.arrays` covers arrays, two pointers, sliding windows and binary
  search: `count_hill_valley`, `remove_duplicates`, `remove_element`,
  `search_insert`, `search_rotated`, `max_area`, `maximum_unique_subarray`,
  `four_sum`, `zero_filled_subarray`, `smallest_subarrays`,
  `subarray_bitwise_ors` and `total_fruit`.
- `puzzlealgos.linkedlist` provides the `ListNode` dataclass (iterating a node
  yields the values from that node to the end of the list), the helpers
  `from_values` and `to_values`, and the functions `merge_two_lists` and
  `swap_pairs`. Both functions relink the nodes they are given.
- `puzzlealgos.fruits` covers baskets and harvesting: `num_of_unplaced_fruits`,
  `num_of_unplaced_fruits_fast` (the same answer, using a segment tree),
  `max_total_fruits`, `max_collected_fruits` and `min_cost`.
- `puzzlealgos.grids` covers binary matrices: `count_squares` and `num_submat`.
- `puzzlealgos.backtracking` covers search problems: `letter_combinations`,
  `combination_sum`, `permute` and `judge_point_24`.
- `puzzlealgos.probability` covers probability puzzles: `new21_game` and
  `soup_servings`.
- `puzzlealgos.folders` provides `delete_duplicate_folder`, which removes every
  folder whose non-empty subtree occurs more than once and returns the
  remaining paths.

## Examples

```python
from puzzlealgos.integers import maximum_69_number, count_and_say
from puzzlealgos.text import is_valid_parentheses
from puzzlealgos.linkedlist import from_values, to_values, merge_two_lists
from puzzlealgos.backtracking import letter_combinations

maximum_69_number(9669)            # 9969
count_and_say(4)                   # "1211"
is_valid_parentheses("()[]{}")     # True
letter_combinations("23")          # ["ad", "ae", "af", "bd", ...]

merged = merge_two_lists(from_values([1, 2, 4]), from_values([1, 3, 4]))
to_values(merged)                  # [1, 1, 2, 3, 4, 4]
```

`remove_duplicates` and `remove_element` change the list they are given so
that it holds only the kept values, and return its new length.

## Errors

Invalid input raises an exception:

- `my_pow(0, n)` with negative `n` raises `ZeroDivisionError`.
- `count_and_say` raises `ValueError` for `n` below 1.
- `product_queries` raises `IndexError` for a query outside the powers of `n`.
- `remove_pairs` raises `ValueError` unless the pair is two characters long.
- `letter_combinations` raises `ValueError` for characters that are not digits.
- `combination_sum` raises `ValueError` if any candidate is not positive.
- `max_collected_fruits` raises `ValueError` for a grid smaller than 2x2.

## Scope

This is a library only. It has no command-line interface.