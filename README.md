# dsakit

Classic data-structure and algorithm routines written as plain Python
functions with no third-party dependencies. Each function takes ordinary
Python values (lists, strings, integers) and returns its result; nothing is
printed and nothing is read from standard input.

Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.numbers`

Digit and series exercises: `binary_digits` (5 -> 101), `sum_square_difference`,
`digits_to_words`, `is_perfect_square`, `reverse_digits`, `digit_sum`,
`multiplication_table` (the ten lines `n*i=product`), `binary_to_gray`,
`product` (repeated addition of non-negative integers), `natural_sum`,
`geometric_sum` (1 + 1/3 + ... + 1/3**n), `reverse_fibonacci`, `mean` and
`array_sum`. Negative input to the routines that need non-negative numbers
raises `ValueError`, as does `mean` of an empty input.

### `dsakit.arrays`

List problems: `left_rotate`, `rotate_right_by_one`, `reversed_copy`,
`is_sorted`, `common_elements` (of three sorted sequences),
`alternate_by_sign`, `first_non_repeating`, `find_unique`, `longest_names`,
`majority_element`, `minimum`, `maximum`, `missing_and_repeating`,
`missing_number`, `sort_by_sign`, `count_occurrences`,
`segregate_zeros_ones`, `sort_012`, `smallest_missing_positive`,
`wave_array`, `longest_consecutive_run` and
`longest_alternating_subsequence`. `first_non_repeating` and
`majority_element` return `None` when there is no such value.

### `dsakit.searching`

`binary_search` (index or `None`), `rotation_pivot`, `peak_index`,
`peak_index_linear`, `row_with_most_ones` (for rows of sorted 0/1 values;
`None` when no row holds a 1), `kth_largest`, `kth_smallest`,
`min_platforms`, `subarray_with_sum` (1-based `(start, end)` or `None`),
`max_path_sum` and `max_subarray_sum`.

### `dsakit.sorting`

`merge_sort`, `quick_sort` (first element as pivot) and `bubble_pass`
(a single bubble-sort pass). Each returns a new list.

### `dsakit.stack`

`BoundedStack(capacity)`, a fixed-capacity LIFO stack with `push`, `pop`,
`peek`, `is_empty` and `len()`. Pushing onto a full stack raises
`StackOverflowError`; popping or peeking an empty one raises
`StackUnderflowError` (a subclass of `IndexError`). `reverse_string`
reverses text through a stack.

### `dsakit.matrix`

`spiral_order`, `parse_matrix` (text of the form "rows cols e1 e2 ..."),
`contains`, `row_sums` and `largest_row_sum_index`.

### `dsakit.dynamic`

`knapsack` (0/1), `can_partition`, `longest_common_subsequence`,
`count_coin_change` and `word_break`.

### `dsakit.recursion`

`palindromic_partitions`, `balanced_braces` (curly-brace sequences),
`subsets`, `remove_adjacent_duplicates`, `is_palindrome` and `reverse_text`.

### `dsakit.strings`

`atoi` (32-bit clamping), `to_roman`, `count_distinct_subsequences`,
`excel_column`, `are_k_anagrams`, `longest_subsequence_word`,
`longest_common_prefix`, `min_word_distance`, `is_pangram`,
`is_rotated_by_two`, `count_equal_012_substrings`, `add_large_numbers`,
`count_vowels`, `contains_word`, `text_length` and `reverse_in_place`.

## Examples

```python
from dsakit.dynamic import knapsack, word_break
from dsakit.strings import to_roman, excel_column, atoi, add_large_numbers
from dsakit.arrays import missing_and_repeating
from dsakit.matrix import spiral_order
from dsakit.searching import binary_search
from dsakit.stack import BoundedStack

knapsack(10, [2, 3, 5, 7], [10, 20, 30, 40])   # 60
word_break("ilikesamsung", {"i", "like", "sam", "sung", "samsung"})  # True
to_roman(3549)                  # "MMMDXLIX"
excel_column(705)               # "AAC"
atoi("  -0012g4")               # -12
add_large_numbers("999", "1")   # "1000"
missing_and_repeating([4, 3, 6, 2, 1, 6, 7])   # (5, 6)
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
binary_search([1, 13, 23, 45, 67], 23)         # 2

stack = BoundedStack(2)
stack.push(21)
stack.push(9)
stack.peek()          # 9
len(stack)            # 2
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
prompts; to work on numbers typed at a terminal, read them yourself and pass
them to the functions.