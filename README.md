# cpkit

A collection of algorithmic problem solutions, each exposed as an ordinary
Python function that takes plain values and returns the answer. Pass in
lists, strings and integers, and get back integers, booleans, strings or
lists. Invalid input, such as an empty list where one element is required
or a value out of range, raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `cpkit.feasibility` | `can_connect_all`, `can_balance_candies` |
| `cpkit.counting` | `count_similar_permutations`, `max_prefix_counts` |
| `cpkit.functional_graph` | `sell_order` |
| `cpkit.strings` | `apply_reversals`, `char_at_position` |
| `cpkit.bitwise` | `sum_xor_lengths`, `min_doublings`, `max_and_values` |
| `cpkit.arrays` | `digit_split_count`, `min_sort_operations`, `increasing_subsequence_sequence` |
| `cpkit.graphs` | `min_travel_time` |
| `cpkit.slimes` | `slime_eat_times` |
| `cpkit.binary_strings` | `sum_of_min_operations`, `count_safe_pairs` |
| `cpkit.div4_basics` | `count_ordered_pairs`, `mirror_string`, `max_seated`, `mode_preserving_array`, `count_power_pairs` |
| `cpkit.grid_beauty` | `grid_queries` |
| `cpkit.plushies` | `first_stable_year`, `first_stable_year_hoarding` |
| `cpkit.mex` | `min_mex_operations`, `mex_friends` |
| `cpkit.training` | `max_problem_difference` |
| `cpkit.round2049` | `permutation_possible`, `min_shift_path_cost` |
| `cpkit.round995` | `journey_day`, `pass_exam_mask`, `count_interesting_pairs`, `max_tree_earnings` |

## Examples

```python
from cpkit.div4_basics import mirror_string, max_seated
from cpkit.round995 import journey_day
from cpkit.arrays import digit_split_count

mirror_string("qwq")          # "pwp"
max_seated(10, 5, 5, 10)      # 20
journey_day(12, 1, 5, 3)      # 5
digit_split_count("11")       # 9
```

Each function documents its inputs in its docstring. Functions that answer
many queries at once, such as `cpkit.grid_beauty.grid_queries` and
`cpkit.bitwise.max_and_values`, return one answer per query, in the same order
as the queries. Where a problem may have no answer, the function says so in
its return value: `cpkit.arrays.min_sort_operations` returns `None` when the
list cannot be sorted, and `cpkit.slimes.slime_eat_times` gives `None` for a
slime that can never be eaten.

## What the package does not do

There is no command-line program: the package does not read test cases from
standard input or files, and does not print answers. Parse the input yourself
and call the functions directly.