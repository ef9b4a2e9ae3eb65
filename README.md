# leetsolve

Short Python solutions to well-known algorithm puzzles. They need nothing outside the
standard library. They cover binary search, string scanning, in-place list edits,
hashing, monotonic stacks, queues and heaps.

## Installation

```
pip install .
```

To install with the test requirements:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `leetsolve.search` | `search`, `search_insert`, `next_greatest_letter`, `count_negatives` |
| `leetsolve.strings` | `longest_palindrome`, `str_str`, `is_palindrome`, `reverse_string` |
| `leetsolve.inplace` | `remove_duplicates`, `remove_element`, `remove_duplicates_keep_two`, `move_zeroes`, `merge`, `rotate` |
| `leetsolve.hashing` | `two_sum`, `intersection`, `intersect`, `contains_nearby_duplicate`, `is_happy` |
| `leetsolve.arrays` | `max_profit`, `max_profit_unlimited`, `majority_element`, `product_except_self`, `can_jump`, `sort_by_bits` |
| `leetsolve.basics` | `get_concatenation`, `shuffle`, `find_max_consecutive_ones`, `find_error_nums`, `smaller_numbers_than_current`, `find_disappeared_numbers` |
| `leetsolve.stacks` | `build_array`, `eval_rpn`, `exclusive_time`, `final_prices`, `daily_temperatures`, `largest_rectangle_area` |
| `leetsolve.queues` | `TwoStackQueue`, `count_students`, `time_required_to_buy` |
| `leetsolve.heaps` | `last_stone_weight`, `k_smallest_pairs` |

Import each function from its module. The package's top level only exposes
`__version__`.

## Examples

```python
from leetsolve.hashing import two_sum
from leetsolve.stacks import eval_rpn, daily_temperatures
from leetsolve.inplace import rotate
from leetsolve.queues import TwoStackQueue

two_sum([2, 7, 11, 15], 9)                  # [0, 1]
eval_rpn(["2", "1", "+", "3", "*"])         # 9
daily_temperatures([73, 74, 75, 71, 69])    # [1, 1, 0, 0, 0]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)                             # modifies nums in place
nums                                        # [5, 6, 7, 1, 2, 3, 4]

queue = TwoStackQueue()
queue.push(1)
queue.push(2)
queue.peek()                                # 1
queue.pop()                                 # 1
queue.empty()                               # False
len(queue)                                  # 1
```

## Notes on behaviour

- The functions in `leetsolve.inplace` and `leetsolve.strings.reverse_string` change
  the list they are given. `remove_duplicates`, `remove_element` and
  `remove_duplicates_keep_two` also return the length of the kept prefix.
- `two_sum` returns `[-1, -1]` when no pair adds up to the target. `search` and
  `str_str` return `-1` when nothing is found.
- `eval_rpn` truncates division toward zero.
- `sort_by_bits` counts the set bits of each value's 32-bit form.
- `intersection` returns its values in no particular order. `intersect` keeps the
  order of its second argument.
- Errors are raised as exceptions. Empty input raises `IndexError` in
  `search_insert`, `next_greatest_letter`, `count_negatives`, `max_profit`,
  `can_jump`, `build_array` and `last_stone_weight`. `rotate` on an empty list
  raises `ZeroDivisionError`. `merge` raises `ValueError` when the first list is not
  exactly `m + n` long. `smaller_numbers_than_current` raises `ValueError` for values
  outside 0..100. `contains_nearby_duplicate` raises `ValueError` for a negative `k`.
  `k_smallest_pairs` raises `IndexError` when fewer than `k` pairs exist.
  `TwoStackQueue.pop` and `peek` raise `IndexError` on an empty queue.

## What it does not do

This is a library only. It has no command-line tool, and it does not read input from
files or standard input.

## Running the tests

```
pytest
```