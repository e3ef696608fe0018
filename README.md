# leetalgo

A small library of classic algorithm solutions with plain Python interfaces:
array lookups, greedy allocation, sliding windows, and a minimal singly
linked list with helpers for comparing results.

It is a library only: there is no command-line tool, and nothing reads input
files or stores results. Every function takes Python values and returns
Python values.

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

### `leetalgo.arrays`

- `two_sum(numbers, target)`: the indices of two distinct entries that add up
  to `target`, smaller index first, or an empty list when there are none.
- `fib(n)`: the `n`-th Fibonacci number (`fib(1) == fib(2) == 1`, and 0 for
  `n <= 0`).

```python
from leetalgo.arrays import two_sum, fib

two_sum([2, 7, 11, 15], 9)   # [0, 1]
two_sum([3, 2, 4], 6)        # [1, 2]
fib(3)                       # 2
```

### `leetalgo.greedy`

- `candy(ratings)`: the fewest candies to hand out so that every child gets at
  least one and a child rated higher than a neighbour gets more than that
  neighbour.
- `largest_number(nums)`: the largest number, as a string, that the
  non-negative integers can form when concatenated (`"0"` when it would start
  with a zero).
- `find_content_children(g, s)`: how many children with greed factors `g` can
  each be given a distinct cookie from sizes `s` that is at least as large as
  their greed.

```python
from leetalgo.greedy import candy, largest_number, find_content_children

candy([1, 0, 2])                          # 5
largest_number([3, 30, 34, 5, 9])         # "9534330"
largest_number([0, 0])                    # "0"
find_content_children([1, 2], [1, 2, 3])  # 2
```

### `leetalgo.sliding_window`

- `length_of_longest_substring(s)` and `length_of_longest_substring_by_index(s)`:
  the length of the longest substring without repeated characters. The first
  shrinks its window one character at a time; the second remembers where each
  character was last seen and jumps past a repeat.
- `min_window(s, t)` and `min_window_alt(s, t)`: the shortest substring of `s`
  holding every character of `t` (with multiplicity), or `""` when there is
  none or `t` is empty.
- `min_sub_array_len(s, nums)`: the length of the shortest contiguous run whose
  sum is at least `s`, or 0 when there is none, when `s` is 0 or `nums` is
  empty.
- `median_sliding_window(nums, k)`: the median, as a float, of every window of
  `k` consecutive numbers, left to right. Raises `ValueError` unless
  `1 <= k <= len(nums)`.

```python
from leetalgo.sliding_window import (
    length_of_longest_substring,
    median_sliding_window,
    min_sub_array_len,
    min_window,
)

length_of_longest_substring("pwwkew")                  # 3
min_window("ADOBECODEBANC", "ABC")                     # "BANC"
min_sub_array_len(7, [2, 3, 1, 2, 4, 3])               # 2
median_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)
# [1.0, -1.0, -1.0, 3.0, 5.0, 6.0]
```

### `leetalgo.linked_list`

`ListNode` is a singly linked node with `val` and `next` fields; iterating a
node yields the values from it to the end of the list. `build_list(values)`
links the values in order and returns the head, or `None` when `values` is
empty.

```python
from leetalgo.linked_list import build_list

head = build_list([1, 2, 3])
list(head)   # [1, 2, 3]
head.val     # 1
```

### `leetalgo.check`

Helpers for comparing results that may come back in another order:

- `lists_equal(head0, head1)`: two linked lists (either may be `None`) hold the
  same values in the same order.
- `same_strings(val1, val2)`: equal length and every string of the first
  appears in the second (repeated strings are not counted).
- `same_sequences(val1, val2)`: equal length and every inner sequence of the
  first appears, element for element, in the second; the outer order does not
  matter.
- `same_members(val1, val2)`: equal length and every value of the first
  appears in the second (repeated values are not counted).
- `equal_in_order(val1, val2)`: element-wise equality.
- `approx_equal(vec1, vec2)`: equal length and each pair of floats differs by
  at most `1e-4`.

```python
from leetalgo.check import approx_equal, same_members

same_members([1, 2, 3], [3, 1, 2])        # True
approx_equal([1.0, 2.0], [1.00005, 2.0])  # True
```