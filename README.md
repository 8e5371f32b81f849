# dsabasics

Compact implementations of classic data structures and algorithms, with no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsabasics.linked_lists`: `SinglyLinkedList`, `DoublyLinkedList` and
  `CircularLinkedList`. Each takes an optional iterable of starting values
  and supports iteration, `len()`, `push_front`, `push_back`, `pop_front`,
  `pop_back`, and 1-based positional `insert` and `delete`. A position out of
  range, or popping from an empty list, raises `IndexError`.
  `SinglyLinkedList` also has `find` (the 1-based position of a value, or
  `None`) and `insert_sorted`; `DoublyLinkedList` supports `reversed()`.
- `dsabasics.stacks`: `Stack`, list-backed and optionally limited by a
  `capacity`; `LinkedStack`, unbounded and node-based. Both offer `push`,
  `pop`, `peek`, `len()` and truth testing. Popping or peeking an empty stack
  raises `StackEmptyError`; pushing onto a full `Stack` raises
  `StackFullError`. `stock_span(prices)` returns the span for each day.
- `dsabasics.queues`: `BoundedQueue(capacity)` with `enqueue`, `dequeue`,
  `is_full`, `front_index`, `rear_index`; and the unbounded `LinkedQueue`
  with `enqueue`, `dequeue` and iteration. Errors are `QueueEmptyError` and
  `QueueFullError`.
- `dsabasics.strings`: `kmp_search` (all start indices, overlaps included),
  `longest_prefix_suffix`, `is_anagram`, `leftmost_repeating`,
  `leftmost_non_repeating`, `is_palindrome` and `reverse_words`.
- `dsabasics.tree`: a binary tree `Node(key, left, right)` and traversals
  (`inorder`, `preorder`, `postorder`, `level_order`, `level_order_by_line`)
  plus `height`, `max_width`, `tree_size`, `tree_max`, `is_balanced`,
  `has_child_sum_property` and `nodes_at_distance`.
- `dsabasics.numbers`: `digit_count`, `factorial`, `factors`, `fibonacci`,
  `fibonacci_sequence`, `gcd`, `lcm`, `is_palindrome_number`,
  `is_power_of_two`, `is_prime`, `prime_factors`, `count_down`, `count_up`,
  `is_bit_set`, `count_set_bits`, `largest`, `second_largest`,
  `sum_of_digits`, `sum_natural`, `tower_of_hanoi` (a generator of
  `(disk, from_peg, to_peg)` moves), `trailing_zeros`, `max_rope_pieces`,
  `odd_occurring` and `two_odd_occurring`.
- `dsabasics.cafe`: a small menu, `order(category, number)`, which returns an
  item name or raises `InvalidOrderError`.

## Examples

```python
from dsabasics.strings import kmp_search
from dsabasics.stacks import stock_span
from dsabasics.linked_lists import SinglyLinkedList

kmp_search("ababcab", "ab")             # [0, 2, 5]
stock_span([100, 80, 60, 70, 60, 75, 85])  # [1, 1, 1, 2, 1, 4, 6]

items = SinglyLinkedList([10, 20, 30])
items.insert_sorted(25)
list(items)                              # [10, 20, 25, 30]
```

## Command line

The cafe menu can be used from a shell. Pass a category letter (`c` coffee,
`t` tea, `s` soup, `b` drinks) and an item number, either as arguments or on
standard input:

```
dsabasics-cafe t 6
```

This prints `Welcome to CCD!` followed by `Enjoy your Masala Tea!`. An
unknown category or item number prints `INVALID OPTION!` and exits with
status 1.