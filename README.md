# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## What is inside

- `dsakit.searching`: `binary_search` and `binary_search_recursive` on an
  ascending sequence, `linear_search`, and `random_values(count, rng=None)`
  for lists of random integers in 0..99. The searches return an index, or
  `None` when the target is absent.
- `dsakit.recursion`: `factorial`, `factorial_recursive`, `factorial_tail`,
  `triangular_sum`, `fibonacci_series`, `fibonacci_recursive`,
  `fibonacci_tail`, and `gcd`, `gcd_recursive`, `gcd_iterative`. Functions
  taking `n` raise `ValueError` for negative input.
- `dsakit.hanoi`: `hanoi_moves(n, source="A", auxiliary="B", destination="C")`
  yields `Move(disk, source, destination)` records; `format_moves` renders
  them as numbered lines.
- `dsakit.sorting`: `bubble_sort`, `selection_sort`, `merge_sort` and
  `quick_sort` sort a list in place and return `None`; `partition` is the
  last-element-pivot partition step used by `quick_sort`.
- `dsakit.queues`: `LinearQueue`, `CircularQueue`, `CountedCircularQueue`,
  `ArrayDeque`, `PriorityQueue` (fixed capacity, 5 by default) and the
  unbounded `LinkedQueue`. Full queues raise `QueueOverflow`; empty ones
  raise `QueueUnderflow`. A `LinearQueue` never reuses its slots, so it stays
  full once `capacity` values have been enqueued. `PriorityQueue` serves the
  smallest value first; `pop_largest` takes the largest and `arrangement`
  shows the stored order.
- `dsakit.stacks`: `ArrayStack` (fixed capacity) and `LinkedStack`, which
  raise `StackOverflow` and `StackUnderflow`.
- `dsakit.expressions`: `to_postfix`, `to_prefix`, `evaluate_postfix`,
  `evaluate_prefix`, `precedence` and `apply_operator`, for expressions of
  single-digit operands and `+ - * / ^`. Malformed input, unknown symbols and
  division by zero raise `ExpressionError`.
- `dsakit.linked_list.SinglyLinkedList`: 1-based positions; `insert` and
  `delete_at` accept interior positions only; `random(count, rng=None)`
  builds a list of integers in 1..100. Operations on an empty list or a bad
  position raise `IndexError`.
- `dsakit.doubly_linked_list.DoublyLinkedList`: `push_front`, `append`,
  `insert_at`, `pop_front`, `pop_back` and `remove(value)`, which raises
  `ValueError` when the value is absent.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.expressions import to_postfix, evaluate_postfix

binary_search([2, 3, 4, 10, 40], 10)      # 3
binary_search([2, 3, 4, 10, 40], 5)       # None

values = [64, 34, 25, 12, 22, 11, 90]
merge_sort(values)
values                                    # [11, 12, 22, 25, 34, 64, 90]

postfix = to_postfix("(2+3)*4")           # "23+4*"
evaluate_postfix(postfix)                 # 20.0
```

```python
from dsakit.hanoi import format_moves, hanoi_moves

format_moves(hanoi_moves(2))
# ['Move 1: Disk 1 from A to B',
#  'Move 2: Disk 2 from A to C',
#  'Move 3: Disk 1 from B to C']
```

```python
from dsakit.stacks import ArrayStack, StackOverflow

stack = ArrayStack()
for value in (10.5, 20.3, 30.7, 40.2, 50.1):
    stack.push(value)
try:
    stack.push(60.4)
except StackOverflow:
    print("full")
```

## Command line

`dsakit-expr` takes an infix expression, converts it to postfix and prints
the converted form and its value; with `--prefix` it uses prefix notation
instead. Without an expression argument it asks for one on standard input.

```
dsakit-expr "2+3*4"
dsakit-expr --prefix "2+3*4"
```

The first prints `Postfix Expression: 234*+` and
`Result of Postfix Evaluation: 14.0000`. Errors are reported on standard
error with exit status 1.

## What it does not do

The package has no interactive menus and no timing of the algorithms; it is
a library of functions and containers, plus the single `dsakit-expr`
command.