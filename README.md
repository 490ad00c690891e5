# algolab

A small library of classic algorithms and data structures (recursion and
backtracking, sorting, prime sieves, stacks, binary trees), together with a
few compact object-oriented examples. It has no runtime dependencies and
needs Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `algolab.recursion` | `painting_fence`, `count_derangements`, `subsequences`, `permutations`, `maze_paths` |
| `algolab.sorting` | `merge_sort`, `quicksort` |
| `algolab.sieve` | `sieve`, `base_primes`, `segmented_sieve`, `primes_in_range` |
| `algolab.stack_algos` | `has_redundant_brackets`, `insert_at_bottom`, `reverse_stack`, `insert_sorted`, `sort_stack`, `middle_element`, `next_smaller` |
| `algolab.stacks` | `BoundedStack`, `TwoStacks`, `StackOverflowError`, `StackUnderflowError` |
| `algolab.tree` | `Node`, `build_tree`, `preorder`, `inorder`, `postorder`, `level_order`, `left_view`, `right_view`, `top_view`, `bottom_view`, `boundary_traversal` |
| `algolab.tree_build` | `from_preorder_inorder`, `from_postorder_inorder` |
| `algolab.booking` | `Booking`, `MovieBooking`, `EventBooking`, `ConcertBooking`, `SportBooking`, `process_booking` |
| `algolab.account` | `BankAccount` |
| `algolab.geometry` | `circle_area`, `circle_perimeter` |
| `algolab.algebra` | `Vector`, `Complex` |
| `algolab.payment` | `pay_cash`, `pay_card`, `pay_upi`, `InvalidPaymentError` |
| `algolab.delivery` | `FoodDelivery`, `ZomatoDelivery`, `SwiggyDelivery`, `process_order`, `Delivery`, `ExpressDelivery`, `NoContactDelivery`, `deliver` |

## Recursion and backtracking

```python
from algolab.recursion import (
    painting_fence, count_derangements, subsequences, permutations, maze_paths,
)

painting_fence(3, 3)        # 24
count_derangements(4)       # 9
list(subsequences("abc"))   # ['', 'c', 'b', 'bc', 'a', 'ac', 'ab', 'abc']
list(permutations("abc"))   # ['abc', 'acb', 'bac', 'bca', 'cba', 'cab']

maze_paths([
    [1, 0, 0, 0],
    [1, 1, 0, 0],
    [1, 1, 1, 0],
    [1, 1, 1, 1],
])
```

`painting_fence` and `count_derangements` raise `ValueError` for `n < 1`.
`maze_paths` treats cells holding `1` as open and returns every path from the
top-left to the bottom-right cell as a string of moves `U`, `D`, `L`, `R`,
tried in that order; it raises `ValueError` for an empty or ragged maze.

## Sorting

Both functions take any iterable and return a new ascending list.

```python
from algolab.sorting import merge_sort, quicksort

merge_sort([2, 1, 6, 9, 4, 5, 3])   # [1, 2, 3, 4, 5, 6, 9]
quicksort([3, 5, 1, 6, 8, 9, 4])    # [1, 3, 4, 5, 6, 8, 9]
```

## Prime sieves

```python
from algolab.sieve import sieve, base_primes, segmented_sieve, primes_in_range

sieve(10)                  # flags for 0..10, True where the index is prime
base_primes(100)           # [2, 3, 5, 7]
primes_in_range(10, 30)    # [11, 13, 17, 19, 23, 29]
```

`segmented_sieve(low, high)` returns one flag per number from `low` to
`high` inclusive; it raises `ValueError` if `low` is negative or `high` is
below `low`.

## Stack algorithms

In `algolab.stack_algos` a stack is a plain list with its bottom at index 0
and its top at the end. The functions return new lists and leave their
arguments alone.

```python
from algolab.stack_algos import (
    has_redundant_brackets, reverse_stack, sort_stack, middle_element, next_smaller,
)

has_redundant_brackets("((a+b))")   # True
has_redundant_brackets("(a+b)")     # False
reverse_stack([1, 2, 3])            # [3, 2, 1]
sort_stack([10, 20, 2, 30, 40, 5])  # [2, 5, 10, 20, 30, 40]
middle_element([10, 20, 30, 40, 50, 60, 70, 80])
next_smaller([8, 4, 6, 2, 3])       # [4, 2, 2, -1, -1]
```

`has_redundant_brackets` raises `ValueError` on a closing bracket with no
opening one; `middle_element` raises `IndexError` on an empty stack.

## Fixed-capacity stacks

```python
from algolab.stacks import BoundedStack, TwoStacks

stack = BoundedStack(2)
stack.push(10)
stack.push(20)
stack.top()    # 20
len(stack)     # 2
list(stack)    # [10, 20], bottom to top

shared = TwoStacks(4)
shared.push1(1)
shared.push2(9)
shared.snapshot()   # [1, 0, 0, 9]
```

Pushing onto a full stack raises `StackOverflowError`; popping or reading an
empty one raises `StackUnderflowError` (a subclass of `IndexError`).

## Binary trees

`build_tree` reads values in preorder, with `-1` standing for an empty child.

```python
from algolab.tree import build_tree, level_order, left_view, top_view, boundary_traversal
from algolab.tree_build import from_preorder_inorder, from_postorder_inorder

root = build_tree([10, 20, -1, -1, 30, -1, -1])
level_order(root)   # [[10], [20, 30]]
left_view(root)     # [10, 20]

rebuilt = from_preorder_inorder([2, 8, 10, 6, 4, 12], [10, 8, 6, 2, 4, 12])
same = from_postorder_inorder([10, 6, 8, 12, 4, 2], [10, 8, 6, 2, 4, 12])
```

The traversals and views return lists of node values; `level_order` returns
one list per level. `build_tree` raises `ValueError` if the values end before
the tree is complete, and the rebuilding functions raise `ValueError` when the
two listings differ in length or in their values.

## Object-oriented examples

These classes return their messages as strings rather than printing them.

```python
from algolab.booking import MovieBooking, process_booking
from algolab.account import BankAccount
from algolab.algebra import Vector, Complex
from algolab.payment import pay_upi
from algolab.delivery import SwiggyDelivery, process_order, ExpressDelivery, deliver
from algolab.geometry import circle_area

process_booking(MovieBooking("Dangal", 250))
# 'Booking a movie ticket: Dangal\nTotal Price: 275'

account = BankAccount("Jane Doe", 500.0)
account.deposit(200.0)    # 700.0
account.withdraw(100.0)   # 600.0

Vector(2, 3) + Vector(4, 5)            # Vector(x=6, y=8)
str(Complex(3.0, 4.0) - Complex(2.0, 5.0))   # '1-1i'

pay_upi(120, "someone@upi", True)
process_order(SwiggyDelivery())
deliver(ExpressDelivery())
circle_area(2)            # uses pi = 3.14
```

`BankAccount.deposit` and `withdraw` raise `ValueError` for a non-positive
amount or an overdraft; `pay_upi` raises `InvalidPaymentError` when
`is_upi` is false; `Booking` raises `ValueError` for a negative price.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
from standard input or prints. Trees are built from lists of values rather
than typed in interactively, and every result is returned to the caller.