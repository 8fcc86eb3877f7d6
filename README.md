# dsakit

Small, readable implementations of classic data structures and algorithms:
linked lists, stacks, sorting, searching, expression handling and a few
array utilities. No third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data structures

### Singly linked list (`dsakit.linked_list`)

```python
from dsakit.linked_list import LinkedList

items = LinkedList([30, 20, 10])
items.insert_at_head(100)      # 100 30 20 10
items.insert_at(4, 200)        # 100 30 20 10 200
items.delete_at_head()         # returns 100; list is 30 20 10 200
items.delete_at(2)             # returns 10; list is 30 20 200
items.insert_after_value(20, 100)
list(items)                    # [30, 20, 100, 200]
items.search(100)              # 2 (-1 when absent)
items.reverse_values()         # [200, 100, 20, 30]
len(items)                     # 4
```

`insert_at` and `delete_at` raise `IndexError` for positions out of range,
and `delete_at_head` raises `IndexError` on an empty list.
`insert_after_value` raises `ValueError` when the list is empty or holds no
element equal to the target.

### Doubly linked list (`dsakit.doubly_linked_list`)

```python
from dsakit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList([10, 40, 20])
items.insert_at(1, 100)        # 10 100 40 20
items.delete_at(0)             # returns 10; list is 100 40 20
items.head_value()             # 100
list(reversed(items))          # [20, 40, 100]
```

Out-of-range positions, and reading or deleting the head of an empty list,
raise `IndexError`.

### Stacks (`dsakit.stacks`)

Three stacks share the same interface: `push`, `pop` (which returns the
removed value), `top` and `len()`. Popping or reading the top of an empty
stack raises `StackEmptyError`, a subclass of `IndexError`.

```python
from dsakit.stacks import ArrayStack, BoundedStack, LinkedStack, StackFullError

stack = ArrayStack()           # grows by doubling its capacity
stack.push(10)
stack.push(20)
stack.push(30)
stack.top()                    # 30
stack.capacity()               # 4
stack.pop()                    # 30

bounded = BoundedStack(2)      # default max_size is 500
bounded.push(1)
bounded.push(2)
bounded.push(3)                # raises StackFullError (an OverflowError)

linked = LinkedStack()         # top is the head of a DoublyLinkedList
```

## Algorithms

### Sorting (`dsakit.sorting`)

`bubble_sort`, `insertion_sort`, `merge_sort` and `quick_sort` take any
iterable and return a new sorted list, leaving the input untouched.
`quick_sort` uses the first value as its pivot.

```python
from dsakit.sorting import merge_sort

merge_sort([5, 2, 9, 1])                 # [1, 2, 5, 9]
```

### Searching (`dsakit.searching`)

```python
from dsakit.searching import binary_search, contains_sorted, linear_search, find_all

binary_search([1, 3, 5, 7], 5)           # 2 (input must be ascending)
binary_search([1, 3, 5, 7], 4)           # -1
contains_sorted([7, 1, 5], 5)            # True (searches a sorted copy)
linear_search([4, 1, 4, 2], 4)           # 0, the first index, or -1
find_all([4, 1, 4, 2], 4)                # [0, 2]
```

### Expressions (`dsakit.expressions`)

```python
from dsakit.expressions import infix_to_postfix, is_balanced, precedence

infix_to_postfix("a+b*c")                # "abc*+"
precedence("+")                          # 0; every non-additive operator is 1
is_balanced("{[()]}")                    # True
is_balanced("([)]")                      # False
```

`infix_to_postfix` treats lowercase letters as operands and every other
character as a left-associative operator; parentheses are not grouped.
`is_balanced` considers any character other than `()`, `{}` and `[]`
unbalanced.

### Arrays (`dsakit.arrays`)

```python
from dsakit.arrays import (
    prefix_sums, range_sum, letter_counts, count_elements_with_successor,
    count_turning_points, fibonacci, insert_at, delete_at,
)

prefix = prefix_sums([1, 2, 3, 4])       # [0, 1, 3, 6, 10]
range_sum(prefix, 2, 3)                  # 5 (1-based, inclusive)
letter_counts("banana")                  # {'a': 3, 'b': 1, 'n': 2}
count_elements_with_successor([1, 1, 2, 5])  # 2: both 1s have a 2
count_turning_points([1, 2, 3, 3, 2])    # 3
fibonacci(9)                             # 34

items = [10, 20, 30]
insert_at(items, 1, 100)                 # items is [10, 100, 20, 30]
delete_at(items, 2)                      # returns 20
```

`range_sum`, `insert_at` and `delete_at` raise `IndexError` for positions out
of range; `letter_counts` raises `ValueError` for anything that is not a
lowercase letter.

## What this package does not do

It is a library only: there is no command-line tool, and nothing reads from
standard input or prints results. Every function takes its data as arguments
and returns its answer.