# dsalgo

Small, dependency-free implementations of classic data structures and
algorithms.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                      | Contents                                           |
|-----------------------------|----------------------------------------------------|
| `dsalgo.sorting`            | `heap_sort`, `insertion_sort`, `quicksort`         |
| `dsalgo.kmp`                | `longest_proper_prefix`, `kmp_search`              |
| `dsalgo.avl_tree`           | `AVLTree`, a self-balancing binary search tree     |
| `dsalgo.binary_tree`        | `BinarySearchTree`, a plain binary search tree     |
| `dsalgo.singly_linked_list` | `SinglyLinkedList`                                 |
| `dsalgo.doubly_linked_list` | `DoublyLinkedList`                                 |
| `dsalgo.cli`                | the `dsalgo` command                               |

## Sorting

Each function sorts a mutable sequence in place, in ascending order, and
returns the same sequence:

```python
from dsalgo.sorting import heap_sort, insertion_sort, quicksort

heap_sort([9, 4, 3, 8, 10, 2, 5])      # [2, 3, 4, 5, 8, 9, 10]
insertion_sort([5, 8, 3, 2, 1])        # [1, 2, 3, 5, 8]
quicksort([3, 7, 4, 8, 23, 45, 2])     # [2, 3, 4, 7, 8, 23, 45]
```

## Knuth–Morris–Pratt search

```python
from dsalgo.kmp import longest_proper_prefix, kmp_search

longest_proper_prefix("kokoko")        # [0, 0, 1, 2, 3, 4]
kmp_search("kokokos kokos", "kokos")   # [2, 8]
```

`kmp_search` returns a list of the start index of every match, overlapping
matches included. An empty pattern raises `ValueError`. Both functions work
on any sequence, not only strings.

## Trees

```python
from dsalgo.avl_tree import AVLTree
from dsalgo.binary_tree import BinarySearchTree

avl = AVLTree([10, 20, 30, 40, 50, 25, 60])
list(avl.preorder())     # [30, 20, 10, 25, 50, 40, 60]
list(avl)                # keys in ascending order
25 in avl                # True
len(avl)                 # 7
avl.height()             # 3

bst = BinarySearchTree(10)
for value in (2, 5, 17, 1):
    bst.insert(value)
list(bst.preorder())     # [10, 2, 1, 5, 17]
```

Duplicate keys are ignored by both trees; `insert` returns `True` when a key
was added and `False` when it was already there. A `BinarySearchTree` is
always created with a root value.

## Linked lists

```python
from dsalgo.singly_linked_list import SinglyLinkedList
from dsalgo.doubly_linked_list import DoublyLinkedList

items = SinglyLinkedList([4, 6])
items.push_first(9)      # [9, 4, 6]
items.insert(2, 7)       # [9, 4, 7, 6]
items.swap(0, 2)         # [7, 4, 9, 6]
items.delete_last()      # returns 6

chain = DoublyLinkedList([2, 8, 5, 1])
chain.delete_at(1)       # returns 8
list(reversed(chain))    # [1, 5, 2]
```

Both lists offer `push_first`, `push_last`, `insert`, `delete_first`,
`delete_last`, `delete_at`, `first`, `last`, `is_empty`, `len()` and
iteration; the delete methods return the removed item.
`SinglyLinkedList` also has `swap` and `count_nodes`, which counts nodes by
walking the chain. `DoublyLinkedList` supports `reversed()`.

In `SinglyLinkedList`, positions are ordinary indices: `insert` accepts
`0` to `len(list)` and `delete_at` accepts `0` to `len(list) - 1`.

In `DoublyLinkedList`, positions given to `insert` and `delete_at` follow a
different rule: `0` addresses the front, `len(list)` the back, and any other
position `p` addresses index `max(p - 1, 1)`.

Deleting from an empty list, reading `first` or `last` of an empty list, or
using a position outside the list raises `IndexError`. `swap` on a list with
fewer than two items raises `ValueError`.

## Command line

The `dsalgo` command runs one demonstration, chosen by a subcommand, and
prints its result:

```
dsalgo avl-tree [KEYS ...]          # pre-order keys of an AVL tree
dsalgo binary-tree [VALUES ...]     # pre-order values, one per line; root first
dsalgo heap-sort [DATA ...]
dsalgo insertion-sort [DATA ...]
dsalgo quicksort [DATA ...]
dsalgo lps [PATTERN]                # longest proper prefix table
dsalgo kmp [TEXT [PATTERN]]         # "Found pattern at index N" per match
```

Every argument is optional; without them each subcommand uses built-in
sample data, for example:

```
dsalgo avl-tree
dsalgo kmp
```

Run `dsalgo --help` or `dsalgo <subcommand> --help` for details. The linked
lists have no command-line demonstration; use them from Python.