# dsalab

A small collection of classic data structures and algorithms for learning
and lab work. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is included

| Module                | Contents |
|-----------------------|----------|
| `dsalab.recursion`    | `fibonacci`, `fibonacci_series`, `factorial` (negative input raises `ValueError`) |
| `dsalab.searching`    | `binary_search(items, target)` over a sorted sequence; returns an index or `None` |
| `dsalab.sorting`      | `bubble_sort`, `insertion_sort`, `merge_sort`, `merge`, and the generators `bubble_sort_passes` and `insertion_sort_steps`, which yield the intermediate states |
| `dsalab.heap`         | `heapify(items, size, index)` and `build_max_heap(items)`, both working in place |
| `dsalab.address`      | `row_major_address`, `column_major_address` for 2-D array layouts (out-of-range indices raise `IndexError`) |
| `dsalab.array_list`   | `BoundedArray`: a fixed-capacity array (default 100) with 1-based `insert` and `delete` |
| `dsalab.linked_stack` | `LinkedStack` with `push`, `pop`, `peek` |
| `dsalab.array_queue`  | `ArrayQueue`: a queue over a fixed number of slots (default 100) |
| `dsalab.linked_queue` | `LinkedQueue` with `enqueue`, `dequeue`, `peek` |
| `dsalab.stack_queue`  | `StackQueue`: a queue built from two stacks, with `is_empty` |
| `dsalab.linked_list`  | `LinkedList`: insert at the beginning, end or a 1-based position; delete by value or by position |
| `dsalab.trees`        | `ArrayBinaryTree`, `TreeNode`, and the generators `preorder`, `inorder`, `postorder`, `level_order` |
| `dsalab.graph`        | `Graph`: an undirected graph of up to 20 vertices stored as an adjacency matrix, with `add_edge`, `remove_edge`, `has_edge`, `matrix` and `render` |
| `dsalab.errors`       | `DataStructureError` and its subclasses `OverflowFullError`, `UnderflowError`, `InvalidPositionError` |

The containers support `len()` and iteration (except `StackQueue`, which
supports `len()` only). `LinkedStack`, `LinkedQueue` and `LinkedList`
print as a chain such as `3 -> 2 -> 1 -> NULL`.

`ArrayQueue` reuses the slots freed by `dequeue` only after the queue has
been emptied completely, so it reports overflow once `capacity` values have
been enqueued since it was last empty.

## Examples

```python
from dsalab.recursion import factorial, fibonacci_series
from dsalab.address import row_major_address, column_major_address
from dsalab.trees import TreeNode, inorder, level_order

factorial(5)                                   # 120
fibonacci_series(6)                            # [0, 1, 1, 2, 3, 5]

# Element [1][2] of a 3x4 array of 4-byte elements starting at address 1000
row_major_address(1000, 3, 4, 4, 1, 2)         # 1024
column_major_address(1000, 3, 4, 4, 1, 2)      # 1028

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
list(inorder(root))                            # [4, 2, 5, 1, 3]
list(level_order(root))                        # [1, 2, 3, 4, 5]
```

Operations that cannot be carried out raise an exception: popping from an
empty stack, adding to a full bounded container, using a position that does
not exist.

```python
from dsalab.linked_stack import LinkedStack
from dsalab.errors import UnderflowError

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.pop()          # 2
stack.pop()          # 1
try:
    stack.pop()
except UnderflowError:
    print("stack is empty")
```

All of these derive from `DataStructureError`, so catching that one class
handles every failure of this kind. `InvalidPositionError` is also an
`IndexError`. `LinkedList.delete_by_value` raises `ValueError` when the
value is absent.

## Command line

The `dsalab` command runs an interactive menu for one structure, named as
its argument:

```
dsalab array
dsalab stack
dsalab queue
dsalab linked-queue
dsalab stack-queue
dsalab list
```

| Argument       | Structure |
|----------------|-----------|
| `array`        | `BoundedArray`; first asks for the number of initial elements and their values, then offers traverse, insert and delete |
| `stack`        | `LinkedStack`: push, pop, peek, display |
| `queue`        | `ArrayQueue`: enqueue, dequeue, peek, display |
| `linked-queue` | `LinkedQueue`: enqueue, dequeue, peek, display |
| `stack-queue`  | `StackQueue`: enqueue, dequeue, peek |
| `list`         | `LinkedList`: shows the list, then offers delete by value, delete by position and append |

Input is read as whitespace-separated integers from standard input, so a
session can also be piped in. The last menu entry exits. The command ends
with status 0 on exit or at end of input, and with status 1 if the initial
`array` values exceed its capacity of 100.

## What it does not do

The command line covers only the six structures above. Recursion,
searching, sorting, heaps, address calculation, trees and graphs are
available as library functions and classes only, with no command or menu
of their own. Nothing is stored between runs.