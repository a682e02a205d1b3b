# sortsteps

Classic sorting algorithms that show their work. Each time an algorithm
changes the data, it prints the current state as one line, with values
separated by `", "`. This makes it easy to follow and compare how different
algorithms move elements around.

## Installation

```
pip install sortsteps
```

## Sorting Python lists

Every array sort works in place on a mutable list of integers. Each one
takes an optional `file` argument, which is the text stream the steps are
written to. The default is standard output.

```python
import io
from sortsteps.array_sorts import bubble_sort

data = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]
steps = io.StringIO()
bubble_sort(data, steps)
print(data)              # [7, 13, 19, 48, 52, 71, 73, 86, 96, 99]
print(steps.getvalue())  # one line per swap, starting "19, 48, 71, 99, 13, ..."
```

These functions are in `sortsteps.array_sorts`:

- `bubble_sort(array, file=None)`: prints the array after each swap. It stops early when a pass makes no swaps.
- `selection_sort(array, file=None)`: prints the array after each swap of two unequal values.
- `quick_sort(array, file=None)`: uses Lomuto partitioning with the last element as the pivot. It prints after each swap.
- `shell_sort(array, file=None)`: uses the Knuth gap sequence (1, 4, 13, ...). It prints once after the pass for each gap.
- `counting_sort(array, file=None)`: for non-negative integers. It prints the cumulative count array once and then places the values. It raises `ValueError` if a value is negative. A list with fewer than two items is left alone.
- `radix_sort(array, file=None)`: an LSD radix sort for non-negative integers. It prints after each decimal digit pass. It raises `ValueError` if a value is negative.
- `merge_sort(array, file=None)`: halves the array recursively and prints each element on its own line, in the order the recursion reaches it. It does **not** merge, so the list is left unchanged.

## Sorting doubly linked lists

`sortsteps.linked` provides the following:

- `Node(n, prev=None, next_node=None)`: a list node. Its integer `n` is read-only, and its `prev` and `next` links can be changed. Iterating over a node yields that node and every node after it.
- `build_list(values)`: builds a list from an iterable and returns its head, or `None` when the iterable is empty.
- `list_values(head)`: returns the values as a Python list.

`sortsteps.list_sorts` sorts the list by relinking nodes. It never copies values. Each sort prints the whole list after every swap and returns the new head.

```python
from sortsteps.linked import build_list, list_values
from sortsteps.list_sorts import insertion_sort_list, cocktail_sort_list

head = build_list([3, 1, 2])
head = insertion_sort_list(head)
print(list_values(head))  # [1, 2, 3]

head = cocktail_sort_list(build_list([5, 4, 3]))
print([node.n for node in head])  # [3, 4, 5]
```

`swap_nodes(head, left, right)` swaps a node with the node that follows it and returns the head of the list, which may have changed. It prints nothing.

## Printing helpers

`sortsteps.printing` holds the helpers behind every step:

- `format_values(values)` joins integers with `", "`.
- `print_array(array, file=None)` writes a sequence as one line.
- `print_list(head, file=None)` writes a linked list as one line. It writes an empty line when `head` is `None`.

## What it does not do

sortsteps is a library only. It has no command-line tool. `merge_sort` shows only how the array is split. It does not sort.