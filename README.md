# dsalgo

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Each module covers one topic and is small enough to read in one
sitting.

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
| `dsalgo.arrays` | `BoundedArray`, `linear_search`, `format_array` |
| `dsalgo.searching` | `binary_search_iterative`, `binary_search_recursive` |
| `dsalgo.sorting` | `bubble_sort`, `merge_sort`, `merge_sort_steps`, `format_merge_trace`, `MergeStep` |
| `dsalgo.linked_list` | `LinkedList` |
| `dsalgo.stack` | `Stack`, `StackOverflowError`, `StackUnderflowError` |
| `dsalgo.circular_queue` | `CircularQueue`, `QueueOverflowError`, `QueueUnderflowError` |
| `dsalgo.bst` | `BinarySearchTree`, `TreeNode` |
| `dsalgo.heap` | `MaxHeap`, `HeapFullError`, `HeapEmptyError` |
| `dsalgo.hash_table` | `HashTable`, `hash_key` |
| `dsalgo.fibonacci` | `fibonacci_naive`, `fibonacci_memo`, `fibonacci_dp`, `fibonacci_optimized`, `fibonacci_sequence`, `measure_time`, `Timing` |
| `dsalgo.graph` | `Graph` with recursive and iterative DFS, BFS and `shortest_path` |
| `dsalgo.greedy` | `select_activities_greedy`, `count_activities_dp`, `fractional_knapsack`, `Activity`, `Item`, `KnapsackPick`, `KnapsackResult` |

## Behaviour worth knowing

- Searches return `-1` when the target is absent (`linear_search`,
  `binary_search_iterative`, `binary_search_recursive`).
- `bubble_sort` and `merge_sort` return new sorted lists and leave their input
  alone. `merge_sort_steps` yields a `MergeStep` for every split and merge, and
  `format_merge_trace` renders them as indented lines.
- Fixed-capacity containers raise instead of silently ignoring a request:
  `BoundedArray.append` raises `OverflowError`; `Stack` raises
  `StackOverflowError` / `StackUnderflowError`; `CircularQueue` raises
  `QueueOverflowError` / `QueueUnderflowError`; `MaxHeap` raises
  `HeapFullError` / `HeapEmptyError`. `Stack`, `CircularQueue` and `MaxHeap`
  default to a capacity of 100.
- `LinkedList.delete`, `BinarySearchTree.delete` and `HashTable.delete` return
  whether something was removed.
- `BinarySearchTree` ignores values already present; `search` returns the
  `TreeNode` or `None`, and `height()` of an empty tree is `-1`.
- `HashTable` keys are strings, hashed by summing their UTF-8 bytes modulo the
  table size (10 by default). Each bucket keeps its newest entry first, and
  `search` raises `KeyError` for a missing key.
- `Graph` is undirected, holds at most 100 vertices, and keeps each adjacency
  list newest-edge first, which fixes the visiting order of its traversals.
  `shortest_path` returns the vertex list, or `None` when `end` is unreachable.
- `measure_time` returns a `Timing` with the result and elapsed processor time.
- `fractional_knapsack` returns a `KnapsackResult` with the items ordered by
  value density, the `KnapsackPick`s taken (the last possibly a fraction) and
  the total value.
- The string forms of the containers (`str(stack)`, `str(table)`,
  `str(graph)` and so on) and the exception messages use Japanese labels,
  for example `スタック: 30 20 10`.

## Examples

Searching and sorting:

```python
from dsalgo.searching import binary_search_iterative
from dsalgo.sorting import merge_sort

data = merge_sort([64, 34, 25, 12, 22, 11, 90])
binary_search_iterative(data, 25)   # 2
```

Bounded containers:

```python
from dsalgo.stack import Stack

stack = Stack(capacity=3)
stack.push(10)
stack.push(20)
stack.pop()    # 20
stack.peek()   # 10
```

Trees and heaps:

```python
from dsalgo.bst import BinarySearchTree
from dsalgo.heap import MaxHeap

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.delete(20)
tree.inorder()       # [30, 40, 50, 60, 70, 80]

heap = MaxHeap.from_iterable([3, 9, 2, 1, 4, 5])
heap.extract_max()   # 9
```

Graphs:

```python
from dsalgo.graph import Graph

graph = Graph(6)
for src, dest in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (3, 5)]:
    graph.add_edge(src, dest)
graph.bfs(0)
graph.shortest_path(0, 5)   # [0, 2, 5]
```

Greedy methods:

```python
from dsalgo.greedy import Item, fractional_knapsack

result = fractional_knapsack(
    [Item(weight=20, value=100, id=1), Item(weight=30, value=120, id=2),
     Item(weight=10, value=60, id=3)],
    capacity=50,
)
result.total_value   # 240.0
```

## What it does not do

This is a library only: there is no command-line program, and nothing is
printed. Every function returns its result, and demonstration output is left
to the caller, for example by printing `str()` of a container or
`format_merge_trace(...)`.