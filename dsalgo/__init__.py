"""Classic data structures and algorithms: arrays, searching, sorting, linked
lists, stacks, circular queues, binary search trees, max-heaps, hash tables,
Fibonacci methods, graphs and greedy algorithms."""

__version__ = "0.1.0"