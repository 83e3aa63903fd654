"""Classic data structures and algorithms: stacks, heaps, linked lists, trees, tries, graphs, string search and backtracking."""

__version__ = "0.1.0"