# algokit

Classic data structures and algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.stacks` | `ArrayStack(capacity)` (bounded) and `LinkedStack`; full pushes raise `StackOverflow`, reads from an empty stack raise `StackUnderflow` |
| `algokit.priority_queue` | `PriorityQueue(capacity=10)`, a bounded min-heap raising `QueueOverflow` / `QueueUnderflow`; `MinHeap(capacity)`, whose `insert` returns `False` when full and whose `get_min` / `delete_min` return `None` when empty |
| `algokit.singly_linked_list` | `SinglyLinkedList` with 1-based `insert`, `get`, `remove`, plus `remove_key`, `reverse_in_groups`, `pop_front`, `pop_back`; empty-list errors are `EmptyListError` |
| `algokit.doubly_linked_list` | `DoublyLinkedList` with the same positional operations, iterable forwards and with `reversed()` |
| `algokit.circular_linked_list` | `CircularLinkedList` with `push_front`, `push_back`, `insert`, `pop_front`, `pop_back` |
| `algokit.list_problems` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `list_length`, `add_two_numbers`, `copy_random_list`, `get_intersection_node`, `has_cycle`, `merge_two_lists`, `merge_k_lists`, `is_palindrome`, `remove_duplicates_sorted`, `remove_nth_from_end`, `reverse_list`, `rotate_right` |
| `algokit.heap_problems` | `kth_smallest`, `running_medians`, `merge_k_sorted`, `top_k_frequent` |
| `algokit.binary_search_tree` | `BinarySearchTree` with `insert`, `remove`, `min`, `max` and in-, pre-, post- and level-order traversals returned as lists |
| `algokit.binary_tree` | `BinaryTree`, filled level by level, with in-, pre- and post-order traversals |
| `algokit.segment_tree` | `SegmentTree` with `update(index, delta)`, inclusive `sum(q_start, q_end)` and `nodes()` |
| `algokit.trie` | `Trie` with `insert`, `search`, `remove`, `words()` and `in` |
| `algokit.graphs` | `DirectedGraph` (`depth_first`, `breadth_first`, `is_cyclic`, `topological_sort`) and `UndirectedGraph` (`is_cyclic`); bad edges raise `GraphError`, sorting a cyclic graph raises `CyclicGraphError` |
| `algokit.pattern_matching` | `naive_search`, `kmp_search`, `boyer_moore_search`, `rabin_karp_search` (all return start indices; an empty pattern raises `ValueError`) and `prefix_table` |
| `algokit.bits` | `count_set_bits`, counting one bits of a 32-bit two's-complement word |
| `algokit.counting` | `num_decodings`, `unique_paths_with_obstacles`, `total_unique_paths`, `power`, `is_valid_sudoku`, `word_break` |
| `algokit.backtracking` | `solve_sudoku`, `knight_tour`, `n_queens`, `rat_in_maze`, `word_exists`, `unique_paths_iii`, `permutations`, `power_set`, `binary_strings`, `generate_parentheses`, `letter_combinations`, `decode_string` |
| `algokit.chess` | `Player`, `is_position_correct` and the `algokit-chess` command |

## Examples

```python
from algokit.stacks import ArrayStack
from algokit.trie import Trie
from algokit.pattern_matching import kmp_search
from algokit.backtracking import generate_parentheses

stack = ArrayStack(4)
stack.push(1)
stack.push(2)
print(stack.top(), len(stack))        # 2 2

trie = Trie(["DOG", "CAT", "DO"])
print("DO" in trie)                   # True
print(trie.words())                   # ['CAT', 'DO', 'DOG']

print(kmp_search("my name is mohit sharma mohit sharma", "mohit"))  # [11, 24]

print(generate_parentheses(2))        # ['(())', '()()']
```

Linked-list helpers work on `ListNode` chains:

```python
from algokit.list_problems import build_list, list_values, reverse_list

head = build_list([1, 2, 3])
print(list_values(reverse_list(head)))   # [3, 2, 1]
```

Solvers that can fail return `None` when there is no solution:

```python
from algokit.backtracking import n_queens

print(n_queens(3))   # None
```

## Command line

```
algokit-chess
```

Reads, from standard input, a username and a one-character colour code for
each of two players, then a starting square for each (a file `a`–`h`
followed by a rank `1`–`8`), asking again until the square is valid. It exits
with status 1 if input ends early.

## What it does not do

The `algokit-chess` command only collects and validates this set-up input.
There is no board, no move handling and no game: nothing is played or printed
once the squares are read.