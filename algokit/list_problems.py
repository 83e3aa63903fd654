"""Classic problems on singly linked lists of ``ListNode`` objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "ListNode",
    "RandomNode",
    "build_list",
    "list_values",
    "list_length",
    "add_two_numbers",
    "copy_random_list",
    "get_intersection_node",
    "has_cycle",
    "merge_two_lists",
    "merge_k_lists",
    "is_palindrome",
    "remove_duplicates_sorted",
    "remove_nth_from_end",
    "reverse_list",
    "rotate_right",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: Any = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node carrying an extra link to any node of the list, or None."""

    val: Any
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def _walk(head: Optional[Any]) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Chain ``values`` into a new list and return its head (None when empty)."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _walk(head)]


def list_length(head: Optional[ListNode]) -> int:
    """Return the number of nodes in an acyclic list."""
    return sum(1 for _ in _walk(head))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as least-significant-digit-first lists."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    dummy = ListNode()
    tail = dummy
    carry = 0
    p, q = l1, l2
    while p is not None or q is not None:
        total = (p.val if p else 0) + (q.val if q else 0) + carry
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
        p = p.next if p else None
        q = q.next if q else None
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy a list whose nodes also hold a random link."""
    if head is None:
        return None
    copies = {node: RandomNode(node.val) for node in _walk(head)}
    for original, copy in copies.items():
        copy.next = copies[original.next] if original.next is not None else None
        copy.random = (
            copies[original.random] if original.random is not None else None
        )
    return copies[head]


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    len_a, len_b = list_length(head_a), list_length(head_b)
    longer, shorter = (head_b, head_a) if len_a <= len_b else (head_a, head_b)
    for _ in range(abs(len_a - len_b)):
        longer = longer.next
    while longer is not None and shorter is not None:
        if longer is shorter:
            return longer
        longer, shorter = longer.next, shorter.next
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Report whether following ``next`` links ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one; on equal values ``l1`` comes first."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists pairwise until one remains."""
    pending = list(lists)
    if not pending:
        return None
    while len(pending) > 1:
        merged = [
            merge_two_lists(first, second)
            for first, second in zip(pending[::2], pending[1::2])
        ]
        if len(pending) % 2:
            merged.append(pending[-1])
        pending = merged
    return pending[0]


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Report whether the list reads the same forwards and backwards."""
    values = list_values(head)
    return values == values[::-1]


def remove_duplicates_sorted(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated neighbours from a sorted list in place."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end; ``n`` past the length removes the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if head is None:
        raise ValueError("cannot remove from an empty list")
    dummy = ListNode(0, head)
    fast = slow = dummy
    for _ in range(n):
        if fast.next is None:
            break
        fast = fast.next
    while fast.next is not None:
        slow, fast = slow.next, fast.next
    removed = slow.next
    slow.next = removed.next
    removed.next = None
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None:
        return head
    k %= list_length(head)
    if k == 0:
        return head
    fast = slow = head
    for _ in range(k):
        fast = fast.next
    while fast.next is not None:
        fast, slow = fast.next, slow.next
    new_head = slow.next
    slow.next = None
    fast.next = head
    return new_head