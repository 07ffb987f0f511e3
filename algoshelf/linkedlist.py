"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; iterating it yields the values from here on."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order; None for no values."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _length(head: ListNode | None) -> int:
    return 0 if head is None else sum(1 for _ in head)


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge sorted lists into one new sorted list; ties keep the earlier list first."""
    return from_values(heapq.merge(*(iter(head) for head in lists if head is not None)))


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Merge two sorted lists.

    New nodes are made while both lists have values; the rest of the longer
    list is then attached as it is.
    """
    dummy = ListNode()
    tail = dummy
    a, b = list1, list2
    while a is not None and b is not None:
        if a.val > b.val:
            tail.next = ListNode(b.val)
            b = b.next
        else:
            tail.next = ListNode(a.val)
            a = a.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Unlink, in place, every node equal in value to the node before it."""
    node = head
    while node is not None and node.next is not None:
        if node.next.val == node.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink, in place, every node holding val."""
    dummy = ListNode(next=head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end, where 1 is the last node."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    dummy = ListNode(next=head)
    prev = dummy
    for _ in range(length - n):
        prev = prev.next
    prev.next = prev.next.next
    return dummy.next


def _reverse_run(first: ListNode, stop: ListNode | None, count: int | None = None):
    """Reverse nodes from first up to stop (or count nodes); return the new head and what follows."""
    prev: ListNode | None = stop
    cur: ListNode | None = first
    steps = 0
    while cur is not stop and (count is None or steps < count):
        cur.next, prev, cur = prev, cur, cur.next
        steps += 1
    return prev, cur


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse, in place, the nodes at positions left to right (counting from 1)."""
    length = _length(head)
    if not 1 <= left <= right <= length:
        raise ValueError(
            f"positions must satisfy 1 <= left <= right <= {length}, got {left}, {right}"
        )
    dummy = ListNode(next=head)
    before = dummy
    for _ in range(left - 1):
        before = before.next
    start = before.next
    prev: ListNode | None = None
    cur: ListNode | None = start
    for _ in range(right - left + 1):
        cur.next, prev, cur = prev, cur, cur.next
    before.next = prev
    start.next = cur
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    prev: ListNode | None = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse, in place, each full group of k nodes; a short last group stays as it is."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    dummy = ListNode(next=head)
    pre = dummy
    while True:
        tail = pre
        for _ in range(k):
            tail = tail.next
            if tail is None:
                return dummy.next
        following = tail.next
        first = pre.next
        prev: ListNode | None = following
        cur: ListNode | None = first
        while cur is not following:
            cur.next, prev, cur = prev, cur, cur.next
        pre.next = tail
        pre = first


def _merge_nodes(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Relink two sorted lists into one; equal values keep a's node first."""
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val <= b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a list by relinking its nodes with a stable merge sort."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return _merge_nodes(sort_list(head), sort_list(second))


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap, in place, every two adjacent nodes."""
    dummy = ListNode(next=head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        first = cur.next
        second = first.next
        first.next = second.next
        second.next = first
        cur.next = second
        cur = first
    return dummy.next