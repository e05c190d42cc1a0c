"""Merging of ascending singly-linked lists."""

import logging
from collections import deque
from collections.abc import Iterable

from linkedlists.types import Number

logger = logging.getLogger(__name__)


class ListNode:
    """A node in a singly-linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: Number = 0, next: "ListNode | None" = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[Number]) -> ListNode | None:
    """Build a singly-linked list from values, returning its head."""
    sentinel = ListNode()
    current = sentinel
    for value in values:
        current.next = ListNode(value)
        current = current.next
    return sentinel.next


def to_values(head: ListNode | None) -> list[Number]:
    """Collect the values of a singly-linked list in order."""
    values: list[Number] = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def merge_two_lists(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """
    Merge two ascending lists by relinking their nodes. O(len(a) + len(b)).

    On equal values the node from ``a`` comes first.
    """
    sentinel = ListNode()
    tail = sentinel

    while a is not None and b is not None:
        if b.val < a.val:
            tail.next = b
            b = b.next
        else:
            tail.next = a
            a = a.next
        tail = tail.next

    tail.next = a if a is not None else b
    return sentinel.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """
    Merge ascending lists into one ascending list.

    Lists are merged two at a time from the front of the collection and the
    result is pushed to the back until one remains. With k lists of total
    length n this is O(n * k) in the worst case.

    Args:
        lists: Heads of ascending lists. None entries are empty lists.

    Returns:
        Head of the merged list, or None if no lists were given
    """
    pending: deque[ListNode | None] = deque(lists)
    if not pending:
        return None

    logger.debug("Merging %d lists", len(pending))
    rounds = 0
    while len(pending) > 1:
        a = pending.popleft()
        b = pending.popleft()
        pending.append(merge_two_lists(a, b))
        rounds += 1

    logger.debug("Merged in %d rounds", rounds)
    return pending[0]
