"""linkedlists - Doubly-linked list with positional access and k-way sorted list merging."""

from linkedlists.linkedlist import DoublyLinkedList, Node
from linkedlists.merge import (
    ListNode,
    build_list,
    merge_k_lists,
    merge_two_lists,
    to_values,
)

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "ListNode",
    "build_list",
    "to_values",
    "merge_two_lists",
    "merge_k_lists",
]
