"""Doubly-linked list with positional access."""

from collections.abc import Iterable, Iterator
from typing import Generic

from linkedlists.types import T


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: T | None,
        prev: "Node[T] | None" = None,
        next: "Node[T] | None" = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with head/tail references and a size counter.

    Positional operations walk from the head and report out-of-range
    indices by returning None (or doing nothing) rather than raising.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional values to append in order.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    @property
    def head(self) -> Node[T] | None:
        """First node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        """Last node, or None when empty."""
        return self._tail

    @property
    def size(self) -> int:
        """Number of nodes in the list."""
        return self._size

    def append(self, value: T) -> None:
        """Append value as a new tail node. O(1)."""
        node = Node(value)
        self._size += 1
        if self._tail is None:
            self._head = self._tail = node
            return
        node.prev = self._tail
        self._tail.next = node
        self._tail = node

    def delete_last(self) -> Node[T] | None:
        """
        Remove and return the tail node. O(1).

        The returned node keeps its ``prev`` reference; the list side is
        fully unlinked. Returns None if the list is empty.
        """
        node = self._tail
        if node is None:
            return None
        previous = node.prev
        if previous is not None:
            previous.next = None
        else:
            self._head = None
        self._tail = previous
        self._size -= 1
        return node

    def delete_first(self) -> Node[T] | None:
        """Remove and return the head node, clearing its ``next``. O(1)."""
        node = self._head
        if node is None:
            return None
        following = node.next
        if following is not None:
            following.prev = None
        else:
            self._tail = None
        self._head = following
        node.next = None
        self._size -= 1
        return node

    def at(self, index: int) -> Node[T] | None:
        """Return the node at a zero-based index, or None if out of range. O(index)."""
        if index < 0 or index >= self._size:
            return None
        node = self._head
        for _ in range(index):
            if node is None:
                break
            node = node.next
        return node

    def insert_at(self, index: int, value: T) -> None:
        """
        Put a new node holding value in place of the node at index. O(index).

        The new node takes over the old occupant's neighbours, so the size
        does not change and the displaced node is detached. On an empty list
        the value is appended whatever the index; any other out-of-range
        index is ignored.
        """
        if self._head is None:
            self.append(value)
            return

        if index < 0 or index >= self._size:
            return

        current = self.at(index)
        if current is None:
            raise RuntimeError(f"Unexpected end of list before index {index}")

        node = Node(value, current.prev, current.next)
        if current.prev is not None:
            current.prev.next = node
        else:
            self._head = node
        if current.next is not None:
            current.next.prev = node
        else:
            self._tail = node
        current.prev = None
        current.next = None

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __iter__(self) -> Iterator[T | None]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T | None]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        items = ", ".join(repr(value) for value in self)
        return f"{self.__class__.__name__}([{items}])"
