"""Doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Node:
    """A node of a doubly linked list holding a read-only integer."""

    __slots__ = ("_n", "prev", "next")

    def __init__(self, n: int, prev: Node | None = None, next_node: Node | None = None):
        self._n = n
        self.prev = prev
        self.next = next_node

    @property
    def n(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[Node]:
        """Yield this node and every node after it."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self._n})"


def build_list(values: Iterable[int]) -> Node | None:
    """Build a doubly linked list from ``values`` and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Node | None) -> list[int]:
    """Return the integers of the list starting at ``head``."""
    return [node.n for node in head] if head is not None else []