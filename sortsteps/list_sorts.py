"""Sorts of doubly linked lists that print the list after each swap."""

from __future__ import annotations

from typing import TextIO

from sortsteps.linked import Node
from sortsteps.printing import print_list


def swap_nodes(head: Node | None, left: Node | None, right: Node | None) -> Node | None:
    """Swap ``left`` with the node ``right`` that follows it; return the new head."""
    if left is None or right is None:
        return head
    before = left.prev
    after = right.next
    if before is not None:
        before.next = right
    else:
        head = right
    right.prev = before
    if after is not None:
        after.prev = left
    left.next = after
    right.next = left
    left.prev = right
    return head


def insertion_sort_list(head: Node | None, file: TextIO | None = None) -> Node | None:
    """Insertion sort of a linked list, printing it after every swap.

    Returns the new head.
    """
    if head is None or head.next is None:
        return head
    current = head.next
    while current is not None:
        following = current.next
        previous = current.prev
        while previous is not None and previous.n > current.n:
            head = swap_nodes(head, previous, current)
            print_list(head, file)
            previous = current.prev
        current = following
    return head


def cocktail_sort_list(head: Node | None, file: TextIO | None = None) -> Node | None:
    """Cocktail shaker sort of a linked list, printing it after every swap.

    Returns the new head.
    """
    if head is None:
        return None
    node: Node | None = head
    for _ in range(sum(1 for _ in head)):
        if node is head:
            while node is not None and node.next is not None:
                following = node.next
                if node.n > following.n:
                    head = swap_nodes(head, node, following)
                    print_list(head, file)
                else:
                    node = following
        else:
            while node is not None and node.prev is not None:
                preceding = node.prev
                if node.n < preceding.n:
                    head = swap_nodes(head, preceding, node)
                    print_list(head, file)
                else:
                    node = preceding
    return head