"""Render integer sequences and linked lists as comma separated lines."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from sortsteps.linked import Node


def format_values(values: Iterable[int]) -> str:
    """Join integers with ", " as a single line of text."""
    return ", ".join(str(value) for value in values)


def print_array(array: Iterable[int], file: TextIO | None = None) -> None:
    """Write the values of ``array`` on one line."""
    print(format_values(array), file=file if file is not None else sys.stdout)


def print_list(head: Node | None, file: TextIO | None = None) -> None:
    """Write the values of a linked list, starting at ``head``, on one line."""
    values = [node.n for node in head] if head is not None else []
    print_array(values, file)