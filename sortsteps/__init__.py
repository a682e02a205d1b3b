"""Sorting algorithms for integer lists and doubly linked lists that print each step."""

__version__ = "0.1.0"
__all__ = ["printing", "linked", "array_sorts", "list_sorts"]