"""In-place sorts of integer lists that print the array as they work."""

from __future__ import annotations

from typing import TextIO

from sortsteps.printing import print_array


def bubble_sort(array: list[int], file: TextIO | None = None) -> None:
    """Bubble sort, printing the array after every swap."""
    size = len(array)
    for i in range(size):
        swapped = False
        for j in range(size - 1 - i):
            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                print_array(array, file)
                swapped = True
        if not swapped:
            break


def selection_sort(array: list[int], file: TextIO | None = None) -> None:
    """Selection sort, printing the array after every swap of unequal values."""
    for i in range(len(array)):
        min_idx = min(range(i, len(array)), key=array.__getitem__)
        if array[i] != array[min_idx]:
            array[i], array[min_idx] = array[min_idx], array[i]
            print_array(array, file)


def _partition(array: list[int], low: int, high: int, file: TextIO | None) -> int:
    pivot_value = array[high]
    i = low
    for j in range(low, high):
        if array[j] <= pivot_value:
            if i != j:
                array[i], array[j] = array[j], array[i]
                print_array(array, file)
            i += 1
    if i != high:
        array[i], array[high] = array[high], array[i]
        print_array(array, file)
    return i


def quick_sort(array: list[int], file: TextIO | None = None) -> None:
    """Quick sort with the Lomuto scheme, printing the array after every swap."""
    pending = [(0, len(array) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(array, low, high, file)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))


def shell_sort(array: list[int], file: TextIO | None = None) -> None:
    """Shell sort with the Knuth gap sequence, printing after each gap pass."""
    size = len(array)
    if size == 1:
        return
    gap = 1
    while gap <= size // 3:
        gap = gap * 3 + 1
    while gap > 0:
        for i in range(gap, size):
            tmp = array[i]
            j = i
            while j >= gap and tmp < array[j - gap]:
                array[j] = array[j - gap]
                j -= gap
            array[j] = tmp
        print_array(array, file)
        gap = 0 if gap == 1 else (gap - 1) // 3


def _require_non_negative(array: list[int]) -> None:
    if any(value < 0 for value in array):
        raise ValueError("values must be non-negative")


def counting_sort(array: list[int], file: TextIO | None = None) -> None:
    """Counting sort of non-negative integers, printing the cumulative counts."""
    if len(array) < 2:
        return
    _require_non_negative(array)
    original = list(array)
    largest = max(original)
    counts = [0] * (largest + 1)
    for value in original:
        counts[value] += 1
    total = 0
    for index, count in enumerate(counts):
        total += count
        counts[index] = total
    print_array(counts, file)
    starts = [0] + counts[:-1]
    for value in original:
        array[starts[value]] = value
        starts[value] += 1


def _leaves(low: int, high: int):
    if low == high:
        yield low
        return
    middle = (high + low + 1) // 2
    yield from _leaves(low, middle - 1)
    yield from _leaves(middle, high)


def merge_sort(array: list[int], file: TextIO | None = None) -> None:
    """Split the array recursively and print each element on its own line.

    The array is left unchanged.
    """
    if not array:
        return
    for index in _leaves(0, len(array) - 1):
        print(array[index], file=file)


def _counting_by_digit(array: list[int], place: int) -> bool:
    digits = [(value // place) % 10 for value in array]
    if all(value // place == 0 for value in array):
        return False
    starts = [0] * 10
    for digit in digits:
        starts[digit] += 1
    total = 0
    for digit in range(10):
        starts[digit], total = total, total + starts[digit]
    original = list(array)
    for value, digit in zip(original, digits):
        array[starts[digit]] = value
        starts[digit] += 1
    return True


def radix_sort(array: list[int], file: TextIO | None = None) -> None:
    """LSD radix sort of non-negative integers, printing after each digit."""
    if len(array) == 1:
        return
    _require_non_negative(array)
    place = 1
    while _counting_by_digit(array, place):
        print_array(array, file)
        place *= 10