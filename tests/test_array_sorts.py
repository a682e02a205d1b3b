import io
from itertools import combinations

import pytest

from sortsteps.array_sorts import (
    bubble_sort,
    counting_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

SAMPLE = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]


def _lines(text):
    return [[int(x) for x in line.split(", ")] for line in text.splitlines()]


def _inversions(values):
    return sum(1 for a, b in combinations(values, 2) if a > b)


def _assert_steps(array, text):
    steps = _lines(text)
    assert steps
    for step in steps:
        assert sorted(step) == sorted(SAMPLE)
    assert steps[-1] == array


def test_bubble_sort_result_is_sorted():
    array = list(SAMPLE)
    bubble_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_selection_sort_result_is_sorted():
    array = list(SAMPLE)
    selection_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_quick_sort_result_is_sorted():
    array = list(SAMPLE)
    quick_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_shell_sort_result_is_sorted():
    array = list(SAMPLE)
    shell_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_counting_sort_result_is_sorted():
    array = list(SAMPLE)
    counting_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_radix_sort_result_is_sorted():
    array = list(SAMPLE)
    radix_sort(array, io.StringIO())
    assert array == sorted(SAMPLE)


def test_bubble_sort_steps_are_permutations():
    array = list(SAMPLE)
    out = io.StringIO()
    bubble_sort(array, out)
    _assert_steps(array, out.getvalue())


def test_selection_sort_steps_are_permutations():
    array = list(SAMPLE)
    out = io.StringIO()
    selection_sort(array, out)
    _assert_steps(array, out.getvalue())


def test_quick_sort_steps_are_permutations():
    array = list(SAMPLE)
    out = io.StringIO()
    quick_sort(array, out)
    _assert_steps(array, out.getvalue())


def test_shell_sort_steps_are_permutations():
    array = list(SAMPLE)
    out = io.StringIO()
    shell_sort(array, out)
    _assert_steps(array, out.getvalue())


@pytest.mark.parametrize("sort", [bubble_sort, selection_sort, quick_sort])
def test_sorted_input_prints_nothing(sort):
    array = [1, 2, 3, 4]
    out = io.StringIO()
    sort(array, out)
    assert out.getvalue() == ""
    assert array == [1, 2, 3, 4]


def test_bubble_sort_steps_are_adjacent_swaps():
    array = list(SAMPLE)
    out = io.StringIO()
    bubble_sort(array, out)
    steps = [list(SAMPLE)] + _lines(out.getvalue())
    assert len(steps) - 1 == _inversions(SAMPLE)
    for before, after in zip(steps, steps[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(changed) == 2
        assert changed[1] == changed[0] + 1


def test_selection_sort_steps_swap_two_positions():
    array = list(SAMPLE)
    out = io.StringIO()
    selection_sort(array, out)
    steps = [list(SAMPLE)] + _lines(out.getvalue())
    assert len(steps) > 1
    for before, after in zip(steps, steps[1:]):
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert len(changed) == 2


def test_quick_sort_handles_duplicates_and_empty():
    array = [5, 1, 5, 3, 1]
    quick_sort(array, io.StringIO())
    assert array == [1, 1, 3, 5, 5]
    empty = []
    out = io.StringIO()
    quick_sort(empty, out)
    assert empty == [] and out.getvalue() == ""


def test_shell_sort_prints_once_per_gap():
    # Knuth gaps for ten elements are 4 and 1.
    array = list(SAMPLE)
    out = io.StringIO()
    shell_sort(array, out)
    assert len(out.getvalue().splitlines()) == 2


@pytest.mark.parametrize("sort", [shell_sort, counting_sort, radix_sort])
def test_single_element_prints_nothing(sort):
    array = [7]
    out = io.StringIO()
    sort(array, out)
    assert array == [7]
    assert out.getvalue() == ""


def test_counting_sort_prints_cumulative_counts():
    array = list(SAMPLE)
    out = io.StringIO()
    counting_sort(array, out)
    (counts,) = _lines(out.getvalue())
    assert len(counts) == max(SAMPLE) + 1
    assert counts[-1] == len(SAMPLE)
    assert counts == sorted(counts)


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2], io.StringIO())


def test_radix_sort_prints_once_per_digit():
    array = [170, 45, 75, 90, 802, 24, 2, 66]
    out = io.StringIO()
    radix_sort(array, out)
    steps = _lines(out.getvalue())
    assert len(steps) == 3
    assert steps[-1] == array == [2, 24, 45, 66, 75, 90, 170, 802]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2], io.StringIO())


def test_merge_sort_prints_each_element_and_keeps_array():
    array = list(SAMPLE)
    out = io.StringIO()
    merge_sort(array, out)
    assert array == SAMPLE
    assert [int(line) for line in out.getvalue().splitlines()] == SAMPLE


def test_merge_sort_empty_prints_nothing():
    array = []
    out = io.StringIO()
    merge_sort(array, out)
    assert array == [] and out.getvalue() == ""