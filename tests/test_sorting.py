import pytest

from algolab.sorting import (
    bubble_sort,
    build_max_heap,
    heap_sort,
    insertion_sort,
    insertion_sort_steps,
    merge_sort,
    merge_sort_steps,
    merge_sorted,
    quick_sort,
    quick_sort_partitions,
    selection_sort,
    selection_sort_passes,
)

INPUTS = [
    [],
    [1],
    [9, 1, 8, 2, 7, 3, 6, 4],
    [5, 1, 4, 3, 2],
    [8, 3, 5, 6, 7, 1, 3, 4, 5, 6, 67, 87],
    [4, 1, 3, 2, 16, 9, 10, 14, 8, 7],
    [3, 3, 3, 3],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
    [-5, 0, 5, -10, 10],
]


class _Labelled:
    """Value compared only by its number, carrying a label to tell copies apart."""

    def __init__(self, number, label):
        self.number = number
        self.label = label

    def __le__(self, other):
        return self.number <= other.number

    def __lt__(self, other):
        return self.number < other.number

    def __gt__(self, other):
        return self.number > other.number

    def __ge__(self, other):
        return self.number >= other.number


@pytest.mark.parametrize("values", INPUTS)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert merge_sort(values) == expected
    assert heap_sort(values) == expected


def test_sorts_do_not_modify_input():
    values = [9, 1, 8, 2, 7, 3, 6, 4]
    original = list(values)
    expected = sorted(original)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert merge_sort(values) == expected
    assert heap_sort(values) == expected
    assert values == original


def test_sorts_accept_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert heap_sort(iter([3, 1, 2])) == [1, 2, 3]


@pytest.mark.parametrize("values", INPUTS)
def test_insertion_steps(values):
    steps = list(insertion_sort_steps(values))
    assert [key for key, _ in steps] == values[1:]
    for i, (_, snapshot) in enumerate(steps, start=1):
        assert snapshot[: i + 1] == sorted(values[: i + 1])
    if steps:
        assert steps[-1][1] == sorted(values)


@pytest.mark.parametrize("values", INPUTS)
def test_selection_passes(values):
    passes = list(selection_sort_passes(values))
    assert len(passes) == max(len(values) - 1, 0)
    expected = sorted(values)
    for i, snapshot in enumerate(passes, start=1):
        assert snapshot[:i] == expected[:i]
    if passes:
        assert passes[-1] == expected


@pytest.mark.parametrize("values", INPUTS)
def test_quick_partitions_place_pivot(values):
    expected = sorted(values)
    partitions = list(quick_sort_partitions(values))
    for pivot_index, snapshot in partitions:
        assert snapshot[pivot_index] == expected[pivot_index]
        assert sorted(snapshot) == expected
    if len(values) > 1:
        assert partitions[-1][1] == expected or quick_sort(values) == expected


@pytest.mark.parametrize("values", INPUTS)
def test_merge_steps(values):
    steps = list(merge_sort_steps(values))
    assert len(steps) == max(len(values) - 1, 0)
    for start, end, snapshot in steps:
        segment = snapshot[start : end + 1]
        assert segment == sorted(segment)
    if steps:
        start, end, snapshot = steps[-1]
        assert (start, end) == (0, len(values) - 1)
        assert snapshot == sorted(values)


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    result = merge_sort([_Labelled(n, label) for n, label in pairs])
    assert [(k.number, k.label) for k in result] == sorted(pairs, key=lambda p: p[0])


def test_build_max_heap_textbook_example():
    assert build_max_heap([4, 1, 3, 2, 16, 9, 10, 14, 8, 7]) == [
        16, 14, 10, 8, 7, 9, 3, 2, 4, 1
    ]


@pytest.mark.parametrize("values", INPUTS)
def test_build_max_heap_property(values):
    heap = build_max_heap(values)
    assert sorted(heap) == sorted(values)
    for i, parent in enumerate(heap):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(heap):
                assert parent >= heap[child]


def test_merge_sorted_example():
    first = [1, 2, 3, 4, 6, 7, 8]
    second = [9, 10, 11, 12, 13, 14, 15]
    assert merge_sorted(first, second) == first + second


@pytest.mark.parametrize(
    "first, second",
    [([], []), ([1, 3, 5], []), ([], [2, 4]), ([1, 3, 5], [2, 4, 6]), ([1, 1, 2], [1, 2, 2])],
)
def test_merge_sorted_matches_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_merge_sorted_prefers_second_on_ties():
    first = [_Labelled(1, "first")]
    second = [_Labelled(1, "second")]
    merged = merge_sorted(first, second)
    assert [item.label for item in merged] == ["second", "first"]