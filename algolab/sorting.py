"""Classic comparison sorts, with generators that expose their intermediate states."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Sequence, Tuple

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "insertion_sort_steps",
    "selection_sort",
    "selection_sort_passes",
    "quick_sort",
    "quick_sort_partitions",
    "merge_sort",
    "merge_sort_steps",
    "build_max_heap",
    "heap_sort",
    "merge_sorted",
]


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _insertion(items: List[Any]) -> Iterator[Any]:
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
        yield key


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using insertion sort."""
    items = list(values)
    for _ in _insertion(items):
        pass
    return items


def insertion_sort_steps(values: Iterable[Any]) -> Iterator[Tuple[Any, List[Any]]]:
    """Yield ``(key, snapshot)`` after each element is inserted into the sorted prefix."""
    items = list(values)
    for key in _insertion(items):
        yield key, list(items)


def _selection(items: List[Any]) -> Iterator[None]:
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
        yield


def selection_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    for _ in _selection(items):
        pass
    return items


def selection_sort_passes(values: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield a snapshot of the array after each selection pass."""
    items = list(values)
    for _ in _selection(items):
        yield list(items)


def _partition(items: List[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _quick(items: List[Any], low: int, high: int) -> Iterator[int]:
    if low < high:
        pivot_index = _partition(items, low, high)
        yield pivot_index
        yield from _quick(items, low, pivot_index - 1)
        yield from _quick(items, pivot_index + 1, high)


def quick_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using quicksort with the last element as pivot."""
    items = list(values)
    for _ in _quick(items, 0, len(items) - 1):
        pass
    return items


def quick_sort_partitions(values: Iterable[Any]) -> Iterator[Tuple[int, List[Any]]]:
    """Yield ``(pivot_index, snapshot)`` after each partitioning step."""
    items = list(values)
    for pivot_index in _quick(items, 0, len(items) - 1):
        yield pivot_index, list(items)


def _merge(items: List[Any], p: int, q: int, r: int) -> None:
    left = items[p : q + 1]
    right = items[q + 1 : r + 1]
    i = j = 0
    for k in range(p, r + 1):
        if j >= len(right) or (i < len(left) and left[i] <= right[j]):
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1


def _merge_sort(items: List[Any], p: int, r: int) -> Iterator[Tuple[int, int]]:
    if p < r:
        q = (p + r) // 2
        yield from _merge_sort(items, p, q)
        yield from _merge_sort(items, q + 1, r)
        _merge(items, p, q, r)
        yield p, r


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using top-down merge sort (stable)."""
    items = list(values)
    for _ in _merge_sort(items, 0, len(items) - 1):
        pass
    return items


def merge_sort_steps(values: Iterable[Any]) -> Iterator[Tuple[int, int, List[Any]]]:
    """Yield ``(start, end, snapshot)`` after merging the inclusive range ``start..end``."""
    items = list(values)
    for p, r in _merge_sort(items, 0, len(items) - 1):
        yield p, r, list(items)


def _max_heapify(items: List[Any], i: int, size: int) -> None:
    while True:
        left, right = 2 * i + 1, 2 * i + 2
        largest = i
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def _build_heap(items: List[Any]) -> None:
    for i in reversed(range(len(items) // 2)):
        _max_heapify(items, i, len(items))


def build_max_heap(values: Iterable[Any]) -> List[Any]:
    """Return ``values`` arranged as a max-heap (children of ``i`` at ``2i+1`` and ``2i+2``)."""
    items = list(values)
    _build_heap(items)
    return items


def heap_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy of ``values`` using heapsort."""
    items = list(values)
    _build_heap(items)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _max_heapify(items, 0, end)
    return items


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> List[Any]:
    """Merge two ascending sequences into one ascending list; ties take from ``second`` first."""
    merged: List[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged