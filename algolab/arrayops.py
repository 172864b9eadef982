"""Basic operations on a list used as a growable array: insertion, deletion, extrema and search."""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, Sequence

__all__ = [
    "insert_front",
    "insert_at",
    "insert_end",
    "delete_front",
    "delete_at",
    "delete_end",
    "minimum",
    "maximum",
    "linear_search",
    "binary_search",
]


def insert_front(items: MutableSequence[Any], value: Any) -> None:
    """Insert ``value`` before the first element, shifting the rest right."""
    items.insert(0, value)


def insert_at(items: MutableSequence[Any], pos: int, value: Any) -> None:
    """Insert ``value`` at ``pos``; ``pos`` may range from 0 to ``len(items)``."""
    if not 0 <= pos <= len(items):
        raise IndexError(f"invalid position {pos} for array of length {len(items)}")
    items.insert(pos, value)


def insert_end(items: MutableSequence[Any], value: Any) -> None:
    """Append ``value`` after the last element."""
    items.append(value)


def _require_items(items: Sequence[Any]) -> None:
    if not items:
        raise IndexError("array is empty, nothing to delete")


def delete_front(items: MutableSequence[Any]) -> Any:
    """Remove and return the first element."""
    _require_items(items)
    return items.pop(0)


def delete_at(items: MutableSequence[Any], pos: int) -> Any:
    """Remove and return the element at ``pos``."""
    _require_items(items)
    if not 0 <= pos < len(items):
        raise IndexError(f"invalid position {pos} for array of length {len(items)}")
    return items.pop(pos)


def delete_end(items: MutableSequence[Any]) -> Any:
    """Remove and return the last element."""
    _require_items(items)
    return items.pop()


def minimum(items: Sequence[Any]) -> Any:
    """Return the smallest element."""
    if not items:
        raise ValueError("minimum of an empty array")
    return min(items)


def maximum(items: Sequence[Any]) -> Any:
    """Return the largest element."""
    if not items:
        raise ValueError("maximum of an empty array")
    return max(items)


def linear_search(items: Sequence[Any], value: Any) -> Optional[int]:
    """Return the index of the first element equal to ``value``, or None."""
    return next((index for index, item in enumerate(items) if item == value), None)


def binary_search(items: Sequence[Any], value: Any) -> Optional[int]:
    """Return an index of ``value`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == value:
            return mid
        if items[mid] < value:
            low = mid + 1
        else:
            high = mid - 1
    return None