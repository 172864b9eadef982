"""Banker's algorithm safety check."""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["UnsafeStateError", "need_matrix", "safe_sequence"]


class UnsafeStateError(Exception):
    """Raised when no safe sequence exists; ``completed`` holds the processes that could finish."""

    def __init__(self, completed: Sequence[int]) -> None:
        super().__init__("system is not in a safe state")
        self.completed = list(completed)


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> List[List[int]]:
    """Return ``maximum - allocation`` for every process and resource."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must have the same number of processes")
    need = []
    for held, claim in zip(allocation, maximum):
        if len(held) != len(claim):
            raise ValueError("allocation and maximum rows must have the same length")
        need.append([c - h for h, c in zip(held, claim)])
    return need


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> List[int]:
    """Return process indices in an order in which all can finish.

    Processes are scanned repeatedly from the lowest index; each one whose
    need fits the free resources finishes at once and returns what it holds.
    Raises UnsafeStateError when a full scan finishes nobody.
    """
    need = need_matrix(allocation, maximum)
    if any(len(row) != len(available) for row in need):
        raise ValueError("every row must have one entry per resource in available")
    work = list(available)
    finished = [False] * len(need)
    sequence: List[int] = []
    while len(sequence) < len(need):
        progressed = False
        for index, row in enumerate(need):
            if finished[index] or any(n > w for n, w in zip(row, work)):
                continue
            work = [w + h for w, h in zip(work, allocation[index])]
            finished[index] = True
            sequence.append(index)
            progressed = True
        if not progressed:
            raise UnsafeStateError(sequence)
    return sequence