"""Fixed-partition memory allocation with first, best and worst fit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

__all__ = ["Strategy", "AllocationResult", "allocate", "first_fit"]


class Strategy(str, Enum):
    """Rule for choosing a free partition for a process."""

    FIRST_FIT = "First Fit"
    BEST_FIT = "Best Fit"
    WORST_FIT = "Worst Fit"


@dataclass(frozen=True)
class AllocationResult:
    """Partition index (or None) for each process, and the total unused space in used partitions."""

    strategy: Strategy
    allocations: Tuple[Optional[int], ...]
    internal_fragmentation: int

    @property
    def unallocated(self) -> List[int]:
        """Indices of the processes that got no partition."""
        return [i for i, part in enumerate(self.allocations) if part is None]


def allocate(
    partitions: Iterable[int],
    processes: Iterable[int],
    strategy: Union[Strategy, str],
) -> AllocationResult:
    """Place each process, in order, into one free partition large enough for it.

    Each partition holds at most one process. Ties between equally good
    partitions go to the lower index.
    """
    strategy = Strategy(strategy)
    free = dict(enumerate(partitions))
    allocations: List[Optional[int]] = []
    fragmentation = 0
    for size in processes:
        candidates = [(index, room) for index, room in free.items() if size <= room]
        if not candidates:
            allocations.append(None)
            continue
        if strategy is Strategy.FIRST_FIT:
            index, room = candidates[0]
        elif strategy is Strategy.BEST_FIT:
            index, room = min(candidates, key=lambda c: c[1] - size)
        else:
            index, room = max(candidates, key=lambda c: c[1] - size)
        del free[index]
        allocations.append(index)
        fragmentation += room - size
    return AllocationResult(strategy, tuple(allocations), fragmentation)


def first_fit(partitions: Iterable[int], processes: Iterable[int]) -> AllocationResult:
    """Allocate with the first-fit strategy."""
    return allocate(partitions, processes, Strategy.FIRST_FIT)