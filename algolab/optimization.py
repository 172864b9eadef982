"""Greedy fractional knapsack and bottom-up rod cutting."""

from __future__ import annotations

from dataclasses import dataclass
from operator import itemgetter
from typing import Iterable, List, Sequence, Tuple

__all__ = ["KnapsackResult", "RodCutting", "fractional_knapsack", "cut_rod"]


@dataclass(frozen=True)
class KnapsackResult:
    """Total value packed and the ``(item index, weight taken)`` portions in order."""

    total_value: float
    portions: Tuple[Tuple[int, float], ...]


def fractional_knapsack(capacity: float, items: Iterable[Tuple[float, float]]) -> KnapsackResult:
    """Fill ``capacity`` greedily by value per unit weight, splitting the last item.

    ``items`` holds ``(weight, value)`` pairs; indices in the result refer to it.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    entries = list(items)
    for weight, _ in entries:
        if weight <= 0:
            raise ValueError(f"item weight must be positive, got {weight}")
    order = sorted(
        range(len(entries)),
        key=lambda index: entries[index][1] / entries[index][0],
        reverse=True,
    )
    remaining = capacity
    total = 0.0
    portions: List[Tuple[int, float]] = []
    for index in order:
        if remaining <= 0:
            break
        weight, value = entries[index]
        if weight <= remaining:
            total += value
            remaining -= weight
            portions.append((index, weight))
        else:
            total += value / weight * remaining
            portions.append((index, remaining))
            remaining = 0
            break
    return KnapsackResult(total_value=total, portions=tuple(portions))


@dataclass(frozen=True)
class RodCutting:
    """Best revenue and first cut for every rod length from 0 up."""

    revenue: Tuple[int, ...]
    first_cut: Tuple[int, ...]

    def cuts(self, length: int) -> List[int]:
        """Return the piece lengths of an optimal cut of a rod of ``length``."""
        if not 0 <= length < len(self.revenue):
            raise ValueError(f"length {length} outside 0..{len(self.revenue) - 1}")
        pieces = []
        while length > 0:
            piece = self.first_cut[length]
            pieces.append(piece)
            length -= piece
        return pieces


def cut_rod(prices: Sequence[int], length: int) -> RodCutting:
    """Solve rod cutting for every length up to ``length``.

    ``prices[k - 1]`` is the price of a piece of length ``k``. Among equally
    good cuts the smallest first piece is chosen.
    """
    prices = list(prices)
    if not 0 <= length <= len(prices):
        raise ValueError(f"length {length} outside 0..{len(prices)}")
    revenue = [0]
    first_cut = [0]
    for j in range(1, length + 1):
        best, cut = max(
            ((prices[i - 1] + revenue[j - i], i) for i in range(1, j + 1)),
            key=itemgetter(0),
        )
        revenue.append(best)
        first_cut.append(cut)
    return RodCutting(revenue=tuple(revenue), first_cut=tuple(first_cut))