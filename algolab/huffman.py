"""Huffman code construction from symbol frequencies."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union

__all__ = ["HuffmanNode", "build_tree", "huffman_codes", "encoded_bits"]

Frequencies = Union[Mapping[Hashable, int], Iterable[Tuple[Hashable, int]]]


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol, inner nodes do not."""

    frequency: int
    symbol: Optional[Hashable] = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _pairs(frequencies: Frequencies) -> List[Tuple[Hashable, int]]:
    pairs = list(frequencies.items() if isinstance(frequencies, Mapping) else frequencies)
    seen = set()
    for symbol, frequency in pairs:
        if symbol in seen:
            raise ValueError(f"duplicate symbol {symbol!r}")
        if frequency < 0:
            raise ValueError(f"negative frequency for {symbol!r}")
        seen.add(symbol)
    return pairs


def build_tree(frequencies: Frequencies) -> HuffmanNode:
    """Build a Huffman tree; the lighter of each merged pair becomes the left child."""
    pairs = _pairs(frequencies)
    if not pairs:
        raise ValueError("no symbols to encode")
    counter = itertools.count()
    heap = [(freq, next(counter), HuffmanNode(freq, symbol)) for symbol, freq in pairs]
    heapq.heapify(heap)
    while len(heap) > 1:
        left = heapq.heappop(heap)[2]
        right = heapq.heappop(heap)[2]
        merged = HuffmanNode(left.frequency + right.frequency, None, left, right)
        heapq.heappush(heap, (merged.frequency, next(counter), merged))
    return heap[0][2]


def huffman_codes(frequencies: Frequencies) -> Dict[Hashable, str]:
    """Return each symbol's code (``0`` for left, ``1`` for right) in input order.

    A lone symbol gets the empty code.
    """
    pairs = _pairs(frequencies)
    root = build_tree(pairs)
    found: Dict[Hashable, str] = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            found[node.symbol] = prefix
            continue
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return {symbol: found[symbol] for symbol, _ in pairs}


def encoded_bits(frequencies: Frequencies, codes: Mapping[Hashable, str]) -> int:
    """Return the number of bits needed to encode a message with these frequencies."""
    return sum(freq * len(codes[symbol]) for symbol, freq in _pairs(frequencies))