"""Graph traversals and single-source shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

__all__ = [
    "DfsRecord",
    "BfsRecord",
    "depth_first_search",
    "breadth_first_search",
    "dijkstra",
]

Graph = Union[Mapping[Hashable, Iterable[Any]], Sequence[Iterable[Any]]]


@dataclass
class DfsRecord:
    """Parent and discovery/finish times of a node after depth-first search."""

    parent: Optional[Hashable] = None
    discovered: int = 0
    finished: int = 0


@dataclass
class BfsRecord:
    """Hop distance from the source and BFS-tree parent; None when unreachable."""

    distance: Optional[int] = None
    parent: Optional[Hashable] = None


def _entries(graph: Graph) -> Dict[Hashable, List[Any]]:
    items = graph.items() if isinstance(graph, Mapping) else enumerate(graph)
    return {node: list(edges) for node, edges in items}


def _node_order(adjacency: Mapping[Hashable, List[Any]], targets: Iterable[Hashable]) -> List[Hashable]:
    order = list(adjacency)
    seen = set(order)
    for target in targets:
        if target not in seen:
            seen.add(target)
            order.append(target)
    return order


def depth_first_search(graph: Graph) -> Dict[Hashable, DfsRecord]:
    """Run depth-first search over every node, in the graph's node order.

    ``graph`` maps each node to its neighbours, or is a sequence of neighbour
    lists indexed by node. Times count from 1 and every discovery and finish
    takes one tick.
    """
    adjacency = _entries(graph)
    order = _node_order(adjacency, (v for edges in adjacency.values() for v in edges))
    records = {node: DfsRecord() for node in order}
    time = 0
    for root in order:
        if records[root].discovered:
            continue
        time += 1
        records[root].discovered = time
        stack = [(root, iter(adjacency.get(root, ())))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not records[nxt].discovered:
                    records[nxt].parent = node
                    time += 1
                    records[nxt].discovered = time
                    stack.append((nxt, iter(adjacency.get(nxt, ()))))
                    break
            else:
                stack.pop()
                time += 1
                records[node].finished = time
    return records


def breadth_first_search(graph: Graph, source: Hashable) -> Dict[Hashable, BfsRecord]:
    """Run breadth-first search from ``source`` and return a record per node."""
    adjacency = _entries(graph)
    order = _node_order(adjacency, (v for edges in adjacency.values() for v in edges))
    if source not in adjacency and source not in order:
        raise KeyError(source)
    records = {node: BfsRecord() for node in order}
    records[source].distance = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adjacency.get(node, ()):
            if records[nxt].distance is None:
                records[nxt].distance = records[node].distance + 1
                records[nxt].parent = node
                queue.append(nxt)
    return records


def dijkstra(graph: Graph, source: Hashable) -> Dict[Hashable, float]:
    """Return the shortest distance from ``source`` to every node.

    ``graph`` maps each node to ``(neighbour, weight)`` pairs, or is a sequence
    of such lists indexed by node. Unreachable nodes get ``math.inf``.
    Negative weights raise ValueError.
    """
    adjacency: Dict[Hashable, List[Tuple[Hashable, Any]]] = {
        node: [(target, weight) for target, weight in edges]
        for node, edges in _entries(graph).items()
    }
    for edges in adjacency.values():
        for target, weight in edges:
            if weight < 0:
                raise ValueError(f"negative edge weight {weight} to {target!r}")
    order = _node_order(adjacency, (t for edges in adjacency.values() for t, _ in edges))
    distances: Dict[Hashable, float] = {node: math.inf for node in order}
    if source not in distances:
        raise KeyError(source)
    distances[source] = 0
    counter = itertools.count()
    heap = [(0, next(counter), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distances[node]:
            continue
        for target, weight in adjacency.get(node, ()):
            candidate = dist + weight
            if candidate < distances[target]:
                distances[target] = candidate
                heapq.heappush(heap, (candidate, next(counter), target))
    return distances