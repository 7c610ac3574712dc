#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generic Dijkstra over implicit graphs.
- Nodes are any hashable values; edges come from a `neighbors` callback.
- Edge weights come from a `cost(a, b)` callback and must be non-negative.
- Optional goal: stop as soon as the goal is finalized.
- Without a goal the full distance map is returned, which is how callers get
  "distance from every node to a sink" (run from the sink on reversed edges).

Returns DijkstraResult(distance_to_end, distances).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar
import heapq
import itertools

TNode = TypeVar("TNode", bound=Hashable)
TDistance = TypeVar("TDistance")


@dataclass
class DijkstraResult(Generic[TNode, TDistance]):
    """Outcome of a single Dijkstra run."""
    # Distance to the goal, None if no goal was given or it was unreachable
    distance_to_end: Optional[TDistance] = None
    # Best distance from the start to every finalized or touched node
    distances: Dict[TNode, TDistance] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.distance_to_end is not None


def dijkstra(start: TNode,
             goal: Optional[TNode],
             neighbors: Callable[[TNode], Iterable[TNode]],
             cost: Callable[[TNode, TNode], TDistance],
             nodes: Optional[Iterable[TNode]] = None,
             zero: Any = 0) -> DijkstraResult[TNode, TDistance]:
    """
    Single-source shortest distances from `start`.

    Parameters
    ----------
    start : node
        Source node. Always recorded with distance `zero`, even if it is not
        part of `nodes`.
    goal : node or None
        Stop once this node is finalized. None runs to exhaustion.
    neighbors : callable
        neighbors(node) -> iterable of candidate nodes.
    cost : callable
        cost(a, b) -> edge weight from a to b.
    nodes : iterable or None
        Complete vertex set. Only neighbors that are still unvisited members
        of this set get relaxed. None means every discovered node is eligible.
    zero : distance
        Identity element of the distance type.

    Returns
    -------
    DijkstraResult
    """
    unrestricted = nodes is None
    unvisited: Set[TNode] = set() if unrestricted else set(nodes)
    visited: Set[TNode] = set()

    distances: Dict[TNode, TDistance] = {start: zero}

    # Frontier entries are (distance, push order, node); the counter keeps
    # nodes out of the comparison and makes equal distances pop FIFO.
    counter = itertools.count()
    frontier: List[Tuple[Any, int, TNode]] = [(zero, next(counter), start)]

    while frontier:
        d, _, current = heapq.heappop(frontier)
        if current in visited or distances[current] < d:
            continue  # stale entry

        for neighbor in neighbors(current):
            if neighbor in visited:
                continue
            if not unrestricted and neighbor not in unvisited:
                continue
            candidate = d + cost(current, neighbor)
            known = distances.get(neighbor)
            if known is None or candidate < known:
                distances[neighbor] = candidate
                heapq.heappush(frontier, (candidate, next(counter), neighbor))

        # current is final from here on
        visited.add(current)
        unvisited.discard(current)

        if goal is not None and current == goal:
            return DijkstraResult(distance_to_end=distances[goal], distances=distances)

    return DijkstraResult(distance_to_end=None, distances=distances)


def distances_to(sink: TNode,
                 reverse_neighbors: Callable[[TNode], Iterable[TNode]],
                 cost: Callable[[TNode, TNode], TDistance],
                 nodes: Optional[Iterable[TNode]] = None,
                 zero: Any = 0) -> Dict[TNode, TDistance]:
    """
    Distance from every node that can reach `sink`, in one search.

    `reverse_neighbors(n)` must yield the nodes that have an edge *into* n, and
    `cost(a, b)` is called as cost(sink-side node, source-side node), i.e. in
    the reversed direction.
    """
    return dijkstra(sink, None, reverse_neighbors, cost, nodes=nodes, zero=zero).distances
