#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generic A* over implicit graphs.
- Open set ordered by (f_score, node): nodes must be orderable for ties.
- Heuristic must be admissible for the returned path to be optimal; this is
  not checked.
- The returned path excludes `start` and ends with `goal`, so len(path) is
  the number of steps taken.

Returns list of nodes, or None if the goal cannot be reached.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar
import heapq

TNode = TypeVar("TNode", bound=Hashable)


def reconstruct_path(came_from: Dict[TNode, TNode], current: TNode) -> List[TNode]:
    """Walk predecessors back from `current`; the origin node is left out."""
    path: List[TNode] = []
    while current in came_from:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path


def a_star(start: TNode,
           goal: TNode,
           heuristic: Callable[[TNode], Any],
           neighbors: Callable[[TNode], Iterable[TNode]],
           cost: Callable[[TNode, TNode], Any],
           zero: Any = 0) -> Optional[List[TNode]]:
    """
    Shortest path from `start` to `goal`.

    Parameters
    ----------
    heuristic : callable
        heuristic(node) -> estimated remaining cost to `goal`.
    neighbors : callable
        neighbors(node) -> iterable of candidate nodes.
    cost : callable
        cost(a, b) -> edge weight from a to b (non-negative).
    zero : distance
        Identity element of the distance type.
    """
    came_from: Dict[TNode, TNode] = {}
    g_score: Dict[TNode, Any] = {start: zero}
    f_score: Dict[TNode, Any] = {start: zero + heuristic(start)}

    open_set: Set[TNode] = {start}
    open_heap: List[Tuple[Any, TNode]] = [(f_score[start], start)]

    while open_heap:
        f, current = heapq.heappop(open_heap)
        # Lazy deletion: skip closed nodes and superseded f-scores
        if current not in open_set or f_score[current] < f:
            continue

        if current == goal:
            return reconstruct_path(came_from, current)

        open_set.remove(current)

        for neighbor in neighbors(current):
            tentative_g = g_score[current] + cost(current, neighbor)
            known = g_score.get(neighbor)
            if known is None or tentative_g < known:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                f_score[neighbor] = tentative_g + heuristic(neighbor)
                open_set.add(neighbor)
                heapq.heappush(open_heap, (f_score[neighbor], neighbor))

    return None


def path_cost(start: TNode,
              path: Iterable[TNode],
              cost: Callable[[TNode, TNode], Any],
              zero: Any = 0) -> Any:
    """Total edge cost of walking from `start` along `path`."""
    total = zero
    previous = start
    for node in path:
        total = total + cost(previous, node)
        previous = node
    return total
