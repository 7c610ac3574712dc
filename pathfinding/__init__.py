# -*- coding: utf-8 -*-
"""
Shortest-path searches over implicit graphs with a shared callback API:
  neighbors(node) -> iterable of nodes
  cost(a, b)      -> edge weight

- dijkstra(start, goal, neighbors, cost, nodes) -> DijkstraResult
- a_star(start, goal, heuristic, neighbors, cost) -> list of nodes or None
"""

from __future__ import annotations
from typing import Callable, Dict

from .a_star import a_star, path_cost, reconstruct_path
from .dijkstra import DijkstraResult, dijkstra, distances_to

# Mapping used by factories/CLIs
SEARCHES: Dict[str, Callable] = {
    "dijkstra": dijkstra,
    "a_star": a_star,
}


def get_search(name: str) -> Callable:
    """Look up a search function by name ('dijkstra' or 'a_star')."""
    key = name.strip().lower()
    if key not in SEARCHES:
        raise ValueError(f"Unknown search '{name}'. Available: {sorted(SEARCHES)}")
    return SEARCHES[key]


__all__ = [
    "DijkstraResult",
    "dijkstra",
    "distances_to",
    "a_star",
    "reconstruct_path",
    "path_cost",
    "SEARCHES",
    "get_search",
]
