#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
from pathfinding import a_star, dijkstra, path_cost, reconstruct_path
from tests.test_dijkstra import random_graph


def test_optimal_with_zero_heuristic():
    rng = np.random.default_rng(21)
    for _ in range(40):
        n = int(rng.integers(2, 12))
        adj = random_graph(n, p_edge=0.3, rng=rng)
        neighbors = lambda u: list(adj[u])
        cost = lambda u, v: adj[u][v]
        goal = n - 1
        expected = dijkstra(0, goal, neighbors, cost, nodes=list(adj)).distance_to_end
        path = a_star(0, goal, lambda u: 0, neighbors, cost)
        if expected is None:
            assert path is None
        else:
            assert path is not None and path[-1] == goal
            assert path_cost(0, path, cost) == expected


def test_optimal_with_exact_heuristic():
    rng = np.random.default_rng(22)
    for _ in range(30):
        n = int(rng.integers(2, 12))
        adj = random_graph(n, p_edge=0.3, rng=rng, directed=False)
        neighbors = lambda u: list(adj[u])
        cost = lambda u, v: adj[u][v]
        goal = n - 1
        # Undirected graph: distance-to-goal == distance-from-goal
        exact = dijkstra(goal, None, neighbors, cost, nodes=list(adj)).distances
        expected = exact.get(0)
        path = a_star(0, goal, lambda u: exact.get(u, 0), neighbors, cost)
        if expected is None:
            assert path is None
        else:
            assert path_cost(0, path, cost) == expected


def test_path_excludes_start_and_ends_at_goal():
    # 0 -> 1 -> 2 -> 3 chain plus an expensive shortcut 0 -> 3
    adj = {0: {1: 1, 3: 10}, 1: {2: 1}, 2: {3: 1}, 3: {}}
    path = a_star(0, 3, lambda u: 0, lambda u: list(adj[u]), lambda u, v: adj[u][v])
    assert path == [1, 2, 3]


def test_start_equals_goal_is_empty_path():
    path = a_star((0, 0), (0, 0), lambda p: 0, lambda p: [], lambda a, b: 1)
    assert path == []


def test_unreachable_goal():
    adj = {0: {1: 1}, 1: {0: 1}, 2: {3: 1}, 3: {2: 1}}
    path = a_star(0, 3, lambda u: 0, lambda u: list(adj[u]), lambda u, v: adj[u][v])
    assert path is None


def test_open_grid_manhattan():
    H, W = 6, 9
    blocked = {(r, 4) for r in range(0, 5)}  # wall with a gap at the bottom

    def neighbors(p):
        r, c = p
        out = []
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nr, nc = r + dr, c + dc
            if 0 <= nr < H and 0 <= nc < W and (nr, nc) not in blocked:
                out.append((nr, nc))
        return out

    goal = (0, 8)
    manhattan = lambda p: abs(p[0] - goal[0]) + abs(p[1] - goal[1])
    path = a_star((0, 0), goal, manhattan, neighbors, lambda a, b: 1)
    expected = dijkstra((0, 0), goal, neighbors, lambda a, b: 1).distance_to_end
    assert len(path) == expected == 18
    assert (5, 4) in path


def test_reconstruct_path():
    came_from = {"b": "a", "c": "b", "d": "c"}
    assert reconstruct_path(came_from, "d") == ["b", "c", "d"]
    assert reconstruct_path(came_from, "a") == []
