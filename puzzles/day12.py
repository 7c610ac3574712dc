#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Day 12: hill climbing on a height map.
- Elevations 'a'..'z' map to 1..26; 'S' (start) sits at 'a', 'E' (end) at 'z'.
- A step may go at most one elevation up (any amount down), 4-connected.
- Part 1: fewest steps from S to E.
- Part 2: fewest steps from any sea-level ('a') cell to E.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from multiprocessing import Pool, cpu_count
from typing import List, NamedTuple, Optional
import os

from tqdm import tqdm

from grids import Grid, save_grid_figure, to_text
from pathfinding import a_star, dijkstra

from .aoc import DayParams

SEA_LEVEL = 1


class Point(NamedTuple):
    row: int
    col: int


def parse_elevation(c: str) -> int:
    if "a" <= c <= "z" and len(c) == 1:
        return ord(c) - ord("a") + 1
    raise ValueError(f"Invalid elevation: {c!r}")


def _unit_cost(a: Point, b: Point) -> int:
    return 1


@dataclass
class HeightMap:
    map: Grid
    start: Point
    end: Point

    @classmethod
    def parse(cls, text: str) -> "HeightMap":
        lines = [line for line in text.strip().splitlines() if line]
        start: Optional[Point] = None
        end: Optional[Point] = None
        rows = []
        for r, line in enumerate(lines):
            row = []
            for c, ch in enumerate(line):
                if ch == "S":
                    start = Point(r, c)
                    row.append(parse_elevation("a"))
                elif ch == "E":
                    end = Point(r, c)
                    row.append(parse_elevation("z"))
                else:
                    row.append(parse_elevation(ch))
            rows.append(row)

        if start is None:
            raise ValueError("No start point found")
        if end is None:
            raise ValueError("No end point found")
        return cls(map=Grid.from_rows(rows, dtype=int), start=start, end=end)

    # ------------------------------ graph ------------------------------ #

    def height(self, p: Point) -> int:
        return self.map.get(p.row, p.col)

    def neighbors(self, p: Point) -> List[Point]:
        return [Point(r, c) for r, c in self.map.orthogonal_neighbors(p.row, p.col)]

    def movable_neighbors(self, p: Point) -> List[Point]:
        here = self.height(p)
        return [n for n in self.neighbors(p) if self.height(n) <= here + 1]

    def movable_neighbors_rev(self, p: Point) -> List[Point]:
        """Cells that can step *into* p."""
        here = self.height(p)
        return [n for n in self.neighbors(p) if here <= self.height(n) + 1]

    def all_points(self) -> List[Point]:
        return [Point(r, c) for r, c in self.map.positions()]

    def sea_level_points(self) -> List[Point]:
        return [Point(r, c) for r, c in self.map.find(SEA_LEVEL)]

    # ----------------------------- searches ---------------------------- #

    def shortest_path_dijkstra(self, start: Point, end: Optional[Point] = None):
        return dijkstra(start, end, self.movable_neighbors, _unit_cost, nodes=self.all_points())

    def shortest_path_from_start(self) -> Optional[int]:
        return self.shortest_path_dijkstra(self.start, self.end).distance_to_end

    def a_star_path(self, start: Optional[Point] = None) -> Optional[List[Point]]:
        start = self.start if start is None else start
        end = self.end

        def manhattan(p: Point) -> int:
            return abs(p.row - end.row) + abs(p.col - end.col)

        return a_star(start, end, manhattan, self.movable_neighbors, _unit_cost)

    def shortest_path_a_star(self) -> Optional[int]:
        path = self.a_star_path()
        return None if path is None else len(path)

    def shortest_path_from_sea(self, workers: int = 1, progress: bool = False) -> Optional[int]:
        """One independent Dijkstra per sea-level start; minimum over the reachable ones."""
        starts = self.sea_level_points()
        if workers <= 0:
            workers = cpu_count()
        run = partial(_distance_from, self)

        found: List[int] = []
        with tqdm(total=len(starts), desc="Sea-level starts", disable=not progress) as pbar:
            if workers == 1:
                results = map(run, starts)
                for dist in results:
                    if dist is not None:
                        found.append(dist)
                    pbar.update(1)
            else:
                with Pool(processes=workers) as pool:
                    for dist in pool.imap_unordered(run, starts):
                        if dist is not None:
                            found.append(dist)
                        pbar.update(1)
        return min(found) if found else None

    def shortest_path_from_sea_reversed(self) -> Optional[int]:
        """Single search from E over reversed edges, read every sea-level cell out of the map."""
        result = dijkstra(self.end, None, self.movable_neighbors_rev, _unit_cost, nodes=self.all_points())
        found = [result.distances[p] for p in self.sea_level_points() if p in result.distances]
        return min(found) if found else None

    def to_text(self) -> str:
        def char_of(h: int) -> str:
            return chr(ord("a") + h - 1)

        canvas = self.map.map_indexed(lambda h, r, c: char_of(h))
        canvas.set(self.start.row, self.start.col, "S")
        canvas.set(self.end.row, self.end.col, "E")
        return to_text(canvas)


def _distance_from(height_map: HeightMap, start: Point) -> Optional[int]:
    return height_map.shortest_path_dijkstra(start, height_map.end).distance_to_end


def day12(params: DayParams, out_dir: str = "out") -> dict:
    height_map = HeightMap.parse(params.read_input())

    if params.debug:
        print(height_map.to_text())
        path = height_map.a_star_path() or []
        save_grid_figure(height_map.map, os.path.join(out_dir, f"day12{'_test' if params.test else ''}.png"),
                         title="Day 12 height map", path=[height_map.start] + list(path))

    answers = {}

    def part1() -> int:
        dist = height_map.shortest_path_from_start()
        if dist is None:
            raise ValueError("No path found")
        return dist

    def part2() -> int:
        if params.workers == 1:
            dist = height_map.shortest_path_from_sea_reversed()
        else:
            dist = height_map.shortest_path_from_sea(workers=params.workers, progress=params.debug)
        if dist is None:
            raise ValueError("No path found")
        return dist

    answers[1] = params.part_1(part1)
    answers[2] = params.part_2(part2)
    return answers
