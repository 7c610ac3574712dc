#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Dense, fixed-size 2D container addressed by (row, col), backed by a NumPy
array. Puzzle code builds its graphs (height maps, caves, sensor fields) on
top of it; it holds no search logic itself.

Conventions:
- Out-of-range reads return None and out-of-range writes return False.
  Negative indices are out of range (no wrap-around).
- Elementwise combination requires identical dimensions and raises
  DimensionMismatchError otherwise.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np


# 4-connected neighborhood deltas: up, down, left, right
DELTAS_4 = np.array([
    (-1, 0), (1, 0), (0, -1), (0, 1)
], dtype=np.int8)


class DimensionMismatchError(ValueError):
    """Raised when an elementwise operation gets grids of different shapes."""

    def __init__(self, left: Tuple[int, int], right: Tuple[int, int]):
        self.left = left
        self.right = right
        super().__init__(
            f"Dimension mismatch: {left[0]}x{left[1]} vs {right[0]}x{right[1]}"
        )


class Grid:
    """rows x cols grid of arbitrary values."""

    def __init__(self, rows: int, cols: int, fill: Any = None, dtype=None):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
        if dtype is None or np.dtype(dtype) == object:
            self.values = np.empty((rows, cols), dtype=object)
            # ndarray.fill treats tuples/lists as a single object
            self.values.fill(fill)
        else:
            self.values = np.full((rows, cols), fill, dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], dtype=None) -> "Grid":
        """Build a grid from nested rows; all rows must share one length."""
        data = [list(row) for row in rows]
        height = len(data)
        width = len(data[0]) if data else 0
        for r, row in enumerate(data):
            if len(row) != width:
                raise ValueError(f"Ragged rows: row 0 has {width} values, row {r} has {len(row)}")
        grid = cls(height, width)
        for r, row in enumerate(data):
            for c, value in enumerate(row):
                grid.values[r, c] = value
        if dtype is not None:
            grid.values = grid.values.astype(dtype)
        return grid

    @classmethod
    def _wrap(cls, values: np.ndarray) -> "Grid":
        grid = cls.__new__(cls)
        grid.values = values
        return grid

    # ------------------------------------------------------------------ #

    @property
    def rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def cols(self) -> int:
        return int(self.values.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[Any]:
        if not self.in_bounds(row, col):
            return None
        value = self.values[row, col]
        return value.item() if isinstance(value, np.generic) else value

    def set(self, row: int, col: int, value: Any) -> bool:
        if not self.in_bounds(row, col):
            return False
        self.values[row, col] = value
        return True

    def __getitem__(self, pos: Tuple[int, int]) -> Any:
        row, col = pos
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.get(row, col)

    # ------------------------------------------------------------------ #

    def combine(self, other: "Grid", op: Callable[[Any, Any], Any], dtype=None) -> "Grid":
        """New grid holding op(self[r, c], other[r, c]) for every cell."""
        if self.shape != other.shape:
            raise DimensionMismatchError(self.shape, other.shape)
        out = np.frompyfunc(op, 2, 1)(self.values, other.values)
        out = np.asarray(out, dtype=object).reshape(self.shape)
        if dtype is not None:
            out = out.astype(dtype)
        return Grid._wrap(out)

    def map(self, func: Callable[[Any], Any], dtype=None) -> "Grid":
        """Same-shaped grid of func(value)."""
        out = np.frompyfunc(func, 1, 1)(self.values)
        out = np.asarray(out, dtype=object).reshape(self.shape)
        if dtype is not None:
            out = out.astype(dtype)
        return Grid._wrap(out)

    def map_indexed(self, func: Callable[[Any, int, int], Any]) -> "Grid":
        """Same-shaped grid of func(value, row, col)."""
        out = Grid(self.rows, self.cols)
        for r, c in self.positions():
            out.values[r, c] = func(self.get(r, c), r, c)
        return out

    # ------------------------------------------------------------------ #

    def positions(self) -> Iterator[Tuple[int, int]]:
        """All (row, col) pairs in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def find(self, value: Any) -> List[Tuple[int, int]]:
        return [(r, c) for r, c in self.positions() if self.get(r, c) == value]

    def orthogonal_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """In-bounds 4-neighbors in the order up, down, left, right."""
        out = []
        for dr, dc in DELTAS_4:
            nr, nc = row + int(dr), col + int(dc)
            if self.in_bounds(nr, nc):
                out.append((nr, nc))
        return out

    def to_numpy(self, dtype=None) -> np.ndarray:
        return self.values.astype(dtype) if dtype is not None else self.values.copy()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values.ravel().tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and all(a == b for a, b in zip(self, other))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, dtype={self.dtype})"
