#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import operator
import pytest
from grids import DimensionMismatchError, Grid, save_grid_figure, to_text


def test_get_set_and_bounds():
    g = Grid(3, 3, 0)
    assert g.get(1, 1) == 0
    assert g.set(1, 1, 1)
    assert g.get(1, 1) == 1
    assert g.get(3, 3) is None
    assert g.get(-1, 0) is None
    assert not g.set(0, 3, 5)
    assert g.shape == (3, 3)
    assert g[1, 1] == 1
    with pytest.raises(IndexError):
        g[3, 0]


def test_row_major_iteration():
    g = Grid(3, 3, 0)
    g.set(1, 1, 1)
    assert list(g) == [0, 0, 0, 0, 1, 0, 0, 0, 0]


def test_combine_adds_cellwise():
    ones = Grid(3, 3, 1)
    twos = Grid(3, 3, 2)
    total = ones.combine(twos, operator.add)
    assert total == Grid(3, 3, 3)
    # operands untouched
    assert ones == Grid(3, 3, 1)


def test_combine_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as exc:
        Grid(3, 3, 1).combine(Grid(2, 2, 2), operator.add)
    assert "3x3 vs 2x2" in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_map_changes_element_type():
    g = Grid.from_rows([[1, 2], [3, 4]], dtype=int)
    chars = g.map(lambda v: "#" if v % 2 else ".")
    assert chars.shape == (2, 2)
    assert to_text(chars) == "#.\n#."
    indexed = g.map_indexed(lambda v, r, c: v * 10 + r + c)
    assert list(indexed) == [10, 21, 31, 42]


def test_from_rows_rejects_ragged_input():
    with pytest.raises(ValueError):
        Grid.from_rows([[1, 2], [3]])


def test_tuple_fill_is_one_value_per_cell():
    g = Grid(2, 2, (0, 0))
    assert g.get(1, 1) == (0, 0)


def test_orthogonal_neighbors_order_and_bounds():
    g = Grid(5, 8, 0)
    assert g.orthogonal_neighbors(0, 0) == [(1, 0), (0, 1)]
    assert g.orthogonal_neighbors(1, 1) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_find_and_positions():
    g = Grid.from_rows(["ab", "ba"])
    assert g.find("a") == [(0, 0), (1, 1)]
    assert list(g.positions()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_save_grid_figure(tmp_path):
    g = Grid.from_rows([[1, 2, 3], [4, 5, 6]], dtype=int)
    out = save_grid_figure(g, str(tmp_path / "figs" / "grid.png"), title="grid", path=[(0, 0), (1, 2)])
    assert os.path.exists(out)
