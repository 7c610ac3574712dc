# -*- coding: utf-8 -*-
"""
Grid container and rendering helpers.
Exposes:
- Grid, DimensionMismatchError (from grid.py)
- to_text, plot_grid, save_grid_figure (from render.py)
"""

from __future__ import annotations

from .grid import DELTAS_4, DimensionMismatchError, Grid
from .render import plot_grid, save_grid_figure, to_text

__all__ = [
    "Grid",
    "DimensionMismatchError",
    "DELTAS_4",
    "to_text",
    "plot_grid",
    "save_grid_figure",
]
