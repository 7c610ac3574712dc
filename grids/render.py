import os
from typing import Any, Callable, Iterable, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .grid import Grid


def to_text(grid: Grid, char_of: Callable[[Any], str] = str) -> str:
    """Render one line per row, one character (or string) per cell."""
    lines = []
    for r in range(grid.rows):
        lines.append("".join(char_of(grid.get(r, c)) for c in range(grid.cols)))
    return "\n".join(lines)


def _to_levels(grid: Grid, color_of: Optional[Callable[[Any], float]]) -> np.ndarray:
    if color_of is None:
        return grid.to_numpy(dtype=float)
    return grid.map(color_of).to_numpy(dtype=float)


def plot_grid(grid: Grid, color_of: Optional[Callable[[Any], float]] = None, ax=None,
              title: Optional[str] = None, path: Optional[Iterable[Tuple[int, int]]] = None,
              cmap: str = "viridis"):
    """
    Draw a grid as an image.

    Layers:
      - cell values mapped through `color_of` (identity if None), colored by `cmap`
      - optional path overlay as (row, col) points
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 5), max(2, H / 5)), dpi=120)

    levels = _to_levels(grid, color_of)
    ax.imshow(levels, cmap=cmap, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    points = list(path) if path is not None else []
    if points:
        rr, cc = zip(*points)
        ax.plot(cc, rr, color="red", lw=1.5, alpha=0.8)

    if title:
        ax.set_title(title, fontsize=10)

    return ax


def save_grid_figure(grid: Grid, out_path: str, color_of: Optional[Callable[[Any], float]] = None,
                     title: Optional[str] = None, path: Optional[Iterable[Tuple[int, int]]] = None,
                     cmap: str = "viridis") -> str:
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(3, W / 5), max(2, H / 5)), dpi=120)
    plot_grid(grid, color_of=color_of, ax=ax, title=title, path=path, cmap=cmap)
    fig.tight_layout()
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {out_path}")
    return out_path
