"""
Grid Geometry
=============
Line layout for the 1 m x 1 m density preview.

The preview area has a fixed size in display pixels. The grid cell edge is
``10 * density`` display pixels, so a denser texture gives a finer-looking
grid.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

# Display pixels per px/cm of density
GRID_SCALE: float = 10.0

# Below this cell size the lines would merge into a solid block
MIN_GRID_CELL_PX: float = 2.0


def grid_cell_size_px(density: float) -> float:
    """Cell edge [display px] for the given density [px/cm]."""
    return GRID_SCALE * float(density)


def is_drawable(cell_size_px: float) -> bool:
    """True if a grid with this cell size can be drawn at all."""
    return math.isfinite(cell_size_px) and cell_size_px > 0.0


def is_saturated(cell_size_px: float) -> bool:
    """True if the cells are too small to show as individual lines."""
    return is_drawable(cell_size_px) and cell_size_px < MIN_GRID_CELL_PX


def grid_line_positions(cell_size_px: float, extent_px: float) -> npt.NDArray[np.float64]:
    """
    Offsets of the grid lines along one axis, starting at 0.

    Args:
        cell_size_px: Spacing between lines [display px].
        extent_px: Length of the axis [display px].

    Returns:
        Sorted 1D array in ``[0, extent_px]``. Empty when nothing should be
        drawn as lines (degenerate or saturated cell size).
    """
    if not is_drawable(cell_size_px) or is_saturated(cell_size_px):
        return np.empty(0, dtype=np.float64)
    return np.arange(0.0, extent_px + 1e-9, cell_size_px, dtype=np.float64)


def grid_segments(
    cell_size_px: float, extent_px: float
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Endpoints of all grid lines as (x, y) arrays for pairwise drawing.

    Every consecutive pair of points forms one line segment: first the
    vertical lines, then the horizontal ones.
    """
    pos = grid_line_positions(cell_size_px, extent_px)
    n = len(pos)
    if n == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)

    xs = np.empty(n * 4, dtype=np.float64)
    ys = np.empty(n * 4, dtype=np.float64)

    # vertical lines
    xs[0:n * 2:2] = pos
    xs[1:n * 2:2] = pos
    ys[0:n * 2:2] = 0.0
    ys[1:n * 2:2] = extent_px

    # horizontal lines
    xs[n * 2::2] = 0.0
    xs[n * 2 + 1::2] = extent_px
    ys[n * 2::2] = pos
    ys[n * 2 + 1::2] = pos

    return xs, ys
