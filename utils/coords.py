from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


def axis_steps(viewport, width: int, height: int,
               live_size: Optional[Tuple[int, int]] = None) -> Tuple[float, float]:
    """
    Plane units per column and per row.

    With ``live_size`` the steps are rescaled so an image of ``width`` x
    ``height`` covers the same plane rectangle as the live raster. At the
    live raster's own size both ratios are exactly 1.0.
    """
    step_x = viewport.scale
    step_y = viewport.scale * viewport.aspect_ratio
    if live_size is not None:
        live_w, live_h = live_size
        step_x = step_x * (live_w / width)
        step_y = step_y * (live_h / height)
    return step_x, step_y


def map_point(row, col, raster_width, raster_height, viewport,
              live_size: Optional[Tuple[int, int]] = None) -> Tuple[float, float]:
    step_x, step_y = axis_steps(viewport, raster_width, raster_height, live_size)
    x = (col - raster_width / 2) * step_x + viewport.center_x
    y = (row - raster_height / 2) * step_y + viewport.center_y
    return x, y


def plane_axes(viewport, width: int, height: int,
               live_size: Optional[Tuple[int, int]] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Column x coordinates (len W) and row y coordinates (len H).
    Same arithmetic as map_point, element by element.
    """
    step_x, step_y = axis_steps(viewport, width, height, live_size)
    cols = np.arange(width, dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)
    xs = (cols - width / 2) * step_x + viewport.center_x
    ys = (rows - height / 2) * step_y + viewport.center_y
    return xs, ys


def image_to_plane_coords(px, py, viewport, image_width, image_height):
    """Plane point under an image/raster pixel, e.g. for click-to-recenter."""
    return map_point(py, px, image_width, image_height, viewport)
