from __future__ import annotations
import math
from numbers import Integral, Real
from typing import List, Optional, Tuple

import numpy as np

from fractals.base import Fractal, Viewport

# Classification canvases are int32.
MAX_ITER_LIMIT = int(np.iinfo(np.int32).max)


class InvalidInputError(ValueError):
    """Aggregated frame-request validation error(s)."""


def _finite(v) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v)


def _positive_int(v) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool) and v > 0


def viewport_errors(vp: Viewport) -> List[str]:
    errors: List[str] = []
    if not isinstance(vp, Viewport):
        return [f"viewport must be a Viewport, got {type(vp).__name__}."]
    for name in ("center_x", "center_y"):
        v = getattr(vp, name)
        if not _finite(v):
            errors.append(f"viewport.{name} must be a finite number, got {v!r}.")
    if not _finite(vp.scale) or vp.scale <= 0:
        errors.append(f"viewport.scale must be positive and finite, got {vp.scale!r}.")
    if not _finite(vp.aspect_ratio) or vp.aspect_ratio <= 0:
        errors.append(f"viewport.aspect_ratio must be positive and finite, got {vp.aspect_ratio!r}.")
    return errors


def validate_frame_request(
    fractal: Fractal,
    vp: Viewport,
    width: int,
    height: int,
    max_iter: int,
    *,
    live_size: Optional[Tuple[int, int]] = None,
) -> None:
    """
    Validates a frame request before any cell is computed.
    Raises InvalidInputError listing every problem found.
    """
    errors: List[str] = []

    if not isinstance(fractal, Fractal):
        errors.append(f"variant must be a Fractal, got {type(fractal).__name__}.")
    else:
        errors.extend(fractal.validation_errors())

    errors.extend(viewport_errors(vp))

    if not _positive_int(width):
        errors.append(f"width must be a positive integer, got {width!r}.")
    if not _positive_int(height):
        errors.append(f"height must be a positive integer, got {height!r}.")
    if not _positive_int(max_iter):
        errors.append(f"max_iter must be a positive integer, got {max_iter!r}.")
    elif max_iter > MAX_ITER_LIMIT:
        errors.append(f"max_iter must be at most {MAX_ITER_LIMIT}, got {max_iter!r}.")

    if live_size is not None:
        try:
            live_w, live_h = live_size
        except (TypeError, ValueError):
            errors.append(f"live_size must be a (width, height) pair, got {live_size!r}.")
        else:
            if not (_positive_int(live_w) and _positive_int(live_h)):
                errors.append(f"live_size entries must be positive integers, got {live_size!r}.")

    if errors:
        raise InvalidInputError("Invalid frame request:\n- " + "\n- ".join(errors))
