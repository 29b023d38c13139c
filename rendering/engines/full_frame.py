from __future__ import annotations

from typing import Optional, Callable
import numpy as np

from fractals.base import Fractal
from rendering.engines.base import BaseRenderEngine


class FullFrameEngine(BaseRenderEngine):
    """
    Full-frame rendering strategy:
      - One call to the variant's parallel frame kernel (rows spread by prange).
      - Returns the classification canvas (H x W, int32).
    """

    def render(
        self,
        fractal: Fractal,
        xs: np.ndarray,
        ys: np.ndarray,
        max_iter: int,
        cancel_cb: Optional[Callable[[], bool]] = None,
    ) -> Optional[np.ndarray]:
        # If the caller already cancelled (e.g., a new render started), skip the work.
        if cancel_cb is not None and cancel_cb():
            return None

        canvas = self.allocate(xs, ys)
        fractal.render_field(xs, ys, max_iter, canvas)
        return canvas
