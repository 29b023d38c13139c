from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Callable, List

import numpy as np

from fractals.base import Fractal
from rendering.engines.base import BaseRenderEngine


class StripeEngine(BaseRenderEngine):
    """
    Row-stripe rendering:
      - Splits the rows into N contiguous stripes.
      - Evaluates each stripe on a thread pool (frame kernels release the GIL).
      - Each worker writes a disjoint row range of the shared canvas.
      - Checks cancel_cb before every stripe; a cancelled frame returns None.
    """

    def __init__(self, workers: Optional[int] = None) -> None:
        super().__init__()
        self.configure_concurrency(workers or os.cpu_count() or 1)

    @staticmethod
    def split_rows(height: int, parts: int) -> List[slice]:
        """
        Stripe splitting; the last stripe takes the remainder.
        """
        parts = max(1, min(parts, height))
        base = height // parts
        out: List[slice] = []
        off = 0
        for i in range(parts):
            h = base if i < parts - 1 else (height - base * (parts - 1))
            out.append(slice(off, off + h))
            off += h
        return out

    def render(
        self,
        fractal: Fractal,
        xs: np.ndarray,
        ys: np.ndarray,
        max_iter: int,
        cancel_cb: Optional[Callable[[], bool]] = None,
    ) -> Optional[np.ndarray]:
        canvas = self.allocate(xs, ys)
        stripes = self.split_rows(ys.shape[0], self._in_flight_hint)
        cancelled = False

        def run(rows: slice) -> bool:
            if cancel_cb is not None and cancel_cb():
                return False
            # Kernels write through the view straight into the canvas.
            fractal.render_field(xs, ys[rows], max_iter, canvas[rows], parallel=False)
            return True

        with ThreadPoolExecutor(max_workers=len(stripes)) as ex:
            for done in ex.map(run, stripes):
                cancelled = cancelled or not done

        if cancelled or (cancel_cb is not None and cancel_cb()):
            return None
        return canvas
