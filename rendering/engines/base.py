from __future__ import annotations

from typing import Optional, Callable
import numpy as np

from fractals.base import Fractal


class BaseRenderEngine:
    """
    Base class for all render engines (full-frame, striped).

    Responsibilities:
      - Decide *how* to decompose a frame into work (strategy),
      - Run the variant's frame kernel over each piece,
      - Return the whole int32 classification canvas, or None when the
        caller cancelled (the frame is then discarded as a whole).
    """

    def __init__(self) -> None:
        self._in_flight_hint: int = 1

    def configure_concurrency(self, workers: int = 1) -> None:
        """
        Hint: how many pieces of the frame this engine may evaluate at once.
        """
        self._in_flight_hint = max(1, int(workers))

    @staticmethod
    def allocate(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.zeros((ys.shape[0], xs.shape[0]), dtype=np.int32)

    def render(
        self,
        fractal: Fractal,
        xs: np.ndarray,
        ys: np.ndarray,
        max_iter: int,
        cancel_cb: Optional[Callable[[], bool]] = None,
    ) -> Optional[np.ndarray]:
        """
        Subclasses implement the strategy. ``xs``/``ys`` are the plane
        coordinates of the columns/rows; the result has shape (len(ys), len(xs)).
        """
        raise NotImplementedError("BaseRenderEngine.render() must be implemented by subclasses.")
