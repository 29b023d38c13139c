from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from coloring.base import ColoringStrategy, DEFAULT_GAMMA
from coloring.escape import PaletteColoring
from coloring.glyphs import GlyphColoring
from fractals.base import ClassificationField, Fractal, Viewport
from fractals.validation import validate_frame_request, InvalidInputError
from rendering.engines.base import BaseRenderEngine
from rendering.engines.full_frame import FullFrameEngine
from utils.coords import plane_axes
from utils.enums import ColorPalette, OutputMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """
    A finished frame: the visual values plus the classification field they
    came from. Pixels are H x W glyphs (TERMINAL) or H x W x 3 uint8 (COLOR).
    """
    pixels: np.ndarray
    field: ClassificationField
    mode: OutputMode

    @property
    def width(self) -> int:
        return int(self.field.shape[1])

    @property
    def height(self) -> int:
        return int(self.field.shape[0])

    def lines(self) -> List[str]:
        if self.mode != OutputMode.TERMINAL:
            raise ValueError("lines() is only available for terminal frames.")
        return ["".join(row) for row in self.pixels]


def make_coloring(mode: OutputMode, palette: ColorPalette = ColorPalette.GRAYSCALE,
                  gamma: float = DEFAULT_GAMMA) -> ColoringStrategy:
    if mode == OutputMode.TERMINAL:
        return GlyphColoring(gamma=gamma)
    if mode == OutputMode.COLOR:
        if not isinstance(palette, ColorPalette):
            raise InvalidInputError(f"Unknown palette {palette!r}")
        return PaletteColoring(palette, gamma=gamma)
    raise InvalidInputError(f"Unknown output mode {mode!r}")


class FrameEvaluator:
    """
    Drives viewport mapping, per-cell evaluation and coloring for whole frames.

    The engine decides how the cells are spread over workers; every engine
    yields the same field. Requests are validated before any cell is computed.
    """

    def __init__(self, engine: Optional[BaseRenderEngine] = None,
                 gamma: float = DEFAULT_GAMMA) -> None:
        self.engine = engine or FullFrameEngine()
        self.gamma = gamma

    def set_engine(self, engine: BaseRenderEngine) -> None:
        """Swap rendering strategy."""
        self.engine = engine

    def classify(
        self,
        fractal: Fractal,
        vp: Viewport,
        width: int,
        height: int,
        max_iter: int,
        *,
        live_size: Optional[Tuple[int, int]] = None,
        cancel_cb: Optional[Callable[[], bool]] = None,
    ) -> Optional[ClassificationField]:
        """Classification field only; None if cancelled."""
        validate_frame_request(fractal, vp, width, height, max_iter, live_size=live_size)
        xs, ys = plane_axes(vp, width, height, live_size)

        t0 = time.perf_counter()
        values = self.engine.render(fractal, xs, ys, max_iter, cancel_cb)
        if values is None:
            logger.debug("%s frame %dx%d cancelled", fractal.name, width, height)
            return None
        elapsed = (time.perf_counter() - t0) * 1000.0
        logger.debug("%s frame %dx%d via %s in %.2f ms", fractal.name, width, height,
                     type(self.engine).__name__, elapsed)
        return fractal.field(values, max_iter)

    def evaluate(
        self,
        fractal: Fractal,
        vp: Viewport,
        width: int,
        height: int,
        max_iter: int,
        mode: OutputMode = OutputMode.TERMINAL,
        palette: ColorPalette = ColorPalette.GRAYSCALE,
        *,
        live_size: Optional[Tuple[int, int]] = None,
        cancel_cb: Optional[Callable[[], bool]] = None,
    ) -> Optional[Frame]:
        """
        Render a full frame. For image export pass ``live_size`` (the live
        raster's width/height) so the image frames the same plane region.
        """
        coloring = make_coloring(mode, palette, self.gamma)
        field = self.classify(fractal, vp, width, height, max_iter,
                              live_size=live_size, cancel_cb=cancel_cb)
        if field is None:
            return None
        return Frame(coloring.apply(field), field, mode)
