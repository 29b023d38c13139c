from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Union
from abc import ABC, abstractmethod

import numpy as np

from utils.enums import ClassificationKind, ColorPalette, EngineMode, OutputMode


@dataclass(frozen=True)
class Viewport:
    """
    Maps raster cells to a rectangle of the complex plane.
    Scale is the plane width of one raster column; aspect_ratio stretches
    the row height to correct for non-square glyph cells.
    """
    center_x: float
    center_y: float
    scale: float
    aspect_ratio: float = 1.0

    def panned(self, dx: float, dy: float) -> "Viewport":
        """Shift the center by dx/dy columns/rows worth of plane units."""
        return replace(self,
                       center_x=self.center_x + dx * self.scale,
                       center_y=self.center_y + dy * self.scale)

    def zoomed(self, factor: float) -> "Viewport":
        return replace(self, scale=self.scale * factor)

    def recentered(self, x: float, y: float) -> "Viewport":
        return replace(self, center_x=float(x), center_y=float(y))


# --------------- Classification ----------------------

@dataclass(frozen=True)
class Escaped:
    iterations: int


@dataclass(frozen=True)
class Converged:
    root_index: int


Classification = Union[Escaped, Converged]

DID_NOT_CONVERGE = Converged(0)


@dataclass(frozen=True)
class ClassificationField:
    """
    Per-cell classifications of a whole frame.
    Values are iteration counts (ESCAPE) or root indices (ROOT).
    """
    values: np.ndarray
    kind: ClassificationKind
    max_iter: int
    root_count: int = 0

    @property
    def shape(self):
        return self.values.shape

    def at(self, row: int, col: int) -> Classification:
        v = int(self.values[row, col])
        if self.kind == ClassificationKind.ROOT:
            return Converged(v)
        return Escaped(v)


class Fractal(ABC):
    """
    An abstract base class for fractal variants.
    """
    name: str
    display_name: str
    default_viewport: Viewport
    kind: ClassificationKind = ClassificationKind.ESCAPE

    @abstractmethod
    def build_arg_values(self) -> Dict[str, Any]:
        """Kernel arguments beyond the plane point and max_iter."""
        ...

    @abstractmethod
    def evaluate(self, x: float, y: float, max_iter: int) -> Classification:
        ...

    @abstractmethod
    def render_field(self, xs: np.ndarray, ys: np.ndarray, max_iter: int,
                     out: np.ndarray, parallel: bool = True) -> None:
        """Fill ``out`` (int32, len(ys) x len(xs)) with raw classification values."""
        ...

    @property
    def root_count(self) -> int:
        return 0

    def field(self, values: np.ndarray, max_iter: int) -> ClassificationField:
        return ClassificationField(values, self.kind, int(max_iter), self.root_count)

    def validation_errors(self) -> List[str]:
        return []


@dataclass
class RenderSettings:
    """
    Caller-side render configuration.
    Max_iter bounds escape-time iteration (Newton basins use their own step budget).
    Gamma shapes the escape fraction before it picks a glyph or color.
    Engine selects the frame strategy; workers sizes the striped engine's pool.
    """
    max_iter: int = 100
    gamma: float = 2.2
    palette: ColorPalette = ColorPalette.GRAYSCALE
    mode: OutputMode = OutputMode.TERMINAL
    engine: EngineMode = EngineMode.FULL_FRAME
    workers: Optional[int] = None
