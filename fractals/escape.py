from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np

from fractals.base import Fractal, Viewport, Escaped
from kernel_sources import load_kernel


@dataclass
class EscapeTimeFractal(Fractal):
    """
    Escape-time variant backed by a registered point kernel and its
    row-parallel frame kernel.
    """
    name: str = "mandelbrot"
    display_name: str = "Mandelbrot"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(-0.5, 0.0, 0.04, 2.0))

    def build_arg_values(self) -> Dict[str, Any]:
        return {"param_x": 0.0, "param_y": 0.0}

    def evaluate(self, x: float, y: float, max_iter: int) -> Escaped:
        point = load_kernel(self.name, "point")["func"]
        args = self.build_arg_values()
        n = point(float(x), float(y), args["param_x"], args["param_y"], int(max_iter))
        return Escaped(int(n))

    def render_field(self, xs: np.ndarray, ys: np.ndarray, max_iter: int,
                     out: np.ndarray, parallel: bool = True) -> None:
        frame = load_kernel(self.name, "frame" if parallel else "frame_serial")["func"]
        args = self.build_arg_values()
        frame(xs, ys, args["param_x"], args["param_y"], int(max_iter), out)


@dataclass
class MandelbrotFractal(EscapeTimeFractal):
    name: str = "mandelbrot"
    display_name: str = "Mandelbrot"


@dataclass
class MandelbrotSineFractal(EscapeTimeFractal):
    name: str = "mandelbrot_sine"
    display_name: str = "Mandelbrot (sine)"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(0.0, 0.0, 0.08, 2.0))


@dataclass
class MandelbrotInverseFractal(EscapeTimeFractal):
    """Mandelbrot set seen through c -> 1/c; the origin neighbourhood is interior."""
    name: str = "mandelbrot_inverse"
    display_name: str = "Mandelbrot (inverse)"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(1.5, 0.0, 0.08, 2.0))


@dataclass
class TricornFractal(EscapeTimeFractal):
    name: str = "tricorn"
    display_name: str = "Tricorn"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(-0.3, 0.0, 0.04, 2.0))


@dataclass
class BurningShipFractal(EscapeTimeFractal):
    name: str = "burning_ship"
    display_name: str = "Burning Ship"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(-0.5, -0.5, 0.04, 2.0))


@dataclass
class CelticFractal(EscapeTimeFractal):
    name: str = "celtic"
    display_name: str = "Celtic"


@dataclass
class BuffaloFractal(EscapeTimeFractal):
    name: str = "buffalo"
    display_name: str = "Buffalo"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(-0.5, -0.5, 0.04, 2.0))
