from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np

from fractals.base import Fractal, Viewport, Converged
from fractals.polynomials import Polynomial, get_polynomial
from kernel_sources import load_kernel
from utils.enums import ClassificationKind, PolynomialId


@dataclass
class NewtonFractal(Fractal):
    """
    Newton-Raphson basins of a catalogued polynomial.

    Each point is classified by the root its Newton orbit lands on
    (1-based), or 0 when the orbit hits a critical point or does not settle
    within the polynomial's step budget. ``max_iter`` plays no part here.
    """
    polynomial: PolynomialId = PolynomialId.CUBIC_UNITY
    name: str = "newton"
    display_name: str = "Newton"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(0.0, 0.0, 0.04, 2.0))
    kind: ClassificationKind = ClassificationKind.ROOT

    @property
    def poly(self) -> Polynomial:
        return get_polynomial(self.polynomial)

    @property
    def root_count(self) -> int:
        return len(self.poly.roots)

    def build_arg_values(self) -> Dict[str, Any]:
        poly = self.poly
        return {
            "coefficients": poly.coefficient_array(),
            "roots": poly.root_array(),
            "tol2": poly.tolerance * poly.tolerance,
            "max_steps": int(poly.max_steps),
        }

    def evaluate(self, x: float, y: float, max_iter: int) -> Converged:
        point = load_kernel("newton", "point")["func"]
        a = self.build_arg_values()
        idx = point(float(x), float(y), a["coefficients"], a["roots"],
                    a["tol2"], a["max_steps"])
        return Converged(int(idx))

    def render_field(self, xs: np.ndarray, ys: np.ndarray, max_iter: int,
                     out: np.ndarray, parallel: bool = True) -> None:
        frame = load_kernel("newton", "frame" if parallel else "frame_serial")["func"]
        a = self.build_arg_values()
        frame(xs, ys, a["coefficients"], a["roots"], a["tol2"], a["max_steps"], out)
