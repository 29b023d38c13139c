from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from fractals.base import Fractal, Viewport
from fractals.escape import (MandelbrotFractal, MandelbrotSineFractal,
                             MandelbrotInverseFractal, TricornFractal,
                             BurningShipFractal, CelticFractal, BuffaloFractal)
from fractals.julia import JuliaFractal
from fractals.newton import NewtonFractal
from fractals.validation import InvalidInputError
from utils.enums import PolynomialId


@dataclass(frozen=True)
class VariantInfo:
    """Menu entry for a variant: stable id, label and starting viewport."""
    id: str
    display_name: str
    default_viewport: Viewport


def _newton(poly: PolynomialId, vid: str, label: str) -> Callable[[], Fractal]:
    return lambda: NewtonFractal(polynomial=poly, name=vid,
                                 display_name=f"Newton {label}")


# Ordered: this is the order menus list them in.
_FACTORIES: Dict[str, Callable[[], Fractal]] = {
    "mandelbrot": MandelbrotFractal,
    "mandelbrot_sine": MandelbrotSineFractal,
    "mandelbrot_inverse": MandelbrotInverseFractal,
    "tricorn": TricornFractal,
    "julia": JuliaFractal,
    "burning_ship": BurningShipFractal,
    "celtic": CelticFractal,
    "buffalo": BuffaloFractal,
    "newton_cubic": _newton(PolynomialId.CUBIC_UNITY, "newton_cubic", "z^3 - 1"),
    "newton_quintic": _newton(PolynomialId.QUINTIC_UNITY, "newton_quintic", "z^5 - 1"),
    "newton_cycle": _newton(PolynomialId.CUBIC_CYCLE, "newton_cycle", "z^3 - 2z + 2"),
}


def get_variant(variant_id: str) -> Fractal:
    """Build the default instance of a variant by id."""
    try:
        factory = _FACTORIES[variant_id]
    except KeyError:
        known = ", ".join(_FACTORIES)
        raise InvalidInputError(f"Unknown variant '{variant_id}' (known: {known})") from None
    return factory()


def available_variants() -> List[VariantInfo]:
    out = []
    for vid in _FACTORIES:
        f = get_variant(vid)
        out.append(VariantInfo(vid, f.display_name, f.default_viewport))
    return out
