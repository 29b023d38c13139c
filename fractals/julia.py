from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fractals.base import Viewport
from fractals.escape import EscapeTimeFractal


@dataclass
class JuliaFractal(EscapeTimeFractal):
    """
    Julia set for a fixed parameter c. The plane point seeds z and
    ``param`` is the additive constant of every step.
    """
    name: str = "julia"
    display_name: str = "Julia"
    default_viewport: Viewport = field(
        default_factory=lambda: Viewport(0.0, 0.0, 0.04, 2.0))
    param: complex = complex(-0.8, 0.156)

    def build_arg_values(self) -> Dict[str, Any]:
        c = complex(self.param)
        return {"param_x": c.real, "param_y": c.imag}

    def validation_errors(self) -> List[str]:
        c = complex(self.param)
        if not (math.isfinite(c.real) and math.isfinite(c.imag)):
            return [f"Julia parameter must be finite, got {self.param!r}."]
        return []
