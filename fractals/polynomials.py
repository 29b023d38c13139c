from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from utils.enums import PolynomialId


@dataclass(frozen=True)
class Polynomial:
    """
    A polynomial whose Newton basins can be rendered.
    Coefficients are highest degree first; roots are in basin-index order
    (root j is reported as index j + 1). Tolerance and the step budget are
    per polynomial.
    """
    id: PolynomialId
    label: str
    coefficients: Tuple[complex, ...]
    roots: Tuple[complex, ...]
    tolerance: float = 1e-6
    max_steps: int = 50

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def coefficient_array(self) -> np.ndarray:
        return np.array(self.coefficients, dtype=np.complex128)

    def root_array(self) -> np.ndarray:
        return np.array(self.roots, dtype=np.complex128)

    def __call__(self, z: complex) -> complex:
        acc = 0j
        for c in self.coefficients:
            acc = acc * z + c
        return acc


_COS72 = 0.30901699437494745
_SIN72 = 0.9510565162951535
_COS144 = -0.8090169943749475
_SIN144 = 0.5877852522924731

POLYNOMIALS: Dict[PolynomialId, Polynomial] = {
    PolynomialId.CUBIC_UNITY: Polynomial(
        id=PolynomialId.CUBIC_UNITY,
        label="z^3 - 1",
        coefficients=(1, 0, 0, -1),
        roots=(
            complex(1.0, 0.0),
            complex(-0.5, 0.8660254037844386),
            complex(-0.5, -0.8660254037844386),
        ),
        tolerance=1e-6,
    ),
    PolynomialId.QUINTIC_UNITY: Polynomial(
        id=PolynomialId.QUINTIC_UNITY,
        label="z^5 - 1",
        coefficients=(1, 0, 0, 0, 0, -1),
        roots=(
            complex(1.0, 0.0),
            complex(_COS72, _SIN72),
            complex(_COS144, _SIN144),
            complex(_COS144, -_SIN144),
            complex(_COS72, -_SIN72),
        ),
        tolerance=1e-6,
    ),
    # Has an attracting 2-cycle {0, 1}: whole regions never reach a root.
    PolynomialId.CUBIC_CYCLE: Polynomial(
        id=PolynomialId.CUBIC_CYCLE,
        label="z^3 - 2z + 2",
        coefficients=(1, 0, -2, 2),
        roots=(
            complex(-1.7692923542386314, 0.0),
            complex(0.8846461771193157, 0.5897428050222055),
            complex(0.8846461771193157, -0.5897428050222055),
        ),
        tolerance=1e-4,
    ),
}


def get_polynomial(poly_id: PolynomialId) -> Polynomial:
    try:
        return POLYNOMIALS[poly_id]
    except KeyError as e:
        raise KeyError(f"Unknown polynomial '{poly_id}'") from e


def max_root_count() -> int:
    return max(len(p.roots) for p in POLYNOMIALS.values())
