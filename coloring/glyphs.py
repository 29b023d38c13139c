import numpy as np

from coloring.base import ColoringStrategy, DEFAULT_GAMMA, gamma_fraction
from fractals.base import ClassificationField
from utils.enums import ClassificationKind

GLYPH_RAMP = " .-:=*#%@"


class GlyphColoring(ColoringStrategy):
    """
    Terminal rendering: one character per cell from a sparse-to-dense ramp.

    Interior points get the densest glyph. Newton frames are not split by
    basin here; every converged cell, matched or not, uses the densest glyph.
    """

    def __init__(self, ramp: str = GLYPH_RAMP, gamma: float = DEFAULT_GAMMA):
        if len(ramp) < 2:
            raise ValueError("Glyph ramp must contain at least two glyphs.")
        self.ramp = np.array(list(ramp), dtype="<U1")
        self.gamma = gamma

    def apply(self, field: ClassificationField) -> np.ndarray:
        values = field.values
        dense = self.ramp[-1]
        if field.kind == ClassificationKind.ROOT:
            return np.full(values.shape, dense, dtype="<U1")

        interior = values >= field.max_iter
        t = gamma_fraction(values, field.max_iter, self.gamma)
        idx = np.floor(t * (len(self.ramp) - 1)).astype(np.int64)
        idx = np.clip(idx, 0, len(self.ramp) - 1)
        glyphs = self.ramp[idx]
        glyphs[interior] = dense
        return glyphs
