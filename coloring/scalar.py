"""Per-classification lookups, routed through the same code as whole frames."""
from typing import Optional

import numpy as np

from coloring.base import DEFAULT_GAMMA
from coloring.escape import PaletteColoring
from coloring.glyphs import GlyphColoring
from fractals.base import Classification, ClassificationField, Converged, Escaped
from fractals.polynomials import max_root_count
from utils.enums import ClassificationKind, ColorPalette


def _single(classification: Classification, max_iter: int,
            root_count: int = 0) -> ClassificationField:
    if isinstance(classification, Converged):
        value, kind = classification.root_index, ClassificationKind.ROOT
    elif isinstance(classification, Escaped):
        value, kind = classification.iterations, ClassificationKind.ESCAPE
    else:
        raise TypeError(f"Not a classification: {classification!r}")
    return ClassificationField(np.array([[value]], dtype=np.int64), kind,
                               int(max_iter), int(root_count))


def glyph_for(classification: Classification, max_iter: int,
              gamma: float = DEFAULT_GAMMA) -> str:
    return str(GlyphColoring(gamma=gamma).apply(_single(classification, max_iter))[0, 0])


def rgb_for(classification: Classification, max_iter: int,
            palette: ColorPalette = ColorPalette.GRAYSCALE,
            gamma: float = DEFAULT_GAMMA,
            root_count: Optional[int] = None):
    """
    RGB triple for one cell. ``root_count`` is the polynomial's root count
    for Converged values; it defaults to the largest in the catalogue.
    """
    if root_count is None:
        root_count = max_root_count()
    field = _single(classification, max_iter, root_count)
    rgb = PaletteColoring(palette, gamma).apply(field)[0, 0]
    return tuple(int(c) for c in rgb)
