import numpy as np

from coloring.base import ColoringStrategy, DEFAULT_GAMMA, gamma_fraction
from coloring.palettes import palettes, ROOT_COLORS
from fractals.base import ClassificationField
from utils.enums import ClassificationKind, ColorPalette


class PaletteColoring(ColoringStrategy):
    """
    Image rendering: escape fraction through a palette, black interior.
    Newton frames ignore the palette and use one flat color per root.
    """

    def __init__(self, palette: ColorPalette = ColorPalette.GRAYSCALE,
                 gamma: float = DEFAULT_GAMMA):
        self.palette = palette
        self.gamma = gamma

    def apply(self, field: ClassificationField) -> np.ndarray:
        values = field.values
        if field.kind == ClassificationKind.ROOT:
            return root_colors(values, field.root_count)

        interior = values >= field.max_iter
        t = gamma_fraction(values, field.max_iter, self.gamma)
        rgb = palettes[self.palette](t)
        rgb[interior] = 0
        return rgb


def root_colors(indices: np.ndarray, root_count: int = len(ROOT_COLORS) - 1) -> np.ndarray:
    """
    Flat basin colors. Index j in 1..root_count takes ROOT_COLORS[j];
    0 and anything past the polynomial's roots map to black.
    """
    idx = np.asarray(indices, dtype=np.int64)
    valid = (idx >= 0) & (idx <= root_count) & (idx < len(ROOT_COLORS))
    rgb = ROOT_COLORS[np.where(valid, idx, 0)]
    return rgb
