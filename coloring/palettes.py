from dataclasses import dataclass
from typing import Callable, Dict, List

import numpy as np

from utils.enums import ColorPalette


def _channels(r, g, b) -> np.ndarray:
    """
    Stack per-channel intensities into (..., 3) uint8, clamping each
    channel to [0, 255] and truncating.
    """
    rgb = np.stack(np.broadcast_arrays(r, g, b), axis=-1)
    return np.clip(rgb, 0.0, 255.0).astype(np.uint8)


def grayscale(t):
    t = np.asarray(t, dtype=np.float64)
    return _channels(255.0 * t, 255.0 * t, 255.0 * t)


def fire(t):
    t = np.asarray(t, dtype=np.float64)
    return _channels(np.minimum(255.0, 255.0 * 1.5 * t),
                     255.0 * 0.8 * t,
                     255.0 * 0.2 * t)


def ocean(t):
    t = np.asarray(t, dtype=np.float64)
    return _channels(255.0 * 0.2 * t,
                     255.0 * 0.5 * t,
                     np.minimum(255.0, 255.0 * 1.2 * t))


def forest(t):
    t = np.asarray(t, dtype=np.float64)
    return _channels(255.0 * 0.3 * t,
                     np.minimum(255.0, 255.0 * 1.2 * t),
                     255.0 * 0.25 * t)


@dataclass(frozen=True)
class PaletteInfo:
    id: ColorPalette
    display_name: str


# Export palettes dictionary (menu order)
palettes: Dict[ColorPalette, Callable[[np.ndarray], np.ndarray]] = {
    ColorPalette.GRAYSCALE: grayscale,
    ColorPalette.FIRE: fire,
    ColorPalette.OCEAN: ocean,
    ColorPalette.FOREST: forest,
}

_NAMES = {
    ColorPalette.GRAYSCALE: "Grayscale",
    ColorPalette.FIRE: "Fire",
    ColorPalette.OCEAN: "Ocean",
    ColorPalette.FOREST: "Forest",
}


def available_palettes() -> List[PaletteInfo]:
    return [PaletteInfo(p, _NAMES[p]) for p in palettes]


# Flat basin colors for Newton frames; index 0 is "no root".
ROOT_COLORS = np.array([
    (0, 0, 0),
    (220, 50, 47),
    (133, 153, 0),
    (38, 139, 210),
    (181, 137, 0),
    (211, 54, 130),
], dtype=np.uint8)
