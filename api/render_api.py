from typing import Callable, List, Optional, Tuple

from coloring.palettes import PaletteInfo, available_palettes as _palettes
from coloring.scalar import glyph_for, rgb_for
from fractals.base import Fractal, Viewport
from fractals.registry import VariantInfo, available_variants as _variants
from rendering.frame import Frame, FrameEvaluator
from rendering.service import RenderService
from utils.enums import ColorPalette, EngineMode, OutputMode

_DEFAULT_EVALUATOR = FrameEvaluator()

__all__ = [
    "evaluate_frame",
    "glyph_for",
    "rgb_for",
    "available_variants",
    "available_palettes",
    "RenderAPI",
]


def evaluate_frame(
    variant: Fractal,
    viewport: Viewport,
    width: int,
    height: int,
    max_iter: int,
    mode: OutputMode = OutputMode.TERMINAL,
    palette: ColorPalette = ColorPalette.GRAYSCALE,
    *,
    live_size: Optional[Tuple[int, int]] = None,
) -> Frame:
    """
    Evaluates one frame with the default full-frame engine.

    Args:
        variant (Fractal): The fractal variant to evaluate.
        viewport (Viewport): Center, per-column scale and aspect ratio.
        width (int): Raster (or image) width in cells.
        height (int): Raster (or image) height in cells.
        max_iter (int): Escape-time iteration budget.
        mode (OutputMode): Glyphs for a terminal or RGB for export.
        palette (ColorPalette): Palette used in COLOR mode.
        live_size (tuple): Live raster size when rendering an export image.

    Returns:
        Frame: glyph or RGB grid plus its classification field.
    """
    return _DEFAULT_EVALUATOR.evaluate(variant, viewport, width, height, max_iter,
                                       mode, palette, live_size=live_size)


def available_variants() -> List[VariantInfo]:
    """Ordered variant descriptions for selection menus."""
    return _variants()


def available_palettes() -> List[PaletteInfo]:
    """Ordered palette descriptions for selection menus."""
    return _palettes()


class RenderAPI:
    """
    Facade for controlling rendering operations and managing callbacks.
    """
    def __init__(self, service: RenderService):
        self.service: RenderService = service

    # ---------- Callbacks --------------------------------
    def on_frame(self, cb: Callable): self.service.on_frame = cb
    def on_log(self, cb: Callable): self.service.on_log = cb

    # ----------- Facade methods --------------------------
    def select_variant(self, variant_id: str) -> None:
        """
        Switches to a catalogued variant and resets to its default viewport.

        Args:
            variant_id (str): One of the ids from available_variants().
        """
        self.service.set_variant_by_id(variant_id)

    def set_view(self, center_x: float, center_y: float, scale: float) -> None:
        """
        Sets the view of the renderer, keeping the current aspect ratio.

        Args:
            center_x (float): The x-coordinate of the center of the view.
            center_y (float): The y-coordinate of the center of the view.
            scale (float): Plane width of one raster column.
        """
        vp = self.service.viewport
        self.service.viewport = Viewport(center_x, center_y, scale, vp.aspect_ratio)

    def set_palette(self, palette: ColorPalette) -> None:
        self.service.set_palette(palette)

    def set_engine_mode(self, mode: EngineMode, workers: Optional[int] = None) -> None:
        self.service.set_engine_mode(mode, workers)

    def start_async_render(self) -> int:
        """
        Initiates asynchronous rendering by delegating to the service.
        """
        return self.service.start_render()

    def stop_render(self) -> None:
        """
        Stops the ongoing rendering process.
        """
        self.service.stop()
