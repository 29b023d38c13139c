from __future__ import annotations
import logging
import threading
import time
from dataclasses import replace
from typing import Callable, Optional, Tuple

# Fractal imports
from fractals.base import Fractal, Viewport, RenderSettings
from fractals.registry import get_variant

# Rendering imports
from rendering.engines.base import BaseRenderEngine
from rendering.engines.full_frame import FullFrameEngine
from rendering.engines.stripe import StripeEngine
from rendering.events import FrameEvent, LogEvent
from rendering.frame import Frame, FrameEvaluator

# Utils imports
from utils.coords import image_to_plane_coords
from utils.enums import ColorPalette, EngineMode, OutputMode

logger = logging.getLogger(__name__)

FINE_STEP = 0.1
COARSE_STEP = 10.0
ZOOM_IN = 0.8
ZOOM_OUT = 1.2


class RenderService:
    """
    Caller-facing facade that owns:
      - the current variant, viewport and raster size,
      - render configuration (iterations, palette, mode, engine),
      - viewport navigation (pan / zoom / recenter),
      - a worker thread per frame with stale-result dropping.

    A display or image-export collaborator drives it and receives finished
    frames through ``on_frame``. Frames started before the latest change are
    never delivered.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fractal: Optional[Fractal] = None,
        settings: Optional[RenderSettings] = None,
    ) -> None:
        # ----- Raster & config -----
        self.width = int(width)
        self.height = int(height)
        self.settings = settings or RenderSettings()

        # ----- Fractal & viewport -----
        self.fractal = fractal or get_variant("mandelbrot")
        self.viewport: Viewport = self.fractal.default_viewport

        # ----- Rendering facade -----
        self.evaluator = FrameEvaluator(self._make_engine(), gamma=self.settings.gamma)

        # ----- Threading -----
        self._worker_thread: Optional[threading.Thread] = None
        self._stop_flag = threading.Event()
        self._render_seq = 0
        self._lock = threading.Lock()

        # Callbacks
        self.on_frame: Optional[Callable[[FrameEvent], None]] = None
        self.on_log: Optional[Callable[[LogEvent], None]] = None

    # ---------------------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------------------

    def _make_engine(self) -> BaseRenderEngine:
        if self.settings.engine == EngineMode.STRIPED:
            return StripeEngine(workers=self.settings.workers)
        return FullFrameEngine()

    def set_engine_mode(self, mode: EngineMode, workers: Optional[int] = None) -> None:
        self.settings.engine = mode
        if workers:
            self.settings.workers = int(workers)
        self.evaluator.set_engine(self._make_engine())

    def set_variant(self, fractal: Fractal, reset_view: bool = True) -> None:
        self.fractal = fractal
        if reset_view:
            self.viewport = fractal.default_viewport

    def set_variant_by_id(self, variant_id: str) -> None:
        self.set_variant(get_variant(variant_id))

    def set_palette(self, palette: ColorPalette) -> None:
        self.settings.palette = palette

    def set_mode(self, mode: OutputMode) -> None:
        self.settings.mode = mode

    def set_max_iter(self, new_max: int) -> None:
        self.settings.max_iter = int(new_max)

    def set_gamma(self, gamma: float) -> None:
        self.settings.gamma = float(gamma)
        self.evaluator.gamma = self.settings.gamma

    def set_aspect_ratio(self, aspect: float) -> None:
        self.viewport = replace(self.viewport, aspect_ratio=float(aspect))

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = int(width), int(height)

    # ---------------------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------------------

    def pan(self, dx: int, dy: int, coarse: bool = False) -> Viewport:
        step = COARSE_STEP if coarse else FINE_STEP
        self.viewport = self.viewport.panned(dx * step, dy * step)
        return self.viewport

    def zoom_in(self) -> Viewport:
        self.viewport = self.viewport.zoomed(ZOOM_IN)
        return self.viewport

    def zoom_out(self) -> Viewport:
        self.viewport = self.viewport.zoomed(ZOOM_OUT)
        return self.viewport

    def recenter_on_cell(self, col: int, row: int) -> Viewport:
        x, y = image_to_plane_coords(col, row, self.viewport, self.width, self.height)
        self.viewport = self.viewport.recentered(x, y)
        return self.viewport

    def reset_view(self) -> Viewport:
        self.viewport = self.fractal.default_viewport
        return self.viewport

    # ---------------------------------------------------------------------
    # Synchronous rendering
    # ---------------------------------------------------------------------

    def render(self) -> Frame:
        """Render the live raster on the calling thread."""
        st = self.settings
        return self.evaluator.evaluate(self.fractal, self.viewport,
                                       self.width, self.height, st.max_iter,
                                       st.mode, st.palette)

    def export(self, image_width: int, image_height: int,
               palette: Optional[ColorPalette] = None) -> Frame:
        """
        Color frame at an arbitrary resolution framing what the live raster shows.
        Encoding it to a file is up to the caller.
        """
        st = self.settings
        return self.evaluator.evaluate(self.fractal, self.viewport,
                                       image_width, image_height, st.max_iter,
                                       OutputMode.COLOR, palette or st.palette,
                                       live_size=(self.width, self.height))

    # ---------------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------------

    def start_render(self) -> int:
        """Render on a worker thread; returns the sequence number of the request."""
        self.stop()
        with self._lock:
            self._render_seq += 1
            seq = self._render_seq
        self._stop_flag.clear()

        # Snapshot: the frame sees the state at request time.
        request = (self.fractal, self.viewport, self.width, self.height,
                   self.settings.max_iter, self.settings.mode, self.settings.palette)
        self._worker_thread = threading.Thread(target=self._run, args=(seq, request),
                                               daemon=True)
        self._worker_thread.start()
        return seq

    def stop(self) -> None:
        self._stop_flag.set()
        if self._worker_thread and self._worker_thread.is_alive():
            self._worker_thread.join(timeout=1.0)
        self._worker_thread = None

    def wait(self, timeout: Optional[float] = None) -> None:
        if self._worker_thread is not None:
            self._worker_thread.join(timeout)

    def is_stale(self, seq: int) -> bool:
        return self._stop_flag.is_set() or seq != self._render_seq

    # ---------------------------------------------------------------------
    # Worker routine
    # ---------------------------------------------------------------------

    def _run(self, seq: int, request: Tuple) -> None:
        fractal, vp, width, height, max_iter, mode, palette = request
        start = time.time()

        def cancel_cb() -> bool:
            return self.is_stale(seq)

        try:
            frame = self.evaluator.evaluate(fractal, vp, width, height, max_iter,
                                            mode, palette, cancel_cb=cancel_cb)
        except Exception as e:
            logger.exception("Frame %d failed", seq)
            if self.on_log:
                self.on_log(LogEvent(f"[RenderService] Frame error: {e}", level="error"))
            return

        if frame is None or cancel_cb():
            logger.debug("Dropping stale frame %d", seq)
            return

        if self.on_frame:
            self.on_frame(FrameEvent(frame, int(width), int(height), seq))
        if self.on_log:
            elapsed = round(time.time() - start, 3)
            self.on_log(LogEvent(f"Render time: {elapsed}s", level=None))
