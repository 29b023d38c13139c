import numpy as np
import pytest

from api.render_api import RenderAPI
from fractals.base import RenderSettings, Viewport
from fractals.validation import InvalidInputError
from rendering.service import RenderService, FINE_STEP, COARSE_STEP
from utils.enums import ColorPalette, EngineMode, OutputMode


@pytest.fixture
def service():
    return RenderService(80, 24, settings=RenderSettings(max_iter=60))


def test_starts_on_default_viewport(service):
    assert service.fractal.name == "mandelbrot"
    assert service.viewport == service.fractal.default_viewport


def test_pan_moves_by_scale_multiples(service):
    vp = service.viewport
    service.pan(1, 0)
    assert service.viewport.center_x == pytest.approx(vp.center_x + FINE_STEP * vp.scale)
    service.pan(0, -1, coarse=True)
    assert service.viewport.center_y == pytest.approx(vp.center_y - COARSE_STEP * vp.scale)
    assert service.viewport.scale == vp.scale


def test_zoom_in_then_out(service):
    scale = service.viewport.scale
    service.zoom_in()
    assert service.viewport.scale == pytest.approx(scale * 0.8)
    service.zoom_out()
    assert service.viewport.scale == pytest.approx(scale * 0.96)


def test_recenter_on_middle_cell_keeps_center(service):
    vp = service.viewport
    service.recenter_on_cell(40, 12)
    assert service.viewport.center_x == pytest.approx(vp.center_x)
    assert service.viewport.center_y == pytest.approx(vp.center_y)


def test_switching_variant_resets_view(service):
    service.zoom_in()
    service.set_variant_by_id("burning_ship")
    assert service.fractal.name == "burning_ship"
    assert service.viewport == Viewport(-0.5, -0.5, 0.04, 2.0)


def test_unknown_variant_id(service):
    with pytest.raises(InvalidInputError):
        service.set_variant_by_id("nope")


def test_render_uses_live_size_and_mode(service):
    frame = service.render()
    assert frame.pixels.shape == (24, 80)
    service.set_mode(OutputMode.COLOR)
    assert service.render().pixels.shape == (24, 80, 3)


def test_export_frames_the_live_view(service):
    live = service.render()
    image = service.export(160, 48, palette=ColorPalette.FOREST)
    assert image.mode == OutputMode.COLOR
    assert image.pixels.shape == (48, 160, 3)
    assert np.array_equal(image.field.values[::2, ::2], live.field.values)


def test_striped_service_matches_full_frame(service):
    full = service.render()
    service.set_engine_mode(EngineMode.STRIPED, workers=3)
    striped = service.render()
    assert np.array_equal(full.field.values, striped.field.values)


def test_async_render_delivers_a_frame(service):
    events = []
    service.on_frame = events.append
    seq = service.start_render()
    service.wait(timeout=60)
    assert len(events) == 1
    assert events[0].seq == seq
    assert (events[0].width, events[0].height) == (80, 24)


def test_stale_frames_are_dropped(service):
    events = []
    service.on_frame = events.append
    service._render_seq = 5
    request = (service.fractal, service.viewport, 20, 6, 30,
               OutputMode.TERMINAL, ColorPalette.GRAYSCALE)
    service._run(4, request)
    assert events == []
    service._run(5, request)
    assert len(events) == 1


def test_render_errors_go_to_the_log_callback(service):
    frames, logs = [], []
    service.on_frame = frames.append
    service.on_log = logs.append
    service.set_max_iter(0)
    service.start_render()
    service.wait(timeout=60)
    assert frames == []
    assert logs and logs[-1].level == "error"
    assert "max_iter" in logs[-1].message


def test_api_facade(service):
    api = RenderAPI(service)
    api.select_variant("julia")
    api.set_view(0.1, 0.2, 0.01)
    assert service.viewport == Viewport(0.1, 0.2, 0.01, 2.0)
    api.set_palette(ColorPalette.OCEAN)
    assert service.settings.palette == ColorPalette.OCEAN
    got = []
    api.on_frame(got.append)
    api.start_async_render()
    service.wait(timeout=60)
    api.stop_render()
    assert len(got) == 1


def test_resize_and_aspect_ratio(service):
    service.resize(40, 10)
    service.set_aspect_ratio(2.5)
    frame = service.render()
    assert frame.pixels.shape == (10, 40)
    assert service.viewport.aspect_ratio == 2.5
    service.zoom_in()
    assert service.reset_view() == service.fractal.default_viewport


def test_set_gamma_reaches_the_evaluator(service):
    service.set_mode(OutputMode.COLOR)
    before = service.render().pixels
    service.set_gamma(1.0)
    assert service.settings.gamma == 1.0
    assert service.evaluator.gamma == 1.0
    after = service.render().pixels
    assert not np.array_equal(before, after)
