import pytest

from api.render_api import available_palettes, available_variants
from fractals.registry import get_variant
from fractals.validation import InvalidInputError
from kernel_sources import list_kernels, load_kernel
from utils.enums import ClassificationKind, ColorPalette


def test_variant_catalogue_order():
    assert [v.id for v in available_variants()] == [
        "mandelbrot", "mandelbrot_sine", "mandelbrot_inverse", "tricorn", "julia",
        "burning_ship", "celtic", "buffalo",
        "newton_cubic", "newton_quintic", "newton_cycle",
    ]


def test_variant_entries_carry_labels_and_viewports():
    for info in available_variants():
        assert info.display_name
        assert info.default_viewport.scale > 0


def test_palette_catalogue_order():
    assert [p.id for p in available_palettes()] == [
        ColorPalette.GRAYSCALE, ColorPalette.FIRE, ColorPalette.OCEAN, ColorPalette.FOREST,
    ]
    assert [p.display_name for p in available_palettes()] == [
        "Grayscale", "Fire", "Ocean", "Forest",
    ]


def test_unknown_variant():
    with pytest.raises(InvalidInputError, match="Unknown variant"):
        get_variant("mandelbulb")


def test_get_variant_returns_fresh_instances():
    a = get_variant("julia")
    a.param = complex(0.0, 0.0)
    assert get_variant("julia").param != a.param


def test_newton_variants_are_root_classified():
    for vid, roots in (("newton_cubic", 3), ("newton_quintic", 5), ("newton_cycle", 3)):
        f = get_variant(vid)
        assert f.kind == ClassificationKind.ROOT
        assert f.root_count == roots


def test_kernel_ops_are_registered():
    assert list_kernels("mandelbrot") == ["frame", "frame_serial", "point"]
    assert list_kernels("newton") == ["frame", "frame_serial", "point"]
    assert callable(load_kernel("julia", "point")["func"])


def test_missing_kernel():
    with pytest.raises(KeyError):
        load_kernel("mandelbrot", "gradient")
    with pytest.raises(KeyError):
        load_kernel("nope", "point")
