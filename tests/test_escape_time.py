import math

import pytest

from fractals.base import Escaped
from fractals.escape import (MandelbrotFractal, MandelbrotSineFractal,
                             MandelbrotInverseFractal, TricornFractal,
                             BurningShipFractal, CelticFractal, BuffaloFractal)
from fractals.julia import JuliaFractal
from fractals.registry import available_variants, get_variant


def _reference(update, x, y, max_iter, z0=(0.0, 0.0), bailout=4.0):
    zr, zi = z0
    n = 0
    while n < max_iter and zr * zr + zi * zi < bailout:
        zr, zi = update(zr, zi, x, y)
        n += 1
    return n


UPDATES = {
    MandelbrotFractal: lambda zr, zi, x, y: (zr * zr - zi * zi + x, 2.0 * zr * zi + y),
    TricornFractal: lambda zr, zi, x, y: (zr * zr - zi * zi + x, -2.0 * zr * zi + y),
    BurningShipFractal: lambda zr, zi, x, y: (zr * zr - zi * zi + x, 2.0 * abs(zr * zi) + y),
    CelticFractal: lambda zr, zi, x, y: (abs(zr * zr - zi * zi) + x, 2.0 * zr * zi + y),
    BuffaloFractal: lambda zr, zi, x, y: (abs(zr * zr - zi * zi) + x, 2.0 * abs(zr * zi) + y),
}

POINTS = [(-0.75, 0.1), (0.3, 0.5), (-1.8, -0.05), (0.25, 0.0), (-0.5, -0.6), (1.0, 1.0)]


@pytest.mark.parametrize("cls", list(UPDATES))
@pytest.mark.parametrize("x,y", POINTS)
def test_update_rules_match_reference(cls, x, y):
    expected = _reference(UPDATES[cls], x, y, 200)
    assert cls().evaluate(x, y, 200) == Escaped(expected)


def test_burning_ship_takes_abs_before_next_square():
    # Mandelbrot and Burning Ship agree on the real axis but not off it.
    assert BurningShipFractal().evaluate(-1.5, 0.0, 100) == MandelbrotFractal().evaluate(-1.5, 0.0, 100)
    # 0.5i is inside the main cardioid; the folded orbit leaves after 6 steps.
    assert MandelbrotFractal().evaluate(0.0, 0.5, 200) == Escaped(200)
    assert BurningShipFractal().evaluate(0.0, 0.5, 200) == Escaped(6)


def test_cardioid_center_is_interior():
    assert MandelbrotFractal().evaluate(-0.5, 0.0, 300) == Escaped(300)


def test_far_point_escapes_after_one_step():
    assert MandelbrotFractal().evaluate(2.0, 0.0, 50) == Escaped(1)
    assert MandelbrotFractal().evaluate(3.0, -4.0, 50) == Escaped(1)


def test_escape_count_grows_towards_the_boundary():
    # Along the real axis from 2.0 down to the cusp at 0.25.
    m = MandelbrotFractal()
    counts = [m.evaluate(2.0 - k * (1.75 / 40), 0.0, 1000).iterations for k in range(40)]
    assert all(a <= b for a, b in zip(counts, counts[1:]))
    assert counts[-1] > counts[0]


@pytest.mark.parametrize("cls", [MandelbrotFractal, TricornFractal, CelticFractal])
def test_real_axis_symmetry(cls):
    f = cls()
    for x, y in POINTS:
        assert f.evaluate(x, y, 150) == f.evaluate(x, -y, 150)


def test_inverse_origin_is_interior():
    inv = MandelbrotInverseFractal()
    assert inv.evaluate(0.0, 0.0, 77) == Escaped(77)
    assert inv.evaluate(1e-12, -1e-12, 77) == Escaped(77)
    assert inv.evaluate(5e-11, 0.0, 77) == Escaped(77)


def test_inverse_evaluates_mandelbrot_at_reciprocal():
    inv, m = MandelbrotInverseFractal(), MandelbrotFractal()
    for x, y in [(0.3, 0.4), (-2.0, 0.0), (1.5, -0.2), (-0.9, 0.7)]:
        d = x * x + y * y
        assert inv.evaluate(x, y, 120) == m.evaluate(x / d, -y / d, 120)
    # 1 / -2 = -0.5 lies in the main cardioid
    assert inv.evaluate(-2.0, 0.0, 120) == Escaped(120)


def test_sine_variant_uses_large_bailout():
    sine = MandelbrotSineFractal()
    assert sine.evaluate(0.0, 0.0, 64) == Escaped(64)
    # |z1|^2 = 100 is below 400, z2 blows up through sinh(10)
    assert sine.evaluate(0.0, 10.0, 64) == Escaped(2)
    # sin keeps the real axis bounded
    assert sine.evaluate(10.0, 0.0, 64) == Escaped(64)


def test_julia_seeds_z_with_the_point():
    j = JuliaFractal(param=complex(0.0, 0.0))
    # z -> z^2: inside the unit circle never escapes, |z| = 2 escapes at once
    assert j.evaluate(0.5, 0.5, 90) == Escaped(90)
    assert j.evaluate(2.0, 0.0, 90) == Escaped(0)
    assert j.evaluate(1.1, 0.0, 90) == Escaped(
        _reference(UPDATES[MandelbrotFractal], 0.0, 0.0, 90, z0=(1.1, 0.0)))


def test_julia_param_is_instance_data():
    a = JuliaFractal(param=complex(-0.8, 0.156))
    b = JuliaFractal(param=complex(0.285, 0.01))
    results_a = [a.evaluate(x, y, 200) for x, y in POINTS]
    results_b = [b.evaluate(x, y, 200) for x, y in POINTS]
    assert results_a != results_b
    assert results_a == [a.evaluate(x, y, 200) for x, y in POINTS]


@pytest.mark.parametrize("variant_id", [v.id for v in available_variants()])
def test_point_evaluation_is_deterministic(variant_id):
    f = get_variant(variant_id)
    for x, y in POINTS:
        assert f.evaluate(x, y, 250) == f.evaluate(x, y, 250)


@pytest.mark.parametrize("variant_id", [v.id for v in available_variants()])
@pytest.mark.parametrize("x,y", [(1e300, -1e300), (-1e-300, 1e-300), (0.0, 0.0), (1e154, 1e154)])
def test_extreme_points_never_raise(variant_id, x, y):
    result = get_variant(variant_id).evaluate(x, y, 40)
    value = getattr(result, "iterations", getattr(result, "root_index", None))
    assert value is not None and not math.isnan(value)
