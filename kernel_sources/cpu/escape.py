import math
from numba import njit

from kernel_sources.registry import register_kernel
from kernel_sources.cpu.frame import make_escape_frame

# Point kernels share one signature so a single frame factory fits them all:
#   (x, y, param_x, param_y, max_iter) -> iterations
# Non-Julia variants ignore the param pair. The bounded test runs before
# every update; NaN magnitudes fail it and count as escaped.

BAILOUT = 4.0
SINE_BAILOUT = 400.0
INVERSE_EPS2 = 1e-20   # |c| < 1e-10


@njit(cache=True, nogil=True)
def mandelbrot_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = 2.0*zr*zi + y
        zr = zr*zr - zi*zi + x
        zi = zi2
        n += 1
    return n


@njit(cache=True, nogil=True)
def tricorn_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = -2.0*zr*zi + y
        zr = zr*zr - zi*zi + x
        zi = zi2
        n += 1
    return n


@njit(cache=True, nogil=True)
def burning_ship_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = 2.0*abs(zr*zi) + y
        zr = zr*zr - zi*zi + x
        zi = zi2
        n += 1
    return n


@njit(cache=True, nogil=True)
def celtic_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = 2.0*zr*zi + y
        zr = abs(zr*zr - zi*zi) + x
        zi = zi2
        n += 1
    return n


@njit(cache=True, nogil=True)
def buffalo_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = 2.0*abs(zr*zi) + y
        zr = abs(zr*zr - zi*zi) + x
        zi = zi2
        n += 1
    return n


@njit(cache=True, nogil=True)
def mandelbrot_sine_point(x, y, param_x, param_y, max_iter):
    zr = 0.0
    zi = 0.0
    n = 0
    while n < max_iter and zr*zr + zi*zi < SINE_BAILOUT:
        zr2 = math.sin(zr)*math.cosh(zi) + x
        zi = math.cos(zr)*math.sinh(zi) + y
        zr = zr2
        n += 1
    return n


@njit(cache=True, nogil=True)
def mandelbrot_inverse_point(x, y, param_x, param_y, max_iter):
    m = x*x + y*y
    if m < INVERSE_EPS2:
        return max_iter
    return mandelbrot_point(x / m, -y / m, param_x, param_y, max_iter)


@njit(cache=True, nogil=True)
def julia_point(x, y, param_x, param_y, max_iter):
    zr = x
    zi = y
    n = 0
    while n < max_iter and zr*zr + zi*zi < BAILOUT:
        zi2 = 2.0*zr*zi + param_y
        zr = zr*zr - zi*zi + param_x
        zi = zi2
        n += 1
    return n


_POINT_KERNELS = {
    "mandelbrot": mandelbrot_point,
    "mandelbrot_sine": mandelbrot_sine_point,
    "mandelbrot_inverse": mandelbrot_inverse_point,
    "tricorn": tricorn_point,
    "julia": julia_point,
    "burning_ship": burning_ship_point,
    "celtic": celtic_point,
    "buffalo": buffalo_point,
}

for _name, _point in _POINT_KERNELS.items():
    register_kernel(_name, "point", func=_point, family="escape")
    register_kernel(_name, "frame", func=make_escape_frame(_point), family="escape")
    register_kernel(_name, "frame_serial", func=make_escape_frame(_point, parallel=False),
                    family="escape")
