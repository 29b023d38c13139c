from numba import njit

from kernel_sources.registry import register_kernel
from kernel_sources.cpu.frame import make_newton_frame


@njit(cache=True, nogil=True)
def newton_point(x, y, coefficients, roots, tol2, max_steps):
    """
    Newton-Raphson basin index of the point (x, y).

    ``coefficients`` are highest degree first; p and p' come from one Horner
    pass. Returns j + 1 for the first root within sqrt(tol2) after a step,
    0 on a zero derivative or when the step budget runs out.
    """
    z = complex(x, y)
    n = coefficients.shape[0]
    for _ in range(max_steps):
        p = coefficients[0]
        dp = 0j
        for k in range(1, n):
            dp = dp*z + p
            p = p*z + coefficients[k]
        d2 = dp.real*dp.real + dp.imag*dp.imag
        if d2 == 0.0:
            return 0
        z = z - p / dp
        for j in range(roots.shape[0]):
            dr = z.real - roots[j].real
            di = z.imag - roots[j].imag
            if dr*dr + di*di < tol2:
                return j + 1
    return 0


register_kernel("newton", "point", func=newton_point, family="root")
register_kernel("newton", "frame", func=make_newton_frame(newton_point), family="root")
register_kernel("newton", "frame_serial",
                func=make_newton_frame(newton_point, parallel=False), family="root")
