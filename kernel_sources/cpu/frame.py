from numba import njit, prange


def make_escape_frame(point, parallel=True):
    """
    Wrap an escape-time point kernel into a frame kernel.

    ``out`` is an int32 (len(ys), len(xs)) buffer; rows are independent so
    each prange worker writes its own rows only. The serial flavour is for
    callers that already spread stripes over threads.
    """
    @njit(parallel=parallel, nogil=True)
    def _escape_frame(xs, ys, param_x, param_y, max_iter, out):
        H = ys.shape[0]
        W = xs.shape[0]
        for r in prange(H):
            y = ys[r]
            for c in range(W):
                out[r, c] = point(xs[c], y, param_x, param_y, max_iter)

    return _escape_frame


def make_newton_frame(point, parallel=True):
    """Frame kernel for a Newton basin point kernel."""
    @njit(parallel=parallel, nogil=True)
    def _newton_frame(xs, ys, coefficients, roots, tol2, max_steps, out):
        H = ys.shape[0]
        W = xs.shape[0]
        for r in prange(H):
            y = ys[r]
            for c in range(W):
                out[r, c] = point(xs[c], y, coefficients, roots, tol2, max_steps)

    return _newton_frame
