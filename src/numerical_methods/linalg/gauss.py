from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import ZeroPivotError
from ..results import LinearSolveResult
from ..typing import FloatArray
from .validate import as_float_array, check_rhs, check_square, pivot_tol

__all__ = ["forward_elimination", "back_substitution", "naive_gauss"]


def _zero_pivot(u: FloatArray, k: int) -> ZeroPivotError | None:
    if abs(u[k, k]) < pivot_tol(u.dtype):
        return ZeroPivotError(f"Near-zero pivot at row {k} ({u[k, k]!r})")
    return None


def forward_elimination(
    a: FloatArray, b: FloatArray, *, check_degeneracy: bool = False
) -> ZeroPivotError | None:
    """
    Reduce ``a`` to upper-triangular form in place, applying the same row
    operations to ``b``.

    Entries below the diagonal are left as they were; only the upper triangle
    of ``a`` is meaningful afterwards. No pivoting: a zero pivot yields inf/NaN
    unless ``check_degeneracy`` is set, in which case elimination stops and the
    offending pivot is returned as a :class:`ZeroPivotError`.
    """
    n = a.shape[0]
    for k in range(n - 1):
        if check_degeneracy:
            err = _zero_pivot(a, k)
            if err is not None:
                return err
        for i in range(k + 1, n):
            factor = a[i, k] / a[k, k]
            a[i, k + 1 :] -= factor * a[k, k + 1 :]
            b[i] -= factor * b[k]
    return None


def back_substitution(u: FloatArray, d: FloatArray) -> FloatArray:
    """Solve the upper-triangular system ``u x = d`` bottom-up."""
    n = u.shape[0]
    x = np.zeros(n, dtype=np.result_type(u, d))
    if n == 0:
        return x
    x[n - 1] = d[n - 1] / u[n - 1, n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (d[i] - u[i, i + 1 :] @ x[i + 1 :]) / u[i, i]
    return x


def naive_gauss(
    a: ArrayLike,
    b: ArrayLike,
    *,
    overwrite: bool = False,
    check_degeneracy: bool = False,
) -> LinearSolveResult:
    """
    Solve ``a x = b`` by naive Gauss elimination.

    Parameters
    ----------
    a : array_like, shape (n, n)
        Coefficient matrix.
    b : array_like, shape (n,)
        Right-hand side.
    overwrite : bool
        When False (default) ``a`` and ``b`` are copied first and never
        modified. When True and they are already float64 arrays, elimination
        runs in place: ``a`` ends up holding U in its upper triangle and ``b``
        the eliminated right-hand side.
    check_degeneracy : bool
        Report a near-zero pivot as a :class:`ZeroPivotError` result instead of
        letting inf/NaN propagate.

    Returns
    -------
    LinearSolveResult
        ``x`` is a freshly allocated solution vector. A non-square ``a`` or a
        mismatched ``b`` gives a result with an InvalidInput ``error`` and
        ``x=None``.
    """
    a = as_float_array(a, overwrite=overwrite)
    err = check_square(a)
    if err is not None:
        return LinearSolveResult(x=None, error=err)
    b = as_float_array(b, overwrite=overwrite)
    n = a.shape[0]
    err = check_rhs(b, n)
    if err is not None:
        return LinearSolveResult(x=None, error=err)

    err = forward_elimination(a, b, check_degeneracy=check_degeneracy)
    if err is None and check_degeneracy and n > 0:
        err = _zero_pivot(a, n - 1)
    if err is not None:
        return LinearSolveResult(x=None, determinant=0.0, error=err)

    x = back_substitution(a, b)
    return LinearSolveResult(x=x, determinant=float(np.prod(np.diag(a))))
