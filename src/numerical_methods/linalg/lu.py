"""LU decomposition (naive, unpivoted) and forward/back substitution.

The factorization is stored in a single matrix: the elimination factors of L
strictly below the diagonal (L has an implicit unit diagonal) and U on and
above it. One decomposition can then be reused for any number of right-hand
sides, which is also how :func:`invert` builds the inverse column by column.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import NumericalMethodsError, ZeroPivotError
from ..results import LinearSolveResult
from ..typing import FloatArray
from .validate import as_float_array, check_rhs, check_square, pivot_tol

__all__ = [
    "LUDecomposition",
    "decompose",
    "substitute",
    "lu_solve",
    "invert",
    "solve_dense_scipy",
]


@dataclass(frozen=True, slots=True)
class LUDecomposition:
    """Combined L/U storage produced by :func:`decompose`.

    ``lu`` is None when the decomposition was rejected (see ``error``).
    """

    lu: FloatArray | None
    error: NumericalMethodsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def n(self) -> int:
        return 0 if self.lu is None else int(self.lu.shape[0])

    def _require(self) -> FloatArray:
        if self.error is not None:
            raise self.error
        assert self.lu is not None
        return self.lu

    def lower(self) -> FloatArray:
        lu = self._require()
        return np.tril(lu, k=-1) + np.eye(lu.shape[0], dtype=lu.dtype)

    def upper(self) -> FloatArray:
        return np.triu(self._require())

    def determinant(self) -> float:
        return float(np.prod(np.diag(self._require())))

    def solve(self, b: ArrayLike, *, overwrite: bool = False) -> LinearSolveResult:
        return substitute(self, b, overwrite=overwrite)

    def inverse(self) -> FloatArray:
        lu = self._require()
        n = lu.shape[0]
        inv = np.empty((n, n), dtype=lu.dtype)
        for j in range(n):
            e_j = np.zeros(n, dtype=lu.dtype)
            e_j[j] = 1.0
            inv[:, j] = substitute(self, e_j, overwrite=True).unwrap()
        return inv


def decompose(
    a: ArrayLike,
    *,
    overwrite: bool = False,
    check_degeneracy: bool = False,
) -> LUDecomposition:
    """
    Factor ``a`` into L and U by Gauss elimination without pivoting.

    With ``overwrite=True`` (and a float64 input) the caller's matrix becomes
    the combined L/U storage. A non-square ``a`` yields a decomposition whose
    ``error`` is a NonSquareMatrixError. With ``check_degeneracy`` a near-zero
    pivot is reported as a ZeroPivotError instead of propagating inf/NaN.
    """
    a = as_float_array(a, overwrite=overwrite)
    err = check_square(a)
    if err is not None:
        return LUDecomposition(lu=None, error=err)

    n = a.shape[0]
    tol = pivot_tol(a.dtype)
    for k in range(n - 1):
        if check_degeneracy and abs(a[k, k]) < tol:
            return LUDecomposition(
                lu=None, error=ZeroPivotError(f"Near-zero pivot at row {k} ({a[k, k]!r})")
            )
        for i in range(k + 1, n):
            factor = a[i, k] / a[k, k]
            a[i, k] = factor
            a[i, k + 1 :] -= factor * a[k, k + 1 :]

    if check_degeneracy and n > 0 and abs(a[n - 1, n - 1]) < tol:
        return LUDecomposition(
            lu=None,
            error=ZeroPivotError(f"Near-zero pivot at row {n - 1} ({a[n - 1, n - 1]!r})"),
        )
    return LUDecomposition(lu=a)


def substitute(
    decomposition: LUDecomposition,
    b: ArrayLike,
    *,
    overwrite: bool = False,
) -> LinearSolveResult:
    """
    Solve ``L U x = b``: forward substitution ``L d = b`` then back
    substitution ``U x = d``.

    A failed decomposition is passed through as the result's ``error``.
    With ``overwrite=True`` the forward pass writes ``d`` into ``b``.
    """
    if decomposition.error is not None:
        return LinearSolveResult(x=None, error=decomposition.error)
    lu = decomposition.lu
    assert lu is not None

    n = lu.shape[0]
    d = as_float_array(b, overwrite=overwrite)
    err = check_rhs(d, n)
    if err is not None:
        return LinearSolveResult(x=None, error=err)

    # forward: unit-diagonal L
    for i in range(1, n):
        d[i] -= lu[i, :i] @ d[:i]

    # backward
    x = np.zeros(n, dtype=np.result_type(lu, d))
    if n > 0:
        x[n - 1] = d[n - 1] / lu[n - 1, n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (d[i] - lu[i, i + 1 :] @ x[i + 1 :]) / lu[i, i]

    return LinearSolveResult(
        x=x,
        d=d,
        determinant=float(np.prod(np.diag(lu))),
    )


def lu_solve(
    a: ArrayLike,
    b: ArrayLike,
    *,
    overwrite: bool = False,
    check_degeneracy: bool = False,
) -> LinearSolveResult:
    """Decompose ``a`` and substitute ``b`` in one call."""
    dec = decompose(a, overwrite=overwrite, check_degeneracy=check_degeneracy)
    return substitute(dec, b, overwrite=overwrite)


def invert(
    a: ArrayLike,
    *,
    check_degeneracy: bool = False,
) -> LinearSolveResult:
    """
    Matrix inverse through LU: one substitution per unit vector.

    ``x`` holds the inverse matrix; column ``j`` solves ``a x_j = e_j``.
    """
    dec = decompose(a, check_degeneracy=check_degeneracy)
    if dec.error is not None:
        return LinearSolveResult(x=None, error=dec.error)
    return LinearSolveResult(x=dec.inverse(), determinant=dec.determinant())


def solve_dense_scipy(a: ArrayLike, b: ArrayLike) -> FloatArray:
    """
    Reference solve with SciPy's pivoted LU. SciPy is imported lazily.

    Raises ValueError on shape mismatches (SciPy's own checks).
    """
    from scipy.linalg import solve  # local import to avoid import-time dependency

    return np.asarray(solve(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))
