"""
Shape checks shared by the Gauss and LU paths, so both report the same
failures for the same inputs.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import InvalidInputError, NonSquareMatrixError
from ..typing import FloatArray


def as_float_array(x: ArrayLike, *, overwrite: bool) -> FloatArray:
    """float64 view of ``x``; copied unless ``overwrite`` and no cast is needed."""
    arr = np.asarray(x)
    dtype = np.result_type(arr, np.float64)
    return arr.astype(dtype, copy=not overwrite)


def check_square(a: FloatArray) -> NonSquareMatrixError | None:
    if a.ndim != 2:
        return NonSquareMatrixError(f"matrix must be 2D, got ndim={a.ndim}")
    rows, cols = a.shape
    if rows != cols:
        return NonSquareMatrixError(f"matrix must be square, got shape {a.shape}")
    return None


def check_rhs(b: FloatArray, n: int) -> InvalidInputError | None:
    if b.shape != (n,):
        return InvalidInputError(f"b must have shape {(n,)} got {b.shape}")
    return None


def pivot_tol(dtype: np.dtype) -> float:
    return float(100.0 * np.finfo(dtype).eps)
