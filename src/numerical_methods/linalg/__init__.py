"""
Dense linear systems: naive Gauss elimination and LU decomposition.

Neither path pivots or scales. Use diagonally dominant systems, or pass
``check_degeneracy=True`` to have zero pivots reported instead of propagated.
"""

from __future__ import annotations

from enum import Enum

from numpy.typing import ArrayLike

from ..config import DEFAULT_LINEAR, LinearSolveConfig
from ..results import LinearSolveResult
from .gauss import back_substitution, forward_elimination, naive_gauss
from .lu import (
    LUDecomposition,
    decompose,
    invert,
    lu_solve,
    solve_dense_scipy,
    substitute,
)

__all__ = [
    # Gauss
    "naive_gauss",
    "forward_elimination",
    "back_substitution",
    # LU
    "LUDecomposition",
    "decompose",
    "substitute",
    "lu_solve",
    "invert",
    "solve_dense_scipy",
    # Dispatch
    "LinearMethod",
    "solve_linear",
]


class LinearMethod(str, Enum):
    GAUSS = "gauss"
    LU = "lu"


def solve_linear(
    a: ArrayLike,
    b: ArrayLike,
    method: LinearMethod | str = LinearMethod.GAUSS,
    *,
    config: LinearSolveConfig = DEFAULT_LINEAR,
) -> LinearSolveResult:
    """
    Solve ``a x = b`` with the ownership and degeneracy settings of ``config``.

    Raises
    ------
    ValueError
        Unknown ``method``.
    """
    try:
        m = LinearMethod(method)
    except ValueError:
        valid = ", ".join(lm.value for lm in LinearMethod)
        raise ValueError(f"Unknown linear method {method!r}; expected one of: {valid}") from None

    solver = naive_gauss if m is LinearMethod.GAUSS else lu_solve
    return solver(a, b, overwrite=config.overwrite, check_degeneracy=config.check_degeneracy)
