from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from ..config import (
    DEFAULT_DERIVATIVE,
    DEFAULT_LINEAR,
    DEFAULT_SOLVER,
    DerivativeConfig,
    LinearSolveConfig,
    SolverConfig,
)
from ..exceptions import InvalidInputError, NumericalDegeneracyError
from ..linalg import LinearMethod, solve_dense_scipy, solve_linear
from ..linalg.validate import check_rhs, check_square
from ..results import OptimizeResult, RootResult
from ..roots import BRACKETING_METHODS, RootMethod, find_root
from ..typing import ScalarFn

__all__ = ["convergence_table", "compare_root_methods", "compare_linear_solvers"]


def convergence_table(result: RootResult | OptimizeResult) -> pd.DataFrame:
    """Per-iteration trace of a solver run as a DataFrame.

    The run must have been made with ``record_history=True``.
    """
    if result.history is None:
        raise ValueError(
            f"{result.method} result has no history; rerun with record_history=True."
        )
    return pd.DataFrame(
        {
            "iteration": [r.iteration for r in result.history],
            "x": [r.x for r in result.history],
            "f_x": [r.f_x for r in result.history],
            "approx_error": [r.approx_error for r in result.history],
        }
    )


def compare_root_methods(
    f: ScalarFn,
    *,
    x_l: float | None = None,
    x_u: float | None = None,
    x0: float | None = None,
    x1: float | None = None,
    config: SolverConfig = DEFAULT_SOLVER,
    derivative_config: DerivativeConfig = DEFAULT_DERIVATIVE,
    methods: Iterable[RootMethod | str] | None = None,
) -> pd.DataFrame:
    """Run several root methods on ``f`` and tabulate the outcomes.

    By default every method whose guesses are available is run: bracketing
    methods need ``x_l``/``x_u``, Newton-Raphson ``x0``, secant ``x0``/``x1``.
    Fixed-point iteration expects ``x = g(x)`` rather than ``f(x) = 0``, so it
    only runs when listed explicitly.
    """
    if methods is None:
        selected: list[RootMethod] = []
        if x_l is not None and x_u is not None:
            selected += sorted(BRACKETING_METHODS, key=lambda m: m.value)
        if x0 is not None:
            selected.append(RootMethod.NEWTON_RAPHSON)
            if x1 is not None:
                selected.append(RootMethod.SECANT)
    else:
        selected = [RootMethod(m) for m in methods]

    rows = []
    for m in selected:
        try:
            res = find_root(
                f,
                m,
                x_l=x_l,
                x_u=x_u,
                x0=x0,
                x1=x1,
                config=config,
                derivative_config=derivative_config,
            )
        except InvalidInputError as e:
            rows.append(
                {
                    "method": m.value,
                    "root": np.nan,
                    "f_at_root": np.nan,
                    "iterations": 0,
                    "converged": False,
                    "error": e.kind.value,
                }
            )
            continue
        rows.append(
            {
                "method": res.method,
                "root": res.root,
                "f_at_root": res.f_at_root,
                "iterations": res.iterations,
                "converged": res.converged,
                "error": None if res.error is None else res.error.kind.value,
            }
        )
    return pd.DataFrame(rows)


def compare_linear_solvers(
    a: ArrayLike,
    b: ArrayLike,
    *,
    config: LinearSolveConfig = DEFAULT_LINEAR,
) -> pd.DataFrame:
    """Solve ``a x = b`` with naive Gauss, LU and SciPy; report residuals.

    Columns: ``solver``, ``max_residual`` (``max |a x - b|``),
    ``max_diff_vs_scipy`` and ``error``. Inputs the library solvers reject are
    not passed to SciPy; its row then carries the same error kind. A matrix
    SciPy finds singular is reported as NumericalDegeneracy.
    """
    A = np.asarray(a, dtype=float)
    rhs = np.asarray(b, dtype=float)

    solved = [
        (name, solve_linear(A.copy(), rhs.copy(), m, config=config))
        for name, m in (("naive_gauss", LinearMethod.GAUSS), ("lu", LinearMethod.LU))
    ]

    x_ref = None
    ref_error = check_square(A)
    if ref_error is None:
        ref_error = check_rhs(rhs, A.shape[0])
    if ref_error is None:
        try:
            x_ref = solve_dense_scipy(A, rhs)
        except np.linalg.LinAlgError as e:
            ref_error = NumericalDegeneracyError(str(e))

    outcomes = [(name, res.x, res.error) for name, res in solved]
    outcomes.append(("scipy", x_ref, ref_error))

    rows = []
    for name, x, err in outcomes:
        if x is None:
            rows.append(
                {
                    "solver": name,
                    "max_residual": np.nan,
                    "max_diff_vs_scipy": np.nan,
                    "error": None if err is None else err.kind.value,
                }
            )
            continue
        rows.append(
            {
                "solver": name,
                "max_residual": float(np.max(np.abs(A @ x - rhs), initial=0.0)),
                "max_diff_vs_scipy": (
                    np.nan if x_ref is None else float(np.max(np.abs(x - x_ref), initial=0.0))
                ),
                "error": None,
            }
        )
    return pd.DataFrame(rows)
