from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from .._iteration import History, approx_relative_error
from ..config import DerivativeScheme
from ..derivative import derivative
from ..exceptions import ZeroDerivativeError
from ..results import RootResult
from ..typing import ScalarFn

__all__ = ["fixed_point", "newton_raphson", "newton_raphson_step", "secant"]


def _naive_div(num: float, den: float) -> float:
    # float64 division: a zero denominator yields inf/nan (with numpy's RuntimeWarning)
    return float(np.float64(num) / np.float64(den))


def fixed_point(
    g: ScalarFn,
    x0: float,
    stop_error: float = 1e-4,
    max_iter: int = 100,
    *,
    record_history: bool = False,
) -> RootResult:
    """Simple fixed-point iteration ``x_{i+1} = g(x_i)``.

    ``g`` is a rearrangement of ``f(x) = 0`` into ``x = g(x)``. The iteration
    only converges when ``|g'(x)| < 1`` near the root; divergence is not
    detected, so check ``converged`` (and ``f_at_root``) on the result.
    ``f_at_root`` is the residual ``g(root) - root``.
    """
    x_r = x0
    e_a = math.inf
    history = History(record_history)
    converged = False
    it = 0

    for it in range(1, max_iter + 1):
        x_r_old = x_r
        x_r = g(x_r_old)
        e_a = approx_relative_error(x_r, x_r_old, e_a)
        history.add(it, x_r, x_r - x_r_old, e_a)
        if e_a < stop_error:
            converged = True
            break

    return RootResult(
        root=x_r,
        converged=converged,
        iterations=it,
        method="fixed_point",
        f_at_root=g(x_r) - x_r,
        approx_error=e_a,
        history=history.freeze(),
    )


def newton_raphson_step(
    f: ScalarFn,
    x: float,
    *,
    df: Callable[[float], float] | None = None,
    scheme: DerivativeScheme | str = DerivativeScheme.CENTRAL,
    step: float = 0.01,
) -> float:
    """One Newton-Raphson update ``x - f(x) / f'(x)`` (no zero-slope guard)."""
    dfx = df(x) if df is not None else derivative(f, x, scheme, step)
    return x - _naive_div(f(x), dfx)


def newton_raphson(
    f: ScalarFn,
    x0: float,
    stop_error: float = 1e-4,
    max_iter: int = 100,
    *,
    df: Callable[[float], float] | None = None,
    scheme: DerivativeScheme | str = DerivativeScheme.CENTRAL,
    step: float = 0.01,
    check_degeneracy: bool = True,
    record_history: bool = False,
) -> RootResult:
    """Newton-Raphson iteration.

    Parameters
    ----------
    f : callable
        Function whose root is sought.
    x0 : float
        Initial guess.
    stop_error : float
        Stopping threshold on the approximate relative error, in percent.
    max_iter : int
        Iteration cap.
    df : callable, optional
        Analytic derivative. When omitted, :func:`numerical_methods.derivative`
        is used with ``scheme`` and ``step``.
    check_degeneracy : bool
        When True, a zero slope or a non-finite iterate stops the iteration and
        the result carries a :class:`ZeroDerivativeError`. When False, the
        division is carried out in float64 and inf/NaN propagate into later
        iterates.
    """
    x_r = x0
    e_a = math.inf
    history = History(record_history)
    converged = False
    it = 0

    for it in range(1, max_iter + 1):
        x_r_old = x_r
        fx = f(x_r_old)
        dfx = df(x_r_old) if df is not None else derivative(f, x_r_old, scheme, step)

        if check_degeneracy and dfx == 0:
            return RootResult(
                root=x_r_old,
                converged=False,
                iterations=it - 1,
                method="newton_raphson",
                f_at_root=fx,
                approx_error=e_a,
                history=history.freeze(),
                error=ZeroDerivativeError(
                    f"Newton-Raphson hit a zero slope at x={x_r_old:g}."
                ),
            )

        x_r = x_r_old - _naive_div(fx, dfx)

        if check_degeneracy and not math.isfinite(x_r):
            return RootResult(
                root=x_r_old,
                converged=False,
                iterations=it - 1,
                method="newton_raphson",
                f_at_root=fx,
                approx_error=e_a,
                history=history.freeze(),
                error=ZeroDerivativeError(
                    f"Newton-Raphson produced a non-finite iterate from x={x_r_old:g} "
                    f"(slope {dfx:g} too small)."
                ),
            )

        e_a = approx_relative_error(x_r, x_r_old, e_a)
        history.add(it, x_r, fx, e_a)
        if e_a < stop_error:
            converged = True
            break

    return RootResult(
        root=x_r,
        converged=converged,
        iterations=it,
        method="newton_raphson",
        f_at_root=f(x_r),
        approx_error=e_a,
        history=history.freeze(),
    )


def secant(
    f: ScalarFn,
    x0: float,
    x1: float,
    stop_error: float = 1e-4,
    max_iter: int = 100,
    *,
    check_degeneracy: bool = True,
    record_history: bool = False,
) -> RootResult:
    """Secant method.

    Newton-Raphson with the derivative replaced by the backward divided
    difference through the last two iterates::

        x_{i+1} = x_i - f(x_i) (x_{i-1} - x_i) / (f(x_{i-1}) - f(x_i))

    Needs two starting values that do not have to bracket the root, and can
    diverge like any open method.
    """
    x_prev, x_r = x0, x1
    f_prev, f_r = f(x_prev), f(x_r)
    e_a = math.inf
    history = History(record_history)
    converged = False
    it = 0

    for it in range(1, max_iter + 1):
        denom = f_prev - f_r
        if check_degeneracy and denom == 0:
            return RootResult(
                root=x_r,
                converged=False,
                iterations=it - 1,
                method="secant",
                f_at_root=f_r,
                approx_error=e_a,
                history=history.freeze(),
                error=ZeroDerivativeError(
                    f"Secant slope vanished between x={x_prev:g} and x={x_r:g}."
                ),
            )

        x_new = x_r - _naive_div(f_r * (x_prev - x_r), denom)
        e_a = approx_relative_error(x_new, x_r, e_a)
        x_prev, f_prev = x_r, f_r
        x_r = x_new
        f_r = f(x_r)

        history.add(it, x_r, f_r, e_a)
        if e_a < stop_error:
            converged = True
            break

    return RootResult(
        root=x_r,
        converged=converged,
        iterations=it,
        method="secant",
        f_at_root=f_r,
        approx_error=e_a,
        history=history.freeze(),
    )
