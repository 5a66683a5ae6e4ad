from __future__ import annotations

import math

from .._iteration import History, approx_relative_error
from ..exceptions import NotBracketedError
from ..results import RootResult
from ..typing import ScalarFn

__all__ = ["bisect", "false_position", "false_position_guess"]


def _not_bracketed(method: str, x_l: float, x_u: float, f_l: float, f_u: float) -> RootResult:
    return RootResult(
        root=math.nan,
        converged=False,
        iterations=0,
        method=method,
        bracket=(x_l, x_u),
        error=NotBracketedError(
            f"{method} requires f(x_l) and f(x_u) to have opposite signs "
            f"(f({x_l:g})={f_l:g}, f({x_u:g})={f_u:g})."
        ),
    )


def bisect(
    f: ScalarFn,
    x_l: float,
    x_u: float,
    x_r: float | None = None,
    max_iter: int = 100,
    stop_error: float = 1e-4,
    *,
    record_history: bool = False,
) -> RootResult:
    """Bisection method.

    Parameters
    ----------
    f : callable
        Continuous function with a sign change on ``[x_l, x_u]``.
    x_l, x_u : float
        Lower and upper bounds of the bracket.
    x_r : float, optional
        Initial estimate, returned only if no iteration runs. The first
        midpoint has no previous iterate, so its approximate error is
        infinite and convergence is never declared on iteration 1 (an exact
        root still stops immediately).
    max_iter : int
        Iteration cap.
    stop_error : float
        Stopping threshold on the approximate relative error, in percent.

    Returns
    -------
    RootResult
        ``error`` is a :class:`~numerical_methods.exceptions.NotBracketedError`
        when ``f(x_l) * f(x_u) >= 0``; no iteration is performed in that case.
    """
    f_l = f(x_l)
    f_u = f(x_u)
    if f_l * f_u >= 0:
        return _not_bracketed("bisection", x_l, x_u, f_l, f_u)

    x_r = x_l if x_r is None else x_r
    f_r = math.nan
    e_a = math.inf
    history = History(record_history)

    for it in range(1, max_iter + 1):
        x_r_old = x_r
        x_r = (x_l + x_u) / 2
        f_r = f(x_r)
        if it > 1:
            e_a = approx_relative_error(x_r, x_r_old, e_a)

        test = f_l * f_r
        if test < 0:
            x_u = x_r
        elif test > 0:
            x_l = x_r
            f_l = f_r
        else:
            e_a = 0.0

        history.add(it, x_r, f_r, e_a)

        if test == 0 or e_a < stop_error:
            return RootResult(
                root=x_r,
                converged=True,
                iterations=it,
                method="bisection",
                f_at_root=f_r,
                approx_error=e_a,
                bracket=(x_l, x_u),
                history=history.freeze(),
            )

    return RootResult(
        root=x_r,
        converged=False,
        iterations=max_iter,
        method="bisection",
        f_at_root=f_r,
        approx_error=e_a,
        bracket=(x_l, x_u),
        history=history.freeze(),
    )


def false_position_guess(f: ScalarFn, x_l: float, x_u: float) -> float:
    """x-intercept of the chord joining (x_l, f(x_l)) and (x_u, f(x_u))."""
    f_u = f(x_u)
    return x_u - f_u * (x_l - x_u) / (f(x_l) - f_u)


def false_position(
    f: ScalarFn,
    x_l: float,
    x_u: float,
    x_r: float | None = None,
    max_iter: int = 100,
    stop_error: float = 1e-4,
    *,
    record_history: bool = False,
) -> RootResult:
    """Modified false-position method.

    Same bracket contract and stopping rule as :func:`bisect`, but the new
    estimate is the chord's x-intercept. A bound that stays fixed for two
    consecutive iterations has its stored function value halved, which pulls
    the next chord towards it (Illinois modification).
    """
    f_l = f(x_l)
    f_u = f(x_u)
    if f_l * f_u >= 0:
        return _not_bracketed("false_position", x_l, x_u, f_l, f_u)

    x_r = x_l if x_r is None else x_r
    f_r = math.nan
    e_a = math.inf
    i_l = 0
    i_u = 0
    history = History(record_history)

    for it in range(1, max_iter + 1):
        x_r_old = x_r
        x_r = x_u - f_u * (x_l - x_u) / (f_l - f_u)
        f_r = f(x_r)
        if it > 1:
            e_a = approx_relative_error(x_r, x_r_old, e_a)

        test = f_l * f_r
        if test < 0:
            x_u = x_r
            f_u = f_r
            i_u = 0
            i_l += 1
            if i_l >= 2:
                f_l /= 2
        elif test > 0:
            x_l = x_r
            f_l = f_r
            i_l = 0
            i_u += 1
            if i_u >= 2:
                f_u /= 2
        else:
            e_a = 0.0

        history.add(it, x_r, f_r, e_a)

        if test == 0 or e_a < stop_error:
            return RootResult(
                root=x_r,
                converged=True,
                iterations=it,
                method="false_position",
                f_at_root=f_r,
                approx_error=e_a,
                bracket=(x_l, x_u),
                history=history.freeze(),
            )

    return RootResult(
        root=x_r,
        converged=False,
        iterations=max_iter,
        method="false_position",
        f_at_root=f_r,
        approx_error=e_a,
        bracket=(x_l, x_u),
        history=history.freeze(),
    )
