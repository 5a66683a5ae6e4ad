"""One-dimensional unconstrained optimization by golden-section search."""

from __future__ import annotations

import math
import operator

from ._iteration import History
from .exceptions import InvalidInputError
from .results import OptimizeResult
from .typing import Comparator, ScalarFn

__all__ = ["GOLDEN_RATIO", "gold"]

GOLDEN_RATIO: float = (math.sqrt(5.0) - 1.0) / 2.0


def gold(
    x_l: float,
    x_u: float,
    max_iter: int,
    stop_error: float,
    f: ScalarFn,
    comp: Comparator = operator.gt,
    *,
    record_history: bool = False,
) -> OptimizeResult:
    """Golden-section search on ``[x_l, x_u]``.

    Parameters
    ----------
    x_l, x_u : float
        Search interval, ``x_l < x_u``.
    max_iter : int
        Iteration cap.
    stop_error : float
        Stopping threshold (percent) on ``(1 - R) |(x_u - x_l) / x_opt| * 100``.
    f : callable
        Objective, assumed unimodal on the interval.
    comp : callable
        ``comp(f_a, f_b)`` is True when ``f_a`` is the better value.
        ``operator.gt`` (default) searches for a maximum, ``operator.lt`` for
        a minimum.

    Returns
    -------
    OptimizeResult
        ``x_opt`` is the best interior point found, not a bracket.

    Notes
    -----
    The two interior points sit at ``x_l + d`` and ``x_u - d`` with
    ``d = R (x_u - x_l)``. After each narrowing one of them becomes the other
    interior point of the new interval, so the objective is evaluated twice up
    front and then exactly once per iteration (``n_evals == 2 + iterations``).
    """
    if not x_l < x_u:
        return OptimizeResult(
            x_opt=math.nan,
            f_opt=math.nan,
            converged=False,
            iterations=0,
            n_evals=0,
            bracket=(x_l, x_u),
            error=InvalidInputError(f"gold requires x_l < x_u (got {x_l:g}, {x_u:g})."),
        )

    R = GOLDEN_RATIO
    d = R * (x_u - x_l)
    x_1 = x_l + d
    x_2 = x_u - d
    f_1 = f(x_1)
    f_2 = f(x_2)
    n_evals = 2

    if comp(f_1, f_2):
        x_opt, f_x = x_1, f_1
    else:
        x_opt, f_x = x_2, f_2

    e_a = math.inf
    history = History(record_history)
    converged = False
    it = 0

    for it in range(1, max_iter + 1):
        d = R * d
        x_int = x_u - x_l

        if comp(f_1, f_2):
            x_l = x_2
            x_2 = x_1
            x_1 = x_l + d
            f_2 = f_1
            f_1 = f(x_1)
        else:
            x_u = x_1
            x_1 = x_2
            x_2 = x_u - d
            f_1 = f_2
            f_2 = f(x_2)
        n_evals += 1

        # the optimum only moves when the upper interior point wins
        if comp(f_1, f_2):
            x_opt, f_x = x_1, f_1

        if x_opt != 0:
            e_a = (1.0 - R) * abs(x_int / x_opt) * 100.0

        history.add(it, x_opt, f_x, e_a)
        if e_a < stop_error:
            converged = True
            break

    return OptimizeResult(
        x_opt=x_opt,
        f_opt=f_x,
        converged=converged,
        iterations=it,
        n_evals=n_evals,
        approx_error=e_a,
        bracket=(x_l, x_u),
        history=history.freeze(),
    )
