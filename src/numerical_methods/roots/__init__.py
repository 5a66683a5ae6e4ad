"""
Root finders.

Bracketing methods (bisection, false position) need two guesses whose function
values differ in sign. Open methods (fixed point, Newton-Raphson, secant) need
one or two starting values and may diverge.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from ..config import (
    DEFAULT_DERIVATIVE,
    DEFAULT_SOLVER,
    DerivativeConfig,
    SolverConfig,
)
from ..exceptions import InvalidInputError
from ..results import RootResult
from ..typing import ScalarFn
from .bracketing import bisect, false_position, false_position_guess
from .open_methods import fixed_point, newton_raphson, newton_raphson_step, secant

__all__ = [
    "RootMethod",
    "get_root_method",
    "find_root",
    "bisect",
    "false_position",
    "false_position_guess",
    "fixed_point",
    "newton_raphson",
    "newton_raphson_step",
    "secant",
]


class RootMethod(str, Enum):
    BISECTION = "bisection"
    FALSE_POSITION = "false_position"
    FIXED_POINT = "fixed_point"
    NEWTON_RAPHSON = "newton_raphson"
    SECANT = "secant"


_ROOT_METHODS: dict[RootMethod, Callable[..., RootResult]] = {
    RootMethod.BISECTION: bisect,
    RootMethod.FALSE_POSITION: false_position,
    RootMethod.FIXED_POINT: fixed_point,
    RootMethod.NEWTON_RAPHSON: newton_raphson,
    RootMethod.SECANT: secant,
}

BRACKETING_METHODS = frozenset({RootMethod.BISECTION, RootMethod.FALSE_POSITION})


def _as_method(method: RootMethod | str) -> RootMethod:
    try:
        return RootMethod(method)
    except ValueError:
        valid = ", ".join(m.value for m in RootMethod)
        raise ValueError(f"Unknown root method {method!r}; expected one of: {valid}") from None


def get_root_method(method: RootMethod | str) -> Callable[..., RootResult]:
    return _ROOT_METHODS[_as_method(method)]


def _require(method: RootMethod, **guesses: float | None) -> None:
    missing = [name for name, value in guesses.items() if value is None]
    if missing:
        raise InvalidInputError(f"{method.value} requires {', '.join(missing)}.")


def find_root(
    f: ScalarFn,
    method: RootMethod | str = RootMethod.BISECTION,
    *,
    x_l: float | None = None,
    x_u: float | None = None,
    x0: float | None = None,
    x1: float | None = None,
    config: SolverConfig = DEFAULT_SOLVER,
    derivative_config: DerivativeConfig = DEFAULT_DERIVATIVE,
) -> RootResult:
    """
    Dispatch to a root method with a shared :class:`SolverConfig`.

    - bisection / false_position: ``x_l``, ``x_u`` (``x0`` is ignored)
    - fixed_point: ``x0``; ``f`` is the rearranged ``g`` with ``x = g(x)``
    - newton_raphson: ``x0``; derivative settings from ``derivative_config``
    - secant: ``x0``, ``x1``

    Raises
    ------
    ValueError
        Unknown ``method``.
    InvalidInputError
        A guess required by ``method`` is missing.
    """
    m = _as_method(method)
    fn = _ROOT_METHODS[m]

    common: dict[str, Any] = {
        "max_iter": config.max_iter,
        "stop_error": config.stop_error,
        "record_history": config.record_history,
    }

    if m in BRACKETING_METHODS:
        _require(m, x_l=x_l, x_u=x_u)
        return fn(f, x_l, x_u, **common)
    if m is RootMethod.FIXED_POINT:
        _require(m, x0=x0)
        return fn(f, x0, **common)
    if m is RootMethod.NEWTON_RAPHSON:
        _require(m, x0=x0)
        return fn(
            f,
            x0,
            scheme=derivative_config.scheme,
            step=derivative_config.step,
            check_degeneracy=derivative_config.check_degeneracy,
            **common,
        )
    _require(m, x0=x0, x1=x1)
    return fn(f, x0, x1, check_degeneracy=derivative_config.check_degeneracy, **common)
