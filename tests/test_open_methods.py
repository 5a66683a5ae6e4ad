from __future__ import annotations

import math

import pytest

from numerical_methods import (
    ErrorKind,
    NumericalDegeneracyError,
    ZeroDerivativeError,
    fixed_point,
    newton_raphson,
    secant,
)
from numerical_methods.roots import newton_raphson_step

ROOT_EXP = 0.567143290409784  # root of e^-x - x


def f_exp(x: float) -> float:
    return math.exp(-x) - x


# --- Fixed point -------------------------------------------------------------


def test_fixed_point_reference_iterate() -> None:
    res = fixed_point(lambda x: math.exp(-x), 0, 0.5, 10)
    assert res.root == pytest.approx(0.5648793473910495, rel=1e-12)
    # still oscillating by ~1% after 10 steps
    assert res.iterations == 10
    assert res.converged is False


def test_fixed_point_converges_with_more_iterations() -> None:
    res = fixed_point(lambda x: math.exp(-x), 0.0, 1e-6, 200)
    assert res.converged
    assert res.root == pytest.approx(ROOT_EXP, rel=1e-6)
    assert abs(res.f_at_root) < 1e-6


def test_fixed_point_divergence_is_only_flagged() -> None:
    # |g'(x)| = 3 > 1: iterates run away
    res = fixed_point(lambda x: 3 * x, 1.0, 1e-3, 20)
    assert res.converged is False
    assert res.error is None
    assert res.root == pytest.approx(3.0**20)


# --- Newton-Raphson ----------------------------------------------------------


def test_newton_reference_iterate() -> None:
    res = newton_raphson(f_exp, 0, 0.5, 10)
    assert res.converged
    assert res.root == pytest.approx(0.5671431598525681, rel=1e-9)


def test_newton_tight_tolerance() -> None:
    res = newton_raphson(f_exp, 0.0, 1e-10, 50)
    assert res.converged
    assert res.root == pytest.approx(ROOT_EXP, rel=1e-12)
    assert abs(res.f_at_root) < 1e-12


def test_newton_with_analytic_derivative() -> None:
    res = newton_raphson(lambda x: x**2 - 2, 1.0, 1e-10, 50, df=lambda x: 2 * x)
    assert res.root == pytest.approx(math.sqrt(2), rel=1e-12)


@pytest.mark.parametrize("scheme", ["forward", "backward"])
def test_newton_one_sided_derivative_still_converges(scheme: str) -> None:
    res = newton_raphson(f_exp, 0.0, 1e-8, 50, scheme=scheme)
    assert res.converged
    assert res.root == pytest.approx(ROOT_EXP, rel=1e-8)


def test_newton_step() -> None:
    x1 = newton_raphson_step(lambda x: x * x - 2, 1.0, df=lambda x: 2 * x)
    assert x1 == pytest.approx(1.5)


def test_newton_zero_slope_reported_when_checked() -> None:
    res = newton_raphson(lambda x: x * x - 1, 0.0)
    assert isinstance(res.error, ZeroDerivativeError)
    assert res.error_kind is ErrorKind.NUMERICAL_DEGENERACY
    assert res.converged is False
    assert res.iterations == 0
    assert res.root == 0.0
    with pytest.raises(NumericalDegeneracyError):
        res.unwrap()


def test_newton_overflowing_step_reported_as_zero_slope() -> None:
    with pytest.warns(RuntimeWarning):
        res = newton_raphson(lambda x: 1e300, 1.0, df=lambda x: 1e-300)
    assert isinstance(res.error, ZeroDerivativeError)
    assert res.error_kind is ErrorKind.NUMERICAL_DEGENERACY
    assert res.iterations == 0
    assert res.root == 1.0


def test_newton_zero_slope_propagates_when_unchecked() -> None:
    with pytest.warns(RuntimeWarning):
        res = newton_raphson(lambda x: x * x - 1, 0.0, max_iter=5, check_degeneracy=False)
    assert res.error is None
    assert res.converged is False
    assert not math.isfinite(res.root)


def test_newton_history() -> None:
    res = newton_raphson(f_exp, 0.0, 1e-8, 50, record_history=True)
    assert res.history is not None
    assert len(res.history) == res.iterations
    errors = [r.approx_error for r in res.history]
    # quadratic convergence: the error shrinks monotonically once close
    assert errors[-1] < errors[-2] < errors[-3]


# --- Secant ------------------------------------------------------------------


def test_secant_first_step() -> None:
    res = secant(f_exp, 0.0, 1.0, 0.0, 1)
    assert res.root == pytest.approx(0.61270, abs=1e-5)
    assert res.iterations == 1


def test_secant_converges() -> None:
    res = secant(f_exp, 0.0, 1.0, 1e-8, 50)
    assert res.converged
    assert res.root == pytest.approx(ROOT_EXP, rel=1e-9)


def test_secant_flat_chord_reported() -> None:
    res = secant(lambda x: x * x - 1, -2.0, 2.0)
    assert isinstance(res.error, ZeroDerivativeError)
    assert res.iterations == 0


def test_fixed_point_zero_iterate_does_not_divide() -> None:
    res = fixed_point(lambda x: x - 1, 1.0, 1.0, 1)
    assert res.root == 0.0
    assert math.isinf(res.approx_error)
    assert res.converged is False
