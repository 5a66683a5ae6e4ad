from __future__ import annotations

import math

import pytest

from numerical_methods import (
    ErrorKind,
    NoConvergenceError,
    NotBracketedError,
    bisect,
    false_position,
)
from numerical_methods.roots import false_position_guess


def parachute(c: float) -> float:
    """Drag coefficient giving a 40 m/s velocity after 10 s (68.1 kg jumper)."""
    return 668.06 / c * (1 - math.exp(-0.146843 * c)) - 40


CASES = [
    pytest.param(lambda x: x**2 - 1, 0.0, 3.0, 1.0, id="x^2-1"),
    pytest.param(lambda x: x**3 - 2, 0.0, 2.0, 2 ** (1 / 3), id="cbrt2"),
    pytest.param(lambda x: math.cos(x) - x, 0.0, 1.0, 0.7390851332151607, id="cos-x"),
]


# --- Bisection ---------------------------------------------------------------


def test_bisect_hits_exact_root_on_first_midpoint() -> None:
    res = bisect(lambda x: x**2 - 1, 0, 2, 0.5, 10, 0)
    assert res.root == pytest.approx(1.0)
    assert res.converged is True
    assert res.iterations == 1
    assert res.f_at_root == 0.0
    assert res.ok


@pytest.mark.parametrize("f, x_l, x_u, expected", CASES)
def test_bisect_converges_within_tolerance(f, x_l, x_u, expected) -> None:
    res = bisect(f, x_l, x_u, stop_error=1e-6)
    assert res.converged
    assert res.root == pytest.approx(expected, rel=1e-7)
    lo, hi = res.bracket
    assert lo <= expected <= hi


def test_bisect_parachute_drag() -> None:
    res = bisect(parachute, 12, 16, 14.75, 10, 0.5)
    assert res.converged
    assert 14.7 < res.root < 14.9
    assert abs(parachute(res.root)) < 0.1


def test_bisect_rejects_missing_sign_change() -> None:
    res = bisect(lambda x: x * x + 1, -1.0, 1.0)
    assert not res.ok
    assert isinstance(res.error, NotBracketedError)
    assert res.error_kind is ErrorKind.INVALID_INPUT
    assert math.isnan(res.root)
    assert res.iterations == 0
    with pytest.raises(NotBracketedError):
        res.unwrap()
    with pytest.raises(ValueError):
        res.unwrap()


def test_bisect_endpoint_root_is_not_a_bracket() -> None:
    res = bisect(lambda x: x - 1, 1.0, 2.0)
    assert isinstance(res.error, NotBracketedError)


def test_bisect_iteration_cap_reports_no_convergence() -> None:
    res = bisect(lambda x: math.cos(x) - x, 0.0, 1.0, max_iter=3, stop_error=0.0)
    assert res.converged is False
    assert res.iterations == 3
    assert res.error is None
    assert res.unwrap() == res.root
    with pytest.raises(NoConvergenceError):
        res.unwrap(require_convergence=True)


def test_bisect_history_matches_iterations() -> None:
    res = bisect(lambda x: x**3 - 2, 0.0, 2.0, stop_error=1e-3, record_history=True)
    assert res.history is not None
    assert len(res.history) == res.iterations
    assert [r.iteration for r in res.history] == list(range(1, res.iterations + 1))
    assert res.history[-1].x == res.root
    assert res.history[-1].approx_error < 1e-3


def test_bisect_without_history_by_default() -> None:
    assert bisect(lambda x: x - 0.3, 0.0, 1.0).history is None


# --- False position ----------------------------------------------------------


def test_false_position_quadratic() -> None:
    res = false_position(lambda x: x**2 - 1, 0, 2, x_r=0.5, max_iter=100, stop_error=0)
    assert res.root == pytest.approx(1.0, abs=1e-12)
    assert res.method == "false_position"


@pytest.mark.parametrize("f, x_l, x_u, expected", CASES)
def test_false_position_converges_within_tolerance(f, x_l, x_u, expected) -> None:
    res = false_position(f, x_l, x_u, stop_error=1e-8)
    assert res.converged
    assert res.root == pytest.approx(expected, rel=1e-7)


def test_false_position_guess_is_chord_intercept() -> None:
    assert false_position_guess(lambda x: 2 * x - 3, 0.0, 5.0) == pytest.approx(1.5)


def test_false_position_stagnant_bound_is_relieved() -> None:
    """x^10 - 1 is the classic one-sided case; halving keeps it ahead of bisection."""
    f = lambda x: x**10 - 1  # noqa: E731
    fp = false_position(f, 0.0, 1.3, stop_error=1e-6)
    bi = bisect(f, 0.0, 1.3, stop_error=1e-6)
    assert fp.converged and bi.converged
    assert fp.root == pytest.approx(1.0, rel=1e-6)
    assert fp.iterations < bi.iterations


def test_false_position_rejects_missing_sign_change() -> None:
    res = false_position(lambda x: x**2 + 0.5, -2.0, 2.0)
    assert isinstance(res.error, NotBracketedError)
    assert res.iterations == 0


# --- First iteration and zero iterates ----------------------------------------


@pytest.mark.parametrize("method", [bisect, false_position])
def test_initial_estimate_equal_to_first_step_does_not_stop_early(method) -> None:
    """x_r = 1.0 is both the seed and the first midpoint/chord on [0, 2]."""
    res = method(lambda x: x * x - 2, 0.0, 2.0, 1.0, 100, 1e-8)
    assert res.converged
    assert res.iterations > 1
    assert res.root == pytest.approx(math.sqrt(2), rel=1e-8)
    assert abs(res.f_at_root) < 1e-7


def test_first_iteration_error_is_infinite() -> None:
    res = bisect(lambda x: x * x - 2, 0.0, 2.0, 1.0, 3, 0.0, record_history=True)
    assert res.history is not None
    assert math.isinf(res.history[0].approx_error)
    assert math.isfinite(res.history[1].approx_error)


def test_zero_iterate_keeps_previous_error() -> None:
    # midpoints on [-7, 1]: -3, -1, then exactly 0
    res = bisect(lambda x: x + 0.5, -7.0, 1.0, max_iter=3, stop_error=0.0, record_history=True)
    assert res.history is not None
    assert [r.x for r in res.history] == [-3.0, -1.0, 0.0]
    assert res.history[1].approx_error == pytest.approx(200.0)
    assert res.history[2].approx_error == res.history[1].approx_error
    assert res.converged is False
    assert res.root == 0.0
