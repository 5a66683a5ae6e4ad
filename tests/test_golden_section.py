from __future__ import annotations

import math
import operator

import pytest

from numerical_methods import InvalidInputError, gold
from numerical_methods.optimize import GOLDEN_RATIO


def f(x: float) -> float:
    return 2 * math.sin(x) - x**2 / 10


class CountingFn:
    def __init__(self, fn) -> None:
        self.fn = fn
        self.calls: list[float] = []

    def __call__(self, x: float) -> float:
        self.calls.append(x)
        return self.fn(x)


def test_golden_ratio_value() -> None:
    assert GOLDEN_RATIO == pytest.approx(0.6180339887498949)


def test_gold_reference_maximum() -> None:
    res = gold(0, 4, 8, 0.01, f)
    assert res.x_opt == pytest.approx(1.4427190999915878, rel=1e-9)
    assert res.f_opt == pytest.approx(f(res.x_opt))
    assert res.iterations == 8
    assert res.converged is False


def test_gold_minimum_of_negated_objective_matches() -> None:
    res = gold(0, 4, 8, 0.01, lambda x: -f(x), operator.lt)
    assert res.x_opt == pytest.approx(1.4427190999915878, rel=1e-9)


def test_gold_converges_near_true_maximum() -> None:
    res = gold(0, 4, 100, 1e-4, f)
    assert res.converged
    # f'(x) = 2 cos x - x/5 = 0 at x ~ 1.4276
    assert res.x_opt == pytest.approx(1.4275517787, abs=1e-3)
    assert res.f_opt == pytest.approx(1.7757, abs=1e-4)


@pytest.mark.parametrize("max_iter", [1, 5, 20])
def test_one_new_evaluation_per_iteration(max_iter: int) -> None:
    fn = CountingFn(f)
    res = gold(0, 4, max_iter, 0.0, fn)
    assert res.iterations == max_iter
    assert res.n_evals == len(fn.calls) == 2 + max_iter
    assert len(set(fn.calls)) == len(fn.calls)


def test_gold_minimum_with_less_than() -> None:
    res = gold(0.0, 5.0, 100, 1e-3, lambda x: (x - 2.0) ** 2 + 1.0, operator.lt)
    lo, hi = res.bracket
    assert lo <= 2.0 <= hi
    assert hi - lo < 1e-3
    assert res.x_opt == pytest.approx(2.0, abs=0.05)


def test_gold_rejects_empty_interval() -> None:
    res = gold(4, 0, 8, 0.01, f)
    assert not res.ok
    assert res.n_evals == 0
    with pytest.raises(InvalidInputError):
        res.unwrap()


def test_gold_history() -> None:
    res = gold(0, 4, 8, 0.01, f, record_history=True)
    assert res.history is not None
    assert len(res.history) == 8
    assert res.history[-1].x == res.x_opt
