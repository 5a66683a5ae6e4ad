from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .exceptions import ErrorKind, NoConvergenceError, NumericalMethodsError
from .typing import FloatArray

__all__ = [
    "IterationRecord",
    "RootResult",
    "OptimizeResult",
    "LinearSolveResult",
]


@dataclass(frozen=True, slots=True)
class IterationRecord:
    iteration: int
    x: float
    f_x: float
    approx_error: float


@dataclass(frozen=True, slots=True)
class RootResult:
    """Outcome of a root-finding call.

    Parameters
    ----------
    root : float
        Last estimate. ``nan`` when the call was rejected before iterating.
    converged : bool
        True when the approximate relative error fell below ``stop_error``
        (or an exact root was hit). False when ``max_iter`` truncated the run.
    iterations : int
        Number of updates performed.
    method : str
        Name of the method that produced the result.
    f_at_root : float
        Function value at ``root`` (for fixed-point iteration: ``g(root) - root``).
    approx_error : float
        Approximate relative error (percent) of the final update.
    bracket : tuple[float, float] | None
        Final bracket for bracketing methods.
    history : tuple[IterationRecord, ...] | None
        Per-iteration trace, only when ``record_history=True``.
    error : NumericalMethodsError | None
        Unraised exception describing a failure, or None on success.
    """

    root: float
    converged: bool
    iterations: int
    method: str
    f_at_root: float = float("nan")
    approx_error: float = float("inf")
    bracket: tuple[float, float] | None = None
    history: tuple[IterationRecord, ...] | None = None
    error: NumericalMethodsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self, *, require_convergence: bool = False) -> float:
        if self.error is not None:
            raise self.error
        if require_convergence and not self.converged:
            raise NoConvergenceError(
                f"{self.method} did not converge within {self.iterations} iterations "
                f"(approx_error={self.approx_error:g}%)."
            )
        return self.root


@dataclass(frozen=True, slots=True)
class OptimizeResult:
    x_opt: float
    f_opt: float
    converged: bool
    iterations: int
    n_evals: int
    method: str = "golden_section"
    approx_error: float = float("inf")
    bracket: tuple[float, float] | None = None
    history: tuple[IterationRecord, ...] | None = None
    error: NumericalMethodsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    def unwrap(self, *, require_convergence: bool = False) -> float:
        if self.error is not None:
            raise self.error
        if require_convergence and not self.converged:
            raise NoConvergenceError(
                f"{self.method} did not converge within {self.iterations} iterations."
            )
        return self.x_opt


@dataclass(frozen=True, slots=True)
class LinearSolveResult:
    """Outcome of a dense linear solve.

    ``x`` is the solution vector (the inverse matrix for
    :func:`~numerical_methods.linalg.lu.invert`). ``d`` holds the intermediate
    vector from forward substitution when the LU path was used.

    In the unchecked (naive) mode a zero pivot is not reported here: ``error``
    stays None and ``x`` carries the propagated inf/NaN values.
    """

    x: FloatArray | None
    determinant: float = float("nan")
    d: FloatArray | None = None
    error: NumericalMethodsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return None if self.error is None else self.error.kind

    @property
    def is_finite(self) -> bool:
        return self.x is not None and bool(np.all(np.isfinite(self.x)))

    def unwrap(self) -> FloatArray:
        if self.error is not None:
            raise self.error
        assert self.x is not None
        return self.x
