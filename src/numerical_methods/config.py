from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DerivativeScheme(str, Enum):
    CENTRAL = "central"
    FORWARD = "forward"
    BACKWARD = "backward"
    LEGACY = "legacy"  # (f(x+h) - f(x-h)) / h, kept for parity with the notebooks


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Stopping rules shared by the iterative solvers.

    ``stop_error`` is a percentage, compared against the approximate relative
    error ``|(x_new - x_old) / x_new| * 100``.
    """

    stop_error: float = 1e-4
    max_iter: int = 100
    record_history: bool = False

    def __post_init__(self) -> None:
        if self.stop_error < 0:
            raise ValueError("stop_error must be >= 0")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")


@dataclass(frozen=True, slots=True)
class DerivativeConfig:
    scheme: DerivativeScheme = DerivativeScheme.CENTRAL
    step: float = 0.01
    check_degeneracy: bool = True

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError("step must be > 0")


@dataclass(frozen=True, slots=True)
class LinearSolveConfig:
    overwrite: bool = False
    check_degeneracy: bool = False


DEFAULT_SOLVER: SolverConfig = SolverConfig()
DEFAULT_DERIVATIVE: DerivativeConfig = DerivativeConfig()
DEFAULT_LINEAR: LinearSolveConfig = LinearSolveConfig()
