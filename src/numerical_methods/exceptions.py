from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by the solvers.

    Attributes
    ----------
    INVALID_INPUT : str
        A precondition was violated (no sign change, non-square matrix, ...).
    NUMERICAL_DEGENERACY : str
        The algorithm hit a zero pivot or a zero slope.
    NO_CONVERGENCE : str
        The iteration cap was reached before the stopping error was met.
    """

    INVALID_INPUT = "InvalidInput"
    NUMERICAL_DEGENERACY = "NumericalDegeneracy"
    NO_CONVERGENCE = "NoConvergence"


class NumericalMethodsError(Exception):
    """Base class for solver failures."""

    kind: ErrorKind


class InvalidInputError(NumericalMethodsError, ValueError):
    """Raised (or returned inside a result) when a precondition is violated."""

    kind = ErrorKind.INVALID_INPUT


class NotBracketedError(InvalidInputError):
    """f(x_l) and f(x_u) do not have opposite signs."""


class NonSquareMatrixError(InvalidInputError):
    """A linear solver received a matrix that is not square."""


class NumericalDegeneracyError(NumericalMethodsError, ArithmeticError):
    """Base class for zero pivots and zero slopes."""

    kind = ErrorKind.NUMERICAL_DEGENERACY


class ZeroPivotError(NumericalDegeneracyError):
    """Elimination reached a (near-)zero pivot."""


class ZeroDerivativeError(NumericalDegeneracyError):
    """An open method cannot proceed due to a zero slope."""


class NoConvergenceError(NumericalMethodsError):
    """Raised by ``unwrap(require_convergence=True)`` on a truncated iteration."""

    kind = ErrorKind.NO_CONVERGENCE
