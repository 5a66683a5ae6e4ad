"""
numerical_methods

Classical numerical-analysis routines: bracketing and open root finders,
golden-section search, naive Gauss elimination and LU decomposition.

The everyday API is re-exported here, so you can write, for example:

    from numerical_methods import bisect, naive_gauss
"""

from .config import DerivativeConfig, DerivativeScheme, LinearSolveConfig, SolverConfig
from .derivative import derivative
from .exceptions import (
    ErrorKind,
    InvalidInputError,
    NoConvergenceError,
    NonSquareMatrixError,
    NotBracketedError,
    NumericalDegeneracyError,
    NumericalMethodsError,
    ZeroDerivativeError,
    ZeroPivotError,
)
from .linalg import (
    LinearMethod,
    decompose,
    invert,
    lu_solve,
    naive_gauss,
    solve_linear,
    substitute,
)
from .optimize import gold
from .results import IterationRecord, LinearSolveResult, OptimizeResult, RootResult
from .roots import (
    RootMethod,
    bisect,
    false_position,
    find_root,
    fixed_point,
    get_root_method,
    newton_raphson,
    secant,
)

__all__ = [
    # Config
    "SolverConfig",
    "DerivativeConfig",
    "DerivativeScheme",
    "LinearSolveConfig",
    # Results
    "IterationRecord",
    "RootResult",
    "OptimizeResult",
    "LinearSolveResult",
    # Errors
    "ErrorKind",
    "NumericalMethodsError",
    "InvalidInputError",
    "NotBracketedError",
    "NonSquareMatrixError",
    "NumericalDegeneracyError",
    "ZeroPivotError",
    "ZeroDerivativeError",
    "NoConvergenceError",
    # Routines
    "derivative",
    "bisect",
    "false_position",
    "fixed_point",
    "newton_raphson",
    "secant",
    "RootMethod",
    "get_root_method",
    "find_root",
    "gold",
    "naive_gauss",
    "decompose",
    "substitute",
    "lu_solve",
    "invert",
    "LinearMethod",
    "solve_linear",
]
