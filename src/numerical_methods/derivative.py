"""First-order finite-difference derivative of a scalar function.

Used directly by callers and by :func:`numerical_methods.roots.newton_raphson`
when no analytic derivative is supplied.
"""

from __future__ import annotations

import warnings

from .config import DerivativeScheme
from .typing import ScalarFn

__all__ = ["derivative", "resolve_scheme"]


def resolve_scheme(scheme: DerivativeScheme | str) -> DerivativeScheme:
    """Map a scheme name to a :class:`DerivativeScheme`.

    Unknown names fall back to ``CENTRAL`` with a ``UserWarning``.
    """
    if isinstance(scheme, DerivativeScheme):
        return scheme
    try:
        return DerivativeScheme(str(scheme).lower())
    except ValueError:
        warnings.warn(
            f"Unknown derivative scheme {scheme!r}; falling back to central difference.",
            category=UserWarning,
            stacklevel=3,
        )
        return DerivativeScheme.CENTRAL


def derivative(
    f: ScalarFn,
    x: float,
    scheme: DerivativeScheme | str = DerivativeScheme.CENTRAL,
    step: float = 0.01,
) -> float:
    """
    Approximate f'(x) with a finite difference of step ``h``.

    - central : (f(x+h) - f(x-h)) / (2h)
    - forward : (f(x+h) - f(x)) / h
    - backward: (f(x) - f(x-h)) / h
    - legacy  : (f(x+h) - f(x-h)) / h   (not a true central difference)
    """
    h = step
    s = resolve_scheme(scheme)
    if s is DerivativeScheme.FORWARD:
        return (f(x + h) - f(x)) / h
    if s is DerivativeScheme.BACKWARD:
        return (f(x) - f(x - h)) / h
    if s is DerivativeScheme.LEGACY:
        return (f(x + h) - f(x - h)) / h
    return (f(x + h) - f(x - h)) / (2 * h)
