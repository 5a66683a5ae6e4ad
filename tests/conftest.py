"""Pytest helpers for the numerical_methods library."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def chapra_system() -> tuple[np.ndarray, np.ndarray]:
    """3x3 diagonally dominant system with solution [3, -2.5, 7]."""
    a = np.array(
        [
            [3.0, -0.1, -0.2],
            [0.1, 7.0, -0.3],
            [0.3, -0.2, 10.0],
        ]
    )
    b = np.array([7.85, -19.3, 71.4])
    return a, b


@pytest.fixture
def make_diag_dominant():
    """Factory fixture for random strictly diagonally dominant systems."""

    def _make(rng: np.random.Generator, n: int, scale: float = 1.0):
        a = rng.normal(size=(n, n)) * scale
        a[np.arange(n), np.arange(n)] = np.abs(a).sum(axis=1) + 1.0
        b = rng.normal(size=n) * scale
        return a, b

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
