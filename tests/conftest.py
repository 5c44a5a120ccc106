"""Pytest configuration and fixtures for fcusum tests."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def cointegrated_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Stable cointegration: y = 2 + 1.5*x + e with x a random walk.

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating]]
        y and x arrays of length 100.
    """
    n = 100
    x = np.cumsum(rng.standard_normal(n))
    y = 2 + 1.5 * x + rng.standard_normal(n)
    return y, x


@pytest.fixture
def multivariate_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Cointegration with two random-walk regressors.

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating]]
        y (150,) and X (150, 2).
    """
    n = 150
    X = np.cumsum(rng.standard_normal((n, 2)), axis=0)
    y = 1 + X @ [0.5, -1.0] + rng.standard_normal(n)
    return y, X


@pytest.fixture
def spurious_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Two independent random walks (no cointegration).

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating]]
        y and x arrays of length 200.
    """
    n = 200
    x = np.cumsum(rng.standard_normal(n))
    y = np.cumsum(rng.standard_normal(n))
    return y, x


@pytest.fixture
def smooth_break_data(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], float]:
    """Cointegration with a smooth Fourier break in the intercept.

    Returns
    -------
    tuple[NDArray[np.floating], NDArray[np.floating], float]
        y, x and the true frequency of the break.
    """
    n = 200
    freq = 1.0
    t = np.arange(1, n + 1)
    x = np.cumsum(rng.standard_normal(n))
    shift = 5 * np.sin(2 * np.pi * freq * t / n) + 5 * np.cos(2 * np.pi * freq * t / n)
    y = 1 + 2 * x + shift + 0.5 * rng.standard_normal(n)
    return y, x, freq
