"""Cointegration stability tests."""

from fcusum.tests.base import (
    MIN_NOBS,
    CointegrationTestBase,
    CointegrationTestResultsBase,
)
from fcusum.tests.critical_values import CriticalValues, get_critical_values
from fcusum.tests.fourier_cusum import (
    FourierCUSUMResults,
    FourierCUSUMTest,
    compute_cusum,
    fcum,
    format_fourier_cusum,
    make_decision,
)

__all__ = [
    "MIN_NOBS",
    "CointegrationTestBase",
    "CointegrationTestResultsBase",
    "CriticalValues",
    "FourierCUSUMResults",
    "FourierCUSUMTest",
    "compute_cusum",
    "fcum",
    "format_fourier_cusum",
    "get_critical_values",
    "make_decision",
]
