"""Regression models used to fit the candidate Fourier regressions."""

from fcusum.models.base import RegressionModelBase
from fcusum.models.ols import OLS, OLSResults

__all__ = [
    "OLS",
    "OLSResults",
    "RegressionModelBase",
]
