"""Corrected Akaike Information Criterion for candidate Fourier models.

References
----------
Hurvich, C. M., & Tsai, C.-L. (1989). Regression and time series model
    selection in small samples. Biometrika, 76(2), 297-307.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from fcusum.models.ols import OLSResults


def aicc(results: OLSResults) -> float:
    """Compute the corrected AIC of a fitted regression.

    Parameters
    ----------
    results : OLSResults
        Fitted regression exposing residuals, coefficients and the
        log-likelihood.

    Returns
    -------
    float
        ``AIC + 2p(p+1)/(n-p-1)``, where ``p`` is the number of
        coefficients (intercept, regressors and Fourier terms) and ``n``
        the number of residuals. ``+inf`` when ``n - p - 1 <= 0`` or the
        score is undefined, so the candidate can never be selected.

    Notes
    -----
    The AIC counts the error variance as an estimated parameter:

        AIC = -2 * llf + 2 * (p + 1)

    A perfect fit has an infinite log-likelihood and scores ``-inf``.
    That is a valid minimum; the zero residual variance it implies is
    rejected by the CUSUM statistic instead.
    """
    n = len(results.resid)
    p = len(results.params)

    denom = n - p - 1
    if denom <= 0 or results.llf is None or np.isnan(results.llf):
        return np.inf

    return float(results.aic + (2 * p * (p + 1)) / denom)
