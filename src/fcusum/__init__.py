"""fcusum: Fourier CUSUM test for cointegration with smooth structural breaks.

A Python package built on statsmodels that tests whether a long-run
linear relationship between time series stays stable over time. Smooth
breaks of unknown form are absorbed by a pair of Fourier terms whose
frequency is chosen by the corrected AIC; stability is judged from the
cumulated residuals of the selected regression.

Example
-------
>>> import fcusum as fc
>>> import numpy as np
>>>
>>> rng = np.random.default_rng(123)
>>> x = np.cumsum(rng.standard_normal(100))
>>> y = 2 + 1.5 * x + rng.standard_normal(100)
>>>
>>> results = fc.fcum(y, x, kstar=3)
>>> print(f"CUSUM = {results.statistic:.4f}{results.significance}")
>>> print(results.decision)
>>> print(results.summary())
"""

from fcusum._version import __version__
from fcusum.api import (
    OLS,
    CointegrationTestBase,
    CointegrationTestResultsBase,
    CriticalValueLookupWarning,
    CriticalValues,
    DegenerateFitError,
    DegenerateVarianceError,
    FCUSUMError,
    FCUSUMResultsBase,
    FourierCUSUMResults,
    FourierCUSUMTest,
    FrequencyGridSearch,
    FrequencySelectionResults,
    InvalidArgumentError,
    OLSResults,
    RegressionModelBase,
    RegressionResultsBase,
    aicc,
    compute_cusum,
    fcum,
    format_fourier_cusum,
    fourier_terms,
    frequency_grid,
    get_critical_values,
    make_decision,
    plot_fourier_cusum,
    plot_ic,
    search_frequency,
)

__all__ = [
    "OLS",
    "CointegrationTestBase",
    "CointegrationTestResultsBase",
    "CriticalValueLookupWarning",
    "CriticalValues",
    "DegenerateFitError",
    "DegenerateVarianceError",
    "FCUSUMError",
    "FCUSUMResultsBase",
    "FourierCUSUMResults",
    "FourierCUSUMTest",
    "FrequencyGridSearch",
    "FrequencySelectionResults",
    "InvalidArgumentError",
    "OLSResults",
    "RegressionModelBase",
    "RegressionResultsBase",
    "__version__",
    "aicc",
    "compute_cusum",
    "fcum",
    "format_fourier_cusum",
    "fourier_terms",
    "frequency_grid",
    "get_critical_values",
    "make_decision",
    "plot_fourier_cusum",
    "plot_ic",
    "search_frequency",
]
