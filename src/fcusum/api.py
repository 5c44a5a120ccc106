"""Public API for fcusum package.

This module provides a clean namespace for the most commonly used
classes and functions in the fcusum package.
"""

# Errors
from fcusum.exceptions import (
    CriticalValueLookupWarning,
    DegenerateFitError,
    DegenerateVarianceError,
    FCUSUMError,
    InvalidArgumentError,
)

# Models
from fcusum.models import OLS, OLSResults, RegressionModelBase

# Results base classes (for type checking)
from fcusum.results import FCUSUMResultsBase, RegressionResultsBase

# Frequency selection
from fcusum.selection import (
    FrequencyGridSearch,
    FrequencySelectionResults,
    aicc,
    fourier_terms,
    frequency_grid,
    search_frequency,
)

# Tests
from fcusum.tests import (
    CointegrationTestBase,
    CointegrationTestResultsBase,
    CriticalValues,
    FourierCUSUMResults,
    FourierCUSUMTest,
    compute_cusum,
    fcum,
    format_fourier_cusum,
    get_critical_values,
    make_decision,
)

# Visualization
from fcusum.visualization import plot_fourier_cusum, plot_ic

__all__ = [
    # Models
    "OLS",
    "CointegrationTestBase",
    "CointegrationTestResultsBase",
    # Errors
    "CriticalValueLookupWarning",
    # Tests
    "CriticalValues",
    "DegenerateFitError",
    "DegenerateVarianceError",
    "FCUSUMError",
    # Base classes
    "FCUSUMResultsBase",
    "FourierCUSUMResults",
    "FourierCUSUMTest",
    # Frequency selection
    "FrequencyGridSearch",
    "FrequencySelectionResults",
    "InvalidArgumentError",
    "OLSResults",
    "RegressionModelBase",
    "RegressionResultsBase",
    "aicc",
    "compute_cusum",
    "fcum",
    "format_fourier_cusum",
    "fourier_terms",
    "frequency_grid",
    "get_critical_values",
    "make_decision",
    # Visualization
    "plot_fourier_cusum",
    "plot_ic",
    "search_frequency",
]
