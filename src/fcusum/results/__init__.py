"""Results containers for regression estimates."""

from fcusum.results.base import FCUSUMResultsBase, RegressionResultsBase

__all__ = [
    "FCUSUMResultsBase",
    "RegressionResultsBase",
]
