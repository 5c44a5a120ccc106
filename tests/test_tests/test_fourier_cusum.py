"""Tests for the Fourier CUSUM cointegration test."""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
import pandas as pd
import pytest
from numpy.typing import NDArray

import fcusum as fc
from fcusum import FourierCUSUMResults, FourierCUSUMTest, fcum, format_fourier_cusum

DECISIONS = {
    "Reject H0 at 1% level": "***",
    "Reject H0 at 5% level": "**",
    "Reject H0 at 10% level": "*",
    "Fail to reject H0": "",
}


class TestFourierCUSUMBasic:
    """End-to-end behavior of fcum()."""

    def test_returns_results(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """fcum() returns FourierCUSUMResults with the documented fields."""
        y, x = cointegrated_data

        results = fcum(y, x, kstar=3)

        assert isinstance(results, FourierCUSUMResults)
        assert results.test_name == "Fourier CUSUM"
        assert results.nobs == 100
        assert results.p == 1
        assert results.k == 3
        assert results.kstar == 3
        assert 0.1 <= results.best_frequency <= 3.0
        assert results.decision in DECISIONS
        assert results.significance == DECISIONS[results.decision]

    def test_statistic_matches_selected_model(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """The statistic is computed from the residuals of the chosen model."""
        y, x = cointegrated_data

        results = fcum(y, x, kstar=2)

        u = results.best_model.resid
        expected = np.max(np.abs(np.cumsum(u))) / (np.std(u, ddof=1) * np.sqrt(len(u)))
        assert results.statistic == pytest.approx(expected)
        assert results.sigma_hat == pytest.approx(np.std(u, ddof=1))
        assert results.statistic > 0

    def test_best_model_is_selection_winner(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """The reported frequency and model come from the grid search."""
        y, x = cointegrated_data

        results = fcum(y, x, kstar=1)

        assert results.selection is not None
        assert results.best_frequency == results.selection.best_frequency
        assert results.best_model is results.selection.best_model
        assert results.best_model.param_names == ["const", "x0", "cos", "sin"]

    def test_default_kstar(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """kstar defaults to 3."""
        y, x = cointegrated_data

        assert fcum(y, x).kstar == 3

    def test_class_interface_matches(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """FourierCUSUMTest.fit() matches fcum()."""
        y, x = cointegrated_data

        a = fcum(y, x, kstar=1)
        b = FourierCUSUMTest(y, x).fit(kstar=1)

        assert a.statistic == b.statistic
        assert a.best_frequency == b.best_frequency
        assert a.decision == b.decision

    def test_deterministic(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """Identical inputs give identical results."""
        y, x = cointegrated_data

        assert fcum(y, x, kstar=1).statistic == fcum(y, x, kstar=1).statistic

    def test_spurious_regression_rejects(
        self,
        spurious_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """Independent random walks produce wandering residuals."""
        y, x = spurious_data

        results = fcum(y, x, kstar=2)

        assert results.reject
        assert results.statistic > results.critical_values["1%"]

    def test_smooth_break(
        self,
        smooth_break_data: tuple[
            NDArray[np.floating[Any]], NDArray[np.floating[Any]], float
        ],
    ) -> None:
        """A smooth intercept break is absorbed by the Fourier terms."""
        y, x, freq = smooth_break_data

        results = fcum(y, x, kstar=3)

        assert results.best_frequency == pytest.approx(freq, abs=0.1)


class TestFourierCUSUMSampleSize:
    """Minimum sample size."""

    def test_ten_observations(self, rng: np.random.Generator) -> None:
        """Ten observations are enough."""
        x = np.cumsum(rng.standard_normal(10))
        y = 1 + x + rng.standard_normal(10)

        results = fcum(y, x, kstar=1)

        assert results.nobs == 10

    def test_nine_observations(self, rng: np.random.Generator) -> None:
        """Nine observations are rejected."""
        with pytest.raises(fc.InvalidArgumentError, match="Insufficient observations"):
            fcum(rng.standard_normal(9), rng.standard_normal(9))

    def test_too_many_regressors(self, rng: np.random.Generator) -> None:
        """No candidate can be scored when n - p - 1 <= 0."""
        y = rng.standard_normal(10)
        X = rng.standard_normal((10, 6))

        with pytest.raises(fc.DegenerateFitError):
            fcum(y, X, kstar=0.5)


class TestFourierCUSUMValidation:
    """Input validation and its order."""

    def test_missing_y(self) -> None:
        """y is required."""
        with pytest.raises(fc.InvalidArgumentError, match="required"):
            fcum(None, np.ones(20))  # type: ignore[arg-type]

    def test_missing_x(self) -> None:
        """x is required."""
        with pytest.raises(fc.InvalidArgumentError, match="required"):
            fcum(np.ones(20), None)  # type: ignore[arg-type]

    def test_non_numeric(self) -> None:
        """Non-numeric data is rejected."""
        with pytest.raises(fc.InvalidArgumentError, match="numeric"):
            fcum(["a", "b", "c"], np.ones(3))

    def test_non_finite(self, rng: np.random.Generator) -> None:
        """Missing values are rejected."""
        y = rng.standard_normal(30)
        y[5] = np.nan

        with pytest.raises(fc.InvalidArgumentError, match="finite"):
            fcum(y, rng.standard_normal(30))

    @pytest.mark.parametrize(
        "kstar", [0, -1.0, np.nan, np.inf, "3", True, [1, 2], None]
    )
    def test_invalid_kstar(self, rng: np.random.Generator, kstar: Any) -> None:
        """kstar must be a single positive number."""
        with pytest.raises(fc.InvalidArgumentError, match="kstar"):
            fcum(rng.standard_normal(30), rng.standard_normal(30), kstar=kstar)

    def test_kstar_below_first_frequency(self, rng: np.random.Generator) -> None:
        """A positive kstar below 0.1 leaves the grid empty."""
        with pytest.raises(fc.InvalidArgumentError, match="at least 0.1"):
            fcum(rng.standard_normal(30), rng.standard_normal(30), kstar=0.05)

    def test_kstar_checked_before_lengths(self) -> None:
        """An invalid kstar is reported before a length mismatch."""
        with pytest.raises(fc.InvalidArgumentError, match="kstar"):
            fcum(np.ones(20), np.ones(25), kstar=-1)

    def test_numeric_checked_before_kstar(self) -> None:
        """Non-numeric data is reported before an invalid kstar."""
        with pytest.raises(fc.InvalidArgumentError, match="numeric"):
            fcum(["a"] * 20, np.ones(20), kstar=-1)

    def test_lengths_checked_before_sample_size(self) -> None:
        """A length mismatch is reported before the minimum sample size."""
        with pytest.raises(fc.InvalidArgumentError, match="same number"):
            fcum(np.arange(5.0), np.arange(6.0))

    def test_fit_validates_kstar(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """FourierCUSUMTest.fit() validates kstar too."""
        y, x = cointegrated_data

        with pytest.raises(fc.InvalidArgumentError, match="kstar"):
            FourierCUSUMTest(y, x).fit(kstar=0)

    def test_array_kstar(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """A one-element array is accepted as kstar."""
        y, x = cointegrated_data

        results = fcum(y, x, kstar=np.array([1.0]))  # type: ignore[arg-type]

        assert results.kstar == 1.0

    def test_errors_are_value_errors(self) -> None:
        """Validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            fcum(np.ones(5), np.ones(5))

    def test_exact_fit(self, rng: np.random.Generator) -> None:
        """A perfect linear relation leaves no residual variance."""
        x = np.cumsum(rng.standard_normal(50))
        y = 2 + 1.5 * x

        with pytest.raises(fc.DegenerateVarianceError):
            fcum(y, x, kstar=1)

    @pytest.mark.parametrize("level", [0.1, 3.7, 1e-3, 123.456, 0.3333333, -2.5])
    @pytest.mark.parametrize("n", [10, 37, 100])
    def test_constant_y(self, rng: np.random.Generator, level: float, n: int) -> None:
        """A constant response is fitted exactly by the intercept."""
        x = np.cumsum(rng.standard_normal(n))

        with pytest.raises(fc.DegenerateVarianceError):
            fcum(np.full(n, level), x, kstar=1)

    def test_zero_y(self, rng: np.random.Generator) -> None:
        """An all-zero response has zero residuals."""
        with pytest.raises(fc.DegenerateVarianceError):
            fcum(np.zeros(30), rng.standard_normal(30), kstar=1)

    def test_small_noise_on_large_level(self, rng: np.random.Generator) -> None:
        """Genuine noise well above rounding error is not treated as exact."""
        x = np.cumsum(rng.standard_normal(50))
        y = 1e4 + x + 1e-3 * rng.standard_normal(50)

        results = fcum(y, x, kstar=1)

        assert results.sigma_hat > 0


class TestFourierCUSUMInputs:
    """Accepted input shapes and containers."""

    def test_multiple_regressors(
        self,
        multivariate_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """Each column of x is a regressor."""
        y, X = multivariate_data

        results = fcum(y, X, kstar=2)

        assert results.n_regressors == 2
        assert results.p == 2
        assert results.k == 2
        assert results.best_model.param_names == ["const", "x0", "x1", "cos", "sin"]

    def test_clamped_lookup(self, rng: np.random.Generator) -> None:
        """Five regressors and kstar=5 use the (4, 3) critical values."""
        n = 80
        X = np.cumsum(rng.standard_normal((n, 5)), axis=0)
        y = X.sum(axis=1) + rng.standard_normal(n)

        with warnings.catch_warnings():
            warnings.simplefilter("error", fc.CriticalValueLookupWarning)
            results = fcum(y, X, kstar=5)

        assert results.n_regressors == 5
        assert (results.p, results.k) == (4, 3)
        assert results.critical_values == fc.get_critical_values(4, 3)[0]
        assert results.best_frequency <= 5.0

    def test_fractional_kstar_warns(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """A fractional kstar below 3 falls back to p=1, k=1."""
        y, x = cointegrated_data

        with pytest.warns(fc.CriticalValueLookupWarning):
            results = fcum(y, x, kstar=0.5)

        assert (results.p, results.k) == (1, 1)
        assert results.kstar == 0.5
        assert results.best_frequency <= 0.5

    def test_pandas_inputs(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """Series inputs give the same answer as arrays."""
        y, x = cointegrated_data
        ys = pd.Series(y, name="consumption")
        xs = pd.Series(x, name="income")

        a = fcum(ys, xs, kstar=1)
        b = fcum(y, x, kstar=1)

        assert a.statistic == pytest.approx(b.statistic)
        assert a.best_model.param_names == ["const", "income", "cos", "sin"]

    def test_single_column_y(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> None:
        """A single-column matrix is accepted for y."""
        y, x = cointegrated_data

        results = fcum(y.reshape(-1, 1), x, kstar=1)

        assert results.statistic == pytest.approx(fcum(y, x, kstar=1).statistic)

    def test_two_column_y(self, rng: np.random.Generator) -> None:
        """A multi-column y is rejected."""
        with pytest.raises(fc.InvalidArgumentError, match="single-column"):
            fcum(rng.standard_normal((30, 2)), rng.standard_normal(30))


class TestFourierCUSUMResults:
    """The results container and its text output."""

    @pytest.fixture
    def results(
        self,
        cointegrated_data: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]],
    ) -> FourierCUSUMResults:
        y, x = cointegrated_data
        return fcum(y, x, kstar=3)

    def test_summary(self, results: FourierCUSUMResults) -> None:
        """Summary shows the statistic, critical values and decision."""
        summary = results.summary(model_summary=False)

        assert "Fourier CUSUM Cointegration Test" in summary
        assert "CUSUM statistic:" in summary
        assert f"{results.statistic:.6f}" in summary
        assert "Critical values:" in summary
        assert f"{results.critical_values.one:.6f}" in summary
        assert f"Decision:  {results.decision}" in summary
        assert "Optimal frequency:" in summary
        assert "Best model:" not in summary

    def test_summary_with_model(self, results: FourierCUSUMResults) -> None:
        """The full summary appends the selected regression."""
        summary = results.summary()

        assert "Number of observations" in summary
        assert "Best model:" in summary
        assert "OLS Regression Results" in summary
        assert "cos" in summary
        assert "sin" in summary

    def test_format_function(self, results: FourierCUSUMResults) -> None:
        """format_fourier_cusum() renders the same report."""
        assert format_fourier_cusum(results) == results.summary(model_summary=False)

    def test_reject_and_level(self, results: FourierCUSUMResults) -> None:
        """reject and significance_level follow the marker."""
        levels = {"***": 0.01, "**": 0.05, "*": 0.10, "": None}

        assert results.reject == (results.significance != "")
        assert results.significance_level == levels[results.significance]

    def test_cusum_path(self, results: FourierCUSUMResults) -> None:
        """The stored path has one point per observation."""
        assert len(results.cusum_path) == results.nobs
        assert np.max(results.cusum_path) == results.statistic

    def test_frozen(self, results: FourierCUSUMResults) -> None:
        """Results are immutable."""
        with pytest.raises(AttributeError):
            results.statistic = 0.0  # type: ignore[misc]
