"""Base classes for regression results.

The Fourier CUSUM test fits one regression per candidate frequency; the
containers defined here hold the estimates of a single fit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd
from scipy import stats

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass(kw_only=True)
class FCUSUMResultsBase(ABC):
    """Base class for all estimation results in the fcusum package.

    Parameters
    ----------
    params : NDArray[np.floating]
        Estimated model parameters.
    nobs : int
        Number of observations used in estimation.
    model_name : str
        Name of the model that produced these results.
    """

    params: NDArray[np.floating[Any]]
    nobs: int
    model_name: str = "Model"

    @property
    @abstractmethod
    def df_model(self) -> int:
        """Degrees of freedom used by the model (number of parameters)."""
        ...

    @property
    def df_resid(self) -> int:
        """Residual degrees of freedom (nobs - df_model)."""
        return self.nobs - self.df_model

    @abstractmethod
    def summary(self) -> str:
        """Generate a text summary of the results."""
        ...


@dataclass(kw_only=True)
class RegressionResultsBase(FCUSUMResultsBase):
    """Base class for linear regression results.

    Parameters
    ----------
    params : NDArray[np.floating]
        Estimated regression coefficients.
    bse : NDArray[np.floating]
        Standard errors of the coefficients.
    resid : NDArray[np.floating]
        Model residuals.
    fittedvalues : NDArray[np.floating]
        Fitted values from the model.
    nobs : int
        Number of observations.
    cov_params_matrix : NDArray[np.floating]
        Covariance matrix of the parameter estimates.
    model_name : str
        Name of the model.
    param_names : Sequence[str] | None
        Names of the parameters for display purposes.
    """

    bse: NDArray[np.floating[Any]]
    resid: NDArray[np.floating[Any]]
    fittedvalues: NDArray[np.floating[Any]]
    cov_params_matrix: NDArray[np.floating[Any]]
    param_names: Sequence[str] | None = None
    _tss: float | None = field(default=None, repr=False)

    @property
    def df_model(self) -> int:
        """Number of estimated coefficients, including the intercept."""
        return len(self.params)

    @property
    def tvalues(self) -> NDArray[np.floating[Any]]:
        """t-statistics for parameter estimates."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return self.params / self.bse

    @property
    def pvalues(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values for t-statistics."""
        if self.df_resid <= 0:
            return np.full(len(self.params), np.nan)
        return 2 * stats.t.sf(np.abs(self.tvalues), self.df_resid)

    @property
    def ssr(self) -> float:
        """Sum of squared residuals."""
        return float(np.sum(self.resid**2))

    @property
    def rsquared(self) -> float:
        """R-squared (coefficient of determination)."""
        if self._tss is None or self._tss == 0:
            return np.nan
        return 1 - self.ssr / self._tss

    @property
    def rsquared_adj(self) -> float:
        """Adjusted R-squared."""
        if self._tss is None or self._tss == 0 or self.df_resid <= 0:
            return np.nan
        return 1 - (self.ssr / self.df_resid) / (self._tss / (self.nobs - 1))

    def conf_int(self, alpha: float = 0.05) -> NDArray[np.floating[Any]]:
        """Compute confidence intervals for parameter estimates.

        Parameters
        ----------
        alpha : float, default 0.05
            Significance level. Default gives 95% confidence intervals.

        Returns
        -------
        NDArray[np.floating]
            Array of shape (n_params, 2) with lower and upper bounds.
        """
        if self.df_resid <= 0:
            return np.full((len(self.params), 2), np.nan)
        q = stats.t.ppf(1 - alpha / 2, self.df_resid)
        return np.column_stack([self.params - q * self.bse, self.params + q * self.bse])

    def _names(self) -> list[str]:
        if self.param_names is not None:
            return list(self.param_names)
        return [f"x{i}" for i in range(len(self.params))]

    def _coef_table(self, width: int = 78) -> list[str]:
        """Coefficient table lines shared by the summaries."""
        lines = [
            f"{'':>15} {'coef':>10} {'std err':>10} {'t':>10} "
            f"{'P>|t|':>10} {'[0.025':>10} {'0.975]':>10}",
            "-" * width,
        ]
        ci = self.conf_int()
        pvalues = self.pvalues
        for i, name in enumerate(self._names()):
            p = pvalues[i]
            pval_str = f"{p:.3f}" if not p < 0.001 else f"{p:.2e}"
            lines.append(
                f"{name:>15} {self.params[i]:>10.4f} {self.bse[i]:>10.4f} "
                f"{self.tvalues[i]:>10.3f} {pval_str:>10} "
                f"{ci[i, 0]:>10.3f} {ci[i, 1]:>10.3f}"
            )
        return lines

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the coefficient table to a pandas DataFrame.

        Returns
        -------
        pd.DataFrame
            DataFrame with parameter estimates, standard errors, t-values,
            p-values and confidence intervals, indexed by parameter name.
        """
        ci = self.conf_int()
        return pd.DataFrame(
            {
                "coef": self.params,
                "std_err": self.bse,
                "t": self.tvalues,
                "P>|t|": self.pvalues,
                "ci_lower": ci[:, 0],
                "ci_upper": ci[:, 1],
            },
            index=self._names(),
        )
