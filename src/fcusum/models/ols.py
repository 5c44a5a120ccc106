"""OLS regression used to fit the candidate Fourier models.

Estimation is delegated to statsmodels; the results are copied into a
light-weight :class:`OLSResults` container so that candidate fits can be
scored and discarded cheaply.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
import statsmodels.api as sm

from fcusum.models.base import RegressionModelBase
from fcusum.results.base import RegressionResultsBase

if TYPE_CHECKING:
    from collections.abc import Sequence

    import pandas as pd
    from numpy.typing import ArrayLike, NDArray


@dataclass(kw_only=True)
class OLSResults(RegressionResultsBase):
    """Results from OLS estimation.

    Additional Attributes
    ---------------------
    llf : float | None
        Gaussian log-likelihood of the model.
    scale : float | None
        Residual variance estimate, ``ssr / df_resid``.
    """

    llf: float | None = None
    scale: float | None = None

    @property
    def sigma_squared(self) -> float:
        """Residual variance (sigma^2)."""
        return self.scale if self.scale is not None else np.nan

    @property
    def sigma(self) -> float:
        """Residual standard error (sigma)."""
        return float(np.sqrt(self.sigma_squared))

    @property
    def k_params(self) -> int:
        """Estimated parameters: the coefficients plus the error variance."""
        return self.df_model + 1

    @property
    def aic(self) -> float:
        """Akaike Information Criterion, ``-2 llf + 2 (p + 1)``."""
        if self.llf is None:
            return np.nan
        return -2 * self.llf + 2 * self.k_params

    @property
    def bic(self) -> float:
        """Bayesian Information Criterion, ``-2 llf + log(n) (p + 1)``."""
        if self.llf is None:
            return np.nan
        return -2 * self.llf + np.log(self.nobs) * self.k_params

    def summary(self) -> str:
        """Generate a text summary of OLS results.

        Returns
        -------
        str
            Formatted summary including fit statistics and the
            coefficient table.
        """
        lines = []
        lines.append("=" * 81)
        lines.append(f"{'OLS Regression Results':^81}")
        lines.append("=" * 81)
        lines.append(
            f"Dep. Variable:           y   No. Observations:    {self.nobs:>10}"
        )
        lines.append(
            f"Model:       {self.model_name:>13}   Df Residuals:        {self.df_resid:>10}"
        )
        lines.append(
            f"R-squared:         {self.rsquared:>7.4f}   Adj. R-squared:      {self.rsquared_adj:>10.4f}"
        )
        lines.append(
            f"Residual Std Err:  {self.sigma:>7.4f}   Df Model:            {self.df_model:>10}"
        )
        if self.llf is not None:
            lines.append(
                f"Log-Likelihood:  {self.llf:>9.2f}   AIC:                 {self.aic:>10.2f}"
            )
            lines.append(f"{'':>30}BIC:                 {self.bic:>10.2f}")
        lines.append("=" * 81)
        lines.extend(self._coef_table(width=81))
        lines.append("=" * 81)
        return "\n".join(lines)


class OLS(RegressionModelBase):
    """Ordinary Least Squares regression.

    Parameters
    ----------
    endog : ArrayLike
        Dependent variable (n_obs,).
    exog : ArrayLike | None
        Regressors (n_obs, k). If None, the model is constant-only.
    has_constant : bool
        Whether to prepend an intercept column. Default True.
    exog_names : Sequence[str] | None
        Display names for the columns of ``exog``. Defaults to pandas
        labels, or ``x0, x1, ...``.

    Examples
    --------
    >>> import numpy as np
    >>> from fcusum import OLS
    >>> rng = np.random.default_rng(42)
    >>> x = rng.standard_normal(100)
    >>> y = 1 + 2 * x + rng.standard_normal(100)
    >>> results = OLS(y, x).fit()
    >>> print(results.summary())
    """

    def __init__(
        self,
        endog: ArrayLike | pd.Series[Any] | pd.DataFrame,
        exog: ArrayLike | pd.Series[Any] | pd.DataFrame | None = None,
        has_constant: bool = True,
        exog_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize OLS model."""
        super().__init__(endog, exog)
        self._has_constant = has_constant

        if exog_names is not None:
            if self.exog is None or len(exog_names) != self.exog.shape[1]:
                raise ValueError("exog_names must have one entry per column of exog")
            self._exog_names = list(exog_names)

        if self.exog is None:
            if not has_constant:
                raise ValueError("exog is required when has_constant is False")
            self._design = np.ones((self.nobs, 1))
            self._param_names = ["const"]
        elif has_constant:
            self._design = np.column_stack([np.ones(self.nobs), self.exog])
            self._param_names = ["const", *self._exog_names]
        else:
            self._design = self.exog
            self._param_names = list(self._exog_names)

    @property
    def design(self) -> NDArray[np.floating[Any]]:
        """Design matrix passed to the estimator (with intercept if any)."""
        return self._design

    @property
    def param_names(self) -> list[str]:
        """Names of the estimated coefficients."""
        return list(self._param_names)

    def fit(self, **kwargs: Any) -> OLSResults:
        """Fit the OLS model.

        Parameters
        ----------
        **kwargs
            Additional arguments (reserved for future use).

        Returns
        -------
        OLSResults
            Results object containing estimates and inference.
        """
        sm_model = sm.OLS(self.endog, self._design)
        # A perfect fit takes log(0) in the likelihood
        with np.errstate(divide="ignore", invalid="ignore"):
            sm_results = sm_model.fit()
            llf = float(sm_results.llf)
            bse = np.asarray(sm_results.bse)
            cov_params = np.asarray(sm_results.cov_params())

        y_mean = np.mean(self.endog)
        tss = float(np.sum((self.endog - y_mean) ** 2))

        return OLSResults(
            params=np.asarray(sm_results.params),
            bse=bse,
            resid=np.asarray(sm_results.resid),
            fittedvalues=np.asarray(sm_results.fittedvalues),
            cov_params_matrix=cov_params,
            nobs=self.nobs,
            param_names=self.param_names,
            model_name="OLS",
            llf=llf,
            scale=float(sm_results.scale),
            _tss=tss,
        )
