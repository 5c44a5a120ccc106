"""Base classes for the regression models used by the Fourier CUSUM test.

This module provides input coercion shared by models and tests, and the
abstract model class that the OLS provider inherits from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from fcusum.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from fcusum.results.base import FCUSUMResultsBase


def _ensure_array(
    data: ArrayLike | pd.Series[Any] | pd.DataFrame | None,
    name: str = "data",
    ndim: int | None = None,
) -> NDArray[np.floating[Any]]:
    """Convert input data to a finite float64 numpy array.

    Parameters
    ----------
    data : ArrayLike | pd.Series | pd.DataFrame | None
        Input data to convert.
    name : str
        Name of the variable for error messages.
    ndim : int | None
        Expected number of dimensions. If None, no check is performed.

    Returns
    -------
    NDArray[np.floating]
        Converted array.

    Raises
    ------
    InvalidArgumentError
        If data is missing, cannot be converted to numbers, contains
        non-finite values or has unexpected dimensions.
    """
    if data is None:
        raise InvalidArgumentError(f"Argument '{name}' is required")

    try:
        if isinstance(data, (pd.Series, pd.DataFrame)):
            arr = data.to_numpy(dtype=np.float64)
        else:
            arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Argument '{name}' must be numeric") from exc

    if arr.size == 0:
        raise InvalidArgumentError(f"Argument '{name}' must not be empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"Argument '{name}' must contain only finite values")
    if ndim is not None and arr.ndim != ndim:
        raise InvalidArgumentError(
            f"Argument '{name}' must be {ndim}-dimensional, got {arr.ndim}"
        )

    return arr


def _as_endog(
    data: ArrayLike | pd.Series[Any] | pd.DataFrame | None,
    name: str = "y",
) -> NDArray[np.floating[Any]]:
    """Coerce a response series to a 1-D array.

    Scalars are treated as a series of length one and single-column
    matrices are flattened.
    """
    arr = _ensure_array(data, name)
    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim == 2 and arr.shape[1] == 1:
        return arr[:, 0]
    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"Argument '{name}' must be a 1-dimensional series or a "
            f"single-column matrix, got shape {arr.shape}"
        )
    return arr


def _as_exog(
    data: ArrayLike | pd.Series[Any] | pd.DataFrame | None,
    name: str = "x",
) -> NDArray[np.floating[Any]]:
    """Coerce regressors to a 2-D (n_obs, k) array."""
    arr = _ensure_array(data, name)
    if arr.ndim == 0:
        return arr.reshape(1, 1)
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise InvalidArgumentError(
            f"Argument '{name}' must be 1D or 2D, got {arr.ndim} dimensions"
        )
    return arr


def _exog_names(
    data: Any,
    k: int,
) -> list[str]:
    """Regressor names, taken from pandas labels when available."""
    if isinstance(data, pd.Series):
        return [str(data.name) if data.name is not None else "x0"]
    if isinstance(data, pd.DataFrame):
        return [str(c) for c in data.columns]
    if k == 1:
        return ["x0"]
    return [f"x{i}" for i in range(k)]


class RegressionModelBase(ABC):
    """Abstract base class for single-equation regression models.

    Follows the statsmodels convention of ``Model(endog, exog).fit() -> Results``.

    Parameters
    ----------
    endog : ArrayLike
        Dependent variable (n_obs,).
    exog : ArrayLike | None
        Regressors (n_obs, k). If None, model-specific defaults apply.

    Attributes
    ----------
    endog : NDArray[np.floating]
        Dependent variable array.
    exog : NDArray[np.floating] | None
        Regressor array, always 2-D when present.
    nobs : int
        Number of observations.
    """

    def __init__(
        self,
        endog: ArrayLike | pd.Series[Any] | pd.DataFrame,
        exog: ArrayLike | pd.Series[Any] | pd.DataFrame | None = None,
    ) -> None:
        """Initialize the model with data."""
        self.endog: NDArray[np.floating[Any]] = _as_endog(endog, "endog")

        if exog is None:
            self.exog: NDArray[np.floating[Any]] | None = None
            self._exog_names: list[str] = []
        else:
            self.exog = _as_exog(exog, "exog")
            self._exog_names = _exog_names(exog, self.exog.shape[1])

        self._validate_data()

    def _validate_data(self) -> None:
        """Validate input data dimensions and consistency.

        Raises
        ------
        InvalidArgumentError
            If endog and exog have different numbers of rows.
        """
        if self.exog is not None and len(self.exog) != len(self.endog):
            raise InvalidArgumentError(
                f"endog and exog must have same length, "
                f"got {len(self.endog)} and {len(self.exog)}"
            )

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return len(self.endog)

    @abstractmethod
    def fit(self, **kwargs: Any) -> FCUSUMResultsBase:
        """Estimate the model.

        Returns
        -------
        FCUSUMResultsBase
            Results object containing estimates.
        """
        ...
