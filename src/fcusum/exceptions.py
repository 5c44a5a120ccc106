"""Exceptions and warnings raised by the fcusum package.

Every error derives from both :class:`FCUSUMError` and :class:`ValueError`,
so callers may catch either the package-specific base class or the
built-in type.
"""

from __future__ import annotations


class FCUSUMError(Exception):
    """Base class for all fcusum errors."""


class InvalidArgumentError(FCUSUMError, ValueError):
    """Raised when the inputs to a test are missing, malformed or too short."""


class DegenerateFitError(FCUSUMError, ValueError):
    """Raised when no candidate model in the frequency grid can be scored.

    This happens when every candidate has non-positive residual degrees of
    freedom for the corrected information criterion (n - p - 1 <= 0).
    """


class DegenerateVarianceError(FCUSUMError, ValueError):
    """Raised when the residual standard deviation is zero or non-finite."""


class CriticalValueLookupWarning(UserWarning):
    """Issued when critical values fall back to the (p=1, k=1) table entry."""
