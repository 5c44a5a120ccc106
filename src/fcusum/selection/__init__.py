"""Fourier frequency selection by information criterion."""

from fcusum.selection.criteria import aicc
from fcusum.selection.frequency import (
    FREQUENCY_START,
    FREQUENCY_STEP,
    FrequencyGridSearch,
    FrequencySelectionResults,
    fourier_terms,
    frequency_grid,
    search_frequency,
)

__all__ = [
    "FREQUENCY_START",
    "FREQUENCY_STEP",
    "FrequencyGridSearch",
    "FrequencySelectionResults",
    "aicc",
    "fourier_terms",
    "frequency_grid",
    "search_frequency",
]
