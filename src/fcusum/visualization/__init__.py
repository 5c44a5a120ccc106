"""Plotting utilities for the Fourier CUSUM test."""

from fcusum.visualization.cusum import plot_fourier_cusum
from fcusum.visualization.selection import plot_ic
from fcusum.visualization.style import (
    FCUSUM_COLOR_CYCLE,
    FCUSUM_COLORS,
    get_style,
    use_style,
)

__all__ = [
    "FCUSUM_COLORS",
    "FCUSUM_COLOR_CYCLE",
    "get_style",
    "plot_fourier_cusum",
    "plot_ic",
    "use_style",
]
