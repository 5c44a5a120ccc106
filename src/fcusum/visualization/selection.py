"""Visualization of the Fourier frequency search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from fcusum.visualization.style import FCUSUM_COLORS, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from fcusum.selection.frequency import FrequencySelectionResults


def plot_ic(
    selection: FrequencySelectionResults,
    ax: Axes | None = None,
    title: str | None = None,
    color: str | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """Plot AICc against the candidate frequency.

    Parameters
    ----------
    selection : FrequencySelectionResults
        Results of the frequency grid search.
    ax : Axes | None
        Axes to plot on.
    title : str | None
        Plot title.
    color : str | None
        Line color. Defaults to FCUSUM_COLORS["blue"].
    figsize : tuple[float, float]
        Figure size.

    Returns
    -------
    tuple[Figure, Axes]
        Figure and axes.
    """
    import matplotlib.pyplot as plt

    if color is None:
        color = FCUSUM_COLORS["blue"]

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[assignment]

        # Unscorable candidates are left as gaps
        scores = np.where(np.isfinite(selection.scores), selection.scores, np.nan)
        ax.plot(selection.frequencies, scores, color=color, linewidth=1.5, label="AICc")

        best = selection.best_frequency
        if np.isfinite(selection.best_score):
            ax.plot(
                best,
                selection.best_score,
                marker="*",
                color=FCUSUM_COLORS["red"],
                markersize=15,
                zorder=5,
            )
        ax.axvline(
            x=best,
            color=FCUSUM_COLORS["grey"],
            linestyle="--",
            linewidth=0.8,
            alpha=0.7,
            label=f"Selected: f={best:.2f}",
        )

        ax.set_xlabel("Fourier frequency")
        ax.set_ylabel("AICc")
        ax.set_title(title or "AICc vs Fourier frequency")
        ax.legend(frameon=False)
        fig.tight_layout()

    return fig, ax  # type: ignore[return-value]
