"""Visualization of the Fourier CUSUM statistic."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from fcusum.visualization.style import FCUSUM_COLORS, use_style

if TYPE_CHECKING:
    from collections.abc import Sequence

    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from fcusum.tests.fourier_cusum import FourierCUSUMResults

_LEVEL_STYLES: dict[str, str] = {"1%": "-", "5%": "--", "10%": ":"}


def plot_fourier_cusum(
    results: FourierCUSUMResults,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Observation",
    ylabel: str = "Normalised |CUSUM|",
    statistic_color: str | None = None,
    bound_color: str | None = None,
    levels: Sequence[str] = ("1%", "5%", "10%"),
    show_max: bool = True,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the normalised CUSUM path with the critical values.

    The statistic is the maximum of the plotted path; H0 is rejected at a
    level when the path rises above the corresponding horizontal line.

    Parameters
    ----------
    results : FourierCUSUMResults
        Results from a Fourier CUSUM test.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title. Defaults to "Fourier CUSUM test statistic".
    xlabel : str
        X-axis label.
    ylabel : str
        Y-axis label.
    statistic_color : str | None
        Color for the path. Defaults to FCUSUM_COLORS["blue"].
    bound_color : str | None
        Color for the critical values. Defaults to FCUSUM_COLORS["red"].
    levels : Sequence[str]
        Significance levels to draw, any of "1%", "5%", "10%".
    show_max : bool
        Whether to mark the observation where the maximum is attained.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    if statistic_color is None:
        statistic_color = FCUSUM_COLORS["blue"]
    if bound_color is None:
        bound_color = FCUSUM_COLORS["red"]

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[assignment]

        path = results.cusum_path
        x = np.arange(1, len(path) + 1)

        ax.plot(x, path, color=statistic_color, linewidth=2.0, label="CUSUM")

        for level in levels:
            ax.axhline(
                y=results.critical_values[level],
                color=bound_color,
                linewidth=1.0,
                linestyle=_LEVEL_STYLES.get(level, "--"),
                label=f"{level} critical value",
            )

        if show_max and len(path) > 0:
            idx = int(np.argmax(path))
            ax.plot(
                x[idx],
                path[idx],
                marker="o",
                color=FCUSUM_COLORS["near_black"],
                markersize=5,
                zorder=5,
            )
            ax.axvline(
                x=x[idx],
                color=FCUSUM_COLORS["grey"],
                linewidth=0.8,
                linestyle=":",
                alpha=0.7,
            )

        ax.set_ylim(bottom=0)
        ax.set_title(title or "Fourier CUSUM test statistic")
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.legend(loc="best", frameon=False)

    return fig, ax  # type: ignore[return-value]
