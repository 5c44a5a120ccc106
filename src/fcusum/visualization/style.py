"""Plot styling for fcusum figures.

All plotting functions draw inside :func:`use_style`, which applies a
light, minimal matplotlib style without touching the global rcParams.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

FCUSUM_COLORS: dict[str, str] = {
    "blue": "#006BA2",
    "red": "#DB444B",
    "teal": "#3EBCD2",
    "grey": "#758D99",
    "light_grey": "#D9D9D9",
    "near_black": "#0C0C0C",
}

FCUSUM_COLOR_CYCLE: list[str] = [
    FCUSUM_COLORS["blue"],
    FCUSUM_COLORS["red"],
    FCUSUM_COLORS["teal"],
    FCUSUM_COLORS["grey"],
]


def get_style() -> dict[str, Any]:
    """Return the rcParams used by fcusum plots."""
    from cycler import cycler

    return {
        "axes.prop_cycle": cycler(color=FCUSUM_COLOR_CYCLE),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.edgecolor": FCUSUM_COLORS["grey"],
        "axes.grid": True,
        "axes.grid.axis": "y",
        "grid.color": FCUSUM_COLORS["light_grey"],
        "grid.linewidth": 0.6,
        "axes.titlesize": 12,
        "axes.titleweight": "bold",
        "axes.labelsize": 10,
        "legend.fontsize": 9,
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
    }


@contextmanager
def use_style() -> Iterator[None]:
    """Temporarily apply the fcusum plotting style.

    Examples
    --------
    >>> import matplotlib.pyplot as plt
    >>> from fcusum.visualization import use_style
    >>> with use_style():
    ...     fig, ax = plt.subplots()
    """
    import matplotlib as mpl

    with mpl.rc_context(get_style()):
        yield
