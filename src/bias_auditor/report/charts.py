"""Horizontal bar charts for per-group fairness scores."""
from __future__ import annotations

from typing import Any, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from .layout import Chart

SCORE_DOMAIN = (0.0, 1.0)
TICK_COLOR = "#9ca3af"
BAR_HEIGHT = 0.6


def plain(text: str) -> str:
    """Escape `$` so matplotlib draws model text literally instead of as mathtext."""
    return text.replace("$", r"\$")


def bar_chart(ax: Any, chart: Chart, *, show_title: bool = False) -> Any:
    """
    Draw one bar per group on `ax`.

    The x-axis is pinned to [0, 1] whatever the data; scores outside the
    domain are cut off at the axis edge.
    """
    # Groups read top to bottom in the order supplied.
    labels = list(chart.groups)[::-1]
    values = list(chart.scores)[::-1]
    positions = list(range(len(values)))
    # Numeric positions keep repeated labels as separate bars.
    ax.barh(positions, values, color=chart.color, height=BAR_HEIGHT)
    ax.set_yticks(positions)
    ax.set_yticklabels([plain(label) for label in labels])
    ax.set_xlim(*SCORE_DOMAIN)
    ax.tick_params(axis="both", labelsize=8, colors=TICK_COLOR)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    if show_title:
        ax.set_title(plain(chart.title), fontsize=9, color=chart.color)
    return ax


def chart_figure(chart: Chart, *, width: float = 4.0, title: Optional[str] = None) -> Any:
    """Standalone figure for one chart; caller closes it."""
    height = 0.6 + 0.35 * max(len(chart.groups), 1)
    fig, ax = plt.subplots(figsize=(width, height))
    bar_chart(ax, chart)
    if title:
        ax.set_title(plain(title), fontsize=10, color=chart.color)
    fig.tight_layout()
    return fig
