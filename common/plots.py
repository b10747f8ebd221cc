# common/plots.py
from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

DEFAULT_FIGSIZE = (6.6, 2.6)
BAR_COLOR  = "#1e64c8"
HOME_COLOR = "#1e64c8"
AWAY_COLOR = "#dc2828"

def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


# --- One bar per venue ---
def plot_venue_bars(stats: pd.DataFrame,
                    column: str,
                    ax: Optional[plt.Axes] = None,
                    top_n: Optional[int] = None,
                    color: str = BAR_COLOR,
                    title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    df = stats.sort_values(column, ascending=False, kind="mergesort")
    if top_n:
        df = df.head(top_n)

    x = np.arange(len(df), dtype=float)
    ax.bar(x, df[column].values, color=color)
    ax.set_xticks(x, df["venue"].tolist(), rotation=60, ha="right")
    ax.set_ylabel(column, fontsize=6)
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)
    return ax


# --- Home/away counts per team (grouped bars) ---
def plot_team_home_away(team_stats: pd.DataFrame,
                        ax: Optional[plt.Axes] = None,
                        show_legend: bool = True,
                        title: str = "") -> plt.Axes:
    fig, ax = _new_ax(ax)
    x = np.arange(len(team_stats), dtype=float)
    w = 0.42

    ax.bar(x - w/2, team_stats["Home"].values, width=w, color=HOME_COLOR, align="center", label="Home")
    ax.bar(x + w/2, team_stats["Away"].values, width=w, color=AWAY_COLOR, align="center", label="Away")

    ax.set_xticks(x, team_stats["Team"].tolist(), rotation=60, ha="right")
    ax.set_title(title)
    ax.tick_params(axis="both", labelsize=6)
    if show_legend:
        ax.legend(fontsize=6)
    return ax
