# src/mm1_fifo/analysis/plotting.py

"""
Provides optional plotting utilities for visualizing simulation output.

This module depends on 'matplotlib' and 'seaborn' (and 'pandas' for the
replication table), which are not part of the core dependencies. These
are intended to be installed via the '[analysis]' extra:

    pip install mm1-fifo[analysis]

The queue-length plots accept a Measure, a SimulationResult or a plain
sequence of per-step queue lengths.
"""

import logging
from typing import Any, Optional, Sequence

# Optional Dependency Handling
try:
    import matplotlib.pyplot as plt
    import matplotlib.axes
    import numpy as np
    import seaborn as sns
except ImportError:
    log = logging.getLogger(__name__)
    log.error("Analysis dependencies (matplotlib, seaborn, pandas, numpy) not found.")
    log.error("Please install them with: pip install mm1-fifo[analysis]")
    raise

log = logging.getLogger(__name__)

# Set a nice default style for the plots
sns.set_theme(style="whitegrid")

REPLICATION_COLUMNS = {
    "queue_zero": "% steps with empty queue",
    "median": "median queue length",
    "mean": "mean queue length",
    "max": "max queue length",
}


def _as_series(data: Any) -> np.ndarray:
    lengths = getattr(data, "queue_lengths", data)
    return np.asarray(lengths)


def plot_queue_length_over_time(
    data: Any,
    ax: Optional[matplotlib.axes.Axes] = None,
    title: str = "Queue Length Over Time"
) -> matplotlib.axes.Axes:
    """
    Generates a step plot of the queue length after every time step.

    Args:
        data (Any): A Measure, a SimulationResult or a sequence of
                    per-step queue lengths.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.
        title (str): The plot title.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 6))

    series = _as_series(data)
    if series.size == 0:
        log.warning("No queue length data to plot. Plot will be empty.")
        ax.set_title(f"{title} (No Data)")
        return ax

    steps = np.arange(1, series.size + 1)
    ax.step(steps, series, where='post')

    mean_len = float(np.mean(series))
    ax.axhline(
        mean_len,
        color='red',
        linestyle='--',
        label=f"Mean Length: {mean_len:.2f}"
    )

    ax.set_title(title)
    ax.set_xlabel("Time Step")
    ax.set_ylabel("Elements in Queue")
    ax.set_ylim(bottom=0) # Queue length cannot be negative
    ax.set_xlim(left=1)
    ax.legend()

    log.debug(f"Plotted queue length over {series.size} steps.")

    return ax


def plot_queue_length_histogram(
    data: Any,
    ax: Optional[matplotlib.axes.Axes] = None,
    title: str = "Distribution of Queue Length"
) -> matplotlib.axes.Axes:
    """
    Generates a histogram of the per-step queue length, one bin per
    integer length.

    Args:
        data (Any): A Measure, a SimulationResult or a sequence of
                    per-step queue lengths.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.
        title (str): The plot title.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    series = _as_series(data)
    if series.size == 0:
        log.warning("No queue length data. Plotting an empty histogram.")
        ax.set_title(f"{title} (No Data)")
        return ax

    sns.histplot(series, discrete=True, ax=ax, label="Queue Length")

    ax.set_title(title)
    ax.set_xlabel("Elements in Queue")
    ax.set_ylabel("Steps")
    ax.legend()

    log.debug(f"Plotted queue length histogram (n={series.size})")

    return ax


def plot_replication_statistics(
    stats_df: Any,
    axes: Optional[Sequence[matplotlib.axes.Axes]] = None,
    title: Optional[str] = None,
    bins: int = 20
) -> Sequence[matplotlib.axes.Axes]:
    """
    Draws one histogram per replication statistic.

    Args:
        stats_df (pandas.DataFrame): The table returned by
            `run_replications()`.
        axes (Optional[Sequence[matplotlib.axes.Axes]]): Four Axes to
            draw on. If None, a new 2x2 Figure is created.
        title (Optional[str]): A prefix for every subplot title, e.g.
            "control = True".
        bins (int): The number of bins per histogram.

    Returns:
        Sequence[matplotlib.axes.Axes]: The Axes objects with the plots.
    """
    if axes is None:
        fig, grid = plt.subplots(2, 2, figsize=(12, 9))
        axes = list(grid.flat)

    if len(axes) < len(REPLICATION_COLUMNS):
        raise ValueError(f"Need {len(REPLICATION_COLUMNS)} Axes, "
                         f"got {len(axes)}.")

    for ax, (column, label) in zip(axes, REPLICATION_COLUMNS.items()):
        if column not in stats_df or len(stats_df[column]) == 0:
            log.warning(f"No '{column}' data. Plot will be empty.")
            ax.set_title(f"Distribution of {label} (No Data)")
            continue

        sns.histplot(stats_df[column], bins=bins, ax=ax)
        prefix = f"{title}: " if title else ""
        ax.set_title(f"{prefix}distribution of {label}")
        ax.set_xlabel("")
        ax.set_ylabel("Replications")

    log.debug(f"Plotted replication statistics (n={len(stats_df)})")

    return axes
