"""Scatter and line chart demos."""

from typing import Optional
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from gbmcharts.simulation.path_generator import geometric_brownian_motion
from gbmcharts.visualization import render_figure


def line_and_scatter_plot(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Three traces: markers only, lines only, and lines with markers."""
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot([1, 2, 3, 4], [10, 15, 13, 17], linestyle="none", marker="o", label="trace1")
    ax.plot([2, 3, 4, 5], [16, 5, 11, 9], label="trace2")
    ax.plot([1, 2, 3, 4], [12, 9, 15, 12], marker="o", label="trace3")

    ax.set_title("Line and Scatter Plot")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def _team_scatter(ax, labels: bool) -> None:
    team_a = ([1, 2, 3, 4, 5], [1, 6, 3, 6, 1])
    team_b = ([1.5, 2.5, 3.5, 4.5, 5.5], [4, 1, 7, 1, 4])

    ax.plot(*team_a, linestyle="none", marker="o", markersize=12, label="Team A")
    ax.plot(*team_b, linestyle="none", marker="o", markersize=12, label="Team B")

    if labels:
        for x, y, text in zip(*team_a, ["A-1", "A-2", "A-3", "A-4", "A-5"]):
            ax.annotate(text, xy=(x, y), xytext=(0, 10),
                        textcoords="offset points", ha="center")
        for x, y, text in zip(*team_b, ["B-a", "B-b", "B-c", "B-d", "B-e"]):
            ax.annotate(text, xy=(x, y), xytext=(0, 10),
                        textcoords="offset points", ha="center")

    ax.set_xlim(0.75, 5.25)
    ax.set_ylim(0.0, 8.0)
    ax.legend(loc="best")


def data_labels_hover(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Two marker series on fixed axis ranges."""
    fig, ax = plt.subplots(figsize=(10, 6))
    _team_scatter(ax, labels=False)
    ax.set_title("Data Labels Hover")
    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def data_labels_on_the_plot(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Two marker series with a text label next to every point."""
    fig, ax = plt.subplots(figsize=(10, 6))
    _team_scatter(ax, labels=True)
    ax.set_title("Data Labels on the Plot")
    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def gbm_scatter_plot(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
    rng=None,
    n: int = 3000,
) -> Figure:
    """A single simulated GBM path drawn as a line.

    Parameters
    ----------
    rng : numpy.random.Generator, int or None, optional
        Randomness source for the path
    n : int, default=3000
        Number of daily steps
    """
    path = geometric_brownian_motion(100.0, 1.0 / 365.0, n, 0.15, 0.5, rng=rng)

    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(np.arange(n), path, linewidth=0.8, label="path_0")
    ax.set_title("Geometric Brownian Motion")
    ax.set_xlabel("Step")
    ax.set_ylabel("Price ($)")
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)
