"""Bar chart demos."""

from typing import Optional
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from gbmcharts.visualization import render_figure

ANIMALS = ["giraffes", "orangutans", "monkeys"]
SF_ZOO = [20, 14, 23]
LA_ZOO = [12, 18, 29]


def basic_bar_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """One bar per animal."""
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.bar(ANIMALS, SF_ZOO)
    ax.set_title("Basic Bar Chart")
    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def grouped_bar_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Two zoos side by side for each animal."""
    fig, ax = plt.subplots(figsize=(8, 6))

    x = np.arange(len(ANIMALS))
    width = 0.4
    ax.bar(x - width / 2, SF_ZOO, width, label="SF Zoo")
    ax.bar(x + width / 2, LA_ZOO, width, label="LA Zoo")

    ax.set_xticks(x)
    ax.set_xticklabels(ANIMALS)
    ax.set_title("Grouped Bar Chart")
    ax.legend(loc="best")

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def stacked_bar_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """LA Zoo counts stacked on top of SF Zoo counts."""
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.bar(ANIMALS, SF_ZOO, label="SF Zoo")
    ax.bar(ANIMALS, LA_ZOO, bottom=SF_ZOO, label="LA Zoo")

    ax.set_title("Stacked Bar Chart")
    ax.legend(loc="best")

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)
