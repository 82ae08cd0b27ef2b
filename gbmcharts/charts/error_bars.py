"""Error bar demos."""

from typing import Optional
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from gbmcharts.visualization import render_figure

TRIALS = ["Trial 1", "Trial 2", "Trial 3"]


def basic_symmetric_error_bars(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """A line trace with symmetric y errors."""
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.errorbar([0, 1, 2], [6, 10, 2], yerr=[1.0, 2.0, 3.0],
                marker="o", capsize=4, label="trace1")
    ax.set_title("Basic Symmetric Error Bars")
    ax.grid(True, alpha=0.3)
    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def bar_chart_with_error_bars(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Two grouped bar series, each bar carrying its own error."""
    fig, ax = plt.subplots(figsize=(8, 6))

    x = np.arange(len(TRIALS))
    width = 0.4
    ax.bar(x - width / 2, [3, 6, 4], width, yerr=[1.0, 0.5, 1.5],
           capsize=4, label="Control")
    ax.bar(x + width / 2, [4, 7, 3], width, yerr=[0.5, 1.0, 2.0],
           capsize=4, label="LA Zoo")

    ax.set_xticks(x)
    ax.set_xticklabels(TRIALS)
    ax.set_title("Bar Chart with Error Bars")
    ax.legend(loc="best")

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)
