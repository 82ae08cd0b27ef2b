"""Candlestick chart demos."""

from typing import Optional
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from gbmcharts.data.sample_prices import sample_ohlc
from gbmcharts.simulation.bars import random_bars
from gbmcharts.visualization import label_dates, plot_candlestick, render_figure


def simple_candlestick_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Candlesticks for the 30-session price sample."""
    bars = sample_ohlc()

    fig, ax = plt.subplots(figsize=(12, 6))
    plot_candlestick(ax, bars)
    label_dates(ax, bars.index)
    ax.set_title("Simple Candlestick Chart")
    ax.set_ylabel("Price ($)")
    ax.grid(True, alpha=0.3)

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def gbm_candlestick_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
    rng=None,
    n: int = 3000,
) -> Figure:
    """Candlesticks wrapped around a simulated GBM path."""
    bars = random_bars(n, rng=rng)

    fig, ax = plt.subplots(figsize=(16, 8))
    plot_candlestick(ax, bars)
    ax.set_title("GBM Candlestick Chart")
    ax.set_xlabel("Step")
    ax.set_ylabel("Price ($)")

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)
