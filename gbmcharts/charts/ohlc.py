"""OHLC chart demos."""

from typing import Optional
from pathlib import Path
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from gbmcharts.data.sample_prices import sample_ohlc
from gbmcharts.simulation.bars import random_bars
from gbmcharts.visualization import label_dates, plot_ohlc, render_figure

# (suffix, width px, height px)
EXPORT_SIZES = [
    ("png", 1024, 1024),
    ("jpg", 1024, 512),
]


def export_copies(fig: Figure, output_path: str, dpi: int = 100) -> list:
    """Save fixed-size image copies of ``fig`` next to ``output_path``.

    Files are named ``<stem>_<width>x<height>.<suffix>``.

    Returns
    -------
    list of Path
        Paths of the written files
    """
    base = Path(output_path).resolve()
    base.parent.mkdir(parents=True, exist_ok=True)
    original_size = fig.get_size_inches()

    written = []
    for suffix, width, height in EXPORT_SIZES:
        target = base.with_name(f"{base.stem}_{width}x{height}.{suffix}")
        fig.set_size_inches(width / dpi, height / dpi)
        fig.savefig(str(target), dpi=dpi)
        written.append(target)

    fig.set_size_inches(*original_size)
    return written


def simple_ohlc_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """OHLC bars for the 30-session price sample."""
    bars = sample_ohlc()

    fig, ax = plt.subplots(figsize=(12, 6))
    plot_ohlc(ax, bars)
    label_dates(ax, bars.index)
    ax.set_title("Simple OHLC Chart")
    ax.set_ylabel("Price ($)")
    ax.grid(True, alpha=0.3)

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)


def gbm_ohlc_chart(
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
    rng=None,
    n: int = 3000,
    export_images: bool = False,
) -> Figure:
    """OHLC bars wrapped around a simulated GBM path.

    Parameters
    ----------
    export_images : bool, default=False
        Also write 1024x1024 PNG and 1024x512 JPG copies next to
        ``output_path``. Ignored when no output path is given.
    """
    bars = random_bars(n, rng=rng)

    fig, ax = plt.subplots(figsize=(16, 8))
    plot_ohlc(ax, bars)
    ax.set_title("GBM OHLC Chart")
    ax.set_xlabel("Step")
    ax.set_ylabel("Price ($)")

    if output_path and export_images:
        export_copies(fig, output_path)

    return render_figure(fig, output_path=output_path, show_plot=show_plot, dpi=dpi)
