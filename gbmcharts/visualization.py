"""Shared rendering helpers and financial glyphs for matplotlib axes."""

from typing import Optional, Sequence, Tuple
from pathlib import Path
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from gbmcharts.simulation.bars import OHLC_COLUMNS

RISING_COLOR = "tab:green"
FALLING_COLOR = "tab:red"


def render_figure(
    fig: Figure,
    output_path: Optional[str] = None,
    show_plot: bool = True,
    dpi: int = 150,
) -> Figure:
    """Save and/or display a finished figure.

    Parameters
    ----------
    fig : Figure
        Figure to render
    output_path : str, optional
        Path to save the figure. Parent directories are created.
    show_plot : bool, default=True
        Whether to display the figure. If False the figure is closed.
    dpi : int, default=150
        Resolution used when saving

    Returns
    -------
    Figure
        The rendered figure
    """
    if output_path:
        output_path_abs = Path(output_path).resolve()
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(str(output_path_abs), dpi=dpi, bbox_inches="tight")

    if show_plot:
        plt.show()
    else:
        plt.close(fig)

    return fig


def _check_bars(bars: pd.DataFrame) -> None:
    missing = [col for col in OHLC_COLUMNS if col not in bars.columns]
    if missing:
        raise ValueError(f"Bars are missing required columns: {missing}")


def _positions(bars: pd.DataFrame, x: Optional[Sequence[float]]) -> np.ndarray:
    if x is None:
        return np.arange(len(bars), dtype=np.float64)
    x = np.asarray(x, dtype=np.float64)
    if len(x) != len(bars):
        raise ValueError(
            f"x has {len(x)} positions but there are {len(bars)} bars"
        )
    return x


def _direction_colors(bars: pd.DataFrame) -> list:
    rising = (bars["close"] >= bars["open"]).to_numpy()
    return [RISING_COLOR if up else FALLING_COLOR for up in rising]


def plot_candlestick(
    ax: Axes,
    bars: pd.DataFrame,
    x: Optional[Sequence[float]] = None,
    width: float = 0.6,
):
    """Draw candlesticks: a high-low wick and an open-close body per bar.

    Parameters
    ----------
    ax : Axes
        Axes to draw on
    bars : pd.DataFrame
        Frame with ``open``, ``high``, ``low``, ``close`` columns
    x : sequence of float, optional
        Bar positions. Defaults to 0..n-1.
    width : float, default=0.6
        Body width in x units

    Returns
    -------
    BarContainer
        The candle bodies

    Raises
    ------
    ValueError
        If columns are missing or x does not match the number of bars
    """
    _check_bars(bars)
    positions = _positions(bars, x)
    colors = _direction_colors(bars)

    open_ = bars["open"].to_numpy()
    close = bars["close"].to_numpy()

    ax.vlines(
        positions,
        bars["low"].to_numpy(),
        bars["high"].to_numpy(),
        colors=colors,
        linewidth=0.8,
    )
    return ax.bar(
        positions,
        np.abs(close - open_),
        bottom=np.minimum(open_, close),
        width=width,
        color=colors,
        edgecolor=colors,
    )


def plot_ohlc(
    ax: Axes,
    bars: pd.DataFrame,
    x: Optional[Sequence[float]] = None,
    tick_width: float = 0.3,
) -> Tuple[LineCollection, LineCollection, LineCollection]:
    """Draw OHLC bars: a high-low line with open (left) and close (right) ticks.

    Parameters
    ----------
    ax : Axes
        Axes to draw on
    bars : pd.DataFrame
        Frame with ``open``, ``high``, ``low``, ``close`` columns
    x : sequence of float, optional
        Bar positions. Defaults to 0..n-1.
    tick_width : float, default=0.3
        Length of the open and close ticks in x units

    Returns
    -------
    tuple of LineCollection
        The high-low ranges, the open ticks and the close ticks

    Raises
    ------
    ValueError
        If columns are missing or x does not match the number of bars
    """
    _check_bars(bars)
    positions = _positions(bars, x)
    colors = _direction_colors(bars)

    ranges = ax.vlines(
        positions,
        bars["low"].to_numpy(),
        bars["high"].to_numpy(),
        colors=colors,
        linewidth=1.0,
    )
    open_ticks = ax.hlines(
        bars["open"].to_numpy(),
        positions - tick_width,
        positions,
        colors=colors,
        linewidth=1.0,
    )
    close_ticks = ax.hlines(
        bars["close"].to_numpy(),
        positions,
        positions + tick_width,
        colors=colors,
        linewidth=1.0,
    )
    return ranges, open_ticks, close_ticks


def label_dates(ax: Axes, index: pd.DatetimeIndex, every: int = 5) -> None:
    """Label integer bar positions with dates from ``index``."""
    ticks = np.arange(0, len(index), every)
    ax.set_xticks(ticks)
    ax.set_xticklabels([index[i].strftime("%Y-%m-%d") for i in ticks])
    ax.figure.autofmt_xdate()
