"""Synthetic OHLC bars built around a mid-price path."""

from typing import Sequence
import numpy as np
import pandas as pd
from gbmcharts.simulation.path_generator import geometric_brownian_motion

OHLC_COLUMNS = ["open", "high", "low", "close"]


def bars_from_path(
    mid: Sequence[float],
    rng=None,
    body: float = 0.02,
    low: float = 0.92,
    high: float = 1.09,
) -> pd.DataFrame:
    """Wrap every mid price in a candle.

    A fair coin picks the direction of each candle: rising candles open
    ``body`` below the mid and close ``body`` above it, falling candles the
    other way around. Wicks sit at fixed multiples of the mid.

    Parameters
    ----------
    mid : sequence of float
        Mid prices, one per bar
    rng : numpy.random.Generator, int or None, optional
        Randomness source for the candle directions
    body : float, default=0.02
        Half-height of the candle body as a fraction of mid
    low : float, default=0.92
        Low as a multiple of mid
    high : float, default=1.09
        High as a multiple of mid

    Returns
    -------
    pd.DataFrame
        Columns ``open``, ``high``, ``low``, ``close`` indexed 0..n-1
    """
    mid = np.asarray(mid, dtype=np.float64)
    if mid.ndim != 1:
        raise ValueError(f"mid must be one-dimensional, got shape {mid.shape}")

    rng = np.random.default_rng(rng)
    up = rng.random(len(mid)) < 0.5

    lower = (1.0 - body) * mid
    upper = (1.0 + body) * mid

    return pd.DataFrame(
        {
            "open": np.where(up, lower, upper),
            "high": high * mid,
            "low": low * mid,
            "close": np.where(up, upper, lower),
        },
        columns=OHLC_COLUMNS,
    )


def random_bars(
    step_count: int,
    rng=None,
    start_price: float = 100.0,
    time_step: float = 1.0 / 365.0,
    drift: float = 0.15,
    diffusion: float = 0.5,
) -> pd.DataFrame:
    """Generate a GBM mid path and turn it into bars.

    The path and the candle directions draw from the same stream.
    """
    rng = np.random.default_rng(rng)
    mid = geometric_brownian_motion(
        start_price, time_step, step_count, drift, diffusion, rng=rng
    )
    return bars_from_path(mid, rng=rng)
