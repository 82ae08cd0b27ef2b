"""Synthetic price paths using discretized Geometric Brownian Motion."""

import math
import numbers
from typing import List, Optional
from datetime import datetime
import numpy as np
import pandas as pd


def _validate(time_step: float, step_count: int) -> None:
    if isinstance(step_count, bool) or not isinstance(step_count, numbers.Integral):
        raise ValueError(
            f"step_count must be an integer, got {type(step_count).__name__}"
        )
    if step_count < 1:
        raise ValueError(f"step_count must be at least 1, got {step_count}")
    if not time_step >= 0:
        raise ValueError(f"time_step must be non-negative, got {time_step}")


def geometric_brownian_motion(
    start_price: float,
    time_step: float,
    step_count: int,
    drift: float,
    diffusion: float,
    rng=None,
) -> np.ndarray:
    """Generate a single GBM price path.

    Each step scales the previous price by
    ``(1 + drift*dt) + diffusion*sqrt(dt)*Z`` with ``Z ~ N(0, 1)``.

    Parameters
    ----------
    start_price : float
        First value of the path
    time_step : float
        Time increment per step (e.g. 1/365 for daily steps)
    step_count : int
        Length of the resulting path, at least 1
    drift : float
        Drift coefficient (mu)
    diffusion : float
        Diffusion coefficient (sigma)
    rng : numpy.random.Generator, int or None, optional
        Randomness source. Anything ``np.random.default_rng`` accepts;
        a Generator is used as-is.

    Returns
    -------
    np.ndarray
        Read-only array of ``step_count`` prices

    Raises
    ------
    ValueError
        If step_count is below 1 or time_step is negative or NaN
    """
    _validate(time_step, step_count)

    if step_count == 1:
        path = np.array([start_price], dtype=np.float64)
        path.flags.writeable = False
        return path

    rng = np.random.default_rng(rng)

    drift_factor = 1.0 + drift * time_step
    diffusion_factor = diffusion * math.sqrt(time_step)

    z = rng.standard_normal(step_count - 1)
    multipliers = drift_factor + diffusion_factor * z

    # Running product left to right: path[i] = multipliers[i-1] * path[i-1]
    with np.errstate(over="ignore", invalid="ignore"):
        path = np.cumprod(np.concatenate(([float(start_price)], multipliers)))
    path.flags.writeable = False
    return path


class PathGenerator:
    """Generates GBM price paths from an owned random stream.

    Parameters
    ----------
    seed : int, optional
        Seed for the underlying ``SeedSequence``. If None, fresh entropy
        is drawn from the OS.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._seed_sequence = np.random.SeedSequence(seed)
        self.rng = np.random.default_rng(self._seed_sequence)

    def generate(
        self,
        start_price: float,
        time_step: float,
        step_count: int,
        drift: float,
        diffusion: float,
    ) -> np.ndarray:
        """Generate one path from this generator's stream.

        See ``geometric_brownian_motion`` for parameter details.
        """
        return geometric_brownian_motion(
            start_price, time_step, step_count, drift, diffusion, rng=self.rng
        )

    def spawn(self, count: int) -> List[np.random.Generator]:
        """Create ``count`` independent child generators."""
        return [
            np.random.default_rng(child)
            for child in self._seed_sequence.spawn(count)
        ]

    def generate_many(
        self,
        num_paths: int,
        start_price: float,
        time_step: float,
        step_count: int,
        drift: float,
        diffusion: float,
    ) -> List[np.ndarray]:
        """Generate several paths, each from its own child stream.

        Parameters
        ----------
        num_paths : int
            Number of independent paths to generate

        Returns
        -------
        list of np.ndarray
            One read-only path per child stream
        """
        if num_paths < 0:
            raise ValueError(f"num_paths must be non-negative, got {num_paths}")
        _validate(time_step, step_count)

        return [
            geometric_brownian_motion(
                start_price, time_step, step_count, drift, diffusion, rng=child
            )
            for child in self.spawn(num_paths)
        ]

    def generate_series(
        self,
        start_price: float,
        time_step: float,
        step_count: int,
        drift: float,
        diffusion: float,
        start_time: datetime,
        freq: str = "1D",
    ) -> pd.Series:
        """Generate a path indexed by timestamps.

        Parameters
        ----------
        start_time : datetime
            Timestamp of the first price
        freq : str, default="1D"
            Pandas frequency string between consecutive prices

        Returns
        -------
        pd.Series
            Prices indexed by a ``DatetimeIndex`` starting at ``start_time``
        """
        path = self.generate(start_price, time_step, step_count, drift, diffusion)
        time_index = pd.date_range(start=start_time, periods=step_count, freq=freq)
        return pd.Series(path, index=time_index, name="price")
