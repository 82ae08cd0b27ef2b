"""GBM Chart Gallery.

Synthetic price paths from discretized Geometric Brownian Motion, and a
gallery of scatter, bar, error-bar, candlestick and OHLC demo charts that
render them with matplotlib.
"""

from gbmcharts.simulation import PathGenerator, geometric_brownian_motion, bars_from_path, random_bars
from gbmcharts.data import sample_ohlc
from gbmcharts.config import GalleryConfig
from gbmcharts.gallery import GALLERY, run_group, run_gallery

__version__ = "1.0.0"
__all__ = [
    "PathGenerator",
    "geometric_brownian_motion",
    "bars_from_path",
    "random_bars",
    "sample_ohlc",
    "GalleryConfig",
    "GALLERY",
    "run_group",
    "run_gallery",
]
