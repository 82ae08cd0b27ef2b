"""Bundled price data."""

from gbmcharts.data.sample_prices import sample_ohlc

__all__ = ["sample_ohlc"]
