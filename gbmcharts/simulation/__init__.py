"""Simulation of synthetic price data."""

from gbmcharts.simulation.path_generator import PathGenerator, geometric_brownian_motion
from gbmcharts.simulation.bars import bars_from_path, random_bars

__all__ = ["PathGenerator", "geometric_brownian_motion", "bars_from_path", "random_bars"]
