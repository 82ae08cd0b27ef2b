"""
Tests for synthetic OHLC bars and the bundled price sample.
"""

import pytest
import numpy as np
import pandas as pd
from gbmcharts.data.sample_prices import sample_ohlc
from gbmcharts.simulation.bars import OHLC_COLUMNS, bars_from_path, random_bars


class TestBarsFromPath:
    """Test suite for bars_from_path."""

    @pytest.fixture
    def mid(self):
        """Create a short mid-price path."""
        return np.linspace(100.0, 150.0, 500)

    def test_columns_and_index(self, mid):
        """Test frame layout."""
        bars = bars_from_path(mid, rng=0)

        assert list(bars.columns) == OHLC_COLUMNS
        assert len(bars) == len(mid)
        assert list(bars.index) == list(range(len(mid)))

    def test_wicks(self, mid):
        """Test that lows and highs are fixed multiples of mid."""
        bars = bars_from_path(mid, rng=0)

        np.testing.assert_array_equal(bars["low"].to_numpy(), 0.92 * mid)
        np.testing.assert_array_equal(bars["high"].to_numpy(), 1.09 * mid)

    def test_bodies(self, mid):
        """Test that each body spans 2% either side of mid."""
        bars = bars_from_path(mid, rng=0)

        lower = np.minimum(bars["open"], bars["close"]).to_numpy()
        upper = np.maximum(bars["open"], bars["close"]).to_numpy()
        np.testing.assert_allclose(lower, 0.98 * mid, rtol=1e-15)
        np.testing.assert_allclose(upper, 1.02 * mid, rtol=1e-15)

    def test_ohlc_invariants(self, mid):
        """Test that low and high bound every body."""
        bars = bars_from_path(mid, rng=1)

        assert (bars["low"] <= bars[["open", "close"]].min(axis=1)).all()
        assert (bars["high"] >= bars[["open", "close"]].max(axis=1)).all()

    def test_both_directions_occur(self, mid):
        """Test that the coin produces rising and falling candles."""
        bars = bars_from_path(mid, rng=2)
        rising = (bars["close"] > bars["open"]).sum()

        assert 0 < rising < len(bars)

    def test_reproducibility(self, mid):
        """Test that the same seed gives the same bars."""
        pd.testing.assert_frame_equal(bars_from_path(mid, rng=4), bars_from_path(mid, rng=4))

    def test_custom_multipliers(self):
        """Test custom body and wick sizes."""
        bars = bars_from_path([10.0], rng=0, body=0.1, low=0.5, high=2.0)

        assert sorted([bars["open"][0], bars["close"][0]]) == pytest.approx([9.0, 11.0])
        assert bars["low"][0] == 5.0
        assert bars["high"][0] == 20.0

    def test_empty_path(self):
        """Test that an empty path gives an empty frame."""
        bars = bars_from_path([], rng=0)

        assert bars.empty
        assert list(bars.columns) == OHLC_COLUMNS

    def test_two_dimensional_input_raises(self):
        """Test that non-1D input is rejected."""
        with pytest.raises(ValueError, match="one-dimensional"):
            bars_from_path(np.ones((3, 3)), rng=0)


class TestRandomBars:
    """Test suite for random_bars."""

    def test_length(self):
        """Test that one bar is produced per step."""
        assert len(random_bars(250, rng=1)) == 250

    def test_first_bar_centered_on_start_price(self):
        """Test that the first candle wraps the start price."""
        bars = random_bars(10, rng=1, start_price=50.0)
        mid = (bars["open"][0] + bars["close"][0]) / 2

        assert mid == pytest.approx(50.0, rel=1e-12)
        assert bars["low"][0] == pytest.approx(0.92 * 50.0)

    def test_reproducibility(self):
        """Test that the same seed gives the same bars."""
        pd.testing.assert_frame_equal(random_bars(100, rng=3), random_bars(100, rng=3))

    def test_invalid_step_count(self):
        """Test that an empty path is rejected."""
        with pytest.raises(ValueError, match="step_count"):
            random_bars(0, rng=1)


class TestSampleOhlc:
    """Test suite for the bundled price sample."""

    def test_shape(self):
        """Test sample size and columns."""
        bars = sample_ohlc()

        assert len(bars) == 30
        assert list(bars.columns) == OHLC_COLUMNS

    def test_index(self):
        """Test the date index."""
        bars = sample_ohlc()

        assert isinstance(bars.index, pd.DatetimeIndex)
        assert bars.index.name == "date"
        assert bars.index[0] == pd.Timestamp("2017-01-04")
        assert bars.index[-1] == pd.Timestamp("2017-02-15")
        assert bars.index.is_monotonic_increasing

    def test_values(self):
        """Test a known row and the OHLC invariants."""
        bars = sample_ohlc()

        first = bars.iloc[0]
        assert first["open"] == 115.849998
        assert first["high"] == 116.510002
        assert first["low"] == 115.75
        assert first["close"] == 116.019997
        assert (bars["low"] <= bars[["open", "close"]].min(axis=1)).all()
        assert (bars["high"] >= bars[["open", "close"]].max(axis=1)).all()

    def test_returns_fresh_copy(self):
        """Test that modifying one sample does not affect the next."""
        bars = sample_ohlc()
        bars.loc[bars.index[0], "open"] = 0.0

        assert sample_ohlc()["open"].iloc[0] == 115.849998
