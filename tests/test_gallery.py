"""
Tests for the chart gallery registry and runner.
"""

import pytest
import numpy as np
from unittest.mock import Mock
from gbmcharts.gallery import GALLERY, RANDOMIZED, get_group, run_gallery, run_group


class TestGalleryRegistry:
    """Test suite for the group registry."""

    def test_groups(self):
        """Test the available groups and their order."""
        assert list(GALLERY) == ["scatter", "bar", "error_bar", "candlestick", "ohlc"]

    def test_demo_count(self):
        """Test that every demo is registered once."""
        demos = [demo for group in GALLERY.values() for demo in group]

        assert len(demos) == 13
        assert len(set(demos)) == 13

    def test_randomized_demos_are_registered(self):
        """Test that every simulated demo belongs to a group."""
        demos = {demo for group in GALLERY.values() for demo in group}

        assert RANDOMIZED <= demos
        assert len(RANDOMIZED) == 3

    def test_get_group(self):
        """Test group lookup."""
        assert [demo.__name__ for demo in get_group("error_bar")] == [
            "basic_symmetric_error_bars",
            "bar_chart_with_error_bars",
        ]

    def test_get_unknown_group(self):
        """Test that an unknown group lists the valid names."""
        with pytest.raises(ValueError, match="Unknown chart group 'pie'.*scatter"):
            get_group("pie")


class TestRunGroup:
    """Test suite for run_group."""

    def test_renders_every_demo(self):
        """Test that a figure is returned per demo."""
        figures = run_group("bar", show_plot=False)

        assert list(figures) == ["basic_bar_chart", "grouped_bar_chart", "stacked_bar_chart"]

    def test_saves_files(self, tmp_path):
        """Test that each demo is saved as <demo>.png."""
        run_group("error_bar", output_dir=str(tmp_path), show_plot=False, dpi=50)

        assert (tmp_path / "basic_symmetric_error_bars.png").exists()
        assert (tmp_path / "bar_chart_with_error_bars.png").exists()

    def test_export_images(self, tmp_path):
        """Test that the OHLC group writes fixed-size copies when asked."""
        run_group(
            "ohlc", output_dir=str(tmp_path), show_plot=False, seed=1, dpi=30,
            export_images=True,
        )

        assert (tmp_path / "gbm_ohlc_chart.png").exists()
        assert (tmp_path / "gbm_ohlc_chart_1024x1024.png").exists()
        assert (tmp_path / "gbm_ohlc_chart_1024x512.jpg").exists()
        assert not (tmp_path / "simple_ohlc_chart_1024x1024.png").exists()

    def test_no_export_by_default(self, tmp_path):
        """Test that no copies are written without export_images."""
        run_group("ohlc", output_dir=str(tmp_path), show_plot=False, seed=1, dpi=30)

        assert list(tmp_path.glob("*.jpg")) == []
        assert len(list(tmp_path.glob("*.png"))) == 2

    def test_callback(self, tmp_path):
        """Test that the callback receives each demo and its output path."""
        callback = Mock()

        run_group("bar", output_dir=str(tmp_path), show_plot=False, dpi=50, callback=callback)

        assert callback.call_count == 3
        callback.assert_any_call("stacked_bar_chart", tmp_path / "stacked_bar_chart.png")

    def test_callback_without_output(self):
        """Test that the output path is None when nothing is saved."""
        callback = Mock()

        run_group("error_bar", show_plot=False, callback=callback)

        callback.assert_any_call("basic_symmetric_error_bars", None)

    def test_seed_reproducibility(self):
        """Test that a seed fixes the simulated charts."""
        figures1 = run_group("scatter", show_plot=False, seed=11)
        figures2 = run_group("scatter", show_plot=False, seed=11)

        np.testing.assert_array_equal(
            figures1["gbm_scatter_plot"].axes[0].lines[0].get_ydata(),
            figures2["gbm_scatter_plot"].axes[0].lines[0].get_ydata(),
        )

    def test_different_seeds(self):
        """Test that different seeds give different simulated charts."""
        figures1 = run_group("scatter", show_plot=False, seed=1)
        figures2 = run_group("scatter", show_plot=False, seed=2)

        assert not np.array_equal(
            figures1["gbm_scatter_plot"].axes[0].lines[0].get_ydata(),
            figures2["gbm_scatter_plot"].axes[0].lines[0].get_ydata(),
        )

    def test_unknown_group(self):
        """Test that an unknown group is rejected."""
        with pytest.raises(ValueError, match="Unknown chart group"):
            run_group("pie", show_plot=False)


class TestRunGallery:
    """Test suite for run_gallery."""

    def test_selected_groups(self):
        """Test rendering a subset of groups."""
        results = run_gallery(["bar", "error_bar"], show_plot=False)

        assert list(results) == ["bar", "error_bar"]
        assert len(results["bar"]) == 3
        assert len(results["error_bar"]) == 2

    def test_unknown_group_renders_nothing(self):
        """Test that groups are validated before rendering starts."""
        callback = Mock()

        with pytest.raises(ValueError, match="Unknown chart group"):
            run_gallery(["bar", "pie"], show_plot=False, callback=callback)

        callback.assert_not_called()

    def test_all_groups(self, tmp_path):
        """Test rendering the whole gallery to disk."""
        results = run_gallery(output_dir=str(tmp_path), show_plot=False, seed=3, dpi=30)

        assert list(results) == list(GALLERY)
        assert len(list(tmp_path.glob("*.png"))) == 13

    def test_export_images_passed_to_groups(self, tmp_path):
        """Test that run_gallery forwards export_images."""
        run_gallery(
            ["bar", "ohlc"], output_dir=str(tmp_path), show_plot=False, seed=3,
            dpi=30, export_images=True,
        )

        assert [p.name for p in tmp_path.glob("*.jpg")] == ["gbm_ohlc_chart_1024x512.jpg"]

    def test_groups_use_independent_streams(self):
        """Test that simulated charts in different groups differ."""
        results = run_gallery(["candlestick", "ohlc"], show_plot=False, seed=5)

        candle_heights = [
            p.get_height()
            for p in results["candlestick"]["gbm_candlestick_chart"].axes[0].patches
        ]
        ohlc_lines = results["ohlc"]["gbm_ohlc_chart"].axes[0].collections[0]
        ohlc_highs = [segment[1][1] for segment in ohlc_lines.get_segments()]

        # Bodies span 4% of mid and highs sit at 109% of mid
        candle_mids = np.array(candle_heights) / 0.04
        ohlc_mids = np.array(ohlc_highs) / 1.09
        assert not np.allclose(candle_mids, ohlc_mids)
