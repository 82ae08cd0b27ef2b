"""Demo charts rendered with matplotlib."""

from gbmcharts.charts.scatter import (
    line_and_scatter_plot,
    data_labels_hover,
    data_labels_on_the_plot,
    gbm_scatter_plot,
)
from gbmcharts.charts.bar import basic_bar_chart, grouped_bar_chart, stacked_bar_chart
from gbmcharts.charts.error_bars import basic_symmetric_error_bars, bar_chart_with_error_bars
from gbmcharts.charts.candlestick import simple_candlestick_chart, gbm_candlestick_chart
from gbmcharts.charts.ohlc import simple_ohlc_chart, gbm_ohlc_chart

__all__ = [
    "line_and_scatter_plot",
    "data_labels_hover",
    "data_labels_on_the_plot",
    "gbm_scatter_plot",
    "basic_bar_chart",
    "grouped_bar_chart",
    "stacked_bar_chart",
    "basic_symmetric_error_bars",
    "bar_chart_with_error_bars",
    "simple_candlestick_chart",
    "gbm_candlestick_chart",
    "simple_ohlc_chart",
    "gbm_ohlc_chart",
]
