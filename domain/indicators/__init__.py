"""Technical indicators for candlestick charts.

Each indicator is an independent pure function over a bar list or a
scalar series. None of them mutates its input or keeps state between calls,
so a renderer can call whichever ones are switched on for the current frame.

Indicators:
    - Candlesticks: box-plot geometry colored against the previous close
    - Typical Price: (high + low + close) / 3 per bar
    - Rolling Mean: simple moving average with an incremental running sum
    - Bollinger Bands: rolling mean +/- k population standard deviations

Example:
    >>> from domain.indicators import bollinger, rolling_mean, typical_price
    >>>
    >>> tp = typical_price(bars)
    >>> sma20 = rolling_mean(tp, 20)
    >>> bands = bollinger(tp, window=20, num_std_devs=2.0)
"""

from domain.indicators.base import OptionalScalarSeries, ScalarSeries
from domain.indicators.bollinger import bollinger, rolling_std
from domain.indicators.candlestick import build_candlesticks, candle_color
from domain.indicators.moving_averages import rolling_mean, sma_overlays
from domain.indicators.typical_price import typical_price

__all__ = [
    # Base types
    "ScalarSeries",
    "OptionalScalarSeries",
    # Geometry
    "build_candlesticks",
    "candle_color",
    # Scalar series
    "typical_price",
    # Moving averages
    "rolling_mean",
    "sma_overlays",
    # Volatility
    "bollinger",
    "rolling_std",
]
