"""Typical price series."""

from collections.abc import Sequence

from domain.indicators.base import ScalarSeries
from domain.models import OHLCBar


def typical_price(bars: Sequence[OHLCBar]) -> ScalarSeries:
    """Calculate the typical price of each bar.

    Typical Price = (high + low + close) / 3

    Args:
        bars: OHLC bars, oldest first

    Returns:
        List of floats, one per bar

    Example:
        >>> typical_price([OHLCBar(timestamp=0, open=9, high=12, low=6, close=9)])
        [9.0]
    """
    return [bar.typical_price for bar in bars]
