"""Candlestick geometry."""

from collections.abc import Sequence

from domain.enums import CandleColor
from domain.models import BoxElement, OHLCBar


def candle_color(close: float, previous_close: float | None) -> CandleColor:
    """Color a candle by comparing its close with the previous close.

    An unchanged close counts as up. No previous bar means neutral.
    """
    if previous_close is None:
        return CandleColor.NEUTRAL
    return CandleColor.UP if close >= previous_close else CandleColor.DOWN


def build_candlesticks(bars: Sequence[OHLCBar]) -> list[BoxElement]:
    """Convert bars into box-plot shaped candlesticks.

    Whiskers span low..high, the box spans min(open, close)..max(open, close)
    and the median line is the bar's typical price.

    Args:
        bars: OHLC bars, oldest first

    Returns:
        One BoxElement per bar, index i at x = i.
        The first bar has no predecessor and is colored NEUTRAL.

    Example:
        >>> bars = [
        ...     OHLCBar(timestamp=0, open=9, high=10, low=8, close=9.5),
        ...     OHLCBar(timestamp=60, open=9.5, high=11, low=9, close=10.5),
        ... ]
        >>> [b.color.value for b in build_candlesticks(bars)]
        ['neutral', 'up']
    """
    elements = []
    previous_close = None

    for i, bar in enumerate(bars):
        elements.append(BoxElement(
            index=float(i),
            lower_whisker=float(bar.low),
            quartile1=float(min(bar.open, bar.close)),
            median=bar.typical_price,
            quartile3=float(max(bar.open, bar.close)),
            upper_whisker=float(bar.high),
            color=candle_color(bar.close, previous_close),
        ))
        previous_close = bar.close

    return elements
