"""
Domain models - immutable chart data carriers.

Bars come in from ingestion; box elements and band points go out
to whatever draws the chart. None of them is mutated after construction.
"""

from dataclasses import dataclass

from .enums import CandleColor
from .errors import InvalidParameterError


@dataclass(frozen=True)
class OHLCBar:
    """
    One time interval's open/high/low/close/volume record.

    The ordering low <= min(open, close) <= max(open, close) <= high is
    assumed by the indicators but not checked here; see validate_bars().
    """
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume_from: float = 0.0
    volume_to: float = 0.0

    @property
    def typical_price(self) -> float:
        """(high + low + close) / 3 in double precision."""
        return (float(self.high) + float(self.low) + float(self.close)) / 3.0

    def is_well_formed(self) -> bool:
        """Check low <= min(open, close) <= max(open, close) <= high."""
        body_low = min(self.open, self.close)
        body_high = max(self.open, self.close)
        return self.low <= body_low <= body_high <= self.high


@dataclass(frozen=True)
class BoxElement:
    """
    Candlestick geometry for a single bar.

    Whiskers span low..high, the box spans the candle body and the
    median line sits at the bar's typical price.
    """
    index: float
    lower_whisker: float
    quartile1: float
    median: float
    quartile3: float
    upper_whisker: float
    color: CandleColor


@dataclass(frozen=True)
class BandPoint:
    """Bollinger envelope at one index."""
    index: float
    upper: float
    lower: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


def validate_bars(bars: list[OHLCBar]) -> list[OHLCBar]:
    """
    Reject bars whose prices are out of order.

    Args:
        bars: Bars to check

    Returns:
        The same list, for chaining

    Raises:
        InvalidParameterError: On the first malformed bar
    """
    for i, bar in enumerate(bars):
        if not bar.is_well_formed():
            raise InvalidParameterError.malformed_bar(
                i,
                f"low={bar.low} open={bar.open} close={bar.close} high={bar.high}",
            )
    return bars
