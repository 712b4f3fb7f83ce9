"""
JSON API response types.

Structured responses for whatever draws the chart: a web frontend,
a notebook, or a desktop plot widget fed over a pipe.
"""

from typing import Any

from pydantic import BaseModel

from domain import BandPoint, BoxElement
from domain.indicators import OptionalScalarSeries
from orchestration.render import ChartFrame


# ============================================================================
# Response Models
# ============================================================================

class BoxElementResponse(BaseModel):
    """API response for one candlestick."""
    index: float
    lower_whisker: float
    quartile1: float
    median: float
    quartile3: float
    upper_whisker: float
    color: str


class BandPointResponse(BaseModel):
    """API response for one Bollinger point."""
    index: float
    upper: float
    lower: float


class LineResponse(BaseModel):
    """API response for a scalar overlay; None marks gaps."""
    name: str
    values: list[float | None]


class ChartFrameResponse(BaseModel):
    """Full frame API response."""
    bar_count: int
    candles: list[BoxElementResponse]
    typical_price: LineResponse | None = None
    sma: list[LineResponse]
    bollinger: list[BandPointResponse] | None = None
    omitted: dict[str, str]


# ============================================================================
# Conversion Functions
# ============================================================================

def _box_to_response(box: BoxElement) -> BoxElementResponse:
    """Convert BoxElement to API response."""
    return BoxElementResponse(
        index=box.index,
        lower_whisker=box.lower_whisker,
        quartile1=box.quartile1,
        median=box.median,
        quartile3=box.quartile3,
        upper_whisker=box.upper_whisker,
        color=box.color.value,
    )


def _band_to_response(point: BandPoint) -> BandPointResponse:
    return BandPointResponse(index=point.index, upper=point.upper, lower=point.lower)


def sma_lines(frame: ChartFrame) -> list[tuple[str, OptionalScalarSeries]]:
    """Labeled SMA lines: configured windows first ('sma_20'), then 'sma_custom_35'."""
    lines = [(f"sma_{w}", values) for w, values in frame.sma.items()]
    if frame.custom_sma is not None:
        lines.append((f"sma_custom_{frame.custom_sma_window}", frame.custom_sma))
    return lines


def to_api_response(frame: ChartFrame) -> ChartFrameResponse:
    """
    Convert ChartFrame to API response.

    Args:
        frame: Geometry from build_frame()

    Returns:
        Structured API response
    """
    typical = None
    if frame.typical_price is not None:
        typical = LineResponse(name="typical_price", values=list(frame.typical_price))

    bands = None
    if frame.bollinger is not None:
        bands = [_band_to_response(p) for p in frame.bollinger]

    return ChartFrameResponse(
        bar_count=frame.bar_count,
        candles=[_box_to_response(b) for b in frame.candles],
        typical_price=typical,
        sma=[
            LineResponse(name=name, values=list(values))
            for name, values in sma_lines(frame)
        ],
        bollinger=bands,
        omitted=dict(frame.omitted),
    )


def to_json(frame: ChartFrame) -> dict[str, Any]:
    """
    Convert ChartFrame to JSON-serializable dict.

    Args:
        frame: Chart frame

    Returns:
        JSON-serializable dictionary
    """
    response = to_api_response(frame)
    return response.model_dump(mode="json")
