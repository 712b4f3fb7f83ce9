from .report import (
    format_frame_text,
    write_frame_text,
)
from .json_api import (
    ChartFrameResponse,
    BoxElementResponse,
    BandPointResponse,
    LineResponse,
    to_api_response,
    to_json,
)

__all__ = [
    # Text report
    "format_frame_text",
    "write_frame_text",
    # JSON API
    "ChartFrameResponse",
    "BoxElementResponse",
    "BandPointResponse",
    "LineResponse",
    "to_api_response",
    "to_json",
]
