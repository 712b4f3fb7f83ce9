from .enums import CandleColor
from .errors import (
    ChartError,
    DataError,
    ErrorCode,
    InvalidParameterError,
    ParseError,
)
from .models import BandPoint, BoxElement, OHLCBar, validate_bars

__all__ = [
    # Enums
    "CandleColor",
    # Models
    "OHLCBar",
    "BoxElement",
    "BandPoint",
    "validate_bars",
    # Errors
    "ChartError",
    "InvalidParameterError",
    "ParseError",
    "DataError",
    "ErrorCode",
]
