from .sources import (
    BarSource,
    ChartError,
    InvalidParameterError,
    ParseError,
    DataError,
    ErrorCode,
)

__all__ = [
    "BarSource",
    "ChartError",
    "InvalidParameterError",
    "ParseError",
    "DataError",
    "ErrorCode",
]
