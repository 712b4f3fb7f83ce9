"""
Bar source port.

This module defines the protocol for anything that feeds bars into
the chart, and re-exports the error types sources raise.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from domain import (
    ChartError,
    DataError,
    ErrorCode,
    InvalidParameterError,
    OHLCBar,
    ParseError,
)


@runtime_checkable
class BarSource(Protocol):
    """
    Protocol for bar sources.

    Implementations read time-ordered OHLC bars from somewhere
    (a CSV file, an in-memory buffer) and hand them to the chart.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this source, used in logs and errors."""
        ...

    @abstractmethod
    def load(self, limit: int | None = None) -> list[OHLCBar]:
        """
        Load bars, oldest first.

        Args:
            limit: Maximum number of bars to return (None = all)

        Raises:
            ParseError: If the input is malformed
            DataError: If the input is missing or empty
        """
        ...


__all__ = [
    "BarSource",
    "ChartError",
    "DataError",
    "ErrorCode",
    "InvalidParameterError",
    "ParseError",
]
