from .base import BaseBarSource
from .csv_source import CsvBarSource, parse_bars

__all__ = [
    "BaseBarSource",
    "CsvBarSource",
    "parse_bars",
]
