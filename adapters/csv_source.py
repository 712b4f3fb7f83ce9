"""
CSV bar source.

Reads minute/hour/day bars exported in the CryptoCompare histo layout:

    time,high,low,open,volumefrom,volumeto,close,conversionType,conversionSymbol

Extra columns are ignored. Rows must be oldest first.
"""

import csv
import logging
import math
from io import StringIO
from pathlib import Path
from typing import Hashable, Iterable

from .base import BaseBarSource
from domain import OHLCBar
from ports import DataError, ParseError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("time", "high", "low", "open", "close")


def _to_float(raw: str | None, column: str, line: int, source: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ParseError(
            source=source,
            format_type="csv",
            reason=f"column '{column}' is not a number: {raw!r}",
            line=line,
            cause=e,
        ) from e

    # WHY: float() accepts "nan" and "inf", which no price or timestamp can be
    if not math.isfinite(value):
        raise ParseError(
            source=source,
            format_type="csv",
            reason=f"column '{column}' is not a finite number: {raw!r}",
            line=line,
        )
    return value


def _rows_to_bars(
    reader: csv.DictReader,
    source: str,
    limit: int | None = None,
) -> list[OHLCBar]:
    if reader.fieldnames is None:
        raise DataError.empty(source, "CSV has no header row")

    fields = {name.strip() for name in reader.fieldnames}
    for column in REQUIRED_COLUMNS:
        if column not in fields:
            raise DataError.missing(source, column)

    bars = []
    # Header is line 1
    for line, row in enumerate(reader, start=2):
        if limit is not None and len(bars) >= limit:
            break

        row = {k.strip(): v for k, v in row.items() if k is not None}
        timestamp = _to_float(row.get("time"), "time", line, source)
        bars.append(OHLCBar(
            timestamp=int(timestamp),
            open=_to_float(row.get("open"), "open", line, source),
            high=_to_float(row.get("high"), "high", line, source),
            low=_to_float(row.get("low"), "low", line, source),
            close=_to_float(row.get("close"), "close", line, source),
            volume_from=_volume(row, "volumefrom", line, source),
            volume_to=_volume(row, "volumeto", line, source),
        ))

    return bars


def _volume(row: dict[str, str], column: str, line: int, source: str) -> float:
    raw = row.get(column)
    if raw is None or raw.strip() == "":
        return 0.0
    return _to_float(raw, column, line, source)


def parse_bars(
    text: str | Iterable[str],
    limit: int | None = None,
    source: str = "csv",
) -> list[OHLCBar]:
    """
    Parse CSV text into bars.

    Args:
        text: Whole CSV document, or an iterable of lines
        limit: Stop after this many bars (None = all)
        source: Name used in error messages

    Returns:
        Bars in file order

    Raises:
        ParseError: If a numeric column cannot be parsed
        DataError: If the header is missing or lacks a required column
    """
    lines = StringIO(text) if isinstance(text, str) else text
    return _rows_to_bars(csv.DictReader(lines), source, limit)


class CsvBarSource(BaseBarSource):
    """
    Bars from a CSV file on disk.

    The parsed file is cached until its modification time changes,
    so repeated loads while resizing the view are cheap.
    """

    def __init__(self, path: Path | str):
        super().__init__()
        self.path = Path(path)

    @property
    def source_name(self) -> str:
        return f"csv:{self.path.name}"

    def _cache_token(self) -> Hashable:
        try:
            stat = self.path.stat()
        except OSError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def _load_impl(self) -> list[OHLCBar]:
        if not self.path.exists():
            raise DataError(
                self.source_name,
                f"File not found: {self.path}",
                field="path",
            )

        with open(self.path, newline="", encoding="utf-8") as f:
            bars = _rows_to_bars(csv.DictReader(f), self.source_name)

        if not bars:
            logger.warning(f"No rows in {self.path}")
        return bars
