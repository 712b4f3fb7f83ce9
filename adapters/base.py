"""
Base bar source with caching and structured logging.

All sources should inherit from BaseBarSource to get:
- Parsed-bar caching, invalidated by a source-specific token
- Limit handling (first N bars of the series)
- Structured logging at boundaries
- Wrapping of unexpected failures into DataError
"""

from abc import ABC, abstractmethod
from typing import Hashable
import logging

from domain import OHLCBar
from ports import ChartError, DataError, InvalidParameterError

logger = logging.getLogger(__name__)


class CacheEntry:
    """Parsed bars plus the token they were read under."""

    __slots__ = ("data", "token")

    def __init__(self, data: list[OHLCBar], token: Hashable):
        self.data = data
        self.token = token

    def is_valid(self, token: Hashable) -> bool:
        return token is not None and token == self.token


class BaseBarSource(ABC):
    """
    Base class for all bar sources.

    Provides:
    - Parsed-bar caching so redraws do not re-read the input
    - Limit handling
    - Error handling boilerplate
    """

    def __init__(self):
        self._cache: CacheEntry | None = None

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this source."""
        ...

    def _cache_token(self) -> Hashable:
        """
        Token identifying the current input version.

        Return None to disable caching. Override in subclass.
        """
        return None

    def load(self, limit: int | None = None) -> list[OHLCBar]:
        """
        Load bars with caching.

        Args:
            limit: Maximum number of bars, taken from the start (None = all)

        Raises:
            InvalidParameterError: If limit is negative
            ParseError: If the input is malformed
            DataError: If the input is missing or loading fails
        """
        if limit is not None and limit < 0:
            raise InvalidParameterError(
                reason=f"limit must be >= 0, got {limit}",
                field="limit",
                value=limit,
                source=self.source_name,
            )

        token = self._cache_token()
        if self._cache is not None and self._cache.is_valid(token):
            logger.debug(f"Cache hit: {self.source_name}")
            bars = self._cache.data
        else:
            try:
                bars = self._load_impl()
            except ChartError:
                raise
            except Exception as e:
                raise DataError(self.source_name, str(e)) from e

            self._cache = CacheEntry(bars, token)
            logger.info(f"Loaded {len(bars)} bars from {self.source_name}")

        if limit is None:
            return list(bars)
        return bars[:limit]

    def clear_cache(self) -> None:
        self._cache = None

    @abstractmethod
    def _load_impl(self) -> list[OHLCBar]:
        """
        Implementation-specific load logic.

        Subclasses implement this instead of load() to get
        automatic caching and limit handling.
        """
        ...
