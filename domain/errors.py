"""
Error types for the charting core.

Structured errors with codes and context, so callers can log them
or decide which overlay to drop from a render pass.
"""

from datetime import datetime
from enum import Enum
from typing import Any


# ============================================================================
# Error Codes
# ============================================================================

class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # Parse errors (3xx)
    PARSE_CSV = "E303"

    # Data errors (4xx)
    DATA_MISSING = "E401"
    DATA_INVALID = "E402"
    DATA_EMPTY = "E404"

    # Validation errors (5xx)
    VALIDATION_PARAM = "E502"
    VALIDATION_BAR = "E504"

    # Internal errors (9xx)
    UNKNOWN = "E999"


# ============================================================================
# Error Classes
# ============================================================================

class ChartError(Exception):
    """
    Base exception for charting failures.

    Provides structured error information for debugging and logging.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        source: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.source = source
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now()

        parts = [f"[{code.value}]"]
        if source:
            parts.append(f"[{source}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "source": self.source,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None,
        }

    def with_context(self, **kwargs: Any) -> "ChartError":
        """Add additional context and return self for chaining."""
        self.context.update(kwargs)
        return self


class InvalidParameterError(ChartError, ValueError):
    """Raised when an indicator or view parameter is out of range."""

    def __init__(
        self,
        reason: str,
        field: str,
        value: Any = None,
        source: str | None = None,
        code: ErrorCode = ErrorCode.VALIDATION_PARAM,
    ):
        context = {"field": field}
        if value is not None:
            context["value"] = str(value)[:50]

        super().__init__(
            message=reason,
            code=code,
            source=source,
            context=context,
        )

    @classmethod
    def window(cls, window: Any, source: str | None = None) -> "InvalidParameterError":
        """Create error for a window size that cannot be averaged over."""
        return cls(
            reason=f"Window must be a positive integer, got {window!r}",
            field="window",
            value=window,
            source=source,
        )

    @classmethod
    def malformed_bar(cls, index: int, reason: str) -> "InvalidParameterError":
        """Create error for a bar that breaks low <= open, close <= high."""
        return cls(
            reason=f"Malformed bar at index {index}: {reason}",
            field="bars",
            value=index,
            code=ErrorCode.VALIDATION_BAR,
        )


class ParseError(ChartError):
    """Raised when input text cannot be parsed into bars."""

    def __init__(
        self,
        source: str,
        format_type: str,
        reason: str,
        line: int | None = None,
        cause: Exception | None = None,
    ):
        code_map = {
            "csv": ErrorCode.PARSE_CSV,
        }
        context: dict[str, Any] = {"format": format_type}
        if line is not None:
            context["line"] = line

        super().__init__(
            message=f"Failed to parse {format_type}: {reason}",
            code=code_map.get(format_type, ErrorCode.UNKNOWN),
            source=source,
            context=context,
            cause=cause,
        )


class DataError(ChartError):
    """Raised when input data is missing or empty."""

    def __init__(
        self,
        source: str,
        reason: str,
        code: ErrorCode = ErrorCode.DATA_INVALID,
        field: str | None = None,
    ):
        context = {"reason": reason}
        if field:
            context["field"] = field

        super().__init__(
            message=reason,
            code=code,
            source=source,
            context=context,
        )

    @classmethod
    def missing(cls, source: str, field: str) -> "DataError":
        """Create error for missing required column."""
        return cls(
            source=source,
            reason=f"Missing required field: {field}",
            code=ErrorCode.DATA_MISSING,
            field=field,
        )

    @classmethod
    def empty(cls, source: str, description: str = "No data") -> "DataError":
        """Create error for empty input."""
        return cls(
            source=source,
            reason=description,
            code=ErrorCode.DATA_EMPTY,
        )
