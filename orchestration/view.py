"""
Visible window handling.

The chart shows the first N bars of the loaded data. The user grows or
shrinks N in fixed steps, and may drag a custom SMA window that has to
stay within what the data can support.
"""

import logging

from domain import InvalidParameterError, OHLCBar

logger = logging.getLogger(__name__)

MIN_CUSTOM_WINDOW = 10


def visible_window(bars: list[OHLCBar], size: int) -> list[OHLCBar]:
    """Return the first `size` bars, clamped to what is available."""
    size = max(0, min(size, len(bars)))
    return bars[:size]


def grow_window(size: int, step: int, total: int) -> int:
    """Add `step` bars to the view, saturating at the data size."""
    return min(size + max(step, 0), total)


def shrink_window(size: int, step: int) -> int:
    """Remove `step` bars from the view, saturating at zero."""
    return max(size - max(step, 0), 0)


def clamp_custom_window(window: int, total: int, minimum: int = MIN_CUSTOM_WINDOW) -> int:
    """
    Clamp a user-chosen SMA window into [minimum, total].

    Args:
        window: Requested window size
        total: Number of bars currently visible
        minimum: Smallest window the slider allows

    Returns:
        The clamped window

    Raises:
        InvalidParameterError: If fewer than `minimum` bars are visible
    """
    if total < minimum:
        raise InvalidParameterError(
            reason=f"Need at least {minimum} bars for a custom window, have {total}",
            field="custom_sma_window",
            value=window,
        )

    clamped = max(minimum, min(window, total))
    if clamped != window:
        logger.debug(f"Custom SMA window {window} clamped to {clamped}")
    return clamped
