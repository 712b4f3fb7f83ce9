"""Running accumulators shared by the windowed indicators."""

import math
import sys
from collections.abc import Iterable, Sequence

from domain.errors import InvalidParameterError

_EPSILON = sys.float_info.epsilon


def check_window(window: int, source: str | None = None) -> int:
    """Validate a window size.

    Args:
        window: Number of values in each window
        source: Name of the calling indicator, for the error message

    Returns:
        The window, unchanged

    Raises:
        InvalidParameterError: If window is not a positive integer
    """
    # WHY: bool is an int subclass, True would silently mean a 1-bar window
    if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
        raise InvalidParameterError.window(window, source=source)
    return window


class RunningSum:
    """Compensated (Neumaier) running sum.

    Supports removing values as well as adding them, so a fixed-size
    window can slide across a long series without drifting away from
    the directly summed result.

    Example:
        >>> total = RunningSum()
        >>> for v in [0.1, 0.2, 0.3]:
        ...     total.add(v)
        >>> total.remove(0.1)
        >>> round(total.value, 12)
        0.5
    """

    __slots__ = ("_total", "_compensation")

    def __init__(self) -> None:
        self._total = 0.0
        self._compensation = 0.0

    def add(self, value: float) -> None:
        t = self._total + value
        if abs(self._total) >= abs(value):
            self._compensation += (self._total - t) + value
        else:
            self._compensation += (value - t) + self._total
        self._total = t

    def remove(self, value: float) -> None:
        self.add(-value)

    def reset(self, values: Iterable[float]) -> None:
        """Start over from the given values."""
        self._total = 0.0
        self._compensation = 0.0
        for value in values:
            self.add(value)

    @property
    def value(self) -> float:
        if not math.isfinite(self._total):
            return self._total
        return self._total + self._compensation


class RollingVariance:
    """Population variance over a sliding window (Welford update).

    The accumulator is seeded from a full window with ``reset()``, then
    each ``push()`` adds the newest value and drops the evicted one.
    Every push also grows a bound on the rounding error picked up since
    the last reset. Once that bound is no longer negligible against the
    sum of squares, ``drifted`` turns true and the caller re-anchors by
    calling ``reset()`` with the current window.

    Notes:
        - Variance divides by the window size (population, not sample)
        - Large values leaving the window (a price level shift) trip the
          drift check; a steady series almost never does

    Example:
        >>> acc = RollingVariance(4)
        >>> acc.reset([2, 4, 4, 4])
        >>> acc.push(6, evicted=2)
        >>> acc.variance
        0.75
    """

    # Relative error in the sum of squares tolerated before a reset
    RESYNC_TOLERANCE = 1e-9

    __slots__ = ("window", "count", "mean", "_m2", "_error", "_mean_error")

    def __init__(self, window: int) -> None:
        self.window = window
        self.count = 0
        self.mean = 0.0
        self._m2 = 0.0
        self._error = 0.0
        self._mean_error = 0.0

    def reset(self, values: Sequence[float]) -> None:
        """Recompute mean and sum of squares exactly from a window of values."""
        self.count = len(values)
        self.mean = math.fsum(values) / self.count if self.count else 0.0
        self._m2 = math.fsum((v - self.mean) * (v - self.mean) for v in values)
        self._error = 0.0
        self._mean_error = 0.0

    def push(self, value: float, evicted: float) -> None:
        old_mean = self.mean
        delta = value - evicted
        self.mean = old_mean + delta / self.window
        incoming = value - self.mean
        outgoing = evicted - old_mean
        self._m2 += delta * (incoming + outgoing)
        self._mean_error += _EPSILON * abs(self.mean)
        self._error += abs(delta) * (
            _EPSILON * (abs(incoming) + abs(outgoing)) + 2.0 * self._mean_error
        ) + _EPSILON * abs(self._m2)

    @property
    def drifted(self) -> bool:
        # A negative sum of squares is rounding residue too; overflow also resets
        if self._m2 < 0.0 or not math.isfinite(self._m2):
            return True
        return self._error > self.RESYNC_TOLERANCE * self._m2

    @property
    def variance(self) -> float:
        if self.count == 0:
            return 0.0
        return max(self._m2, 0.0) / self.count
