"""Moving average indicators."""

import math
from collections.abc import Iterable, Sequence

from domain.indicators.base import OptionalScalarSeries
from domain.indicators.utils import RunningSum, check_window


def rolling_mean(series: Sequence[float], window: int) -> OptionalScalarSeries:
    """Calculate the Simple Moving Average of a scalar series.

    Args:
        series: Values to average, oldest first
        window: Number of values in each average

    Returns:
        List the same length as series, with None for insufficient data points

    Raises:
        InvalidParameterError: If window is zero or negative

    Example:
        >>> rolling_mean([1, 2, 3, 4, 5], 3)
        [None, None, 2.0, 3.0, 4.0]

    Notes:
        - A window larger than the series gives all None, never a partial average
        - The sum is updated incrementally (add newest, drop oldest)
        - A window holding NaN or inf is averaged directly, so the NaN/inf
          shows up there and nowhere after it leaves the window
    """
    check_window(window, source="rolling_mean")

    n = len(series)
    if window > n:
        return [None] * n

    result: OptionalScalarSeries = [None] * (window - 1)
    total = RunningSum()
    last_non_finite = -window

    for i in range(n):
        value = float(series[i])
        if math.isfinite(value):
            total.add(value)
        else:
            last_non_finite = i

        if i >= window:
            evicted = float(series[i - window])
            if math.isfinite(evicted):
                total.remove(evicted)

        if i < window - 1:
            continue

        if i - last_non_finite < window:
            result.append(sum(float(v) for v in series[i - window + 1:i + 1]) / window)
            continue

        # Finite values can still overflow the running total
        if not math.isfinite(total.value):
            total.reset(float(v) for v in series[i - window + 1:i + 1])
        result.append(total.value / window)

    return result


def sma_overlays(
    series: Sequence[float],
    windows: Iterable[int],
) -> dict[int, OptionalScalarSeries]:
    """Calculate several SMAs over the same series.

    Args:
        series: Values to average, oldest first
        windows: Window sizes, e.g. (20, 50, 200)

    Returns:
        Dict of window size -> SMA series, in the order given (duplicates collapse)

    Raises:
        InvalidParameterError: If any window is zero or negative
    """
    overlays: dict[int, OptionalScalarSeries] = {}
    for window in windows:
        if window not in overlays:
            overlays[window] = rolling_mean(series, window)
    return overlays
