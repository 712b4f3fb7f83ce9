"""Bollinger Bands indicator."""

import math
from collections.abc import Sequence

from domain.indicators.base import OptionalScalarSeries
from domain.indicators.moving_averages import rolling_mean
from domain.indicators.utils import RollingVariance, check_window
from domain.models import BandPoint

DEFAULT_WINDOW = 20
DEFAULT_STD_DEVS = 2.0


def rolling_std(series: Sequence[float], window: int) -> OptionalScalarSeries:
    """Calculate rolling population standard deviation.

    Args:
        series: Values, oldest first
        window: Number of values in each window

    Returns:
        List the same length as series, with None for insufficient data points

    Raises:
        InvalidParameterError: If window is zero or negative

    Example:
        >>> rolling_std([2, 4, 4, 4, 5, 5, 7, 9], 8)[-1]
        2.0

    Notes:
        - Slides a Welford accumulator and re-anchors it from the window
          whenever its rounding error bound stops being negligible
        - A window holding NaN or inf gives NaN, as the direct formula does
    """
    check_window(window, source="rolling_std")

    n = len(series)
    if window > n:
        return [None] * n

    def current(i: int) -> list[float]:
        return [float(v) for v in series[i - window + 1:i + 1]]

    acc = RollingVariance(window)
    result: OptionalScalarSeries = [None] * (window - 1)
    last_non_finite = -window
    seeded = False

    for i in range(n):
        value = float(series[i])
        if not math.isfinite(value):
            last_non_finite = i
        if i < window - 1:
            continue

        if i - last_non_finite < window:
            result.append(math.nan)
            seeded = False
            continue

        if not seeded:
            acc.reset(current(i))
            seeded = True
        else:
            acc.push(value, evicted=float(series[i - window]))
            if acc.drifted:
                acc.reset(current(i))

        result.append(math.sqrt(acc.variance))

    return result


def bollinger(
    series: Sequence[float],
    window: int | None = None,
    num_std_devs: float = DEFAULT_STD_DEVS,
    *,
    default_window: int = DEFAULT_WINDOW,
) -> list[BandPoint]:
    """Calculate Bollinger Bands.

    Upper Band = SMA + (num_std_devs * standard_deviation)
    Lower Band = SMA - (num_std_devs * standard_deviation)

    The standard deviation is the population one (divide by window).

    Args:
        series: Scalar series, usually the typical price
        window: Period for SMA and standard deviation; None uses default_window
        num_std_devs: Number of standard deviations for bands (default: 2.0)
        default_window: The caller's configured SMA window

    Returns:
        Band points for every index with a full window of history.
        Empty if window is not positive or exceeds the series length.

    Example:
        >>> points = bollinger([1, 2, 3, 4, 5], window=3, num_std_devs=1.0)
        >>> [p.index for p in points]
        [2.0, 3.0, 4.0]
    """
    if window is None:
        window = default_window

    # WHY: bands are an "only if enough history" overlay, so bad windows
    # mean nothing to draw rather than a caller error
    if isinstance(window, bool) or not isinstance(window, int):
        return []
    if window <= 0 or window > len(series):
        return []

    means = rolling_mean(series, window)
    stds = rolling_std(series, window)

    points = []
    for i in range(window - 1, len(series)):
        mean = means[i]
        std = stds[i]
        if mean is None or std is None:
            continue
        spread = num_std_devs * std
        points.append(BandPoint(index=float(i), upper=mean + spread, lower=mean - spread))

    return points
