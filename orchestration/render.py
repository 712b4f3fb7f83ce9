"""
Render-frame orchestration.

Builds everything one redraw needs from the visible bars:
1. Candlestick geometry (always)
2. Typical price series (shared input of the scalar overlays)
3. SMA overlays, one per configured window plus an optional custom one
4. Bollinger envelope

Indicators are computed independently. One that cannot be computed is
left out of the frame and recorded in `omitted` - it never fails the frame.
"""

import logging
from dataclasses import dataclass, field

from config.schema import IndicatorsConfig
from domain import BandPoint, BoxElement, InvalidParameterError, OHLCBar, validate_bars
from domain.indicators import (
    OptionalScalarSeries,
    ScalarSeries,
    bollinger,
    build_candlesticks,
    rolling_mean,
    typical_price,
)
from domain.indicators.bollinger import DEFAULT_STD_DEVS, DEFAULT_WINDOW

from .view import clamp_custom_window

logger = logging.getLogger(__name__)


# ============================================================================
# Options
# ============================================================================

@dataclass
class RenderOptions:
    """Which overlays to draw and with which parameters."""

    show_typical_price: bool = False
    show_sma: bool = False
    show_bollinger: bool = False

    sma_windows: list[int] = field(default_factory=lambda: [20, 50, 200])
    custom_sma_window: int | None = None

    bollinger_window: int | None = None
    bollinger_std_devs: float = DEFAULT_STD_DEVS

    validate_bars: bool = False

    @classmethod
    def from_config(cls, config: IndicatorsConfig, validate: bool = False) -> "RenderOptions":
        return cls(
            show_typical_price=config.show_typical_price,
            show_sma=config.show_sma,
            show_bollinger=config.show_bollinger,
            sma_windows=list(config.sma_windows),
            custom_sma_window=config.custom_sma_window,
            bollinger_window=config.bollinger_window,
            bollinger_std_devs=config.bollinger_std_devs,
            validate_bars=validate,
        )

    @property
    def needs_typical_price(self) -> bool:
        return self.show_typical_price or self.show_sma or self.show_bollinger


# ============================================================================
# Frame
# ============================================================================

@dataclass
class ChartFrame:
    """Plottable geometry for one redraw."""
    bar_count: int
    candles: list[BoxElement] = field(default_factory=list)
    typical_price: ScalarSeries | None = None
    sma: dict[int, OptionalScalarSeries] = field(default_factory=dict)
    custom_sma_window: int | None = None
    custom_sma: OptionalScalarSeries | None = None
    bollinger: list[BandPoint] | None = None
    omitted: dict[str, str] = field(default_factory=dict)

    def omit(self, name: str, reason: str) -> None:
        logger.warning(f"Omitting {name}: {reason}")
        self.omitted[name] = reason


def _resolve_custom_window(
    frame: ChartFrame,
    options: RenderOptions,
    bar_count: int,
) -> int | None:
    if options.custom_sma_window is None:
        return None
    try:
        return clamp_custom_window(options.custom_sma_window, bar_count)
    except InvalidParameterError as e:
        frame.omit("sma_custom", e.message)
        return None


def build_frame(bars: list[OHLCBar], options: RenderOptions | None = None) -> ChartFrame:
    """
    Compute the geometry for one redraw.

    Args:
        bars: Visible bars, oldest first
        options: Overlay toggles and parameters (defaults: candles only)

    Returns:
        ChartFrame with the enabled overlays filled in

    Raises:
        InvalidParameterError: If options.validate_bars is set and a bar is malformed
    """
    options = options or RenderOptions()
    if options.validate_bars:
        validate_bars(bars)

    frame = ChartFrame(bar_count=len(bars), candles=build_candlesticks(bars))

    if not options.needs_typical_price:
        return frame

    tp = typical_price(bars)
    if options.show_typical_price:
        frame.typical_price = tp

    custom_window = None
    if options.show_sma or options.show_bollinger:
        custom_window = _resolve_custom_window(frame, options, len(bars))
        frame.custom_sma_window = custom_window

    if options.show_sma:
        for window in options.sma_windows:
            if window in frame.sma:
                continue
            try:
                frame.sma[window] = rolling_mean(tp, window)
            except InvalidParameterError as e:
                frame.omit(f"sma_{window}", e.message)
        # Drawn on its own even when it matches a configured window
        if custom_window is not None:
            frame.custom_sma = rolling_mean(tp, custom_window)

    if options.show_bollinger:
        if custom_window is not None:
            default_window = custom_window
        elif options.sma_windows:
            default_window = options.sma_windows[0]
        else:
            default_window = DEFAULT_WINDOW

        frame.bollinger = bollinger(
            tp,
            window=options.bollinger_window,
            num_std_devs=options.bollinger_std_devs,
            default_window=default_window,
        )
        if not frame.bollinger:
            logger.debug(f"Bollinger bands empty for {len(bars)} bars")

    logger.debug(
        f"Frame: {frame.bar_count} bars, {len(frame.sma)} SMA(s), "
        f"{len(frame.omitted)} omitted"
    )
    return frame
