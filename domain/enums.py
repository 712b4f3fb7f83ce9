from enum import Enum


class CandleColor(str, Enum):
    """Direction of a candle relative to the previous close."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"  # first bar, no predecessor
