"""
Plain-text frame summary.

Transforms a chart frame into a short table of the most recent bars.
Pure formatting logic - no I/O except final writing.
"""

import sys
from typing import TextIO

from domain import CandleColor
from orchestration.render import ChartFrame

from .json_api import sma_lines


def _color_marker(color: CandleColor) -> str:
    """Single-character marker for candle direction."""
    return {
        CandleColor.UP: "+",
        CandleColor.DOWN: "-",
        CandleColor.NEUTRAL: "=",
    }.get(color, "?")


def _fmt(value: float | None, precision: int = 2) -> str:
    if value is None:
        return "-"
    return f"{value:.{precision}f}"


def format_frame_text(frame: ChartFrame, tail: int = 5, precision: int = 2) -> str:
    """
    Format the last `tail` bars of a frame with their overlay values.

    Args:
        frame: Geometry from build_frame()
        tail: Number of most recent bars to list
        precision: Decimal places for prices

    Returns:
        Multi-line text
    """
    lines = [f"Bars: {frame.bar_count}"]

    overlays = []
    if frame.typical_price is not None:
        overlays.append("typical_price")
    sma = sma_lines(frame)
    overlays.extend(name for name, _ in sma)
    if frame.bollinger is not None:
        overlays.append(f"bollinger ({len(frame.bollinger)} points)")
    lines.append(f"Overlays: {', '.join(overlays) if overlays else 'none'}")

    for name, reason in frame.omitted.items():
        lines.append(f"Omitted {name}: {reason}")

    if not frame.candles:
        return "\n".join(lines) + "\n"

    bands = {int(p.index): p for p in frame.bollinger or []}
    header = ["idx", "dir", "low", "q1", "median", "q3", "high"]
    header.extend(name for name, _ in sma)
    if frame.bollinger is not None:
        header.extend(["bb_lower", "bb_upper"])
    lines.append("")
    lines.append("  ".join(header))

    start = max(len(frame.candles) - max(tail, 0), 0)
    for box in frame.candles[start:]:
        i = int(box.index)
        row = [
            str(i),
            _color_marker(box.color),
            _fmt(box.lower_whisker, precision),
            _fmt(box.quartile1, precision),
            _fmt(box.median, precision),
            _fmt(box.quartile3, precision),
            _fmt(box.upper_whisker, precision),
        ]
        row.extend(_fmt(values[i], precision) for _, values in sma)
        if frame.bollinger is not None:
            band = bands.get(i)
            row.append(_fmt(band.lower if band else None, precision))
            row.append(_fmt(band.upper if band else None, precision))
        lines.append("  ".join(row))

    return "\n".join(lines) + "\n"


def write_frame_text(
    frame: ChartFrame,
    output: TextIO | None = None,
    filepath: str | None = None,
    tail: int = 5,
) -> str:
    """
    Generate and write the text summary.

    Args:
        frame: Chart frame
        output: File-like object to write to (default: stdout)
        filepath: Optional file path to write to
        tail: Number of most recent bars to list

    Returns:
        Generated text
    """
    content = format_frame_text(frame, tail=tail)

    if filepath:
        with open(filepath, "w") as f:
            f.write(content)
    elif output:
        output.write(content)
    else:
        sys.stdout.write(content)

    return content
