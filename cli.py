"""
Candlechart CLI - compute chart geometry from OHLC bars.

Usage:
    candlechart frame --data FILE [--bars N] [--sma 20,50] [--bollinger]
    candlechart frame --typical-price --format json --output frame.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from adapters import CsvBarSource
from config import CandlechartConfig, ConfigError, load_config
from domain import ChartError
from orchestration import RenderOptions, build_frame, visible_window
from presentation.json_api import to_json
from presentation.report import write_frame_text

logger = logging.getLogger(__name__)


def _parse_windows(raw: str) -> list[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {raw!r}")


def _apply_overrides(config: CandlechartConfig, args: argparse.Namespace) -> CandlechartConfig:
    """Layer command-line flags over the loaded configuration."""
    view = {}
    if args.bars is not None:
        view["visible_bars"] = args.bars

    indicators = {}
    if args.typical_price:
        indicators["show_typical_price"] = True
    if args.sma is not None:
        indicators["show_sma"] = True
        indicators["sma_windows"] = args.sma
    if args.custom_sma is not None:
        indicators["show_sma"] = True
        indicators["custom_sma_window"] = args.custom_sma
    if args.bollinger:
        indicators["show_bollinger"] = True
    if args.bollinger_window is not None:
        indicators["bollinger_window"] = args.bollinger_window
    if args.std_devs is not None:
        indicators["bollinger_std_devs"] = args.std_devs

    data = {}
    if args.data:
        data["csv_path"] = args.data
    if args.validate:
        data["validate_bars"] = True

    merged = config.model_dump()
    merged["view"].update(view)
    merged["indicators"].update(indicators)
    merged["data"].update(data)
    try:
        return CandlechartConfig(**merged)
    except ValueError as e:
        raise ConfigError(f"Invalid option: {e}", source="command line")


def cmd_frame(args: argparse.Namespace) -> int:
    """Compute one frame and print it."""
    try:
        config = _apply_overrides(load_config(args.config), args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.data.csv_path:
        print("Error: no data file (use --data or set data.csv_path)", file=sys.stderr)
        return 1

    source = CsvBarSource(config.data.csv_path)
    options = RenderOptions.from_config(config.indicators, validate=config.data.validate_bars)

    try:
        bars = visible_window(source.load(), config.view.visible_bars)
        frame = build_frame(bars, options)
    except ChartError as e:
        logger.debug(f"Frame failed: {e.to_dict()}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(to_json(frame), indent=2)
        if args.output:
            Path(args.output).write_text(output)
        else:
            print(output)
    else:
        write_frame_text(frame, filepath=args.output, tail=args.tail)

    if args.output:
        print(f"Frame written to {args.output}", file=sys.stderr)

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="candlechart",
        description="Candlestick chart indicator engine",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-c", "--config", help="Path to TOML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Frame command
    frame_parser = subparsers.add_parser("frame", help="Compute chart geometry")
    frame_parser.add_argument("-d", "--data", help="CSV file with OHLC bars")
    frame_parser.add_argument("-n", "--bars", type=int, help="Number of visible bars")
    frame_parser.add_argument("--sma", type=_parse_windows, help="Comma-separated SMA windows")
    frame_parser.add_argument("--custom-sma", type=int, help="Custom SMA window (>= 10)")
    frame_parser.add_argument("--bollinger", action="store_true", help="Show Bollinger Bands")
    frame_parser.add_argument("--bollinger-window", type=int, help="Bollinger window")
    frame_parser.add_argument("--std-devs", type=float, help="Bollinger standard deviations")
    frame_parser.add_argument("--typical-price", action="store_true", help="Show typical price line")
    frame_parser.add_argument("--validate", action="store_true", help="Reject malformed bars")
    frame_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    frame_parser.add_argument("--tail", type=int, default=5, help="Bars listed in text output")
    frame_parser.add_argument("-o", "--output", help="Output file path")
    frame_parser.set_defaults(func=cmd_frame)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
