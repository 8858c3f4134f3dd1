"""CLI entry point for stream aggregation — standalone-capable.

Examples:
  # One-shot aggregation of a snapshot file
  streamstats aggregate snapshot.json streams.json

  # Markdown table for a report
  streamstats aggregate snapshot.json streams.json --format markdown

  # Re-read the snapshot every 2 seconds, 10 times, with debug logging
  streamstats watch snapshot.json streams.json --interval 2 --count 10 -v
"""

from __future__ import annotations

import argparse
import os
import platform
import sys

from loguru import logger
from tabulate import tabulate

from streamstats import __version__, configure_logging
from streamstats.aggregator.core import aggregate_streams
from streamstats.aggregator.exceptions import StreamStatsError
from streamstats.aggregator.formatters import MarkdownFormatter, TerminalFormatter, format_json
from streamstats.aggregator.loader import load_snapshot, load_stream_configs
from streamstats.aggregator.models import DerivedMetrics
from streamstats.aggregator.monitor import StreamMonitor

OUTPUT_FORMATS = ["terminal", "markdown", "json"]


def _print_startup_banner() -> None:
    startup_rows = [
        ["version", __version__],
        ["python", platform.python_version()],
        ["log level", os.getenv("LOGURU_LEVEL", "DEBUG")],
    ]

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "streamstats starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    logger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def render(metrics: dict[int, DerivedMetrics], output_format: str, stale: bool = False) -> str:
    """Render aggregation results in the requested output format."""
    if output_format == "markdown":
        return MarkdownFormatter(metrics.values()).format()
    if output_format == "json":
        return format_json(metrics.values())
    return TerminalFormatter(metrics.values(), stale=stale).format()


def cmd_aggregate(args: argparse.Namespace) -> None:
    """Aggregate a single snapshot and print the result."""
    configs = load_stream_configs(args.config)
    snapshot = load_snapshot(args.snapshot)
    print(render(aggregate_streams(snapshot, configs), args.format))


def cmd_watch(args: argparse.Namespace) -> None:
    """Re-read the snapshot periodically and print every refresh."""
    configs = load_stream_configs(args.config)

    def _print(metrics: dict[int, DerivedMetrics], stale: bool) -> None:
        print(render(metrics, args.format, stale=stale))
        print()

    monitor = StreamMonitor(lambda: load_snapshot(args.snapshot), configs, interval=args.interval)
    monitor.run(iterations=args.count, on_update=_print)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for stream aggregation."""
    parser = argparse.ArgumentParser(
        prog="streamstats",
        description="Per-stream L1/L2 rate and packet loss aggregation",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def _add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("snapshot", help="Statistics snapshot (JSON)")
        sub.add_argument("config", help="Stream configuration (JSON)")
        sub.add_argument(
            "-f",
            "--format",
            choices=OUTPUT_FORMATS,
            default="terminal",
            help="Output format (default: terminal)",
        )
        sub.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging and the startup banner")

    # aggregate
    aggregate_parser = subparsers.add_parser("aggregate", help="Aggregate one snapshot")
    _add_common(aggregate_parser)

    # watch
    watch_parser = subparsers.add_parser("watch", help="Re-aggregate periodically")
    _add_common(watch_parser)
    watch_parser.add_argument("--interval", type=float, default=1.0, help="Refresh interval in seconds (default: 1)")
    watch_parser.add_argument("--count", type=int, help="Stop after N refreshes (default: run until Ctrl-C)")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the stream aggregation CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    if parsed.verbose:
        configure_logging()
        _print_startup_banner()
    else:
        logger.enable("streamstats")
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        if parsed.command == "aggregate":
            cmd_aggregate(parsed)
        elif parsed.command == "watch":
            cmd_watch(parsed)
    except StreamStatsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
