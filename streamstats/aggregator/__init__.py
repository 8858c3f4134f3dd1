"""Stream aggregation — derive per-stream rates and loss from port counters."""

from streamstats.aggregator.core import aggregate, aggregate_streams
from streamstats.aggregator.formatters import MarkdownFormatter, TerminalFormatter, format_bits
from streamstats.aggregator.loader import load_snapshot, load_stream_configs
from streamstats.aggregator.models import DerivedMetrics, StatisticsSnapshot, StreamConfig
from streamstats.aggregator.monitor import StreamMonitor

__all__ = [
    "aggregate",
    "aggregate_streams",
    "load_snapshot",
    "load_stream_configs",
    "MarkdownFormatter",
    "TerminalFormatter",
    "format_bits",
    "DerivedMetrics",
    "StatisticsSnapshot",
    "StreamConfig",
    "StreamMonitor",
]
