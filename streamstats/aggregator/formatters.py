"""Terminal, Markdown and JSON formatters for derived stream metrics."""

from __future__ import annotations

import json
from collections.abc import Iterable

from tabulate import tabulate

from streamstats.aggregator.models import DerivedMetrics

BIT_UNITS = ["bit/s", "Kbit/s", "Mbit/s", "Gbit/s", "Tbit/s"]
HEADERS = ["Stream", "TX L1", "RX L1", "TX L2", "RX L2", "Frame Size", "Loss rate"]


def format_bits(value: float, decimals: int = 2) -> str:
    """Format a bit rate with a decimal (base 1000) unit prefix.

    E.g. 1312.5 -> '1.31 Kbit/s', 0 -> '0 bit/s'
    """
    if value == 0:
        return "0 bit/s"
    idx = 0
    while abs(value) >= 1000 and idx < len(BIT_UNITS) - 1:
        value /= 1000
        idx += 1
    return f"{value:.{decimals}f} {BIT_UNITS[idx]}"


def metrics_rows(metrics: Iterable[DerivedMetrics]) -> list[list[str]]:
    """Return one formatted table row per stream, ordered by stream id."""
    rows: list[list[str]] = []
    for m in sorted(metrics, key=lambda m: m.stream_id):
        rows.append(
            [
                f"#{m.stream_id} {m.name}".rstrip(),
                format_bits(m.tx_rate_l1),
                format_bits(m.rx_rate_l1),
                format_bits(m.tx_rate_l2),
                format_bits(m.rx_rate_l2),
                f"{m.frame_size} B",
                f"{m.loss_rate_percent:.2f}%",
            ]
        )
    return rows


class TerminalFormatter:
    """Format DerivedMetrics as a plain-text table."""

    def __init__(self, metrics: Iterable[DerivedMetrics], stale: bool = False) -> None:
        self.metrics = list(metrics)
        self.stale = stale

    def format(self) -> str:
        """Return the table as a string."""
        if self.metrics:
            table = tabulate(metrics_rows(self.metrics), headers=HEADERS, tablefmt="simple", disable_numparse=True)
        else:
            table = "  (no streams)"
        if self.stale:
            table += "\n  (stale: last snapshot could not be read)"
        return table


class MarkdownFormatter:
    """Format DerivedMetrics as a Markdown pipe table."""

    def __init__(self, metrics: Iterable[DerivedMetrics], title: str = "Stream Statistics") -> None:
        self.metrics = list(metrics)
        self.title = title

    def format(self) -> str:
        """Return the complete Markdown document as a string."""
        lines: list[str] = [f"# {self.title}\n"]
        if self.metrics:
            lines.append(tabulate(metrics_rows(self.metrics), headers=HEADERS, tablefmt="github", disable_numparse=True))
        else:
            lines.append("_No streams configured._")
        return "\n".join(lines)


def format_json(metrics: Iterable[DerivedMetrics]) -> str:
    """Serialise metrics as a JSON list ordered by stream id."""
    ordered = sorted(metrics, key=lambda m: m.stream_id)
    return json.dumps([m.model_dump() for m in ordered], indent=2)
