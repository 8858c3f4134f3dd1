"""Private helpers for rate and loss derivation."""

from __future__ import annotations

from loguru import logger

from streamstats.aggregator.exceptions import ConfigurationError
from streamstats.aggregator.models import CounterTable

# preamble + start frame delimiter (8 B) and inter-frame gap (12 B)
L1_OVERHEAD_BYTES = 20


def check_frame_size(frame_size: int, stream_id: int | None = None) -> None:
    """Raise ConfigurationError unless ``frame_size`` is a positive integer."""
    if isinstance(frame_size, bool) or not isinstance(frame_size, int):
        raise ConfigurationError(
            f"Frame size must be an integer, got {type(frame_size).__name__}",
            stream_id=stream_id,
        )
    if frame_size <= 0:
        raise ConfigurationError(f"Frame size must be positive, got {frame_size}", stream_id=stream_id)


def sum_counters(table: CounterTable, ports: list[int], stream_id: int, direction: str) -> float:
    """Sum the counters of ``stream_id`` over ``ports``; absent entries count as zero."""
    total = 0.0
    for port in ports:
        per_stream = table.get(port)
        if per_stream is None:
            logger.trace(f"{direction}: port {port} not in snapshot")
            continue
        value = per_stream.get(stream_id)
        if value is None:
            logger.trace(f"{direction}: stream #{stream_id} not reported on port {port}")
            continue
        total += value
    return total


def l1_rate(rate_l2: float, frame_size: int) -> float:
    """Scale a Layer-2 rate by the per-frame Layer-1 overhead."""
    return rate_l2 * (frame_size + L1_OVERHEAD_BYTES) / frame_size


def loss_rate_percent(tx_rate: float, rx_rate: float) -> float:
    """Return the loss in percent, rounded to two decimals and floored at zero."""
    if tx_rate > 0 and (1 - rx_rate / tx_rate) > 0:
        return round(100 * (1 - rx_rate / tx_rate), 2)
    return 0.0
