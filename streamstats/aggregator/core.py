"""Stream metric aggregation over mapped TX/RX port pairs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from streamstats.aggregator._util import check_frame_size, l1_rate, loss_rate_percent, sum_counters
from streamstats.aggregator.exceptions import ConfigurationError
from streamstats.aggregator.models import DerivedMetrics, StatisticsSnapshot, StreamConfig


def aggregate(
    snapshot: StatisticsSnapshot,
    port_mapping: Mapping[int, int],
    stream_id: int,
    frame_size: int,
) -> DerivedMetrics:
    """Derive L2/L1 rates and loss for one stream from a snapshot.

    TX counters are summed over the keys of ``port_mapping`` (the sending
    ports), RX counters over its values (the paired receiving ports). The
    counters are already rates, so no time normalisation happens here.

    Raises:
        ConfigurationError: if ``frame_size`` is not a positive integer.
    """
    check_frame_size(frame_size, stream_id=stream_id)

    tx_rate_l2 = sum_counters(snapshot.app_tx_l2, list(port_mapping.keys()), stream_id, "TX")
    rx_rate_l2 = sum_counters(snapshot.app_rx_l2, list(port_mapping.values()), stream_id, "RX")

    return DerivedMetrics(
        stream_id=stream_id,
        frame_size=frame_size,
        tx_rate_l2=tx_rate_l2,
        rx_rate_l2=rx_rate_l2,
        tx_rate_l1=l1_rate(tx_rate_l2, frame_size),
        rx_rate_l1=l1_rate(rx_rate_l2, frame_size),
        loss_rate_percent=loss_rate_percent(tx_rate_l2, rx_rate_l2),
    )


def aggregate_streams(
    snapshot: StatisticsSnapshot,
    configs: Iterable[StreamConfig],
) -> dict[int, DerivedMetrics]:
    """Aggregate every configured stream, keyed by stream id.

    Raises:
        ConfigurationError: on duplicate stream ids or an invalid frame size.
    """
    results: dict[int, DerivedMetrics] = {}
    for config in configs:
        if config.stream_id in results:
            raise ConfigurationError(
                f"Stream with ID #{config.stream_id} is configured more than once.",
                stream_id=config.stream_id,
            )
        metrics = aggregate(snapshot, config.port_mapping, config.stream_id, config.frame_size)
        results[config.stream_id] = metrics.model_copy(update={"name": config.name}) if config.name else metrics

    logger.debug(f"Aggregated {len(results)} stream(s)")
    return results
