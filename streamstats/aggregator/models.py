"""Pydantic models for statistics snapshots, stream configuration and derived metrics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt

PortId = NonNegativeInt
StreamId = NonNegativeInt
PortMapping = dict[PortId, PortId]
CounterTable = dict[PortId, dict[StreamId, NonNegativeFloat]]


class StatisticsSnapshot(BaseModel):
    """Point-in-time Layer-2 counters per physical port and stream.

    Both tables map a port id to a mapping of stream id to the Layer-2 rate
    reported by the traffic generator. Ports without traffic for a stream
    may be missing from either table.
    """

    model_config = ConfigDict(frozen=True)

    app_tx_l2: CounterTable = Field(default_factory=dict)
    app_rx_l2: CounterTable = Field(default_factory=dict)


class StreamConfig(BaseModel):
    """Frame size and TX-to-RX port mapping of a single logical stream."""

    model_config = ConfigDict(frozen=True)

    stream_id: StreamId
    frame_size: int = Field(gt=0)
    port_mapping: PortMapping = Field(default_factory=dict)
    name: str = ""


class DerivedMetrics(BaseModel):
    """Rates (bit/s) and loss percentage computed for one stream."""

    model_config = ConfigDict(frozen=True)

    stream_id: int
    frame_size: int
    tx_rate_l2: float = 0.0
    rx_rate_l2: float = 0.0
    tx_rate_l1: float = 0.0
    rx_rate_l1: float = 0.0
    loss_rate_percent: float = 0.0
    name: str = ""
