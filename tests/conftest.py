"""Shared fixtures for the streamstats test suite."""

from __future__ import annotations

import json

import pytest
from loguru import logger

from streamstats.aggregator.models import DerivedMetrics, StatisticsSnapshot, StreamConfig

# ── snapshot fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def sample_snapshot():
    """Factory fixture returning a StatisticsSnapshot with customizable tables."""

    def _make(**overrides):
        defaults = dict(
            app_tx_l2={1: {5: 500.0, 6: 200.0}, 3: {5: 500.0}},
            app_rx_l2={2: {5: 500.0, 6: 150.0}, 4: {5: 400.0}},
        )
        defaults.update(overrides)
        return StatisticsSnapshot(**defaults)

    return _make


@pytest.fixture()
def sample_stream_config():
    """Factory fixture returning a StreamConfig."""

    def _make(**overrides):
        defaults = dict(stream_id=5, frame_size=64, port_mapping={1: 2, 3: 4})
        defaults.update(overrides)
        return StreamConfig(**defaults)

    return _make


@pytest.fixture()
def sample_metrics():
    """Factory fixture returning DerivedMetrics."""

    def _make(**overrides):
        defaults = dict(
            stream_id=5,
            frame_size=64,
            tx_rate_l2=1000.0,
            rx_rate_l2=900.0,
            tx_rate_l1=1312.5,
            rx_rate_l1=1181.25,
            loss_rate_percent=10.0,
        )
        defaults.update(overrides)
        return DerivedMetrics(**defaults)

    return _make


# ── file fixtures ─────────────────────────────────────────────────────


@pytest.fixture()
def snapshot_file(tmp_path):
    """Snapshot JSON file with string keys as written by the traffic generator."""
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "app_tx_l2": {"1": {"5": 1000}, "3": {"6": 2000}},
                "app_rx_l2": {"2": {"5": 800}, "4": {"6": 2000}},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def config_file(tmp_path):
    """Stream configuration JSON file for streams #5 and #6."""
    path = tmp_path / "streams.json"
    path.write_text(
        json.dumps(
            {
                "streams": [
                    {"stream_id": 5, "frame_size": 64, "port_mapping": {"1": 2}},
                    {"stream_id": 6, "frame_size": 1500, "port_mapping": {"3": 4}, "name": "bulk"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _reset_loguru():
    """Drop sinks bound to captured streams by CLI tests."""
    yield
    logger.remove()
    logger.disable("streamstats")
