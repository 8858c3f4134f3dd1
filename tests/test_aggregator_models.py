"""Tests for streamstats.aggregator.models Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from streamstats.aggregator.models import DerivedMetrics, StatisticsSnapshot, StreamConfig


class TestStatisticsSnapshot:
    """Test StatisticsSnapshot model."""

    def test_defaults_empty(self):
        """Both counter tables default to empty."""
        snap = StatisticsSnapshot()
        assert snap.app_tx_l2 == {}
        assert snap.app_rx_l2 == {}

    def test_string_keys_coerced_to_int(self):
        """JSON-style string keys become integer port and stream ids."""
        snap = StatisticsSnapshot.model_validate({"app_tx_l2": {"1": {"5": 1000}}, "app_rx_l2": {"2": {"5": "800"}}})
        assert snap.app_tx_l2 == {1: {5: 1000.0}}
        assert snap.app_rx_l2[2][5] == 800.0

    def test_negative_counter_rejected(self):
        """Counters must be non-negative."""
        with pytest.raises(ValidationError):
            StatisticsSnapshot(app_tx_l2={1: {5: -1}})

    def test_non_numeric_port_rejected(self):
        """Port ids must be integers."""
        with pytest.raises(ValidationError):
            StatisticsSnapshot.model_validate({"app_tx_l2": {"eth0": {"5": 1}}})

    def test_frozen(self):
        """Snapshot fields cannot be reassigned."""
        snap = StatisticsSnapshot()
        with pytest.raises(ValidationError):
            snap.app_tx_l2 = {1: {5: 1.0}}


class TestStreamConfig:
    """Test StreamConfig model."""

    def test_creation(self):
        """Create config with all fields."""
        config = StreamConfig(stream_id=3, frame_size=1518, port_mapping={"10": "11"}, name="video")
        assert config.stream_id == 3
        assert config.frame_size == 1518
        assert config.port_mapping == {10: 11}
        assert config.name == "video"

    def test_defaults(self):
        """Mapping and name default to empty."""
        config = StreamConfig(stream_id=1, frame_size=64)
        assert config.port_mapping == {}
        assert config.name == ""

    @pytest.mark.parametrize("frame_size", [0, -1])
    def test_non_positive_frame_size_rejected(self, frame_size):
        """frame_size must be > 0."""
        with pytest.raises(ValidationError):
            StreamConfig(stream_id=1, frame_size=frame_size)

    def test_negative_stream_id_rejected(self):
        """Stream ids are non-negative."""
        with pytest.raises(ValidationError):
            StreamConfig(stream_id=-1, frame_size=64)


class TestDerivedMetrics:
    """Test DerivedMetrics model."""

    def test_defaults_zero(self):
        """Rates and loss default to zero."""
        m = DerivedMetrics(stream_id=1, frame_size=64)
        assert m.tx_rate_l2 == 0.0
        assert m.rx_rate_l1 == 0.0
        assert m.loss_rate_percent == 0.0

    def test_model_dump(self, sample_metrics):
        """model_dump() exposes every metric."""
        d = sample_metrics().model_dump()
        assert set(d) == {
            "stream_id",
            "frame_size",
            "tx_rate_l2",
            "rx_rate_l2",
            "tx_rate_l1",
            "rx_rate_l1",
            "loss_rate_percent",
            "name",
        }
        assert d["loss_rate_percent"] == 10.0
