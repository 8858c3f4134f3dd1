"""Load statistics snapshots and stream configurations from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from streamstats.aggregator.exceptions import ConfigurationError, SnapshotError
from streamstats.aggregator.models import StatisticsSnapshot, StreamConfig

Source = str | Path | dict[str, Any]


def _read_json(source: Source) -> Any:
    if isinstance(source, dict):
        return source
    path = Path(source)
    logger.debug(f"Reading {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_snapshot(source: Source) -> StatisticsSnapshot:
    """Parse a snapshot document; JSON object keys are coerced to integer ids.

    Expected shape::

        {"app_tx_l2": {"1": {"5": 1000}}, "app_rx_l2": {"2": {"5": 980}}}
    """
    try:
        data = _read_json(source)
    except (OSError, ValueError) as e:
        raise SnapshotError(f"Cannot read snapshot {source}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot must be a JSON object, got {type(data).__name__}")

    try:
        return StatisticsSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot: {e}") from e


def load_stream_configs(source: Source) -> list[StreamConfig]:
    """Parse a ``{"streams": [...]}`` document into StreamConfig objects."""
    try:
        data = _read_json(source)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot read stream configuration {source}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("streams"), list):
        raise ConfigurationError("Stream configuration must contain a 'streams' list")

    configs: list[StreamConfig] = []
    for idx, entry in enumerate(data["streams"]):
        try:
            configs.append(StreamConfig.model_validate(entry))
        except ValidationError as e:
            stream_id = entry.get("stream_id") if isinstance(entry, dict) else None
            raise ConfigurationError(f"Invalid stream configuration at index {idx}: {e}", stream_id=stream_id) from e

    logger.info(f"Loaded {len(configs)} stream configuration(s)")
    return configs
