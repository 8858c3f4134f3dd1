"""Caller-owned refresh loop that keeps the latest valid aggregation result."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from loguru import logger

from streamstats.aggregator.core import aggregate_streams
from streamstats.aggregator.exceptions import SnapshotError
from streamstats.aggregator.models import DerivedMetrics, StatisticsSnapshot, StreamConfig

SnapshotProvider = Callable[[], StatisticsSnapshot]
UpdateCallback = Callable[[dict[int, DerivedMetrics], bool], None]


class StreamMonitor:
    """Re-aggregate all configured streams whenever a new snapshot is pulled.

    The most recent successful result wins. When the provider fails with
    :class:`SnapshotError` the previous result is kept and marked stale.
    """

    def __init__(
        self,
        provider: SnapshotProvider,
        configs: Sequence[StreamConfig],
        interval: float = 1.0,
    ) -> None:
        self.provider = provider
        self.configs = list(configs)
        self.interval = interval
        self.latest: dict[int, DerivedMetrics] = {}
        self.stale = True
        self.log = logger.bind(classname=self.__class__.__name__)

    def refresh(self) -> dict[int, DerivedMetrics]:
        """Pull one snapshot and recompute; returns the current (possibly stale) result."""
        try:
            snapshot = self.provider()
        except SnapshotError as e:
            self.stale = True
            self.log.warning(f"Snapshot unavailable, keeping last result: {e}")
            return self.latest

        self.latest = aggregate_streams(snapshot, self.configs)
        self.stale = False
        return self.latest

    def run(self, iterations: int | None = None, on_update: UpdateCallback | None = None) -> None:
        """Refresh every ``interval`` seconds until ``iterations`` rounds ran.

        ``KeyboardInterrupt`` is logged and re-raised to the caller.
        """
        done = 0
        try:
            while iterations is None or done < iterations:
                result = self.refresh()
                if on_update is not None:
                    on_update(result, self.stale)
                done += 1
                if iterations is not None and done >= iterations:
                    break
                time.sleep(self.interval)
        except KeyboardInterrupt:
            self.log.info("Monitoring stopped")
            raise
