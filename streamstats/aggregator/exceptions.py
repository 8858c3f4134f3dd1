"""Exception hierarchy for stream statistics aggregation."""


class StreamStatsError(Exception):
    """Base exception for all stream statistics errors."""


class ConfigurationError(StreamStatsError):
    """Stream configuration is invalid (frame size, port mapping, duplicates)."""

    def __init__(self, message: str, stream_id: int | None = None):
        self.stream_id = stream_id
        super().__init__(message)


class SnapshotError(StreamStatsError):
    """Statistics snapshot could not be read or is malformed."""
