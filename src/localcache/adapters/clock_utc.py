"""UTC clock adapter."""

from datetime import UTC, datetime


class UtcClockAdapter:
    """UTC implementation of ClockPort."""

    def now(self) -> datetime:
        """Get current UTC time."""
        return datetime.now(UTC)
