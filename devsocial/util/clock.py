"""Wall-clock source."""

from datetime import datetime, timezone


class Clock:
    """Wall-clock source returning timezone-aware UTC datetimes.

    Every service that needs "now" (today's date, the current hour,
    presence recency) asks the injected clock instead of calling
    `datetime.now()` itself, so tests can freeze time.
    """

    def now(self) -> datetime:
        """Current UTC time."""
        return datetime.now(timezone.utc)
