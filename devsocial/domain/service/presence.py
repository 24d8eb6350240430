"""Presence resolver."""

from datetime import datetime, timedelta
from typing import Optional

from devsocial.config import PresenceSettings
from devsocial.domain.value import PresenceStatus


class PresenceResolver:
    """Classifies a user as online, idle or offline from the age of their
    last activity merge.

    Boundaries are exclusive on the lower state: an age equal to the idle
    threshold is already idle, an age equal to the offline threshold is
    already offline.
    """

    def __init__(self, settings: PresenceSettings) -> None:
        self.idle_threshold = timedelta(seconds=settings.idle_threshold_seconds)
        self.offline_threshold = timedelta(seconds=settings.offline_threshold_seconds)

    def classify(
        self, last_update: Optional[datetime], now: datetime
    ) -> PresenceStatus:
        """Classify presence.

        Args:
            last_update: Last merge time of today's aggregate, None when the
                user has no aggregate today
            now: Current wall-clock time

        Returns:
            Presence status
        """
        if last_update is None:
            return PresenceStatus.OFFLINE

        elapsed = now - last_update
        if elapsed < self.idle_threshold:
            return PresenceStatus.ONLINE
        if elapsed < self.offline_threshold:
            return PresenceStatus.IDLE
        return PresenceStatus.OFFLINE
