"""Presence feed builder."""

from datetime import datetime
from typing import Mapping, Optional

import logfire

from devsocial.domain.model import DailyActivity, FriendActivity, User
from devsocial.domain.repository import ActivityRepository, FriendshipRepository
from devsocial.domain.value import PresenceStatus, UserId
from devsocial.util.clock import Clock

from .base import Service
from .presence import PresenceResolver
from .user_service import UserService


def top_entry(breakdown: Mapping[str, int]) -> Optional[str]:
    """Key with the most seconds, None if every value is zero.

    Ties go to the key met first in iteration order.
    """
    best_key: Optional[str] = None
    best_seconds = 0
    for key, seconds in breakdown.items():
        if seconds > best_seconds:
            best_key, best_seconds = key, seconds
    return best_key


class PresenceFeedService(Service):
    """Builds the friends presence feed of a user."""

    def __init__(
        self,
        friendship_repository: FriendshipRepository,
        activity_repository: ActivityRepository,
        user_service: UserService,
        presence_resolver: PresenceResolver,
        clock: Clock,
    ) -> None:
        """Initialize presence feed service.

        Args:
            friendship_repository: Friendship graph
            activity_repository: Aggregate store
            user_service: User directory
            presence_resolver: Online/idle/offline classifier
            clock: Wall-clock source
        """
        self.friendship_repository = friendship_repository
        self.activity_repository = activity_repository
        self.user_service = user_service
        self.presence_resolver = presence_resolver
        self.clock = clock

    async def get_friends_activity(self, user_id: UserId) -> list[FriendActivity]:
        """Current status of every friend, online first.

        Friends who do not share activity are listed blanked. Project and
        language are only surfaced for friends who are not offline and who
        share them.

        Args:
            user_id: The user whose friends are listed

        Returns:
            Feed sorted by status (online, idle, offline) then by active
            seconds descending; empty if the user has no friends or is
            unknown
        """
        with logfire.span(
            "presence_feed_service.get_friends_activity", user_id=str(user_id)
        ):
            friend_ids = await self.friendship_repository.find_friend_ids(user_id)
            if not friend_ids:
                return []

            now = self.clock.now()
            friends = await self.user_service.get_many(friend_ids)
            today = await self.activity_repository.find_daily_for_users(
                list(friends), now.date()
            )

            feed = [
                self._build_entry(friend, today.get(friend.id), now)
                for friend in friends.values()
            ]
            feed.sort(key=lambda entry: (entry.status.rank, -entry.active_seconds))

            logfire.info(
                "Friends feed built",
                user_id=str(user_id),
                friends=len(feed),
                online=sum(1 for e in feed if e.status is PresenceStatus.ONLINE),
            )
            return feed

    def _build_entry(
        self, friend: User, daily: Optional[DailyActivity], now: datetime
    ) -> FriendActivity:
        if not friend.settings.share_activity:
            return FriendActivity(
                user_id=friend.id,
                username=friend.username,
                avatar_id=friend.avatar_id,
            )

        last_active = daily.last_update if daily else None
        status = self.presence_resolver.classify(last_active, now)

        current_project = None
        current_language = None
        if daily and status is not PresenceStatus.OFFLINE:
            if friend.settings.share_project_name:
                current_project = top_entry(daily.projects)
            if friend.settings.share_language:
                current_language = top_entry(daily.languages)

        return FriendActivity(
            user_id=friend.id,
            username=friend.username,
            avatar_id=friend.avatar_id,
            status=status,
            active_seconds=daily.total_seconds if daily else 0,
            last_active=last_active,
            current_project=current_project,
            current_language=current_language,
        )
