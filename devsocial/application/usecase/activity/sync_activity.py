"""Sync activity use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devsocial.application.usecase.common import AchievementInfo, FriendActivityInfo
from devsocial.domain.service import (
    AchievementService,
    ActivityService,
    PresenceFeedService,
    get_achievement,
)
from devsocial.domain.value import UserId


class SyncActivityRequest(BaseModel):
    """Activity report sent by the editor extension.

    Only metadata: durations and project/language names.
    """

    user_id: str  # User ID from authenticated user
    seconds: float
    projects: dict[str, float] = Field(default_factory=dict)
    languages: dict[str, float] = Field(default_factory=dict)


class SyncActivityResponse(BaseModel):
    """Sync activity response."""

    today_total: int
    week_total: int
    friends_activity: list[FriendActivityInfo]
    achievements: list[AchievementInfo]
    achievement_error: Optional[str] = None


class SyncActivityUseCase:
    """Use case for merging an activity report and reporting back.

    Achievement evaluation is best-effort: when it fails the merged
    activity is kept and the failure is reported in `achievement_error`.
    """

    def __init__(
        self,
        activity_service: ActivityService,
        presence_feed_service: PresenceFeedService,
        achievement_service: AchievementService,
    ) -> None:
        """Initialize sync activity use case.

        Args:
            activity_service: Activity domain service
            presence_feed_service: Presence feed domain service
            achievement_service: Achievement domain service
        """
        self.activity_service = activity_service
        self.presence_feed_service = presence_feed_service
        self.achievement_service = achievement_service

    async def execute(self, request: SyncActivityRequest) -> SyncActivityResponse:
        """Execute sync flow.

        Steps:
        1. Merge the report into today's aggregates
        2. Evaluate achievements (best-effort)
        3. Read week total and the friends feed

        Raises:
            ValidationError: If a duration is invalid; nothing is merged
            StorageError: If the merge failed
        """
        user_id = UserId(UUID(request.user_id))

        today = await self.activity_service.merge_activity(
            user_id, request.seconds, request.projects, request.languages
        )

        achievements: list[AchievementInfo] = []
        achievement_error = None
        try:
            unlocks = await self.achievement_service.evaluate_and_unlock(user_id)
        except Exception as e:
            logfire.error(
                "Achievement evaluation failed during sync",
                user_id=str(user_id),
                error=str(e),
            )
            achievement_error = "Achievement evaluation failed"
        else:
            for unlock in unlocks:
                achievement = get_achievement(unlock.achievement_id)
                if achievement:
                    achievements.append(AchievementInfo.from_unlock(achievement, unlock))

        week_total = await self.activity_service.get_week_total(user_id)
        feed = await self.presence_feed_service.get_friends_activity(user_id)

        return SyncActivityResponse(
            today_total=today.total_seconds,
            week_total=week_total,
            friends_activity=[FriendActivityInfo.from_activity(f) for f in feed],
            achievements=achievements,
            achievement_error=achievement_error,
        )
