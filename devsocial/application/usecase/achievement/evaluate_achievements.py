"""Evaluate achievements use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.common import AchievementInfo
from devsocial.domain.service import AchievementService, get_achievement
from devsocial.domain.value import UserId


class EvaluateAchievementsRequest(BaseModel):
    """Evaluate achievements request."""

    user_id: str


class EvaluateAchievementsResponse(BaseModel):
    """Achievements unlocked by this evaluation only."""

    unlocked: list[AchievementInfo]


class EvaluateAchievementsUseCase:
    """Use case for an explicit achievement check.

    Unlike the sync flow, failures propagate to the caller.
    """

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(
        self, request: EvaluateAchievementsRequest
    ) -> EvaluateAchievementsResponse:
        unlocks = await self.achievement_service.evaluate_and_unlock(
            UserId(UUID(request.user_id))
        )
        unlocked = []
        for unlock in unlocks:
            achievement = get_achievement(unlock.achievement_id)
            if achievement:
                unlocked.append(AchievementInfo.from_unlock(achievement, unlock))
        return EvaluateAchievementsResponse(unlocked=unlocked)
