"""List achievements use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.application.usecase.common import AchievementInfo
from devsocial.domain.service import AchievementService
from devsocial.domain.value import UserId


class ListAchievementsRequest(BaseModel):
    """List achievements request."""

    user_id: str


class ListAchievementsResponse(BaseModel):
    """Whole catalog with per-user unlock state."""

    achievements: list[AchievementInfo]
    unlocked_count: int


class ListAchievementsUseCase:
    """Use case for showing the achievement catalog to a user."""

    def __init__(self, achievement_service: AchievementService) -> None:
        self.achievement_service = achievement_service

    async def execute(self, request: ListAchievementsRequest) -> ListAchievementsResponse:
        statuses = await self.achievement_service.list_achievements(
            UserId(UUID(request.user_id))
        )
        return ListAchievementsResponse(
            achievements=[
                AchievementInfo.from_achievement(s.achievement, s.unlocked_at)
                for s in statuses
            ],
            unlocked_count=sum(1 for s in statuses if s.unlocked),
        )
