"""Get activity stats use case."""

from uuid import UUID

from pydantic import BaseModel

from devsocial.domain.service import ActivityService
from devsocial.domain.value import UserId


class GetActivityStatsRequest(BaseModel):
    """Get activity stats request."""

    user_id: str


class GetActivityStatsResponse(BaseModel):
    """Today's aggregate and the week total."""

    today_total: int
    projects: dict[str, int]
    languages: dict[str, int]
    week_total: int


class GetActivityStatsUseCase:
    """Use case for reading a user's own activity stats."""

    def __init__(self, activity_service: ActivityService) -> None:
        """Initialize get activity stats use case.

        Args:
            activity_service: Activity domain service
        """
        self.activity_service = activity_service

    async def execute(self, request: GetActivityStatsRequest) -> GetActivityStatsResponse:
        """Execute get stats flow."""
        user_id = UserId(UUID(request.user_id))

        today = await self.activity_service.get_today(user_id)
        week_total = await self.activity_service.get_week_total(user_id)

        return GetActivityStatsResponse(
            today_total=today.total_seconds if today else 0,
            projects=dict(today.projects) if today else {},
            languages=dict(today.languages) if today else {},
            week_total=week_total,
        )
