"""Activity rollup use cases: hourly, daily and language distribution."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel

from devsocial.domain.service import ActivityService
from devsocial.domain.value import UserId


class RollupRequest(BaseModel):
    """Rollup request over the last `days` days, today included."""

    user_id: str
    days: int


class HourlyBucketInfo(BaseModel):
    hour: int
    total_seconds: int


class GetHourlyActivityResponse(BaseModel):
    """24 buckets, hour 0 to 23."""

    hours: list[HourlyBucketInfo]


class DailyTotalInfo(BaseModel):
    day: date
    total_seconds: int


class GetDailyHistoryResponse(BaseModel):
    """One entry per day, oldest first."""

    days: list[DailyTotalInfo]


class LanguageShareInfo(BaseModel):
    language: str
    total_seconds: int
    share: float


class GetLanguageDistributionResponse(BaseModel):
    """Languages by time spent, descending."""

    languages: list[LanguageShareInfo]


class GetHourlyActivityUseCase:
    """Use case for the hour-of-day histogram."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: RollupRequest) -> GetHourlyActivityResponse:
        """Raises ValidationError if days < 1."""
        buckets = await self.activity_service.get_hourly_activity(
            UserId(UUID(request.user_id)), request.days
        )
        return GetHourlyActivityResponse(
            hours=[
                HourlyBucketInfo(hour=b.hour, total_seconds=b.total_seconds)
                for b in buckets
            ]
        )


class GetDailyHistoryUseCase:
    """Use case for the per-day history."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: RollupRequest) -> GetDailyHistoryResponse:
        """Raises ValidationError if days < 1."""
        history = await self.activity_service.get_daily_history(
            UserId(UUID(request.user_id)), request.days
        )
        return GetDailyHistoryResponse(
            days=[
                DailyTotalInfo(day=d.day, total_seconds=d.total_seconds)
                for d in history
            ]
        )


class GetLanguageDistributionUseCase:
    """Use case for the language breakdown."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: RollupRequest) -> GetLanguageDistributionResponse:
        """Raises ValidationError if days < 1."""
        shares = await self.activity_service.get_language_distribution(
            UserId(UUID(request.user_id)), request.days
        )
        return GetLanguageDistributionResponse(
            languages=[
                LanguageShareInfo(
                    language=s.language, total_seconds=s.total_seconds, share=s.share
                )
                for s in shares
            ]
        )
