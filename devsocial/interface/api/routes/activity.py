"""Activity routes: sync from the editor, stats, feed and rollups."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from devsocial.application.usecase.activity import (
    GetActivityStatsRequest,
    GetActivityStatsResponse,
    GetActivityStatsUseCase,
    GetDailyHistoryResponse,
    GetDailyHistoryUseCase,
    GetFriendsActivityRequest,
    GetFriendsActivityResponse,
    GetFriendsActivityUseCase,
    GetHourlyActivityResponse,
    GetHourlyActivityUseCase,
    GetLanguageDistributionResponse,
    GetLanguageDistributionUseCase,
    RollupRequest,
    SyncActivityRequest,
    SyncActivityResponse,
    SyncActivityUseCase,
)
from devsocial.application.usecase.user import AuthenticateUseCase
from devsocial.interface.api.auth import authenticate

router = APIRouter(prefix="/activity", tags=["activity"], route_class=DishkaRoute)


class SyncActivityAPIRequest(BaseModel):
    """Activity report body. Durations in seconds."""

    seconds: float
    projects: dict[str, float] = Field(default_factory=dict)
    languages: dict[str, float] = Field(default_factory=dict)


@router.post("/sync", response_model=SyncActivityResponse)
async def sync_activity(
    request: SyncActivityAPIRequest,
    sync_activity_use_case: FromDishka[SyncActivityUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> SyncActivityResponse:
    """Merge an activity report from the editor extension.

    Example:
        POST /activity/sync
        X-API-Key: ...

        Request:
        {
            "seconds": 1800,
            "projects": {"app": 1800},
            "languages": {"rust": 1800}
        }

        Response:
        {
            "today_total": 5400,
            "week_total": 20100,
            "friends_activity": [...],
            "achievements": [],
            "achievement_error": null
        }
    """
    user = await authenticate(x_api_key, authenticate_use_case)
    return await sync_activity_use_case.execute(
        SyncActivityRequest(
            user_id=user.user_id,
            seconds=request.seconds,
            projects=request.projects,
            languages=request.languages,
        )
    )


@router.get("/stats", response_model=GetActivityStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetActivityStatsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetActivityStatsResponse:
    """Today's totals and the last 7 days total of the caller."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_stats_use_case.execute(
        GetActivityStatsRequest(user_id=user.user_id)
    )


@router.get("/friends", response_model=GetFriendsActivityResponse)
async def get_friends_activity(
    get_friends_activity_use_case: FromDishka[GetFriendsActivityUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> GetFriendsActivityResponse:
    """Presence feed of the caller's friends, online first."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_friends_activity_use_case.execute(
        GetFriendsActivityRequest(user_id=user.user_id)
    )


@router.get("/hourly", response_model=GetHourlyActivityResponse)
async def get_hourly_activity(
    get_hourly_use_case: FromDishka[GetHourlyActivityUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    days: int = Query(default=7),
    x_api_key: str | None = Header(default=None),
) -> GetHourlyActivityResponse:
    """Seconds per hour of day over the last `days` days."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_hourly_use_case.execute(
        RollupRequest(user_id=user.user_id, days=days)
    )


@router.get("/daily", response_model=GetDailyHistoryResponse)
async def get_daily_history(
    get_daily_use_case: FromDishka[GetDailyHistoryUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    days: int = Query(default=30),
    x_api_key: str | None = Header(default=None),
) -> GetDailyHistoryResponse:
    """Seconds per day over the last `days` days, oldest first."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_daily_use_case.execute(
        RollupRequest(user_id=user.user_id, days=days)
    )


@router.get("/languages", response_model=GetLanguageDistributionResponse)
async def get_language_distribution(
    get_languages_use_case: FromDishka[GetLanguageDistributionUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    days: int = Query(default=30),
    x_api_key: str | None = Header(default=None),
) -> GetLanguageDistributionResponse:
    """Share of coding time per language over the last `days` days."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await get_languages_use_case.execute(
        RollupRequest(user_id=user.user_id, days=days)
    )
