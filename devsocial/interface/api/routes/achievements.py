"""Achievement routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from devsocial.application.usecase.achievement import (
    EvaluateAchievementsRequest,
    EvaluateAchievementsResponse,
    EvaluateAchievementsUseCase,
    ListAchievementsRequest,
    ListAchievementsResponse,
    ListAchievementsUseCase,
)
from devsocial.application.usecase.user import AuthenticateUseCase
from devsocial.interface.api.auth import authenticate

router = APIRouter(
    prefix="/achievements", tags=["achievements"], route_class=DishkaRoute
)


@router.get("", response_model=ListAchievementsResponse)
async def list_achievements(
    list_use_case: FromDishka[ListAchievementsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> ListAchievementsResponse:
    """The achievement catalog with the caller's unlock state."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await list_use_case.execute(ListAchievementsRequest(user_id=user.user_id))


@router.post("/evaluate", response_model=EvaluateAchievementsResponse)
async def evaluate_achievements(
    evaluate_use_case: FromDishka[EvaluateAchievementsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    x_api_key: str | None = Header(default=None),
) -> EvaluateAchievementsResponse:
    """Check thresholds now and return what got unlocked by this call."""
    user = await authenticate(x_api_key, authenticate_use_case)
    return await evaluate_use_case.execute(
        EvaluateAchievementsRequest(user_id=user.user_id)
    )
