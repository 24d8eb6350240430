"""Achievement use cases."""

from .evaluate_achievements import (
    EvaluateAchievementsRequest,
    EvaluateAchievementsResponse,
    EvaluateAchievementsUseCase,
)
from .list_achievements import (
    ListAchievementsRequest,
    ListAchievementsResponse,
    ListAchievementsUseCase,
)

__all__ = [
    "EvaluateAchievementsRequest",
    "EvaluateAchievementsResponse",
    "EvaluateAchievementsUseCase",
    "ListAchievementsRequest",
    "ListAchievementsResponse",
    "ListAchievementsUseCase",
]
