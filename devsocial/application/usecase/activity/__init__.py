"""Activity use cases."""

from .get_friends_activity import (
    GetFriendsActivityRequest,
    GetFriendsActivityResponse,
    GetFriendsActivityUseCase,
)
from .get_rollups import (
    GetDailyHistoryResponse,
    GetDailyHistoryUseCase,
    GetHourlyActivityResponse,
    GetHourlyActivityUseCase,
    GetLanguageDistributionResponse,
    GetLanguageDistributionUseCase,
    RollupRequest,
)
from .get_stats import (
    GetActivityStatsRequest,
    GetActivityStatsResponse,
    GetActivityStatsUseCase,
)
from .sync_activity import (
    SyncActivityRequest,
    SyncActivityResponse,
    SyncActivityUseCase,
)

__all__ = [
    "GetActivityStatsRequest",
    "GetActivityStatsResponse",
    "GetActivityStatsUseCase",
    "GetDailyHistoryResponse",
    "GetDailyHistoryUseCase",
    "GetFriendsActivityRequest",
    "GetFriendsActivityResponse",
    "GetFriendsActivityUseCase",
    "GetHourlyActivityResponse",
    "GetHourlyActivityUseCase",
    "GetLanguageDistributionResponse",
    "GetLanguageDistributionUseCase",
    "RollupRequest",
    "SyncActivityRequest",
    "SyncActivityResponse",
    "SyncActivityUseCase",
]
