"""Points use cases."""

from .award_points import AwardPointsRequest, AwardPointsResponse, AwardPointsUseCase
from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardItem,
)
from .get_point_history import (
    GetPointHistoryRequest,
    GetPointHistoryResponse,
    GetPointHistoryUseCase,
    PointActionItem,
)
from .get_user_points import (
    GetUserPointsRequest,
    GetUserPointsResponse,
    GetUserPointsUseCase,
)

__all__ = [
    "AwardPointsRequest",
    "AwardPointsResponse",
    "AwardPointsUseCase",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetPointHistoryRequest",
    "GetPointHistoryResponse",
    "GetPointHistoryUseCase",
    "GetUserPointsRequest",
    "GetUserPointsResponse",
    "GetUserPointsUseCase",
    "LeaderboardItem",
    "PointActionItem",
]
