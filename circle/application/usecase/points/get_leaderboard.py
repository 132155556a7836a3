"""Get leaderboard use case."""

from pydantic import BaseModel, Field

from circle.domain.model import LeaderboardEntry
from circle.domain.service import PointsService, format_rank, points_tier
from circle.domain.value import PointsTier


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    limit: int | None = Field(default=None, gt=0)


class LeaderboardItem(BaseModel):
    """Leaderboard row for API response."""

    user_id: str
    points: int
    rank: int
    rank_label: str
    tier: PointsTier

    @classmethod
    def from_domain(cls, entry: LeaderboardEntry) -> "LeaderboardItem":
        return cls(
            user_id=str(entry.user_id),
            points=entry.points,
            rank=entry.rank,
            rank_label=format_rank(entry.rank),
            tier=points_tier(entry.points),
        )


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    entries: list[LeaderboardItem]


class GetLeaderboardUseCase:
    """Use case for listing the top users by points."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize get leaderboard use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow.

        Args:
            request: Get leaderboard request

        Returns:
            Top users, highest points first, tied users sharing a rank
        """
        entries = await self.points_service.get_leaderboard(limit=request.limit)
        return GetLeaderboardResponse(
            entries=[LeaderboardItem.from_domain(entry) for entry in entries]
        )
