"""Get user points use case."""

from pydantic import BaseModel

from circle.domain.service import PointsService, format_rank, points_tier
from circle.domain.value import PointsTier, UserId


class GetUserPointsRequest(BaseModel):
    """Get user points request."""

    user_id: str


class GetUserPointsResponse(BaseModel):
    """Get user points response."""

    user_id: str
    points: int
    rank: int
    rank_label: str  # "1st", "2nd", ...
    tier: PointsTier


class GetUserPointsUseCase:
    """Use case for showing a user's points, rank and badge tier."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize get user points use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(self, request: GetUserPointsRequest) -> GetUserPointsResponse:
        """Execute get user points flow.

        Users who never earned points get 0 points and share the last rank.
        """
        entry = await self.points_service.get_user_points(UserId(request.user_id))
        return GetUserPointsResponse(
            user_id=str(entry.user_id),
            points=entry.points,
            rank=entry.rank,
            rank_label=format_rank(entry.rank),
            tier=points_tier(entry.points),
        )
