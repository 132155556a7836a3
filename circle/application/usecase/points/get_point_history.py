"""Get point history use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from circle.domain.model import PointAction
from circle.domain.service import PointsService
from circle.domain.value import ActionType, UserId


class GetPointHistoryRequest(BaseModel):
    """Get point history request."""

    user_id: str
    limit: int = Field(default=20, ge=1, le=100)


class PointActionItem(BaseModel):
    """Ledger entry for API response."""

    id: str
    action_type: ActionType
    reference_id: str
    points_awarded: int
    created_at: datetime

    @classmethod
    def from_domain(cls, action: PointAction) -> "PointActionItem":
        return cls(
            id=str(action.id),
            action_type=action.action_type,
            reference_id=action.reference_id,
            points_awarded=action.points_awarded,
            created_at=action.created_at,
        )


class GetPointHistoryResponse(BaseModel):
    """Get point history response."""

    user_id: str
    actions: list[PointActionItem]


class GetPointHistoryUseCase:
    """Use case for listing how a user earned their points."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize get point history use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(self, request: GetPointHistoryRequest) -> GetPointHistoryResponse:
        """Execute get point history flow.

        Returns:
            Newest entries first, zero awards included
        """
        actions = await self.points_service.get_history(
            UserId(request.user_id), limit=request.limit
        )
        return GetPointHistoryResponse(
            user_id=request.user_id,
            actions=[PointActionItem.from_domain(action) for action in actions],
        )
