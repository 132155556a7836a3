"""Award points use case."""

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import PointsService
from circle.domain.service.points_rules import POST_BASE_POINTS
from circle.domain.value import ActionType, PostKind, UserId


class AwardPointsRequest(BaseModel):
    """Award points request."""

    user_id: str
    action_type: str  # Raw tag, validated by the points rules
    reference_id: str  # Post, comment, thread or challenge that triggered it
    base_points: int | None = None  # Challenge reward or reply upvote value
    post_kind: PostKind | None = None  # Selects the base for created posts


class AwardPointsResponse(BaseModel):
    """Award points response."""

    user_id: str
    action_type: str
    points_awarded: int
    total_points: int


class AwardPointsUseCase(BaseUseCase[AwardPointsRequest, AwardPointsResponse]):
    """Use case for rewarding a user action with points."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize award points use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(self, request: AwardPointsRequest) -> AwardPointsResponse:
        """Execute award points flow.

        Steps:
        1. Resolve the base award (explicit value, then post kind, then rule)
        2. Award points via points service (applies diminishing returns)
        3. Read back the user's new total

        Args:
            request: Award points request

        Returns:
            Points awarded for this action and the user's total

        Raises:
            UnknownActionTypeError: If the action type is not recognized
        """
        user_id = UserId(request.user_id)

        base_points = request.base_points
        if (
            base_points is None
            and request.post_kind is not None
            and request.action_type == ActionType.POST_CREATED.value
        ):
            base_points = POST_BASE_POINTS[request.post_kind]

        awarded = await self.points_service.award_points(
            user_id=user_id,
            action_type=request.action_type,
            reference_id=request.reference_id,
            base_points=base_points,
        )
        standing = await self.points_service.get_user_points(user_id)

        return AwardPointsResponse(
            user_id=request.user_id,
            action_type=request.action_type,
            points_awarded=awarded,
            total_points=standing.points,
        )
