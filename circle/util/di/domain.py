"""Domain layer DI providers."""

from dishka import Scope, provide

from circle.config import CommentSettings, PointsSettings
from circle.domain.repository import (
    CommentRepository,
    MentorProfileRepository,
    PointActionRepository,
    UserPointsRepository,
)
from circle.domain.service import CommentService, MentorService, PointsService
from circle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_points_service(
        self,
        point_action_repository: PointActionRepository,
        user_points_repository: UserPointsRepository,
        points_settings: PointsSettings,
    ) -> PointsService:
        """Provide points domain service."""
        return PointsService(
            point_action_repository=point_action_repository,
            user_points_repository=user_points_repository,
            points_settings=points_settings,
        )

    @provide
    def get_mentor_service(
        self, mentor_profile_repository: MentorProfileRepository
    ) -> MentorService:
        """Provide mentor domain service."""
        return MentorService(mentor_profile_repository=mentor_profile_repository)
