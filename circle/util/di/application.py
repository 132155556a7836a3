"""Application layer DI providers."""

from dishka import Scope, provide

from circle.application.usecase.comment import GetCommentTreeUseCase
from circle.application.usecase.mentor import (
    GetMentorProfileUseCase,
    SearchMentorsUseCase,
)
from circle.application.usecase.points import (
    AwardPointsUseCase,
    GetLeaderboardUseCase,
    GetPointHistoryUseCase,
    GetUserPointsUseCase,
)
from circle.domain.service import CommentService, MentorService, PointsService
from circle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_service=comment_service)

    # Points use cases
    @provide(scope=Scope.REQUEST)
    def get_award_points_use_case(
        self, points_service: PointsService
    ) -> AwardPointsUseCase:
        """Provide award points use case."""
        return AwardPointsUseCase(points_service=points_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_points_use_case(
        self, points_service: PointsService
    ) -> GetUserPointsUseCase:
        """Provide get user points use case."""
        return GetUserPointsUseCase(points_service=points_service)

    @provide(scope=Scope.REQUEST)
    def get_get_leaderboard_use_case(
        self, points_service: PointsService
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(points_service=points_service)

    @provide(scope=Scope.REQUEST)
    def get_get_point_history_use_case(
        self, points_service: PointsService
    ) -> GetPointHistoryUseCase:
        """Provide get point history use case."""
        return GetPointHistoryUseCase(points_service=points_service)

    # Mentor use cases
    @provide(scope=Scope.REQUEST)
    def get_search_mentors_use_case(
        self, mentor_service: MentorService
    ) -> SearchMentorsUseCase:
        """Provide search mentors use case."""
        return SearchMentorsUseCase(mentor_service=mentor_service)

    @provide(scope=Scope.REQUEST)
    def get_get_mentor_profile_use_case(
        self, mentor_service: MentorService
    ) -> GetMentorProfileUseCase:
        """Provide get mentor profile use case."""
        return GetMentorProfileUseCase(mentor_service=mentor_service)
