"""Persistence infrastructure providers."""

from dishka import Scope, provide

from circle.domain.repository import (
    CommentRepository,
    MentorProfileRepository,
    PointActionRepository,
    UserPointsRepository,
)
from circle.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryMentorProfileRepository,
    InMemoryPointActionRepository,
    InMemoryUserPointsRepository,
)
from circle.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Repositories live for the whole process. A host application with a real
    data layer registers its own ``PersistenceProvider`` instead.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_point_action_repository(self) -> PointActionRepository:
        """Provide PointAction repository."""
        return InMemoryPointActionRepository()

    @provide
    def get_user_points_repository(self) -> UserPointsRepository:
        """Provide UserPoints repository."""
        return InMemoryUserPointsRepository()

    @provide
    def get_mentor_profile_repository(self) -> MentorProfileRepository:
        """Provide MentorProfile repository."""
        return InMemoryMentorProfileRepository()
