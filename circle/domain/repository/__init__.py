"""Repository interfaces for Circle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from circle.domain.repository.comment import CommentRepository
from circle.domain.repository.mentor_profile import MentorProfileRepository
from circle.domain.repository.point_action import (
    PointActionRepository,
    UserPointsRepository,
)

__all__ = [
    "CommentRepository",
    "MentorProfileRepository",
    "PointActionRepository",
    "UserPointsRepository",
]
