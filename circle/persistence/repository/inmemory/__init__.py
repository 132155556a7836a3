"""In-memory repository implementations.

Used by the default container (the host application's data layer replaces
them) and by tests.
"""

from .comment import InMemoryCommentRepository
from .mentor_profile import InMemoryMentorProfileRepository
from .point_action import InMemoryPointActionRepository, InMemoryUserPointsRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryMentorProfileRepository",
    "InMemoryPointActionRepository",
    "InMemoryUserPointsRepository",
]
