"""Repository implementations."""

from circle.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryMentorProfileRepository,
    InMemoryPointActionRepository,
    InMemoryUserPointsRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryMentorProfileRepository",
    "InMemoryPointActionRepository",
    "InMemoryUserPointsRepository",
]
