"""Mentor use cases."""

from .get_mentor_profile import (
    GetMentorProfileRequest,
    GetMentorProfileResponse,
    GetMentorProfileUseCase,
)
from .search_mentors import (
    MentorItem,
    SearchMentorsRequest,
    SearchMentorsResponse,
    SearchMentorsUseCase,
)

__all__ = [
    "GetMentorProfileRequest",
    "GetMentorProfileResponse",
    "GetMentorProfileUseCase",
    "MentorItem",
    "SearchMentorsRequest",
    "SearchMentorsResponse",
    "SearchMentorsUseCase",
]
