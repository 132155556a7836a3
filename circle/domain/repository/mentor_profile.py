"""Mentor profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from circle.domain.model.mentor_profile import MentorProfile
from circle.domain.value import MentorProfileId


class MentorProfileRepository(ABC):
    """Repository for MentorProfile entity."""

    @abstractmethod
    async def find_by_id(self, profile_id: MentorProfileId) -> Optional[MentorProfile]:
        """Find a mentor profile by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[MentorProfile]:
        """Find all mentor profiles, newest first."""
        pass

    @abstractmethod
    async def save(self, profile: MentorProfile) -> MentorProfile:
        """Save a mentor profile (create or update)."""
        pass
