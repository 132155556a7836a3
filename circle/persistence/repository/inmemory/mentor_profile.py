"""In-memory mentor profile repository."""

from typing import Optional

from circle.domain.model.mentor_profile import MentorProfile
from circle.domain.repository.mentor_profile import MentorProfileRepository
from circle.domain.value import MentorProfileId


class InMemoryMentorProfileRepository(MentorProfileRepository):
    """In-memory implementation of MentorProfileRepository."""

    def __init__(self) -> None:
        self._profiles: dict[MentorProfileId, MentorProfile] = {}

    async def find_by_id(self, profile_id: MentorProfileId) -> Optional[MentorProfile]:
        """Find a mentor profile by ID."""
        return self._profiles.get(profile_id)

    async def find_all(self) -> list[MentorProfile]:
        """Find all mentor profiles, newest first."""
        profiles = list(self._profiles.values())
        profiles.sort(key=lambda p: p.created_at, reverse=True)
        return profiles

    async def save(self, profile: MentorProfile) -> MentorProfile:
        """Save or update a mentor profile."""
        self._profiles[profile.id] = profile
        return profile
