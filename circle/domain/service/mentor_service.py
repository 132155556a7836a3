"""Mentor domain service."""

import logfire
from pydantic import Field

from circle.domain.error import NotFoundError
from circle.domain.model.mentor_profile import MentorProfile
from circle.domain.repository import MentorProfileRepository
from circle.domain.value import (
    EXPERTISE_DOMAINS,
    EXPERTISE_TOPICS,
    MENTORING_LEVELS,
    PAYMENT_TYPES,
    MentorProfileId,
)
from circle.domain.value.common import ValueObject
from circle.domain.value.flags import known_mask, matches_any

from .base import Service


class MentorSearchFilter(ValueObject):
    """Mentor search criteria.

    A zero flag filter means "any". A non-zero one matches profiles sharing
    at least one bit with it.
    """

    mentoring_levels: int = Field(default=0, ge=0)
    payment_types: int = Field(default=0, ge=0)
    expertise_domains: int = Field(default=0, ge=0)
    expertise_topics: int = Field(default=0, ge=0)
    min_rate: float | None = Field(default=None, ge=0)
    max_rate: float | None = Field(default=None, ge=0)

    def matches(self, profile: MentorProfile) -> bool:
        """Check a profile against every criterion."""
        flag_filters = (
            (profile.mentoring_levels, self.mentoring_levels),
            (profile.payment_types, self.payment_types),
            (profile.expertise_domains, self.expertise_domains),
            (profile.expertise_topics_preset, self.expertise_topics),
        )
        for stored, wanted in flag_filters:
            if wanted and not matches_any(stored, wanted):
                return False

        if self.min_rate is not None or self.max_rate is not None:
            if profile.hourly_rate is None:
                return False
            if self.min_rate is not None and profile.hourly_rate < self.min_rate:
                return False
            if self.max_rate is not None and profile.hourly_rate > self.max_rate:
                return False
        return True


class MentorService(Service):
    """Domain service for mentor profiles."""

    span_prefix = "mentor_service"

    def __init__(self, mentor_profile_repository: MentorProfileRepository) -> None:
        """Initialize mentor service.

        Args:
            mentor_profile_repository: Mentor profile repository
        """
        self.mentor_profile_repository = mentor_profile_repository

    async def save_profile(self, profile: MentorProfile) -> MentorProfile:
        """Create or update a mentor profile.

        Flag bits no family member defines are stored as given, with a
        warning naming them.
        """
        with self._span(
            "save_profile",
            profile_id=str(profile.id),
            user_id=str(profile.user_id),
        ):
            unrecognized = unrecognized_flag_bits(profile)
            if unrecognized:
                logfire.warn(
                    "Mentor profile has unrecognized flag bits",
                    profile_id=str(profile.id),
                    **unrecognized,
                )
            saved = await self.mentor_profile_repository.save(profile)
            logfire.info(
                "Mentor profile saved",
                profile_id=str(saved.id),
                mentoring_levels=saved.mentoring_levels,
                payment_types=saved.payment_types,
            )
            return saved

    async def get_profile(self, profile_id: MentorProfileId) -> MentorProfile:
        """Get a mentor profile by ID.

        Raises:
            NotFoundError: If no profile has this ID
        """
        profile = await self.mentor_profile_repository.find_by_id(profile_id)
        if profile is None:
            raise NotFoundError("MentorProfile", str(profile_id))
        return profile

    async def search(
        self, search_filter: MentorSearchFilter, limit: int = 20, offset: int = 0
    ) -> tuple[list[MentorProfile], int]:
        """Search mentor profiles.

        Args:
            search_filter: Search criteria
            limit: Page size
            offset: Number of matches to skip

        Returns:
            Tuple of (page of matching profiles, total number of matches)
        """
        with self._span(
            "search",
            **search_filter.model_dump(),
            limit=limit,
            offset=offset,
        ):
            profiles = await self.mentor_profile_repository.find_all()
            matches = [p for p in profiles if search_filter.matches(p)]
            logfire.info(
                "Mentor search completed",
                scanned=len(profiles),
                matched=len(matches),
            )
            return matches[offset : offset + limit], len(matches)


def unrecognized_flag_bits(profile: MentorProfile) -> dict[str, int]:
    """Map each flag column to the bits its family does not define.

    Columns without such bits are left out.
    """
    columns = {
        "mentoring_levels": (profile.mentoring_levels, MENTORING_LEVELS),
        "payment_types": (profile.payment_types, PAYMENT_TYPES),
        "expertise_domains": (profile.expertise_domains, EXPERTISE_DOMAINS),
        "expertise_topics_preset": (profile.expertise_topics_preset, EXPERTISE_TOPICS),
    }
    unrecognized = {}
    for column, (flags, family) in columns.items():
        extra = flags & ~known_mask(family)
        if extra:
            unrecognized[column] = extra
    return unrecognized
