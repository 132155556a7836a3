"""Search mentors use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from circle.application.usecase.base import BaseUseCase
from circle.domain.model import MentorProfile
from circle.domain.service import MentorSearchFilter, MentorService
from circle.domain.value import (
    EXPERTISE_DOMAINS,
    EXPERTISE_TOPICS,
    MENTORING_LEVELS,
    PAYMENT_TYPES,
)
from circle.domain.value.flags import parse_flags


class SearchMentorsRequest(BaseModel):
    """Search mentors request.

    Flag filters are taken straight from the query string: either the stored
    integer (``"5"``) or member names (``"entry,staff"``).
    """

    mentoring_levels: str | None = None
    payment_types: str | None = None
    expertise_domains: str | None = None
    expertise_topics: str | None = None
    min_rate: float | None = Field(default=None, ge=0)
    max_rate: float | None = Field(default=None, ge=0)
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class MentorItem(BaseModel):
    """Mentor profile for API response, flags with their display names."""

    id: str
    user_id: str
    nick_name: str
    bio: str
    mentoring_levels: int
    mentoring_level_names: list[str]
    payment_types: int
    payment_type_names: list[str]
    expertise_domains: int
    expertise_domain_names: list[str]
    expertise_topics_preset: int
    expertise_topic_names: list[str]
    availability: str | None
    hourly_rate: float | None
    allow_reviews: bool
    allow_recording: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, profile: MentorProfile) -> "MentorItem":
        return cls(
            id=str(profile.id),
            user_id=str(profile.user_id),
            nick_name=profile.nick_name,
            bio=profile.bio,
            mentoring_levels=profile.mentoring_levels,
            mentoring_level_names=profile.mentoring_level_names,
            payment_types=profile.payment_types,
            payment_type_names=profile.payment_type_names,
            expertise_domains=profile.expertise_domains,
            expertise_domain_names=profile.expertise_domain_names,
            expertise_topics_preset=profile.expertise_topics_preset,
            expertise_topic_names=profile.expertise_topic_names,
            availability=profile.availability,
            hourly_rate=profile.hourly_rate,
            allow_reviews=profile.allow_reviews,
            allow_recording=profile.allow_recording,
            created_at=profile.created_at,
        )


class SearchMentorsResponse(BaseModel):
    """Search mentors response."""

    mentors: list[MentorItem]
    total: int
    limit: int
    offset: int


class SearchMentorsUseCase(BaseUseCase[SearchMentorsRequest, SearchMentorsResponse]):
    """Use case for browsing mentors by level, payment, expertise and rate."""

    def __init__(self, mentor_service: MentorService) -> None:
        """Initialize search mentors use case.

        Args:
            mentor_service: Mentor domain service
        """
        self.mentor_service = mentor_service

    async def execute(self, request: SearchMentorsRequest) -> SearchMentorsResponse:
        """Execute search mentors flow.

        Steps:
        1. Parse each raw flag filter against its attribute family
        2. Search via mentor service
        3. Convert profiles to response models

        Args:
            request: Search mentors request

        Returns:
            Page of matching mentors with the total match count

        Raises:
            ValidationError: If a flag filter cannot be parsed
        """
        search_filter = MentorSearchFilter(
            mentoring_levels=parse_flags(request.mentoring_levels, MENTORING_LEVELS),
            payment_types=parse_flags(request.payment_types, PAYMENT_TYPES),
            expertise_domains=parse_flags(
                request.expertise_domains, EXPERTISE_DOMAINS
            ),
            expertise_topics=parse_flags(request.expertise_topics, EXPERTISE_TOPICS),
            min_rate=request.min_rate,
            max_rate=request.max_rate,
        )

        profiles, total = await self.mentor_service.search(
            search_filter, limit=request.limit, offset=request.offset
        )

        return SearchMentorsResponse(
            mentors=[MentorItem.from_domain(profile) for profile in profiles],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
