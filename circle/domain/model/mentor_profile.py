"""Mentor profile entity.

Multi-select attributes are stored as bit-flag integers, one column per
attribute family (see ``circle.domain.value.flags``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from circle.domain.model.common import DomainModel
from circle.domain.value import (
    EXPERTISE_DOMAINS,
    EXPERTISE_TOPICS,
    MENTORING_LEVELS,
    PAYMENT_TYPES,
    MentorProfileId,
    UserId,
)
from circle.domain.value.flags import names_of


class MentorProfile(DomainModel):
    """Mentor profile.

    The flag columns accept any non-negative integer; bits outside a family
    are kept but not listed by the ``*_names`` properties.
    """

    id: MentorProfileId
    user_id: UserId
    nick_name: str = Field(min_length=1, max_length=100)
    bio: str = ""
    mentoring_levels: int = Field(default=0, ge=0)
    payment_types: int = Field(default=0, ge=0)
    expertise_domains: int = Field(default=0, ge=0)
    expertise_topics_preset: int = Field(default=0, ge=0)
    expertise_topics_custom: list[str] = Field(default_factory=list)
    availability: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    allow_reviews: bool = True
    allow_recording: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def mentoring_level_names(self) -> list[str]:
        return names_of(self.mentoring_levels, MENTORING_LEVELS)

    @computed_field
    @property
    def payment_type_names(self) -> list[str]:
        return names_of(self.payment_types, PAYMENT_TYPES)

    @computed_field
    @property
    def expertise_domain_names(self) -> list[str]:
        return names_of(self.expertise_domains, EXPERTISE_DOMAINS)

    @computed_field
    @property
    def expertise_topic_names(self) -> list[str]:
        """Preset topic names followed by custom topics."""
        return names_of(self.expertise_topics_preset, EXPERTISE_TOPICS) + list(
            self.expertise_topics_custom
        )
