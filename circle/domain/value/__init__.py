"""Domain value objects for Circle."""

from circle.domain.value.flags import (
    EXPERTISE_DOMAINS,
    EXPERTISE_TOPICS,
    MENTORING_LEVELS,
    PAYMENT_TYPES,
    ExpertiseDomain,
    ExpertiseTopic,
    FlagFamily,
    MentoringLevel,
    PaymentType,
)
from circle.domain.value.identifiers import (
    CommentId,
    MentorProfileId,
    PointActionId,
    ThreadId,
    UserId,
)
from circle.domain.value.types import ActionType, PointsTier, PostKind

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "ThreadId",
    "MentorProfileId",
    "PointActionId",
    # Types
    "ActionType",
    "PostKind",
    "PointsTier",
    # Bit-flag families
    "FlagFamily",
    "MentoringLevel",
    "PaymentType",
    "ExpertiseDomain",
    "ExpertiseTopic",
    "MENTORING_LEVELS",
    "PAYMENT_TYPES",
    "EXPERTISE_DOMAINS",
    "EXPERTISE_TOPICS",
]
