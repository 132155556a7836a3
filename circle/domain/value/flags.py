"""Bit-flag families for multi-valued profile attributes.

Mentor profiles store each multi-select attribute as a single integer column:
bit ``i`` set means the member with value ``2**i`` is selected. The helpers
here are the only way those integers are built or read.

Any integer is a valid flags value. Bits no member defines are kept by
``add``/``remove``/``toggle`` and ignored by ``names_of``, so members can be
appended to a family without migrating stored rows.

Usage:
    levels = add(0, MentoringLevel.ENTRY)
    levels = add(levels, MentoringLevel.STAFF)
    names_of(levels, MENTORING_LEVELS)  # ['Entry', 'Staff']
    from_names(["staff", "ENTRY"], MENTORING_LEVELS)  # 5
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntFlag
from typing import Generic, TypeVar

from circle.domain.error import ValidationError


class MentoringLevel(IntFlag):
    """Career levels a mentor is willing to coach."""

    ENTRY = 1
    SENIOR = 2
    STAFF = 4
    MANAGEMENT = 8


class PaymentType(IntFlag):
    """Payment methods a mentor accepts."""

    VENMO = 1
    PAYPAL = 2
    ZELLE = 4
    ALIPAY = 8
    WECHAT = 16
    CRYPTO = 32


class ExpertiseDomain(IntFlag):
    """Professional domains a mentor covers."""

    TECHNICAL_DEVELOPMENT = 1
    PRODUCT_AND_PROJECT = 2
    MANAGEMENT_AND_STRATEGY = 4
    CAREER_DEVELOPMENT = 8


class ExpertiseTopic(IntFlag):
    """Preset expertise topics (custom topics are stored separately)."""

    CAREER_TRANSITION = 1
    TECHNICAL_SKILLS = 2
    LEADERSHIP = 4
    COMMUNICATION = 8
    INTERVIEW_PREP = 16
    NEGOTIATION = 32
    TIME_MANAGEMENT = 64
    FUNDRAISING = 128
    VOLUNTEER_MANAGEMENT = 256
    STRATEGIC_PLANNING = 512


F = TypeVar("F", bound=IntFlag)


@dataclass(frozen=True)
class FlagFamily(Generic[F]):
    """An attribute family: its members in display order and their labels."""

    name: str
    members: tuple[tuple[F, str], ...]

    def __iter__(self) -> Iterator[tuple[F, str]]:
        return iter(self.members)

    def lookup(self, name: str) -> F | None:
        """Find a member by display name or enum name, ignoring case."""
        key = name.strip().lower()
        for member, display in self.members:
            if key in (display.lower(), member.name.lower()):
                return member
        return None


MENTORING_LEVELS: FlagFamily[MentoringLevel] = FlagFamily(
    name="mentoring_levels",
    members=(
        (MentoringLevel.ENTRY, "Entry"),
        (MentoringLevel.SENIOR, "Senior"),
        (MentoringLevel.STAFF, "Staff"),
        (MentoringLevel.MANAGEMENT, "Management"),
    ),
)

PAYMENT_TYPES: FlagFamily[PaymentType] = FlagFamily(
    name="payment_types",
    members=(
        (PaymentType.VENMO, "Venmo"),
        (PaymentType.PAYPAL, "Paypal"),
        (PaymentType.ZELLE, "Zelle"),
        (PaymentType.ALIPAY, "Alipay"),
        (PaymentType.WECHAT, "WeChat"),
        (PaymentType.CRYPTO, "Crypto"),
    ),
)

EXPERTISE_DOMAINS: FlagFamily[ExpertiseDomain] = FlagFamily(
    name="expertise_domains",
    members=(
        (ExpertiseDomain.TECHNICAL_DEVELOPMENT, "Technical Development"),
        (ExpertiseDomain.PRODUCT_AND_PROJECT, "Product & Project"),
        (ExpertiseDomain.MANAGEMENT_AND_STRATEGY, "Management & Strategy"),
        (ExpertiseDomain.CAREER_DEVELOPMENT, "Career Development"),
    ),
)

EXPERTISE_TOPICS: FlagFamily[ExpertiseTopic] = FlagFamily(
    name="expertise_topics_preset",
    members=(
        (ExpertiseTopic.CAREER_TRANSITION, "Career Transition"),
        (ExpertiseTopic.TECHNICAL_SKILLS, "Technical Skills"),
        (ExpertiseTopic.LEADERSHIP, "Leadership"),
        (ExpertiseTopic.COMMUNICATION, "Communication"),
        (ExpertiseTopic.INTERVIEW_PREP, "Interview Prep"),
        (ExpertiseTopic.NEGOTIATION, "Negotiation"),
        (ExpertiseTopic.TIME_MANAGEMENT, "Time Management"),
        (ExpertiseTopic.FUNDRAISING, "Fundraising"),
        (ExpertiseTopic.VOLUNTEER_MANAGEMENT, "Volunteer Management"),
        (ExpertiseTopic.STRATEGIC_PLANNING, "Strategic Planning"),
    ),
)


def has(flags: int, value: int) -> bool:
    """Check whether ``value`` is set in ``flags``."""
    return (int(flags) & int(value)) != 0


def add(flags: int, value: int) -> int:
    """Return ``flags`` with ``value`` set."""
    return int(flags) | int(value)


def remove(flags: int, value: int) -> int:
    """Return ``flags`` with ``value`` cleared."""
    return int(flags) & ~int(value)


def toggle(flags: int, value: int) -> int:
    """Return ``flags`` with ``value`` flipped."""
    return int(flags) ^ int(value)


def names_of(flags: int, family: FlagFamily) -> list[str]:
    """Get display names of the members set in ``flags``.

    Names come out in the family's declaration order, whatever order the
    bits were set in. Undefined bits are skipped.

    Args:
        flags: Stored flags integer
        family: Attribute family to read the integer as

    Returns:
        Display names, e.g. ``['Venmo', 'WeChat']``
    """
    return [display for member, display in family if has(flags, member)]


def from_names(names: Iterable[str], family: FlagFamily) -> int:
    """Combine member names into a flags integer.

    Matching is case-insensitive against display names and enum names.
    Unrecognized names are ignored.

    Args:
        names: Names from a request payload
        family: Attribute family the names belong to

    Returns:
        Combined flags integer (0 if nothing matched)
    """
    flags = 0
    for name in names:
        member = family.lookup(name)
        if member is not None:
            flags = add(flags, member)
    return flags


def known_mask(family: FlagFamily) -> int:
    """OR of every member the family defines."""
    mask = 0
    for member, _ in family:
        mask = add(mask, member)
    return mask


def matches_any(flags: int, wanted: int) -> bool:
    """Check whether ``flags`` shares at least one bit with ``wanted``.

    Mirrors the ``column & ? > 0`` search filter, so ``wanted == 0`` never
    matches; callers skip zero filters.
    """
    return (int(flags) & int(wanted)) > 0


def parse_flags(raw: str | int | None, family: FlagFamily | None = None) -> int:
    """Parse an untrusted query-string value into a flags integer.

    Accepts a non-negative integer (``"5"``) or, when ``family`` is given, a
    comma-separated list of member names (``"entry,staff"``). Empty input
    parses to 0.

    Raises:
        ValidationError: If the value is negative or cannot be parsed
    """
    if raw is None:
        return 0
    if isinstance(raw, int):
        if raw < 0:
            raise ValidationError(f"Flags must be non-negative, got {raw}")
        return raw

    text = raw.strip()
    if not text:
        return 0
    if text.isascii() and text.isdigit():
        return int(text)
    if family is not None and not text.startswith("-"):
        names = [part for part in text.split(",") if part.strip()]
        flags = from_names(names, family)
        if flags or not names:
            return flags
    raise ValidationError(f"Invalid {family.name if family else 'flags'} value: {raw!r}")
