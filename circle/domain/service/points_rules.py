"""Point award rules with diminishing returns.

Each action type has a base award and a tier table. The tier is chosen by
how many actions of the same type the user already performed inside the
trailing window (one hour in the product rules):

    forum_thread_created: first 3 threads 15 points, next 2 at 50%, then 0

The count itself comes from the point action log; everything here is a pure
function of ``(action_type, prior_count, base_points)``.
"""

import math

from pydantic import Field

from circle.domain.error import InvalidArgumentError, UnknownActionTypeError
from circle.domain.value import ActionType, PointsTier, PostKind
from circle.domain.value.common import ValueObject


class Tier(ValueObject):
    """Applies while the prior count is below ``up_to`` (None: no limit)."""

    up_to: int | None = Field(default=None, gt=0)
    multiplier: float = Field(default=1.0, ge=0)


class PointRule(ValueObject):
    """Base award and diminishing-returns tiers for one action type."""

    base_points: int = Field(ge=0)
    tiers: tuple[Tier, ...]

    def points_for(self, prior_count: int, base_points: int | None = None) -> int:
        """Points for the next action after ``prior_count`` recent ones."""
        base = self.base_points if base_points is None else base_points
        if base <= 0:
            return 0
        for tier in self.tiers:
            if tier.up_to is None or prior_count < tier.up_to:
                return math.floor(base * tier.multiplier)
        return 0


UNLIMITED = (Tier(),)

POINT_RULES: dict[ActionType, PointRule] = {
    ActionType.POST_CREATED: PointRule(
        base_points=10,
        tiers=(Tier(up_to=3), Tier(up_to=5, multiplier=0.5)),
    ),
    ActionType.COMMENT_CREATED: PointRule(
        base_points=5,
        tiers=(Tier(up_to=10), Tier(up_to=20, multiplier=0.4)),
    ),
    ActionType.LIKE_RECEIVED: PointRule(
        base_points=2,
        tiers=(Tier(up_to=5), Tier(up_to=15, multiplier=0.5)),
    ),
    ActionType.COMMENT_RECEIVED: PointRule(base_points=3, tiers=UNLIMITED),
    ActionType.BLOG_CREATED: PointRule(
        base_points=10,
        tiers=(Tier(up_to=2), Tier(up_to=4, multiplier=0.5)),
    ),
    ActionType.BLOG_FEATURED: PointRule(base_points=50, tiers=UNLIMITED),
    ActionType.FORUM_THREAD_CREATED: PointRule(
        base_points=15,
        tiers=(Tier(up_to=3), Tier(up_to=5, multiplier=0.5)),
    ),
    ActionType.FORUM_REPLY_CREATED: PointRule(
        base_points=5,
        tiers=(Tier(up_to=10), Tier(up_to=20, multiplier=0.4)),
    ),
    # Thread upvotes use the base; reply upvotes pass base_points=2
    ActionType.UPVOTE_RECEIVED: PointRule(
        base_points=3,
        tiers=(Tier(up_to=5), Tier(up_to=15, multiplier=0.5)),
    ),
    ActionType.CHALLENGE_JOINED: PointRule(base_points=5, tiers=(Tier(up_to=5),)),
    ActionType.CHALLENGE_SUBMITTED: PointRule(
        base_points=10, tiers=(Tier(up_to=3),)
    ),
    # Reward is set per challenge by its creator
    ActionType.CHALLENGE_APPROVED: PointRule(base_points=0, tiers=UNLIMITED),
}

POST_BASE_POINTS: dict[PostKind, int] = {
    PostKind.DISCUSSION: 15,
    PostKind.GENERAL: 10,
    PostKind.ANNOUNCEMENT: 0,
}

REPLY_UPVOTE_BASE_POINTS = 2


def to_action_type(action_type: ActionType | str) -> ActionType:
    """Coerce a raw action type tag.

    Raises:
        UnknownActionTypeError: If the tag names no known action type
    """
    if isinstance(action_type, ActionType):
        return action_type
    try:
        return ActionType(action_type)
    except ValueError:
        raise UnknownActionTypeError(action_type) from None


def get_rule(action_type: ActionType | str) -> PointRule:
    """Look up the rule for an action type.

    Raises:
        UnknownActionTypeError: If no rule exists for the action type
    """
    resolved = to_action_type(action_type)
    rule = POINT_RULES.get(resolved)
    if rule is None:
        raise UnknownActionTypeError(action_type)
    return rule


def calculate_points(
    action_type: ActionType | str,
    prior_count: int,
    base_points: int | None = None,
) -> int:
    """Calculate the award for one action.

    Args:
        action_type: Action being rewarded
        prior_count: Same-type actions by the same user already inside the window
        base_points: Overrides the rule's base award (post kinds, reply
            upvotes, challenge rewards)

    Returns:
        Points to award, 0 once the user is past the last tier

    Raises:
        UnknownActionTypeError: If the action type is not recognized
        InvalidArgumentError: If ``prior_count`` is negative
    """
    rule = get_rule(action_type)
    if prior_count < 0:
        raise InvalidArgumentError("prior_count", prior_count, "must be >= 0")
    return rule.points_for(prior_count, base_points)


def format_rank(rank: int | None) -> str:
    """Format a leaderboard rank as an ordinal ("1st", "12th", "23rd")."""
    if not rank or rank < 1:
        return ""
    if 11 <= rank % 100 <= 13:
        return f"{rank}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"


def points_tier(points: int) -> PointsTier:
    """Badge tier for a points total."""
    if points >= 1000:
        return PointsTier.GOLD
    if points >= 500:
        return PointsTier.SILVER
    if points >= 100:
        return PointsTier.BRONZE
    return PointsTier.NONE
