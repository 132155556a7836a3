"""Point ledger entities.

Every point-earning action is appended to the action log, including actions
that earned nothing, so repeated spam keeps counting against the window.
"""

from datetime import datetime

from pydantic import Field

from circle.domain.model.common import DomainModel
from circle.domain.value import ActionType, PointActionId, UserId


class PointAction(DomainModel):
    """Append-only ledger entry for one point-earning action."""

    id: PointActionId
    user_id: UserId
    action_type: ActionType
    reference_id: str  # Post, comment, like, blog or challenge that triggered it
    points_awarded: int = Field(ge=0)
    created_at: datetime = Field(default_factory=datetime.now)


class UserPoints(DomainModel):
    """Accumulated points for a user."""

    user_id: UserId
    points: int = Field(default=0, ge=0)
    updated_at: datetime = Field(default_factory=datetime.now)


class LeaderboardEntry(DomainModel):
    """User points with their leaderboard rank (1-indexed, ties share a rank)."""

    user_id: UserId
    points: int = Field(ge=0)
    rank: int = Field(ge=1)
