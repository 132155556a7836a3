"""In-memory point ledger repositories."""

from datetime import datetime
from typing import Optional

from circle.domain.model.point_action import PointAction, UserPoints
from circle.domain.repository.point_action import (
    PointActionRepository,
    UserPointsRepository,
)
from circle.domain.value import ActionType, UserId


class InMemoryPointActionRepository(PointActionRepository):
    """In-memory implementation of PointActionRepository."""

    def __init__(self) -> None:
        self._actions: list[PointAction] = []

    async def append(self, action: PointAction) -> PointAction:
        """Append an action to the log."""
        self._actions.append(action)
        return action

    async def count_since(
        self, user_id: UserId, action_type: ActionType, since: datetime
    ) -> int:
        """Count a user's actions of one type at or after ``since``."""
        return sum(
            1
            for a in self._actions
            if a.user_id == user_id
            and a.action_type == action_type
            and a.created_at >= since
        )

    async def find_by_user(self, user_id: UserId) -> list[PointAction]:
        """Find all ledger entries of a user, newest first."""
        actions = [a for a in self._actions if a.user_id == user_id]
        actions.sort(key=lambda a: a.created_at, reverse=True)
        return actions


class InMemoryUserPointsRepository(UserPointsRepository):
    """In-memory implementation of UserPointsRepository."""

    def __init__(self) -> None:
        self._points: dict[UserId, UserPoints] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[UserPoints]:
        """Find a user's points record."""
        return self._points.get(user_id)

    async def save(self, points: UserPoints) -> UserPoints:
        """Save or update a user's points record."""
        self._points[points.user_id] = points
        return points

    async def find_top(self, limit: int) -> list[UserPoints]:
        """Find the highest point totals, descending."""
        records = sorted(self._points.values(), key=lambda p: p.points, reverse=True)
        return records[:limit]

    async def count_above(self, points: int) -> int:
        """Count users with strictly more points."""
        return sum(1 for p in self._points.values() if p.points > points)
