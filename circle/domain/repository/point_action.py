"""Point ledger repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from circle.domain.model.point_action import PointAction, UserPoints
from circle.domain.value import ActionType, UserId


class PointActionRepository(ABC):
    """Repository for the append-only point action log."""

    @abstractmethod
    async def append(self, action: PointAction) -> PointAction:
        """Append an action to the log.

        Args:
            action: Ledger entry to append

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def count_since(
        self, user_id: UserId, action_type: ActionType, since: datetime
    ) -> int:
        """Count a user's actions of one type created at or after ``since``.

        Args:
            user_id: User who performed the actions
            action_type: Action type to count
            since: Start of the trailing window (inclusive)

        Returns:
            Number of matching ledger entries
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[PointAction]:
        """Find all ledger entries of a user, newest first."""
        pass


class UserPointsRepository(ABC):
    """Repository for accumulated user points."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[UserPoints]:
        """Find a user's points record.

        Args:
            user_id: User ID

        Returns:
            Points record if the user has one, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, points: UserPoints) -> UserPoints:
        """Save a user's points record (create or update)."""
        pass

    @abstractmethod
    async def find_top(self, limit: int) -> List[UserPoints]:
        """Find the highest point totals, descending.

        Args:
            limit: Maximum number of records to return

        Returns:
            Points records sorted by points descending
        """
        pass

    @abstractmethod
    async def count_above(self, points: int) -> int:
        """Count users with strictly more than ``points`` points.

        Used for competition ranking: rank = count_above(points) + 1.
        """
        pass
