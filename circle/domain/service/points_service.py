"""Points domain service."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from circle.config import PointsSettings
from circle.domain.error import UnknownActionTypeError
from circle.domain.model.point_action import LeaderboardEntry, PointAction, UserPoints
from circle.domain.repository import PointActionRepository, UserPointsRepository
from circle.domain.value import ActionType, PointActionId, UserId

from .base import Service
from .points_rules import calculate_points, get_rule, to_action_type


class PointsService(Service):
    """Domain service for awarding points and ranking users."""

    span_prefix = "points_service"

    def __init__(
        self,
        point_action_repository: PointActionRepository,
        user_points_repository: UserPointsRepository,
        points_settings: PointsSettings,
    ) -> None:
        """Initialize points service.

        Args:
            point_action_repository: Point action log
            user_points_repository: Accumulated user points
            points_settings: Window length and caps
        """
        self.point_action_repository = point_action_repository
        self.user_points_repository = user_points_repository
        self.points_settings = points_settings

    async def award_points(
        self,
        user_id: UserId,
        action_type: ActionType | str,
        reference_id: str,
        base_points: int | None = None,
        now: datetime | None = None,
    ) -> int:
        """Award points for an action, applying diminishing returns.

        Steps:
        1. Count the user's same-type actions inside the trailing window
        2. Calculate the award from the action type's tier table
        3. Append the action to the log (zero awards included)
        4. Add the award to the user's total, capped at ``max_points``

        Actions whose base award is not positive earn nothing and are not
        logged.

        Args:
            user_id: User receiving the points
            action_type: Action being rewarded
            reference_id: Content that triggered the action
            base_points: Overrides the rule's base award
            now: Time of the action (defaults to the current time)

        Returns:
            Points actually awarded

        Raises:
            UnknownActionTypeError: If the action type is not recognized
        """
        try:
            resolved = to_action_type(action_type)
            rule = get_rule(resolved)
        except UnknownActionTypeError:
            logfire.warn(
                "Points requested for unknown action type",
                user_id=str(user_id),
                action_type=str(action_type),
            )
            raise

        base = rule.base_points if base_points is None else base_points
        if base <= 0:
            return 0

        now = now or datetime.now()
        since = now - timedelta(seconds=self.points_settings.window_seconds)

        with self._span(
            "award_points",
            user_id=str(user_id),
            action_type=resolved.value,
            reference_id=reference_id,
        ):
            prior_count = await self.point_action_repository.count_since(
                user_id, resolved, since
            )
            awarded = calculate_points(resolved, prior_count, base)

            await self.point_action_repository.append(
                PointAction(
                    id=PointActionId(str(uuid4())),
                    user_id=user_id,
                    action_type=resolved,
                    reference_id=reference_id,
                    points_awarded=awarded,
                    created_at=now,
                )
            )

            if awarded > 0:
                await self._add_to_total(user_id, awarded, now)
                logfire.info(
                    "Points awarded",
                    user_id=str(user_id),
                    action_type=resolved.value,
                    points=awarded,
                    prior_count=prior_count,
                )
            else:
                logfire.info(
                    "Points withheld by diminishing returns",
                    user_id=str(user_id),
                    action_type=resolved.value,
                    prior_count=prior_count,
                )
            return awarded

    async def get_user_points(self, user_id: UserId) -> LeaderboardEntry:
        """Get a user's points and leaderboard rank.

        Users without a points record have 0 points.

        Args:
            user_id: User ID

        Returns:
            Points with competition rank (ties share a rank)
        """
        with self._span("get_user_points", user_id=str(user_id)):
            record = await self.user_points_repository.find_by_user(user_id)
            points = record.points if record else 0
            rank = await self.user_points_repository.count_above(points) + 1
            return LeaderboardEntry(user_id=user_id, points=points, rank=rank)

    async def get_history(self, user_id: UserId, limit: int = 20) -> list[PointAction]:
        """Get a user's most recent ledger entries, newest first.

        Zero awards withheld by diminishing returns are included.
        """
        with self._span("get_history", user_id=str(user_id), limit=limit):
            actions = await self.point_action_repository.find_by_user(user_id)
            return actions[:limit]

    async def get_leaderboard(self, limit: int | None = None) -> list[LeaderboardEntry]:
        """Get the top users by points.

        Args:
            limit: Maximum rows (defaults to ``leaderboard_limit``)

        Returns:
            Entries sorted by points descending; equal totals share a rank
            and the next rank skips accordingly (1, 1, 3)
        """
        limit = limit or self.points_settings.leaderboard_limit
        with self._span("get_leaderboard", limit=limit):
            records = await self.user_points_repository.find_top(limit)

            entries: list[LeaderboardEntry] = []
            for position, record in enumerate(records, start=1):
                if entries and entries[-1].points == record.points:
                    rank = entries[-1].rank
                else:
                    rank = position
                entries.append(
                    LeaderboardEntry(
                        user_id=record.user_id, points=record.points, rank=rank
                    )
                )

            logfire.info("Leaderboard built", count=len(entries))
            return entries

    async def _add_to_total(self, user_id: UserId, points: int, now: datetime) -> None:
        record = await self.user_points_repository.find_by_user(user_id)
        current = record.points if record else 0
        total = min(current + points, self.points_settings.max_points)
        await self.user_points_repository.save(
            UserPoints(user_id=user_id, points=total, updated_at=now)
        )
