"""Unit tests for the leaderboard and user points use cases."""

import pytest

from circle.application.usecase.points import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
    GetUserPointsRequest,
    GetUserPointsUseCase,
)
from circle.domain.model import UserPoints
from circle.domain.repository import UserPointsRepository
from circle.domain.value import PointsTier, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env, totals: dict[str, int]) -> None:
    points_repo = await unit_env.get(UserPointsRepository)
    for user, points in totals.items():
        await points_repo.save(UserPoints(user_id=UserId(user), points=points))


class TestGetLeaderboardUseCase:
    """Tests for GetLeaderboardUseCase."""

    @pytest.mark.asyncio
    async def test_entries_carry_rank_labels_and_tiers(self, unit_env):
        """Rows should include the ordinal rank and badge tier."""
        # Arrange
        await _seed(unit_env, {"ann": 1200, "ben": 1200, "cat": 450})
        use_case = await unit_env.get(GetLeaderboardUseCase)

        # Act
        response = await use_case.execute(GetLeaderboardRequest())

        # Assert
        assert [(e.rank, e.rank_label, e.tier) for e in response.entries] == [
            (1, "1st", PointsTier.GOLD),
            (1, "1st", PointsTier.GOLD),
            (3, "3rd", PointsTier.BRONZE),
        ]

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        """Limit should cap the number of rows."""
        await _seed(unit_env, {"ann": 3, "ben": 2, "cat": 1})
        use_case = await unit_env.get(GetLeaderboardUseCase)

        response = await use_case.execute(GetLeaderboardRequest(limit=1))

        assert [e.user_id for e in response.entries] == ["ann"]

    @pytest.mark.asyncio
    async def test_empty_leaderboard(self, unit_env):
        """No users should give no rows."""
        use_case = await unit_env.get(GetLeaderboardUseCase)

        response = await use_case.execute(GetLeaderboardRequest())

        assert response.entries == []


class TestGetUserPointsUseCase:
    """Tests for GetUserPointsUseCase."""

    @pytest.mark.asyncio
    async def test_user_standing(self, unit_env):
        """Should report points, rank, label and tier."""
        # Arrange
        await _seed(unit_env, {"ann": 700, "ben": 520, "cat": 90})
        use_case = await unit_env.get(GetUserPointsUseCase)

        # Act
        response = await use_case.execute(GetUserPointsRequest(user_id="ben"))

        # Assert
        assert response.points == 520
        assert response.rank == 2
        assert response.rank_label == "2nd"
        assert response.tier == PointsTier.SILVER
