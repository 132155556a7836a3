"""Unit tests for AwardPointsUseCase."""

import pytest

from circle.application.usecase.points import AwardPointsRequest, AwardPointsUseCase
from circle.domain.error import UnknownActionTypeError
from circle.domain.value import PostKind
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAwardPointsUseCase:
    """Tests for AwardPointsUseCase."""

    @pytest.mark.asyncio
    async def test_awards_points_and_reports_total(self, unit_env):
        """Should return the award and the running total."""
        # Arrange
        use_case = await unit_env.get(AwardPointsUseCase)
        request = AwardPointsRequest(
            user_id="u1", action_type="blog_created", reference_id="blog-1"
        )

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.points_awarded == 10
        assert first.total_points == 10
        assert second.points_awarded == 10
        assert second.total_points == 20
        assert second.user_id == "u1"
        assert second.action_type == "blog_created"

    @pytest.mark.asyncio
    async def test_post_kind_selects_base(self, unit_env):
        """Discussion posts should earn their own base award."""
        # Arrange
        use_case = await unit_env.get(AwardPointsUseCase)

        # Act
        response = await use_case.execute(
            AwardPointsRequest(
                user_id="u1",
                action_type="post_created",
                reference_id="post-1",
                post_kind=PostKind.DISCUSSION,
            )
        )

        # Assert
        assert response.points_awarded == 15

    @pytest.mark.asyncio
    async def test_announcement_earns_nothing(self, unit_env):
        """Announcements should not earn points."""
        use_case = await unit_env.get(AwardPointsUseCase)

        response = await use_case.execute(
            AwardPointsRequest(
                user_id="u1",
                action_type="post_created",
                reference_id="post-1",
                post_kind="announcement",
            )
        )

        assert response.points_awarded == 0
        assert response.total_points == 0

    @pytest.mark.asyncio
    async def test_explicit_base_wins_over_post_kind(self, unit_env):
        """An explicit base should take precedence."""
        use_case = await unit_env.get(AwardPointsUseCase)

        response = await use_case.execute(
            AwardPointsRequest(
                user_id="u1",
                action_type="post_created",
                reference_id="post-1",
                base_points=4,
                post_kind=PostKind.DISCUSSION,
            )
        )

        assert response.points_awarded == 4

    @pytest.mark.asyncio
    async def test_unknown_action_type_raises(self, unit_env):
        """Unknown action types should surface as a domain error."""
        use_case = await unit_env.get(AwardPointsUseCase)

        with pytest.raises(UnknownActionTypeError):
            await use_case.execute(
                AwardPointsRequest(
                    user_id="u1", action_type="teleport", reference_id="x"
                )
            )
