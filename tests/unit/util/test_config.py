"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from circle.config import CommentSettings, PointsSettings, Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        """Defaults should match the product rules."""
        settings = Settings(_env_file=None)

        assert settings.environment == "test"
        assert settings.comments.max_depth is None
        assert settings.points.window_seconds == 3600
        assert settings.points.max_points == 999_999
        assert settings.points.leaderboard_limit == 50
        assert settings.observability.logfire_token is None

    def test_nested_environment_variables(self, monkeypatch):
        """Nested sections should be read with the ``__`` delimiter."""
        # Arrange
        monkeypatch.setenv("COMMENTS__MAX_DEPTH", "3")
        monkeypatch.setenv("POINTS__WINDOW_SECONDS", "7200")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.comments.max_depth == 3
        assert settings.points.window_seconds == 7200

    def test_negative_max_depth_rejected(self):
        """Configured depths must not be negative."""
        with pytest.raises(ValidationError):
            CommentSettings(max_depth=-1)

    def test_window_must_be_positive(self):
        """A zero-length window would disable diminishing returns."""
        with pytest.raises(ValidationError):
            PointsSettings(window_seconds=0)
