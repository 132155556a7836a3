"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Any

import pytest

from circle.domain.model import Comment

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    comment_id: str,
    parent_id: str | None = None,
    minutes: int = 0,
    **extra: Any,
) -> Comment:
    """Helper function to build test comments.

    Args:
        comment_id: Comment ID
        parent_id: Parent comment ID (None for top-level comments)
        minutes: Offset from BASE_TIME used as created_at
        **extra: Additional columns carried through the tree

    Returns:
        Comment created ``minutes`` after BASE_TIME
    """
    return Comment(
        id=comment_id,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        **extra,
    )


@pytest.fixture(autouse=True)
def _test_environment_variables(monkeypatch):
    """Keep tests independent of the developer's environment."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    for name in (
        "COMMENTS__MAX_DEPTH",
        "POINTS__WINDOW_SECONDS",
        "POINTS__MAX_POINTS",
        "POINTS__LEADERBOARD_LIMIT",
        "OBSERVABILITY__LOGFIRE_TOKEN",
        "OBSERVABILITY__SEND_TO_LOGFIRE",
    ):
        monkeypatch.delenv(name, raising=False)
