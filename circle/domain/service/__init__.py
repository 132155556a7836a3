"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_nodes
from .mentor_service import MentorSearchFilter, MentorService
from .points_rules import (
    POINT_RULES,
    PointRule,
    Tier,
    calculate_points,
    format_rank,
    points_tier,
)
from .points_service import PointsService

__all__ = [
    "CommentService",
    "MentorSearchFilter",
    "MentorService",
    "POINT_RULES",
    "PointRule",
    "PointsService",
    "Service",
    "Tier",
    "build_comment_tree",
    "calculate_points",
    "count_nodes",
    "format_rank",
    "points_tier",
]
