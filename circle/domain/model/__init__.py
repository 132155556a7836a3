"""Domain model entities for Circle."""

from circle.domain.model.comment import Comment, CommentNode
from circle.domain.model.mentor_profile import MentorProfile
from circle.domain.model.point_action import LeaderboardEntry, PointAction, UserPoints

__all__ = [
    "Comment",
    "CommentNode",
    "MentorProfile",
    "PointAction",
    "UserPoints",
    "LeaderboardEntry",
]
