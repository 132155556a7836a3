"""Domain value types for Circle."""

from enum import Enum


class ActionType(str, Enum):
    """User action that can earn points.

    Values match the ``action_type`` column of the point action log.
    """

    POST_CREATED = "post_created"
    COMMENT_CREATED = "comment_created"
    LIKE_RECEIVED = "like_received"
    COMMENT_RECEIVED = "comment_received"
    BLOG_CREATED = "blog_created"
    BLOG_FEATURED = "blog_featured"
    FORUM_THREAD_CREATED = "forum_thread_created"
    FORUM_REPLY_CREATED = "forum_reply_created"
    UPVOTE_RECEIVED = "upvote_received"
    CHALLENGE_JOINED = "challenge_joined"
    CHALLENGE_SUBMITTED = "challenge_submitted"
    CHALLENGE_APPROVED = "challenge_approved"


class PostKind(str, Enum):
    """Kind of feed post; decides the base award for creating it."""

    DISCUSSION = "discussion"
    GENERAL = "general"
    ANNOUNCEMENT = "announcement"


class PointsTier(str, Enum):
    """Badge tier shown next to a user's points."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    NONE = "none"
