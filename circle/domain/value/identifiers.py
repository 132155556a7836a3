"""Strongly typed identifiers for Circle domain entities.

Identifiers are opaque strings issued by the data layer. NewType keeps
different entity IDs from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
CommentId = NewType("CommentId", str)
ThreadId = NewType("ThreadId", str)  # Post, blog or forum thread being discussed
MentorProfileId = NewType("MentorProfileId", str)
PointActionId = NewType("PointActionId", str)
