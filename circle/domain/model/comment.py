"""Comment entity.

Comments are threaded discussions on feed posts, blogs and forum threads.
The data layer stores them flat, each row pointing at an optional parent;
nesting is rebuilt at read time (see ``circle.domain.service.comment_tree``).
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field

from circle.domain.model.common import DomainModel
from circle.domain.value import CommentId

# Column names other tables use for the parent reference
PARENT_ID_ALIASES = ("parent_comment_id", "parent_reply_id")


class Comment(DomainModel):
    """Comment or reply as fetched from the data layer.

    Only the threading fields are declared. Every other column (thread id,
    author name and email, content, updated_at, ...) is kept as an extra
    field and passed through untouched.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: CommentId
    parent_id: Optional[CommentId] = None
    # datetime or a unix timestamp, whichever the data layer stores
    created_at: datetime | int | float

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any],
        author_name: str | None = None,
        author_email: str | None = None,
    ) -> "Comment":
        """Build a comment from a raw row, optionally attaching author info.

        Rows whose parent column is named ``parent_comment_id`` or
        ``parent_reply_id`` keep that column and also get ``parent_id``.

        Args:
            row: Raw row from the data layer
            author_name: Author display name joined from the users table
            author_email: Author email joined from the users table

        Returns:
            Comment carrying every column of the row
        """
        data = dict(row)
        if "parent_id" not in data:
            for alias in PARENT_ID_ALIASES:
                if alias in data:
                    data["parent_id"] = data[alias]
                    break
        if author_name is not None:
            data["author_name"] = author_name
        if author_email is not None:
            data["author_email"] = author_email
        return cls.model_validate(data)


class CommentNode(Comment):
    """Comment with its replies attached.

    ``replies`` is computed when the tree is built and never persisted.
    """

    replies: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Wrap a comment as a node with no replies yet."""
        return cls(**{**dict(comment), "replies": []})
