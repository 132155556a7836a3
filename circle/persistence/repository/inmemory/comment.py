"""In-memory comment repository."""

from typing import Optional

from circle.domain.model.comment import Comment
from circle.domain.repository.comment import CommentRepository
from circle.domain.value import CommentId, ThreadId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._threads: dict[CommentId, ThreadId] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_thread(self, thread_id: ThreadId) -> list[Comment]:
        """Find all comments of a thread in insertion order."""
        return [
            comment
            for comment_id, comment in self._comments.items()
            if self._threads[comment_id] == thread_id
        ]

    async def save(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        self._threads[comment.id] = thread_id
        return comment
