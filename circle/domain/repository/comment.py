"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from circle.domain.model.comment import Comment
from circle.domain.value import CommentId, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find all comments of a thread as a flat list.

        Order is not significant; the tree builder sorts.

        Args:
            thread_id: Post, blog or forum thread ID

        Returns:
            Flat list of comments
        """
        pass

    @abstractmethod
    async def save(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Save a comment under a thread (create or update).

        Args:
            thread_id: Thread the comment belongs to
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
