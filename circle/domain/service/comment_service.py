"""Comment domain service."""

import logfire

from circle.config import CommentSettings
from circle.domain.error import InvalidArgumentError
from circle.domain.model.comment import Comment, CommentNode
from circle.domain.repository import CommentRepository
from circle.domain.value import ThreadId

from .base import Service
from .comment_tree import build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment threads."""

    span_prefix = "comment_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Default tree depth configuration
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def add_comment(self, thread_id: ThreadId, comment: Comment) -> Comment:
        """Store a comment under a thread.

        Args:
            thread_id: Thread the comment belongs to
            comment: Comment to store

        Returns:
            Saved comment
        """
        with self._span(
            "add_comment",
            thread_id=str(thread_id),
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
        ):
            saved = await self.comment_repository.save(thread_id, comment)
            logfire.info(
                "Comment stored", thread_id=str(thread_id), comment_id=str(saved.id)
            )
            return saved

    async def get_comment_tree(
        self, thread_id: ThreadId, max_depth: int | None = None
    ) -> list[CommentNode]:
        """Get the comments of a thread as nested trees.

        Args:
            thread_id: Post, blog or forum thread ID
            max_depth: Nesting levels to keep; falls back to the configured
                default when None

        Returns:
            Root comments with replies attached, oldest first

        Raises:
            InvalidArgumentError: If ``max_depth`` is negative
        """
        depth = max_depth if max_depth is not None else self.comment_settings.max_depth
        with self._span(
            "get_comment_tree",
            thread_id=str(thread_id),
            max_depth=depth,
        ):
            comments = await self.comment_repository.find_by_thread(thread_id)
            try:
                tree = build_comment_tree(comments, max_depth=depth)
            except InvalidArgumentError as e:
                logfire.warn(
                    "Invalid comment tree depth",
                    thread_id=str(thread_id),
                    error=str(e),
                )
                raise

            logfire.info(
                "Comment tree built",
                thread_id=str(thread_id),
                count=len(comments),
                root_count=len(tree),
                node_count=count_nodes(tree),
            )
            return tree
