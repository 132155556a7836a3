"""Get comment tree use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from circle.domain.model import CommentNode
from circle.domain.service import CommentService, count_nodes
from circle.domain.value import ThreadId


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    thread_id: str
    max_depth: int | None = None  # None uses the configured default


class CommentTreeItem(BaseModel):
    """Comment in a thread response.

    Carries every column of the stored comment (content, author fields,
    timestamps) plus its replies. Recursive structure mirroring the domain
    tree.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    parent_id: str | None = None
    created_at: datetime | int | float
    replies: list["CommentTreeItem"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentTreeItem":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment node

        Returns:
            API response model with replies recursively converted
        """
        return cls(
            **{
                **dict(node),
                "id": str(node.id),
                "parent_id": str(node.parent_id) if node.parent_id else None,
                "replies": [cls.from_domain(reply) for reply in node.replies],
            }
        )


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    thread_id: str
    comments: list[CommentTreeItem]
    total: int


class GetCommentTreeUseCase:
    """Use case for reading a thread's comments as nested trees.

    Root comments and every reply list are ordered oldest first. Comments
    whose parent is missing show up at the top level.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Get comment tree request

        Returns:
            Nested comments with the total number of comments in the thread

        Raises:
            InvalidArgumentError: If ``max_depth`` is negative
        """
        tree = await self.comment_service.get_comment_tree(
            ThreadId(request.thread_id), max_depth=request.max_depth
        )

        return GetCommentTreeResponse(
            thread_id=request.thread_id,
            comments=[CommentTreeItem.from_domain(root) for root in tree],
            total=count_nodes(tree),
        )
