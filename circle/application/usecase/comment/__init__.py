"""Comment use cases."""

from .get_comment_tree import (
    CommentTreeItem,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)

__all__ = [
    "CommentTreeItem",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
]
