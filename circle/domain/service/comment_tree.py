"""Comment tree builder.

Turns the flat comment rows of a thread into nested ``CommentNode`` trees.

Rules:
- A comment is a root when it has no parent, or when its parent is not in
  the input (orphans are promoted, never dropped).
- Depth is 0 for roots and grows by one per ancestor.
- With ``max_depth`` set, a comment at depth >= ``max_depth`` is attached at
  root level instead of under its parent. Depth is always the comment's
  original depth, so flattening one comment never changes how its
  descendants are judged.
- Roots and every ``replies`` list are sorted by ``created_at`` ascending;
  equal timestamps keep input order.
"""

from collections.abc import Iterable
from datetime import datetime

from circle.domain.error import InvalidArgumentError
from circle.domain.model.comment import Comment, CommentNode
from circle.domain.value import CommentId


def build_comment_tree(
    comments: Iterable[Comment], max_depth: int | None = None
) -> list[CommentNode]:
    """Build nested comment trees from a flat list.

    Args:
        comments: Comments of one thread, in any order
        max_depth: Number of nesting levels to keep (None for unbounded)

    Returns:
        Root nodes sorted by creation time, each with ``replies`` filled in

    Raises:
        InvalidArgumentError: If ``max_depth`` is negative
    """
    if max_depth is not None and max_depth < 0:
        raise InvalidArgumentError("max_depth", max_depth, "must be >= 0")

    # Index by id; a repeated id keeps its last record
    index: dict[CommentId, Comment] = {}
    for comment in comments:
        index.pop(comment.id, None)
        index[comment.id] = comment

    parents = _resolve_parents(index)
    depths = _resolve_depths(parents)

    nodes = {comment_id: CommentNode.from_comment(c) for comment_id, c in index.items()}
    roots: list[CommentNode] = []
    for comment_id, node in nodes.items():
        parent_id = parents[comment_id]
        too_deep = max_depth is not None and depths[comment_id] >= max_depth
        if parent_id is None or too_deep:
            roots.append(node)
        else:
            nodes[parent_id].replies.append(node)

    roots.sort(key=_created_at)
    for node in nodes.values():
        node.replies.sort(key=_created_at)

    return roots


def count_nodes(tree: Iterable[CommentNode]) -> int:
    """Count every node in a built tree, replies included."""
    total = 0
    stack = list(tree)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.replies)
    return total


def _created_at(node: CommentNode) -> float:
    """Sort key comparable across datetimes and unix timestamps."""
    value = node.created_at
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def _resolve_parents(
    index: dict[CommentId, Comment],
) -> dict[CommentId, CommentId | None]:
    """Map each comment to its parent, or None for roots and orphans."""
    parents: dict[CommentId, CommentId | None] = {}
    for comment_id, comment in index.items():
        parent_id = comment.parent_id
        if parent_id is None or parent_id not in index:
            parents[comment_id] = None
        else:
            parents[comment_id] = parent_id
    return parents


def _resolve_depths(
    parents: dict[CommentId, CommentId | None],
) -> dict[CommentId, int]:
    """Compute each comment's depth by walking its ancestors iteratively.

    A parent chain that loops back on itself has no root; every comment on
    the loop is cut loose and becomes a root (``parents`` is updated in
    place). Comments hanging off the loop nest under it as usual.
    """
    depths: dict[CommentId, int] = {}
    for start in parents:
        path: list[CommentId] = []
        on_path: set[CommentId] = set()
        current = start
        while current is not None and current not in depths:
            if current in on_path:
                for member in path[path.index(current) :]:
                    parents[member] = None
                    depths[member] = 0
                break
            path.append(current)
            on_path.add(current)
            current = parents[current]

        # Ancestors sit later in the path, so walk it backwards
        for member in reversed(path):
            if member in depths:
                continue
            parent_id = parents[member]
            depths[member] = 0 if parent_id is None else depths[parent_id] + 1
    return depths
