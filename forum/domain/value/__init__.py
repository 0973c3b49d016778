"""Domain value objects for the forum."""

from forum.domain.value.identifiers import AdminId, CommentId, PostId, UserId
from forum.domain.value.types import (
    ANONYMOUS_AUTHOR,
    Category,
    CommentPatch,
    MediaAttachment,
    MediaType,
    PostContentPatch,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "UserId",
    "AdminId",
    # Types
    "ANONYMOUS_AUTHOR",
    "Category",
    "CommentPatch",
    "MediaAttachment",
    "MediaType",
    "PostContentPatch",
]
