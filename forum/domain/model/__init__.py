"""Domain model entities for the forum."""

from forum.domain.model.admin import AdminAccount
from forum.domain.model.comment import Comment
from forum.domain.model.post import Post

__all__ = [
    "Post",
    "Comment",
    "AdminAccount",
]
