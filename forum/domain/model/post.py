"""Post aggregate root.

A post document embeds its comments and the set of users who liked it, so a
single read returns everything needed to render it.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from forum.domain.model.comment import Comment
from forum.domain.model.common import DomainModel
from forum.domain.value import Category, CommentId, MediaAttachment, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Ownership is decided by `hidden_user_id`, never by the displayed
    `author`. `token` is the legacy edit/delete credential issued at
    creation time.
    """

    id: PostId
    title: str
    content: str
    category: Category
    author: str
    hidden_user_id: UserId = UserId("")
    token: str = ""
    link: str = ""
    media: list[MediaAttachment] = Field(default_factory=list)
    likes: int = Field(default=0, ge=0)
    liked_user_ids: list[UserId] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
    is_pinned: bool = False
    pinned_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def drop_stale_pin_timestamp(cls, data: Any) -> Any:
        """Unpinned posts carry no pin timestamp."""
        if isinstance(data, dict) and not data.get("is_pinned"):
            return {**data, "pinned_at": None}
        return data

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Find an embedded comment by ID."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Check whether a user has liked this post."""
        return bool(user_id) and user_id in self.liked_user_ids
