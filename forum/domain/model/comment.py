"""Comment entity.

Comments live inside their parent Post document. They have no storage of
their own and their ids are only unique within the parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment embedded in a post.

    `author` is the display name shown to readers; `user_id` is the true
    owner and the only credential accepted for editing.
    """

    id: CommentId = Field(min_length=1)
    content: str
    author: str
    user_id: UserId
    is_anonymous: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    edited_at: Optional[datetime] = None
