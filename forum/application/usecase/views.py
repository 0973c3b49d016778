"""Response views shared by the use cases.

Views never expose edit tokens, hidden owner ids or the liked-user set.
Ownership and like state are reported relative to the viewer instead.
"""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import AdminAccount, Comment, Post
from forum.domain.value import ANONYMOUS_AUTHOR, Category, MediaType


class MediaItem(BaseModel):
    """Media attachment in a response."""

    url: str
    type: MediaType


class CommentView(BaseModel):
    """Comment as shown to a viewer."""

    comment_id: str
    content: str
    author: str
    is_anonymous: bool
    created_at: datetime
    edited_at: datetime | None
    is_mine: bool


class PostView(BaseModel):
    """Post as shown to a viewer."""

    post_id: str
    title: str
    content: str
    category: Category
    category_label: str
    author: str
    link: str
    media: list[MediaItem]
    likes: int
    liked_by_me: bool
    comment_count: int
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime | None
    is_pinned: bool
    pinned_at: datetime | None
    is_mine: bool


class AdminView(BaseModel):
    """Admin account without its password hash."""

    admin_id: str
    name: str
    created_at: datetime


def comment_view(comment: Comment, viewer_id: str | None) -> CommentView:
    """Build the viewer's view of a comment."""
    return CommentView(
        comment_id=comment.id,
        content=comment.content,
        author=ANONYMOUS_AUTHOR if comment.is_anonymous else comment.author,
        is_anonymous=comment.is_anonymous,
        created_at=comment.created_at,
        edited_at=comment.edited_at,
        is_mine=bool(viewer_id) and comment.user_id == viewer_id,
    )


def post_view(post: Post, viewer_id: str | None) -> PostView:
    """Build the viewer's view of a post.

    Args:
        post: Post domain model
        viewer_id: The viewer's user id, if known

    Returns:
        Post view with viewer-relative flags
    """
    return PostView(
        post_id=post.id,
        title=post.title,
        content=post.content,
        category=post.category,
        category_label=post.category.label,
        author=post.author,
        link=post.link,
        media=[MediaItem(url=m.url, type=m.type) for m in post.media],
        likes=post.likes,
        liked_by_me=post.is_liked_by(viewer_id) if viewer_id else False,
        comment_count=len(post.comments),
        comments=[comment_view(c, viewer_id) for c in post.comments],
        created_at=post.created_at,
        updated_at=post.updated_at,
        is_pinned=post.is_pinned,
        pinned_at=post.pinned_at,
        is_mine=bool(viewer_id) and post.hidden_user_id == viewer_id,
    )


def admin_view(account: AdminAccount) -> AdminView:
    """Build the public view of an admin account."""
    return AdminView(
        admin_id=account.id,
        name=account.name,
        created_at=account.created_at,
    )
