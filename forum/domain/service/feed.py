"""Read-side views computed from a full post listing.

These are pure functions: callers load posts once with
`PostService.list_posts()` and derive every board, home and activity view
from that snapshot.
"""

import math
from datetime import datetime, timezone
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from forum.domain.error import InvalidInputError
from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.value import Category, UserId

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class Board(BaseModel):
    """One page of a category board.

    Pinned posts are listed separately and are not paginated.
    """

    model_config = ConfigDict(frozen=True)

    pinned: list[Post]
    posts: list[Post]
    page: int
    total_pages: int
    total_posts: int


class CommentActivity(BaseModel):
    """A comment together with the post it was left on."""

    model_config = ConfigDict(frozen=True)

    post: Post
    comment: Comment


def _newest_first(posts: Iterable[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


def build_board(
    posts: list[Post],
    category: Category | None = None,
    page: int = 1,
    per_page: int = 15,
) -> Board:
    """Partition, filter and paginate posts for a board page.

    Args:
        posts: Full post listing
        category: Category filter, None for every category
        page: 1-based page number
        per_page: Unpinned posts per page

    Returns:
        Board page; a page past the end is empty rather than an error

    Raises:
        InvalidInputError: If page or per_page is below 1
    """
    if page < 1:
        raise InvalidInputError("page must be 1 or greater")
    if per_page < 1:
        raise InvalidInputError("per_page must be 1 or greater")

    if category is not None:
        posts = [p for p in posts if p.category == category]

    pinned = sorted(
        (p for p in posts if p.is_pinned),
        key=lambda p: p.pinned_at or _EPOCH,
        reverse=True,
    )
    unpinned = _newest_first(p for p in posts if not p.is_pinned)

    start = (page - 1) * per_page
    return Board(
        pinned=pinned,
        posts=unpinned[start : start + per_page],
        page=page,
        total_pages=math.ceil(len(unpinned) / per_page),
        total_posts=len(unpinned),
    )


def recent_posts(posts: list[Post], limit: int = 5) -> list[Post]:
    """Newest posts for the home page, pinned or not."""
    return _newest_first(posts)[:limit]


def authored_by(posts: list[Post], user_id: UserId) -> list[Post]:
    """Posts owned by a hidden user id."""
    if not user_id:
        return []
    return _newest_first(p for p in posts if p.hidden_user_id == user_id)


def liked_by(posts: list[Post], user_id: UserId) -> list[Post]:
    """Posts the user currently likes."""
    if not user_id:
        return []
    return _newest_first(p for p in posts if p.is_liked_by(user_id))


def comments_by(posts: list[Post], user_id: UserId) -> list[CommentActivity]:
    """Comments left by the user, grouped by post, newest post first."""
    if not user_id:
        return []
    return [
        CommentActivity(post=post, comment=comment)
        for post in _newest_first(posts)
        for comment in post.comments
        if comment.user_id == user_id
    ]
