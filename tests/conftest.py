"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire

from forum.domain.model import AdminAccount, Comment, Post
from forum.domain.service.admin_service import hash_password
from forum.domain.value import AdminId, Category, CommentId, PostId, UserId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    post_id: str = "post-1",
    *,
    hidden_user_id: str = "owner-1",
    token: str = "token-1",
    category: Category = Category.SCIENCE,
    created_at: datetime | None = None,
    comments: list[Comment] | None = None,
    **overrides,
) -> Post:
    """Build a post with sensible defaults for tests."""
    return Post(
        id=PostId(post_id),
        title=overrides.pop("title", "Why is the sky blue?"),
        content=overrides.pop("content", "Rayleigh scattering, probably."),
        category=category,
        author=overrides.pop("author", "Curie"),
        hidden_user_id=UserId(hidden_user_id),
        token=token,
        created_at=created_at or datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
        comments=comments or [],
        **overrides,
    )


def make_comment(
    comment_id: str = "c1",
    *,
    user_id: str = "commenter-1",
    content: str = "Nice result",
    **overrides,
) -> Comment:
    """Build a comment with sensible defaults for tests."""
    return Comment(
        id=CommentId(comment_id),
        content=content,
        author=overrides.pop("author", "Darwin"),
        user_id=UserId(user_id),
        created_at=overrides.pop(
            "created_at", datetime(2024, 3, 1, 13, 0, tzinfo=timezone.utc)
        ),
        **overrides,
    )


def make_admin(
    admin_id: str = "root",
    *,
    name: str = "Root",
    password: str = "s3cret!",
) -> AdminAccount:
    """Build an admin account with a real bcrypt hash."""
    return AdminAccount(
        id=AdminId(admin_id),
        name=name,
        password_hash=hash_password(password),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
