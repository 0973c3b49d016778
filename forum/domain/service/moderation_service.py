"""Moderation domain service."""

from datetime import datetime, timezone

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId

from .base import Service


class ModerationService(Service):
    """Pinning of posts.

    Callers are responsible for checking that the actor is an admin.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize moderation service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def toggle_pin(self, post_id: PostId) -> Post:
        """Pin an unpinned post or unpin a pinned one.

        Args:
            post_id: Post ID

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("moderation_service.toggle_pin", post_id=post_id):
            updated = await self.post_repository.toggle_pin(
                post_id, datetime.now(timezone.utc)
            )
            if updated is None:
                logfire.warn("Pin on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            logfire.info(
                "Pin toggled",
                post_id=post_id,
                is_pinned=updated.is_pinned,
            )
            return updated
