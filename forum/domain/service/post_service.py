"""Post domain service."""

import secrets
from datetime import datetime, timezone

import logfire

from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.service.authorization import Action, ensure_allowed
from forum.domain.value import (
    Category,
    MediaAttachment,
    PostContentPatch,
    PostId,
    UserId,
)

from .base import Service


class PostService(Service):
    """Domain service for the post lifecycle."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self, category: Category | None = None) -> list[Post]:
        """List every post, newest first.

        Args:
            category: Optional category filter

        Returns:
            Posts ordered by creation time, descending
        """
        with logfire.span(
            "post_service.list_posts",
            category=category.value if category else None,
        ):
            posts = await self.post_repository.find_all(category=category)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return post

    async def create_post(
        self,
        title: str,
        content: str,
        category: Category | None,
        author: str,
        hidden_user_id: UserId | None = None,
        link: str | None = None,
        media: list[MediaAttachment] | None = None,
    ) -> Post:
        """Create a post.

        Generates the legacy edit token, zero-initializes likes and
        comments, and stamps the creation time.

        Args:
            title: Post title
            content: Post body
            category: Board category
            author: Display name (may be the anonymous sentinel)
            hidden_user_id: True owner id (empty for legacy anonymous clients)
            link: Optional external link
            media: Optional media attachments

        Returns:
            Stored post, including its ID and edit token

        Raises:
            InvalidInputError: If a required field is missing
        """
        missing = [
            name
            for name, value in (
                ("title", title),
                ("content", content),
                ("category", category),
                ("author", author),
            )
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise InvalidInputError(f"Missing required fields: {', '.join(missing)}")

        with logfire.span(
            "post_service.create_post",
            title=title,
            category=category.value,
            has_owner=bool(hidden_user_id),
        ):
            post = Post(
                id=self.post_repository.new_id(),
                title=title,
                content=content,
                category=category,
                author=author,
                hidden_user_id=hidden_user_id or UserId(""),
                token=secrets.token_urlsafe(16),
                link=link or "",
                media=media or [],
                likes=0,
                liked_user_ids=[],
                comments=[],
                created_at=datetime.now(timezone.utc),
                updated_at=None,
                is_pinned=False,
                pinned_at=None,
            )

            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_id=saved.id, category=saved.category.value)
            return saved

    async def update_post(
        self,
        post_id: PostId,
        actor_token: str | None,
        actor_hidden_id: UserId | None,
        patch: PostContentPatch,
    ) -> Post:
        """Edit a post's content.

        Authorized by the hidden owner id or the legacy edit token. Admins
        get no bypass. Likes, comments, pin state and the owner id are
        left untouched.

        Args:
            post_id: Post ID
            actor_token: Edit token presented by the caller
            actor_hidden_id: Hidden user id of the caller
            patch: Fields to change

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If neither credential matches
        """
        with logfire.span(
            "post_service.update_post",
            post_id=post_id,
            fields=sorted(patch.changes()),
        ):
            post = await self.get_post(post_id)

            ensure_allowed(
                Action.EDIT_POST,
                post_id,
                is_admin=False,
                actor_id=actor_hidden_id,
                actor_token=actor_token,
                owner_id=post.hidden_user_id,
                resource_token=post.token,
            )

            updated = await self.post_repository.update_content(
                post_id, patch, datetime.now(timezone.utc)
            )
            if updated is None:
                # Deleted between the read and the write
                raise NotFoundError("Post", post_id)

            logfire.info("Post updated", post_id=post_id)
            return updated

    async def delete_post(
        self,
        post_id: PostId,
        actor_token: str | None,
        actor_user_id: UserId | None,
        is_admin: bool,
    ) -> None:
        """Permanently delete a post and its embedded comments.

        Args:
            post_id: Post ID
            actor_token: Edit token presented by the caller
            actor_user_id: Hidden user id of the caller
            is_admin: Whether the caller is a verified admin

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither owner nor admin
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, is_admin=is_admin
        ):
            post = await self.get_post(post_id)

            ensure_allowed(
                Action.DELETE_POST,
                post_id,
                is_admin=is_admin,
                actor_id=actor_user_id,
                actor_token=actor_token,
                owner_id=post.hidden_user_id,
                resource_token=post.token,
            )

            if not await self.post_repository.delete(post_id):
                raise NotFoundError("Post", post_id)

            logfire.info(
                "Post deleted",
                post_id=post_id,
                comment_count=len(post.comments),
                by_admin=is_admin,
            )

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> Post:
        """Like or unlike a post.

        Delegates to the repository's atomic toggle. Not retried on
        failure: a retry could register the toggle twice.

        Args:
            post_id: Post ID
            user_id: User toggling their like

        Returns:
            Updated post

        Raises:
            InvalidInputError: If user_id is empty
            NotFoundError: If the post doesn't exist
        """
        if not user_id:
            raise InvalidInputError("userId is required")

        with logfire.span("post_service.toggle_like", post_id=post_id, user_id=user_id):
            updated = await self.post_repository.toggle_like(post_id, user_id)
            if updated is None:
                logfire.warn("Like on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id)

            logfire.info(
                "Like toggled",
                post_id=post_id,
                liked=updated.is_liked_by(user_id),
                likes=updated.likes,
            )
            return updated
