"""Comment domain service.

Comments are embedded in their parent post, so every mutation reads the
post, changes the comment list in memory and rewrites the whole list.
Concurrent writers on the same post are last-writer-wins; this is accepted
at forum scale but does not suit high-volume threads.
"""

import secrets
from datetime import datetime, timezone

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.repository import PostRepository
from forum.domain.service.authorization import Action, ensure_allowed
from forum.domain.value import CommentId, CommentPatch, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comments embedded in posts."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize comment service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def add_comment(
        self,
        post_id: PostId,
        content: str,
        author: str,
        user_id: UserId,
        is_anonymous: bool = False,
    ) -> Post:
        """Append a comment to a post.

        Args:
            post_id: Post ID
            content: Comment text
            author: Display name
            user_id: Owner of the comment
            is_anonymous: Whether the author chose to stay anonymous

        Returns:
            Updated post with the new comment last

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=post_id,
            user_id=user_id,
            is_anonymous=is_anonymous,
        ):
            post = await self._load_post(post_id)

            comment = Comment(
                id=self._generate_comment_id(post),
                content=content,
                author=author,
                user_id=user_id,
                is_anonymous=is_anonymous,
                created_at=datetime.now(timezone.utc),
                edited_at=None,
            )

            updated = await self._write_comments(post_id, [*post.comments, comment])
            logfire.info(
                "Comment added",
                post_id=post_id,
                comment_id=comment.id,
                comment_count=len(updated.comments),
            )
            return updated

    async def edit_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        actor_user_id: UserId | None,
        patch: CommentPatch,
    ) -> Post:
        """Replace a comment's content, author and anonymity in place.

        Only the comment owner may edit; there is no token fallback and no
        admin bypass.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            NotAuthorizedError: If the actor doesn't own the comment
        """
        with logfire.span(
            "comment_service.edit_comment",
            post_id=post_id,
            comment_id=comment_id,
        ):
            post = await self._load_post(post_id)
            comment = self._find_comment(post, comment_id)

            ensure_allowed(
                Action.EDIT_COMMENT,
                comment_id,
                is_admin=False,
                actor_id=actor_user_id,
                actor_token=None,
                owner_id=comment.user_id,
                resource_token=None,
            )

            edited = comment.model_copy(
                update={
                    "content": patch.content,
                    "author": patch.author,
                    "is_anonymous": patch.is_anonymous,
                    "edited_at": datetime.now(timezone.utc),
                }
            )
            comments = [edited if c.id == comment_id else c for c in post.comments]

            updated = await self._write_comments(post_id, comments)
            logfire.info("Comment edited", post_id=post_id, comment_id=comment_id)
            return updated

    async def delete_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        actor_user_id: UserId | None,
        is_admin: bool,
    ) -> Post:
        """Remove a comment from a post.

        Raises:
            NotFoundError: If the post or the comment doesn't exist
            NotAuthorizedError: If the actor is neither owner nor admin
        """
        with logfire.span(
            "comment_service.delete_comment",
            post_id=post_id,
            comment_id=comment_id,
            is_admin=is_admin,
        ):
            post = await self._load_post(post_id)
            comment = self._find_comment(post, comment_id)

            ensure_allowed(
                Action.DELETE_COMMENT,
                comment_id,
                is_admin=is_admin,
                actor_id=actor_user_id,
                actor_token=None,
                owner_id=comment.user_id,
                resource_token=None,
            )

            comments = [c for c in post.comments if c.id != comment_id]

            updated = await self._write_comments(post_id, comments)
            logfire.info(
                "Comment deleted",
                post_id=post_id,
                comment_id=comment_id,
                by_admin=is_admin,
            )
            return updated

    async def _load_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found for comment operation", post_id=post_id)
            raise NotFoundError("Post", post_id)
        return post

    @staticmethod
    def _find_comment(post: Post, comment_id: CommentId) -> Comment:
        comment = post.find_comment(comment_id)
        if comment is None:
            logfire.warn(
                "Comment not found", post_id=post.id, comment_id=comment_id
            )
            raise NotFoundError("Comment", comment_id)
        return comment

    async def _write_comments(self, post_id: PostId, comments: list[Comment]) -> Post:
        updated = await self.post_repository.replace_comments(post_id, comments)
        if updated is None:
            # Post deleted between the read and the write
            raise NotFoundError("Post", post_id)
        return updated

    @staticmethod
    def _generate_comment_id(post: Post) -> CommentId:
        """Generate an ID unique within the post.

        Comment IDs are only unique per post, so checking the current list
        is enough.
        """
        existing = {c.id for c in post.comments}
        while True:
            candidate = CommentId(secrets.token_hex(8))
            if candidate not in existing:
                return candidate
