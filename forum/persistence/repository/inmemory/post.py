"""In-memory post repository."""

import asyncio
from datetime import datetime
from typing import Optional
from uuid import uuid4

from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import Category, PostContentPatch, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository.

    Used by tests and by `STORAGE__BACKEND=memory` for local development.
    Every mutation runs under one lock, so toggles are atomic even when
    requests interleave at await points.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._lock = asyncio.Lock()

    def new_id(self) -> PostId:
        """Generate a fresh post ID."""
        return PostId(uuid4().hex)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self, category: Optional[Category] = None) -> list[Post]:
        """List posts newest first."""
        posts = [
            p for p in self._posts.values() if category is None or p.category == category
        ]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def create(self, post: Post) -> Post:
        """Store a new post."""
        async with self._lock:
            self._posts[post.id] = post
            return post

    async def update_content(
        self, post_id: PostId, patch: PostContentPatch, updated_at: datetime
    ) -> Optional[Post]:
        """Apply the supplied content fields."""
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None
            updated = post.model_copy(
                update={**patch.changes(), "updated_at": updated_at}
            )
            self._posts[post_id] = updated
            return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        async with self._lock:
            return self._posts.pop(post_id, None) is not None

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Add or remove the user's like; the count is recomputed from the set."""
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None

            if user_id in post.liked_user_ids:
                liked = [u for u in post.liked_user_ids if u != user_id]
            else:
                liked = [*post.liked_user_ids, user_id]

            updated = post.model_copy(
                update={"liked_user_ids": liked, "likes": len(liked)}
            )
            self._posts[post_id] = updated
            return updated

    async def toggle_pin(self, post_id: PostId, now: datetime) -> Optional[Post]:
        """Flip the pin flag."""
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None

            pinned = not post.is_pinned
            updated = post.model_copy(
                update={"is_pinned": pinned, "pinned_at": now if pinned else None}
            )
            self._posts[post_id] = updated
            return updated

    async def replace_comments(
        self, post_id: PostId, comments: list[Comment]
    ) -> Optional[Post]:
        """Overwrite the embedded comment list."""
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None

            updated = post.model_copy(update={"comments": list(comments)})
            self._posts[post_id] = updated
            return updated
