"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.model.post import Post
from forum.domain.value import Category, PostContentPatch, PostId, UserId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Defines the contract for post persistence operations against a
    document store. Comments are embedded in the post document, so there
    is no separate comment repository.

    Mutating methods return the stored post after the write, or None when
    the post does not exist. Implementations raise StorageUnavailableError
    when the backend cannot be reached.
    """

    @abstractmethod
    def new_id(self) -> PostId:
        """Reserve a fresh document ID.

        Returns:
            An ID generated by the store, not yet used by any post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, category: Optional[Category] = None) -> List[Post]:
        """Fetch every post, newest first.

        This is a full collection scan; pagination happens in the caller.

        Args:
            category: Only return posts in this category (None for all)

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Persist a new post under its reserved ID.

        Args:
            post: The post to store

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, patch: PostContentPatch, updated_at: datetime
    ) -> Optional[Post]:
        """Merge editable fields into a stored post.

        Likes, comments, pin state and ownership are never touched.

        Args:
            post_id: ID of the post to update
            patch: Fields to overwrite
            updated_at: Edit timestamp

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Embedded comments are removed with the document.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def toggle_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Atomically add or remove a user from the liked set.

        The like counter moves with the set and never drops below zero.
        Implementations must use the store's atomic primitives so that
        concurrent togglers on the same post are not lost.

        Args:
            post_id: The post ID
            user_id: The user toggling their like

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def toggle_pin(self, post_id: PostId, now: datetime) -> Optional[Post]:
        """Flip the pinned state of a post.

        Pinning stamps pinned_at with `now`; unpinning clears it.

        Args:
            post_id: The post ID
            now: Pin timestamp

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def replace_comments(
        self, post_id: PostId, comments: List[Comment]
    ) -> Optional[Post]:
        """Overwrite the embedded comment list.

        This is a whole-field rewrite, so concurrent comment writers on the
        same post are last-writer-wins.

        Args:
            post_id: The post ID
            comments: The complete new comment list

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass
