"""Firestore implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from google.api_core.exceptions import NotFound
from google.cloud import firestore
from google.cloud.firestore import async_transactional

from forum.domain.model import Comment, Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import Category, PostContentPatch, PostId, UserId
from forum.persistence.client import storage_errors
from forum.persistence.mappers import (
    comment_to_document,
    document_to_post,
    patch_to_fields,
    post_to_document,
)


# Raised by document_to_post on a document it cannot interpret
_MALFORMED = (ValueError, TypeError, AttributeError)


def _snapshot_to_post(snapshot: firestore.DocumentSnapshot) -> Optional[Post]:
    """Read a post snapshot.

    A document that cannot be interpreted as a post is logged and treated
    as missing: it is left out of listings and reported as not found when
    addressed directly.
    """
    if not snapshot.exists:
        return None
    try:
        return document_to_post(snapshot.id, snapshot.to_dict())
    except _MALFORMED as e:
        logfire.warn(
            "Skipping malformed post document",
            post_id=snapshot.id,
            error=str(e),
        )
        return None


@async_transactional
async def _toggle_like_in_transaction(
    transaction: firestore.AsyncTransaction,
    ref: firestore.AsyncDocumentReference,
    user_id: UserId,
) -> Optional[Post]:
    snapshot = await ref.get(transaction=transaction)
    post = _snapshot_to_post(snapshot)
    if post is None:
        return None

    raw = snapshot.to_dict()

    liking = user_id not in post.liked_user_ids
    if liking:
        liked = [*post.liked_user_ids, user_id]
    else:
        liked = [u for u in post.liked_user_ids if u != user_id]

    stored_ids = raw.get("likedUserIds") or []
    consistent = (
        "likedUsers" not in raw
        and len(set(stored_ids)) == len(stored_ids)
        and raw.get("likes") == len(stored_ids)
    )

    if consistent:
        transaction.update(
            ref,
            {
                "likedUserIds": (
                    firestore.ArrayUnion([user_id])
                    if liking
                    else firestore.ArrayRemove([user_id])
                ),
                "likes": firestore.Increment(1 if liking else -1),
            },
        )
    else:
        # Counter drifted from the set, or legacy fields are present:
        # rewrite both from the merged set
        fields = {"likedUserIds": liked, "likes": len(liked)}
        if "likedUsers" in raw and not liking:
            fields["likedUsers"] = firestore.ArrayRemove([user_id])
        transaction.update(ref, fields)
        logfire.warn(
            "Like counter recounted",
            post_id=snapshot.id,
            stored_likes=raw.get("likes"),
            likes=len(liked),
        )

    return post.model_copy(update={"liked_user_ids": liked, "likes": len(liked)})


@async_transactional
async def _toggle_pin_in_transaction(
    transaction: firestore.AsyncTransaction,
    ref: firestore.AsyncDocumentReference,
    now: datetime,
) -> Optional[Post]:
    post = _snapshot_to_post(await ref.get(transaction=transaction))
    if post is None:
        return None

    pinned = not post.is_pinned
    pinned_at = now if pinned else None

    transaction.update(ref, {"isPinned": pinned, "pinnedAt": pinned_at})
    return post.model_copy(update={"is_pinned": pinned, "pinned_at": pinned_at})


class FirestorePostRepository(PostRepository):
    """Firestore implementation of PostRepository.

    Each post is one document in the posts collection, with its comments
    and liked-user set embedded.
    """

    def __init__(self, client: firestore.AsyncClient, collection: str) -> None:
        """Initialize repository.

        Args:
            client: Shared Firestore async client
            collection: Posts collection name
        """
        self.client = client
        self.collection = client.collection(collection)

    def new_id(self) -> PostId:
        """Reserve a Firestore auto-ID."""
        return PostId(self.collection.document().id)

    async def _read(self, post_id: PostId) -> Optional[Post]:
        return _snapshot_to_post(await self.collection.document(post_id).get())

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            with storage_errors("find_by_id"):
                return await self._read(post_id)

    async def find_all(self, category: Optional[Category] = None) -> List[Post]:
        """Fetch every post, newest first.

        Ordering and filtering happen after the scan: legacy documents mix
        string and native timestamps, which Firestore orders by type first.
        """
        with logfire.span(
            "post_repository.find_all",
            category=category.value if category else None,
        ):
            posts = []
            with storage_errors("find_all"):
                async for snapshot in self.collection.stream():
                    post = _snapshot_to_post(snapshot)
                    if post is None:
                        continue
                    if category is None or post.category == category:
                        posts.append(post)

            posts.sort(key=lambda p: p.created_at, reverse=True)
            return posts

    async def create(self, post: Post) -> Post:
        """Write a new post document."""
        with logfire.span("post_repository.create", post_id=post.id):
            with storage_errors("create"):
                await self.collection.document(post.id).create(post_to_document(post))
            return post

    async def update_content(
        self, post_id: PostId, patch: PostContentPatch, updated_at: datetime
    ) -> Optional[Post]:
        """Merge the supplied content fields into the document."""
        with logfire.span("post_repository.update_content", post_id=post_id):
            with storage_errors("update_content"):
                try:
                    await self.collection.document(post_id).update(
                        patch_to_fields(patch, updated_at)
                    )
                except NotFound:
                    return None
                return await self._read(post_id)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post document."""
        with logfire.span("post_repository.delete", post_id=post_id):
            with storage_errors("delete"):
                try:
                    await self.collection.document(post_id).delete(
                        option=self.client.write_option(exists=True)
                    )
                except NotFound:
                    return False
                return True

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> Optional[Post]:
        """Toggle a like inside a transaction."""
        with logfire.span("post_repository.toggle_like", post_id=post_id):
            with storage_errors("toggle_like"):
                return await _toggle_like_in_transaction(
                    self.client.transaction(),
                    self.collection.document(post_id),
                    user_id,
                )

    async def toggle_pin(self, post_id: PostId, now: datetime) -> Optional[Post]:
        """Toggle the pin flag inside a transaction."""
        with logfire.span("post_repository.toggle_pin", post_id=post_id):
            with storage_errors("toggle_pin"):
                return await _toggle_pin_in_transaction(
                    self.client.transaction(),
                    self.collection.document(post_id),
                    now,
                )

    async def replace_comments(
        self, post_id: PostId, comments: List[Comment]
    ) -> Optional[Post]:
        """Rewrite the embedded comment list."""
        with logfire.span(
            "post_repository.replace_comments",
            post_id=post_id,
            comment_count=len(comments),
        ):
            with storage_errors("replace_comments"):
                try:
                    await self.collection.document(post_id).update(
                        {"comments": [comment_to_document(c) for c in comments]}
                    )
                except NotFound:
                    return None
                return await self._read(post_id)
