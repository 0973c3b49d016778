"""Mappers between Firestore documents and domain models.

Documents use the camelCase field names written by the legacy Node server
and web client, so both can keep reading the same collections. Readers
accept the older shapes as well:

- `likedUsers` alongside `likedUserIds` (merged)
- a single `mediaUrl`/`mediaType` pair instead of the `media` list
- ISO-8601 strings instead of native timestamps
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from forum.domain.model import AdminAccount, Comment, Post
from forum.domain.value import (
    AdminId,
    Category,
    CommentId,
    MediaAttachment,
    MediaType,
    PostContentPatch,
    PostId,
    UserId,
)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def to_datetime(value: Any) -> Optional[datetime]:
    """Normalize a stored timestamp to an aware UTC datetime.

    Args:
        value: Native timestamp, ISO-8601 string or None

    Returns:
        Aware datetime, or None if no timestamp was stored
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if not isinstance(value, datetime):
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _unique(values: list[Any]) -> list[UserId]:
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(str(value), None)
    return [UserId(v) for v in seen]


def media_from_document(data: Dict[str, Any]) -> list[MediaAttachment]:
    """Read media attachments, falling back to the single legacy pair."""
    items = data.get("media")
    if items:
        return [
            MediaAttachment(url=item["url"], type=MediaType(item["type"]))
            for item in items
            if isinstance(item, dict)
            and item.get("url")
            and item.get("type") in (MediaType.IMAGE, MediaType.VIDEO)
        ]

    url = data.get("mediaUrl")
    media_type = data.get("mediaType") or MediaType.NONE
    if url and media_type != MediaType.NONE:
        return [MediaAttachment(url=url, type=MediaType(media_type))]
    return []


def media_to_document(media: list[MediaAttachment]) -> Dict[str, Any]:
    """Write the media list and mirror its first entry in the legacy fields."""
    first = media[0] if media else None
    return {
        "media": [{"url": m.url, "type": m.type.value} for m in media],
        "mediaUrl": first.url if first else None,
        "mediaType": first.type.value if first else MediaType.NONE.value,
    }


def document_to_comment(data: Dict[str, Any], position: int) -> Comment:
    """Convert an embedded comment map to a Comment.

    Args:
        data: Comment map
        position: Index in the parent's list, used to name comments
            written before ids existed

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(data.get("id") or f"legacy-{position}"),
        content=data.get("content", ""),
        author=data.get("author", ""),
        user_id=UserId(data.get("userId") or ""),
        is_anonymous=bool(data.get("isAnonymous", False)),
        created_at=to_datetime(data.get("createdAt")) or _EPOCH,
        edited_at=to_datetime(data.get("editedAt") or data.get("updatedAt")),
    )


def comment_to_document(comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to its embedded map."""
    return {
        "id": comment.id,
        "content": comment.content,
        "author": comment.author,
        "userId": comment.user_id,
        "isAnonymous": comment.is_anonymous,
        "createdAt": comment.created_at,
        "editedAt": comment.edited_at,
    }


def document_to_post(doc_id: str, data: Dict[str, Any]) -> Post:
    """Convert a post document to a Post.

    Args:
        doc_id: Document ID
        data: Document fields

    Returns:
        Post domain model

    Raises:
        ValueError, TypeError or AttributeError: If the document can't be
            interpreted as a post
    """
    liked = _unique(list(data.get("likedUserIds") or []) + list(data.get("likedUsers") or []))

    return Post(
        id=PostId(doc_id),
        title=data.get("title", ""),
        content=data.get("content", ""),
        category=Category(data.get("category")),
        author=data.get("author", ""),
        hidden_user_id=UserId(data.get("hiddenUserId") or ""),
        token=data.get("token") or "",
        link=data.get("link") or "",
        media=media_from_document(data),
        likes=max(0, int(data.get("likes") or 0)),
        liked_user_ids=liked,
        comments=[
            document_to_comment(c, i) for i, c in enumerate(data.get("comments") or [])
        ],
        created_at=to_datetime(data.get("createdAt")) or _EPOCH,
        updated_at=to_datetime(data.get("updatedAt")),
        is_pinned=bool(data.get("isPinned", False)),
        pinned_at=to_datetime(data.get("pinnedAt")),
    )


def post_to_document(post: Post) -> Dict[str, Any]:
    """Convert a Post to a document, without its ID."""
    return {
        "title": post.title,
        "content": post.content,
        "category": post.category.value,
        "author": post.author,
        "hiddenUserId": post.hidden_user_id,
        "token": post.token,
        "link": post.link,
        **media_to_document(post.media),
        "likes": post.likes,
        "likedUserIds": list(post.liked_user_ids),
        "comments": [comment_to_document(c) for c in post.comments],
        "createdAt": post.created_at,
        "updatedAt": post.updated_at,
        "isPinned": post.is_pinned,
        "pinnedAt": post.pinned_at,
    }


def patch_to_fields(patch: PostContentPatch, updated_at: datetime) -> Dict[str, Any]:
    """Convert a content patch to the document fields it changes."""
    changes = patch.changes()
    fields: Dict[str, Any] = {"updatedAt": updated_at}

    for name in ("title", "content", "link"):
        if name in changes:
            fields[name] = changes[name]
    if "category" in changes:
        fields["category"] = changes["category"].value
    if "media" in changes:
        fields.update(media_to_document(changes["media"]))

    return fields


def document_to_admin(doc_id: str, data: Dict[str, Any]) -> AdminAccount:
    """Convert an admin document to an AdminAccount."""
    return AdminAccount(
        id=AdminId(doc_id),
        name=data["name"],
        password_hash=data["passwordHash"],
        created_at=to_datetime(data.get("createdAt")) or _EPOCH,
    )


def admin_to_document(account: AdminAccount) -> Dict[str, Any]:
    """Convert an AdminAccount to a document, without its ID."""
    return {
        "name": account.name,
        "passwordHash": account.password_hash,
        "createdAt": account.created_at,
    }
