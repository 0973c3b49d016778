"""Domain services."""

from .admin_service import AdminService
from .authorization import AccessDecision, Action, decide, ensure_allowed
from .base import Service
from .comment_service import CommentService
from .feed import (
    Board,
    CommentActivity,
    authored_by,
    build_board,
    comments_by,
    liked_by,
    recent_posts,
)
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .post_service import PostService

__all__ = [
    "AccessDecision",
    "Action",
    "AdminService",
    "Board",
    "CommentActivity",
    "CommentService",
    "JWTService",
    "ModerationService",
    "PostService",
    "Service",
    "authored_by",
    "build_board",
    "comments_by",
    "decide",
    "ensure_allowed",
    "liked_by",
    "recent_posts",
]
