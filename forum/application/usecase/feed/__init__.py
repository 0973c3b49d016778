"""Feed use cases."""

from .get_board import GetBoardRequest, GetBoardResponse, GetBoardUseCase
from .get_recent_posts import (
    GetRecentPostsRequest,
    GetRecentPostsResponse,
    GetRecentPostsUseCase,
)
from .get_user_activity import (
    ActivityComment,
    GetUserActivityRequest,
    GetUserActivityResponse,
    GetUserActivityUseCase,
)

__all__ = [
    "ActivityComment",
    "GetBoardRequest",
    "GetBoardResponse",
    "GetBoardUseCase",
    "GetRecentPostsRequest",
    "GetRecentPostsResponse",
    "GetRecentPostsUseCase",
    "GetUserActivityRequest",
    "GetUserActivityResponse",
    "GetUserActivityUseCase",
]
