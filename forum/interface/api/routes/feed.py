"""Board, home page and user activity routes.

Registered before the post routes so `/posts/board` and `/posts/recent`
are not captured by `/posts/{post_id}`.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from forum.application.usecase.feed import (
    GetBoardRequest,
    GetBoardResponse,
    GetBoardUseCase,
    GetRecentPostsRequest,
    GetRecentPostsResponse,
    GetRecentPostsUseCase,
    GetUserActivityRequest,
    GetUserActivityResponse,
    GetUserActivityUseCase,
)
from forum.interface.api.params import parse_category

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


@router.get("/posts/board", response_model=GetBoardResponse)
async def get_board(
    get_board_use_case: FromDishka[GetBoardUseCase],
    category: str | None = None,
    page: int = Query(default=1, ge=1),
    user_id: str | None = None,
) -> GetBoardResponse:
    """Get one page of a board, with pinned posts listed first.

    Args:
        get_board_use_case: Get board use case from DI
        category: Category filter; omit or "all" for every category
        page: 1-based page number
        user_id: Viewer id, for viewer flags
    """
    return await get_board_use_case.execute(
        GetBoardRequest(
            category=parse_category(category), page=page, viewer_id=user_id
        )
    )


@router.get("/posts/recent", response_model=GetRecentPostsResponse)
async def get_recent_posts(
    get_recent_posts_use_case: FromDishka[GetRecentPostsUseCase],
    user_id: str | None = None,
) -> GetRecentPostsResponse:
    """Get the latest posts for the home page."""
    return await get_recent_posts_use_case.execute(
        GetRecentPostsRequest(viewer_id=user_id)
    )


@router.get("/users/{user_id}/activity", response_model=GetUserActivityResponse)
async def get_user_activity(
    user_id: str,
    get_user_activity_use_case: FromDishka[GetUserActivityUseCase],
) -> GetUserActivityResponse:
    """Get a user's own posts, liked posts and comments."""
    return await get_user_activity_use_case.execute(
        GetUserActivityRequest(user_id=user_id)
    )
