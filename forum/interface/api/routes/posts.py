"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    TogglePinRequest,
    TogglePinResponse,
    TogglePinUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from forum.domain.value import Category, MediaAttachment
from forum.interface.api.params import parse_category

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Length limits are enforced by the client, not here.
    """

    title: str = ""
    content: str = ""
    category: Category | None = None
    author: str = ""
    hidden_user_id: str | None = None
    link: str | None = None
    media: list[MediaAttachment] = []


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post.

    Either `hidden_user_id` or the edit `token` must match the post.
    """

    token: str | None = None
    hidden_user_id: str | None = None
    title: str | None = None
    content: str | None = None
    category: Category | None = None
    link: str | None = None
    media: list[MediaAttachment] | None = None


class DeletePostAPIRequest(BaseModel):
    """API request for deleting a post."""

    token: str | None = None
    user_id: str | None = None


class ToggleLikeAPIRequest(BaseModel):
    """API request for toggling a like."""

    user_id: str = ""


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    category: str | None = None,
    user_id: str | None = None,
) -> ListPostsResponse:
    """List every post, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        category: Optional category filter
        user_id: Viewer id, for `liked_by_me` and `is_mine`
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(category=parse_category(category), viewer_id=user_id)
    )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    No login is required. The response carries the edit token, which
    is not returned anywhere else.
    """
    return await create_post_use_case.execute(
        CreatePostRequest(**request.model_dump())
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    user_id: str | None = None,
) -> GetPostResponse:
    """Get a post with all of its comments."""
    return await get_post_use_case.execute(
        GetPostRequest(post_id=post_id, viewer_id=user_id)
    )


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Edit a post's content as its owner."""
    return await update_post_use_case.execute(
        UpdatePostRequest(post_id=post_id, **request.model_dump())
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    request: DeletePostAPIRequest | None = None,
    admin_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post as its owner or as an admin."""
    request = request or DeletePostAPIRequest()
    return await delete_post_use_case.execute(
        DeletePostRequest(
            post_id=post_id,
            token=request.token,
            user_id=request.user_id,
            admin_token=admin_token,
        )
    )


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: str,
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
) -> ToggleLikeResponse:
    """Like the post, or remove the caller's like if already liked."""
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=post_id, user_id=request.user_id)
    )


@router.post("/{post_id}/pin", response_model=TogglePinResponse)
async def toggle_pin(
    post_id: str,
    toggle_pin_use_case: FromDishka[TogglePinUseCase],
    admin_token: str | None = Cookie(default=None),
) -> TogglePinResponse:
    """Pin or unpin a post. Requires an admin session."""
    return await toggle_pin_use_case.execute(
        TogglePinRequest(post_id=post_id, admin_token=admin_token)
    )
