"""Comment routes.

Comments are addressed through their parent post.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentResponse,
    EditCommentUseCase,
)

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    content: str = ""
    author: str = ""
    user_id: str = ""
    is_anonymous: bool = False


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    user_id: str | None = None
    content: str = ""
    author: str = ""
    is_anonymous: bool = False


class DeleteCommentAPIRequest(BaseModel):
    """API request for deleting a comment."""

    user_id: str | None = None


@router.post(
    "/{post_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Append a comment to a post."""
    return await add_comment_use_case.execute(
        AddCommentRequest(post_id=post_id, **request.model_dump())
    )


@router.put("/{post_id}/comments/{comment_id}", response_model=EditCommentResponse)
async def edit_comment(
    post_id: str,
    comment_id: str,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
) -> EditCommentResponse:
    """Edit a comment. Only its owner may do this."""
    return await edit_comment_use_case.execute(
        EditCommentRequest(post_id=post_id, comment_id=comment_id, **request.model_dump())
    )


@router.delete("/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    request: DeleteCommentAPIRequest | None = None,
    admin_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment as its owner or as an admin."""
    request = request or DeleteCommentAPIRequest()
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=post_id,
            comment_id=comment_id,
            user_id=request.user_id,
            admin_token=admin_token,
        )
    )
