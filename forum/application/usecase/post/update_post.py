"""Update post use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import PostService
from forum.domain.value import (
    Category,
    MediaAttachment,
    PostContentPatch,
    PostId,
    UserId,
)


class UpdatePostRequest(BaseModel):
    """Update post request.

    Omitted content fields keep their stored values.
    """

    post_id: str
    token: str | None = None
    hidden_user_id: str | None = None
    title: str | None = None
    content: str | None = None
    category: Category | None = None
    link: str | None = None
    media: list[MediaAttachment] | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostView


class UpdatePostUseCase:
    """Use case for editing a post's content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with the caller's credentials

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If neither the token nor the hidden id match
        """
        patch = PostContentPatch(
            title=request.title,
            content=request.content,
            category=request.category,
            link=request.link,
            media=request.media,
        )

        post = await self.post_service.update_post(
            post_id=PostId(request.post_id),
            actor_token=request.token,
            actor_hidden_id=UserId(request.hidden_user_id) if request.hidden_user_id else None,
            patch=patch,
        )

        return UpdatePostResponse(post=post_view(post, request.hidden_user_id))
