"""Toggle like use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import PostService
from forum.domain.value import PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    user_id: str = ""


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    post: PostView
    liked: bool
    likes: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            InvalidInputError: If no user id was given
            NotFoundError: If the post doesn't exist
        """
        user_id = UserId(request.user_id)
        post = await self.post_service.toggle_like(PostId(request.post_id), user_id)

        return ToggleLikeResponse(
            post=post_view(post, user_id),
            liked=post.is_liked_by(user_id),
            likes=post.likes,
        )
