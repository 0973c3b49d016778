"""Get post use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import PostService
from forum.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    viewer_id: str | None = None  # Client-side user id, for viewer flags


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostView


class GetPostUseCase:
    """Use case for reading a single post with its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return GetPostResponse(post=post_view(post, request.viewer_id))
