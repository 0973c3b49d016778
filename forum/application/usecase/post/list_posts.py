"""List posts use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import PostService
from forum.domain.value import Category


class ListPostsRequest(BaseModel):
    """List posts request."""

    category: Category | None = None
    viewer_id: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    total: int


class ListPostsUseCase:
    """Use case for listing every post, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        posts = await self.post_service.list_posts(category=request.category)
        return ListPostsResponse(
            posts=[post_view(p, request.viewer_id) for p in posts],
            total=len(posts),
        )
