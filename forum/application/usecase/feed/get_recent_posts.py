"""Get recent posts use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.config import ListingSettings
from forum.domain.service import PostService, recent_posts


class GetRecentPostsRequest(BaseModel):
    """Get recent posts request."""

    viewer_id: str | None = None


class GetRecentPostsResponse(BaseModel):
    """Get recent posts response."""

    posts: list[PostView]


class GetRecentPostsUseCase:
    """Use case for the home page's latest posts."""

    def __init__(
        self, post_service: PostService, listing_settings: ListingSettings
    ) -> None:
        self.post_service = post_service
        self.listing_settings = listing_settings

    async def execute(self, request: GetRecentPostsRequest) -> GetRecentPostsResponse:
        """Execute get recent posts flow."""
        posts = await self.post_service.list_posts()
        recent = recent_posts(posts, limit=self.listing_settings.recent_limit)
        return GetRecentPostsResponse(
            posts=[post_view(p, request.viewer_id) for p in recent]
        )
