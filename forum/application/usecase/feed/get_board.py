"""Get board use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.config import ListingSettings
from forum.domain.service import PostService, build_board
from forum.domain.value import Category


class GetBoardRequest(BaseModel):
    """Get board request."""

    category: Category | None = None
    page: int = 1
    viewer_id: str | None = None


class GetBoardResponse(BaseModel):
    """One board page, pinned posts first."""

    category: Category | None
    pinned: list[PostView]
    posts: list[PostView]
    page: int
    total_pages: int
    total_posts: int


class GetBoardUseCase:
    """Use case for rendering a paginated category board."""

    def __init__(
        self, post_service: PostService, listing_settings: ListingSettings
    ) -> None:
        """Initialize get board use case.

        Args:
            post_service: Post domain service
            listing_settings: Page size settings
        """
        self.post_service = post_service
        self.listing_settings = listing_settings

    async def execute(self, request: GetBoardRequest) -> GetBoardResponse:
        """Execute get board flow.

        Loads every post once and builds the page from that snapshot.

        Raises:
            InvalidInputError: If the page number is below 1
        """
        posts = await self.post_service.list_posts()
        board = build_board(
            posts,
            category=request.category,
            page=request.page,
            per_page=self.listing_settings.posts_per_page,
        )

        return GetBoardResponse(
            category=request.category,
            pinned=[post_view(p, request.viewer_id) for p in board.pinned],
            posts=[post_view(p, request.viewer_id) for p in board.posts],
            page=board.page,
            total_pages=board.total_pages,
            total_posts=board.total_posts,
        )
