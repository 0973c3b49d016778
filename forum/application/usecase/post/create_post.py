"""Create post use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import PostService
from forum.domain.value import Category, MediaAttachment, UserId


class CreatePostRequest(BaseModel):
    """Create post request.

    Required fields default to empty so that missing values are reported
    by the domain as a single InvalidInputError.
    """

    title: str = ""
    content: str = ""
    category: Category | None = None
    author: str = ""
    hidden_user_id: str | None = None
    link: str | None = None
    media: list[MediaAttachment] = []


class CreatePostResponse(BaseModel):
    """Create post response.

    The edit token is returned only here; clients keep it to edit or
    delete the post later.
    """

    post: PostView
    token: str


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post and its edit token

        Raises:
            InvalidInputError: If a required field is missing
        """
        post = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            category=request.category,
            author=request.author,
            hidden_user_id=UserId(request.hidden_user_id) if request.hidden_user_id else None,
            link=request.link,
            media=request.media,
        )

        return CreatePostResponse(
            post=post_view(post, request.hidden_user_id),
            token=post.token,
        )
