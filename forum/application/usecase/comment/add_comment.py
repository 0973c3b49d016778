"""Add comment use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import CommentService
from forum.domain.value import PostId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    content: str = ""
    author: str = ""
    user_id: str = ""
    is_anonymous: bool = False


class AddCommentResponse(BaseModel):
    """Add comment response.

    Contains the whole updated post so clients can refresh in one step.
    """

    post: PostView
    comment_id: str


class AddCommentUseCase:
    """Use case for appending a comment to a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.comment_service.add_comment(
            post_id=PostId(request.post_id),
            content=request.content,
            author=request.author,
            user_id=UserId(request.user_id),
            is_anonymous=request.is_anonymous,
        )

        return AddCommentResponse(
            post=post_view(post, request.user_id),
            comment_id=post.comments[-1].id,
        )
