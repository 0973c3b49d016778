"""Edit comment use case."""

from pydantic import BaseModel

from forum.application.usecase.views import PostView, post_view
from forum.domain.service import CommentService
from forum.domain.value import CommentId, CommentPatch, PostId, UserId


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    post_id: str
    comment_id: str
    user_id: str | None = None
    content: str = ""
    author: str = ""
    is_anonymous: bool = False


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    post: PostView


class EditCommentUseCase:
    """Use case for editing one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller doesn't own the comment
        """
        post = await self.comment_service.edit_comment(
            post_id=PostId(request.post_id),
            comment_id=CommentId(request.comment_id),
            actor_user_id=UserId(request.user_id) if request.user_id else None,
            patch=CommentPatch(
                content=request.content,
                author=request.author,
                is_anonymous=request.is_anonymous,
            ),
        )

        return EditCommentResponse(post=post_view(post, request.user_id))
