"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.admin.session import resolve_admin
from forum.application.usecase.views import PostView, post_view
from forum.domain.service import AdminService, CommentService, JWTService
from forum.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str | None = None
    admin_token: str | None = None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    post: PostView


class DeleteCommentUseCase:
    """Use case for deleting a comment as its owner or as an admin."""

    def __init__(
        self,
        comment_service: CommentService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            admin_service: Admin registry, for the admin bypass
            jwt_service: JWT service for admin sessions
        """
        self.comment_service = comment_service
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the post or comment doesn't exist
            NotAuthorizedError: If the caller is neither owner nor admin
        """
        admin_id = await resolve_admin(
            request.admin_token, self.jwt_service, self.admin_service
        )

        post = await self.comment_service.delete_comment(
            post_id=PostId(request.post_id),
            comment_id=CommentId(request.comment_id),
            actor_user_id=UserId(request.user_id) if request.user_id else None,
            is_admin=admin_id is not None,
        )

        return DeleteCommentResponse(post=post_view(post, request.user_id))
