"""Delete post use case."""

from pydantic import BaseModel

from forum.application.usecase.admin.session import resolve_admin
from forum.domain.service import AdminService, JWTService, PostService
from forum.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    token: str | None = None
    user_id: str | None = None
    admin_token: str | None = None  # Admin session cookie, if any


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for deleting a post and all of its comments."""

    def __init__(
        self,
        post_service: PostService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            admin_service: Admin registry, for the admin bypass
            jwt_service: JWT service for admin sessions
        """
        self.post_service = post_service
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither owner nor admin
        """
        admin_id = await resolve_admin(
            request.admin_token, self.jwt_service, self.admin_service
        )

        await self.post_service.delete_post(
            post_id=PostId(request.post_id),
            actor_token=request.token,
            actor_user_id=UserId(request.user_id) if request.user_id else None,
            is_admin=admin_id is not None,
        )

        return DeletePostResponse(post_id=request.post_id, deleted=True)
