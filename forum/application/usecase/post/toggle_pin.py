"""Toggle pin use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.admin.session import resolve_admin
from forum.application.usecase.views import PostView, post_view
from forum.domain.error import NotAuthorizedError
from forum.domain.service import AdminService, JWTService, ModerationService
from forum.domain.value import PostId


class TogglePinRequest(BaseModel):
    """Toggle pin request."""

    post_id: str
    admin_token: str | None = None


class TogglePinResponse(BaseModel):
    """Toggle pin response."""

    post: PostView


class TogglePinUseCase:
    """Use case for pinning or unpinning a post. Admins only."""

    def __init__(
        self,
        moderation_service: ModerationService,
        admin_service: AdminService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize toggle pin use case.

        Args:
            moderation_service: Moderation domain service
            admin_service: Admin registry
            jwt_service: JWT service for admin sessions
        """
        self.moderation_service = moderation_service
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: TogglePinRequest) -> TogglePinResponse:
        """Execute toggle pin flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the post doesn't exist
        """
        admin_id = await resolve_admin(
            request.admin_token, self.jwt_service, self.admin_service
        )
        if admin_id is None:
            logfire.warn("Pin attempt without admin session", post_id=request.post_id)
            raise NotAuthorizedError("pin", "post", request.post_id)

        post = await self.moderation_service.toggle_pin(PostId(request.post_id))
        return TogglePinResponse(post=post_view(post, None))
