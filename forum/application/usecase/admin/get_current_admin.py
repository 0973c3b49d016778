"""Get current admin use case."""

from pydantic import BaseModel

from forum.application.usecase.admin.session import require_admin
from forum.application.usecase.views import AdminView, admin_view
from forum.domain.service import AdminService, JWTService


class GetCurrentAdminRequest(BaseModel):
    """Get current admin request."""

    admin_token: str | None = None


class GetCurrentAdminUseCase:
    """Use case for reading the admin behind a session."""

    def __init__(self, admin_service: AdminService, jwt_service: JWTService) -> None:
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentAdminRequest) -> AdminView:
        """Execute get current admin flow.

        Raises:
            AuthenticationError: If there is no valid admin session
        """
        admin_id = await require_admin(
            request.admin_token, self.jwt_service, self.admin_service
        )
        account = await self.admin_service.get_admin(admin_id)
        return admin_view(account)
