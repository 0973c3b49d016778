"""Admin registry management use cases.

Every operation here requires a valid admin session.
"""

from pydantic import BaseModel

from forum.application.usecase.admin.session import require_admin
from forum.application.usecase.views import AdminView, admin_view
from forum.domain.service import AdminService, JWTService
from forum.domain.value import AdminId


class ListAdminsRequest(BaseModel):
    """List admins request."""

    admin_token: str | None = None


class ListAdminsResponse(BaseModel):
    """List admins response."""

    admins: list[AdminView]


class CreateAdminRequest(BaseModel):
    """Create admin request."""

    admin_token: str | None = None
    admin_id: str = ""
    name: str = ""
    password: str = ""


class RemoveAdminRequest(BaseModel):
    """Remove admin request."""

    admin_token: str | None = None
    admin_id: str


class RemoveAdminResponse(BaseModel):
    """Remove admin response."""

    admin_id: str
    removed: bool


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    admin_token: str | None = None
    admin_id: str
    new_password: str


class _AdminUseCase:
    def __init__(self, admin_service: AdminService, jwt_service: JWTService) -> None:
        """Initialize admin use case.

        Args:
            admin_service: Admin registry
            jwt_service: JWT service for verifying sessions
        """
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def _actor(self, admin_token: str | None) -> AdminId:
        return await require_admin(admin_token, self.jwt_service, self.admin_service)


class ListAdminsUseCase(_AdminUseCase):
    """Use case for listing admin accounts."""

    async def execute(self, request: ListAdminsRequest) -> ListAdminsResponse:
        await self._actor(request.admin_token)
        accounts = await self.admin_service.list_admins()
        return ListAdminsResponse(admins=[admin_view(a) for a in accounts])


class CreateAdminUseCase(_AdminUseCase):
    """Use case for registering another admin."""

    async def execute(self, request: CreateAdminRequest) -> AdminView:
        """Execute create admin flow.

        Raises:
            AuthenticationError: If there is no valid admin session
            InvalidInputError: If a field is missing, the password is too
                short, or the id is taken
        """
        await self._actor(request.admin_token)
        account = await self.admin_service.create_admin(
            request.admin_id, request.name, request.password
        )
        return admin_view(account)


class RemoveAdminUseCase(_AdminUseCase):
    """Use case for removing another admin."""

    async def execute(self, request: RemoveAdminRequest) -> RemoveAdminResponse:
        """Execute remove admin flow.

        Raises:
            AuthenticationError: If there is no valid admin session
            InvalidInputError: If the admin tries to remove themselves
            NotFoundError: If the account doesn't exist
        """
        actor_id = await self._actor(request.admin_token)
        await self.admin_service.remove_admin(actor_id, AdminId(request.admin_id))
        return RemoveAdminResponse(admin_id=request.admin_id, removed=True)


class ChangePasswordUseCase(_AdminUseCase):
    """Use case for changing one's own admin password."""

    async def execute(self, request: ChangePasswordRequest) -> AdminView:
        """Execute change password flow.

        Raises:
            AuthenticationError: If there is no valid admin session
            NotAuthorizedError: If the target is another admin
            InvalidInputError: If the new password is too short
        """
        actor_id = await self._actor(request.admin_token)
        account = await self.admin_service.change_password(
            actor_id, AdminId(request.admin_id), request.new_password
        )
        return admin_view(account)
