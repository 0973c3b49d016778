"""Admin login use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.views import AdminView, admin_view
from forum.domain.error import AuthenticationError
from forum.domain.service import AdminService, JWTService
from forum.domain.value import AdminId


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    admin_id: str
    password: str


class AdminLoginResponse(BaseModel):
    """Admin login response.

    The token is set as the `admin_token` cookie by the API layer.
    """

    admin: AdminView
    token: str


class AdminLoginUseCase:
    """Use case for exchanging admin credentials for a session token."""

    def __init__(self, admin_service: AdminService, jwt_service: JWTService) -> None:
        """Initialize admin login use case.

        Args:
            admin_service: Admin registry
            jwt_service: JWT service for issuing sessions
        """
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Execute admin login flow.

        Raises:
            AuthenticationError: If the id or password is wrong
        """
        with logfire.span("admin_login.execute", admin_id=request.admin_id):
            valid = await self.admin_service.check_admin_password(
                request.admin_id, request.password
            )
            if not valid:
                # Same message for unknown ids and wrong passwords
                raise AuthenticationError("Invalid admin id or password")

            account = await self.admin_service.get_admin(AdminId(request.admin_id))
            token = self.jwt_service.create_token(account.id, account.name)

            logfire.info("Admin logged in", admin_id=account.id)
            return AdminLoginResponse(admin=admin_view(account), token=token)
