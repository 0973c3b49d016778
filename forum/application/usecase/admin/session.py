"""Admin session resolution."""

import logfire

from forum.domain.error import AuthenticationError
from forum.domain.service import AdminService, JWTService
from forum.domain.value import AdminId


async def resolve_admin(
    admin_token: str | None,
    jwt_service: JWTService,
    admin_service: AdminService,
) -> AdminId | None:
    """Resolve the admin behind a session token.

    The token alone is not trusted: the account must still be in the
    registry, so removed admins lose their privileges immediately.

    Args:
        admin_token: Session token from the `admin_token` cookie
        jwt_service: JWT service
        admin_service: Admin registry

    Returns:
        Admin ID, or None if the caller is not a current admin
    """
    admin_id = jwt_service.get_admin_id_from_token(admin_token)
    if admin_id is None:
        return None

    if not await admin_service.is_admin(admin_id):
        logfire.warn("Session for removed admin", admin_id=admin_id)
        return None

    return AdminId(admin_id)


async def require_admin(
    admin_token: str | None,
    jwt_service: JWTService,
    admin_service: AdminService,
) -> AdminId:
    """Resolve the admin behind a session token or fail.

    Raises:
        AuthenticationError: If the caller is not a current admin
    """
    admin_id = await resolve_admin(admin_token, jwt_service, admin_service)
    if admin_id is None:
        raise AuthenticationError()
    return admin_id
