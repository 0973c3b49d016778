"""JWT token domain service."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for admin session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, admin_id: str, name: str) -> str:
        """Create a session token for an admin.

        Args:
            admin_id: Admin ID
            name: Admin display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", admin_id=admin_id):
            token = create_token(admin_id, name, self.auth_settings)
            logfire.info("JWT token created", admin_id=admin_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", admin_id=payload.admin_id)
            return payload

    def get_admin_id_from_token(self, token: str | None) -> str | None:
        """Extract the admin ID from a session token without raising.

        Used by routes where an admin session is optional, such as deletes
        that owners can also perform.

        Args:
            token: JWT token string (optional)

        Returns:
            Admin ID if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).admin_id
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
