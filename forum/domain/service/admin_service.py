"""Admin registry domain service."""

from datetime import datetime, timezone

import bcrypt
import logfire

from forum.config import AdminSettings, SeedAdminAccount
from forum.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from forum.domain.model.admin import AdminAccount
from forum.domain.repository import AdminRepository
from forum.domain.value import AdminId

from .base import Service

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class AdminService(Service):
    """Domain service for the admin registry.

    Admins are the only actors allowed to pin posts and to delete content
    they don't own.
    """

    def __init__(
        self, admin_repository: AdminRepository, admin_settings: AdminSettings
    ) -> None:
        """Initialize admin service.

        Args:
            admin_repository: Admin account repository
            admin_settings: Admin registry settings
        """
        self.admin_repository = admin_repository
        self.admin_settings = admin_settings

    async def is_admin(self, actor_id: str | None) -> bool:
        """Check whether an id belongs to a registered admin."""
        if not actor_id:
            return False
        return await self.admin_repository.find_by_id(AdminId(actor_id)) is not None

    async def check_admin_password(self, actor_id: str | None, secret: str | None) -> bool:
        """Verify admin credentials.

        Args:
            actor_id: Admin ID
            secret: Plain-text password

        Returns:
            True only if the account exists and the password matches
        """
        with logfire.span("admin_service.check_admin_password", admin_id=actor_id):
            if not actor_id or not secret:
                return False

            account = await self.admin_repository.find_by_id(AdminId(actor_id))
            if account is None:
                logfire.warn("Login attempt for unknown admin", admin_id=actor_id)
                return False

            valid = verify_password(secret, account.password_hash)
            if not valid:
                logfire.warn("Invalid admin password", admin_id=actor_id)
            return valid

    async def get_admin(self, admin_id: AdminId) -> AdminAccount:
        """Get an admin account by ID.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        account = await self.admin_repository.find_by_id(admin_id)
        if account is None:
            raise NotFoundError("Admin", admin_id)
        return account

    async def list_admins(self) -> list[AdminAccount]:
        """List every admin account."""
        with logfire.span("admin_service.list_admins"):
            return await self.admin_repository.find_all()

    async def create_admin(self, admin_id: str, name: str, password: str) -> AdminAccount:
        """Register a new admin.

        Args:
            admin_id: Login ID
            name: Display name
            password: Plain-text password

        Returns:
            Created account

        Raises:
            InvalidInputError: If a field is missing, the password is too
                short, or the ID is already taken
        """
        if not admin_id or not name or not password:
            raise InvalidInputError("Admin id, name and password are required")
        self._validate_password(password)

        with logfire.span("admin_service.create_admin", admin_id=admin_id):
            if await self.admin_repository.find_by_id(AdminId(admin_id)) is not None:
                logfire.warn("Duplicate admin id", admin_id=admin_id)
                raise InvalidInputError(f"Admin already exists: {admin_id}")

            account = AdminAccount(
                id=AdminId(admin_id),
                name=name,
                password_hash=hash_password(password),
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.admin_repository.save(account)
            logfire.info("Admin created", admin_id=admin_id)
            return saved

    async def remove_admin(self, actor_id: AdminId, admin_id: AdminId) -> None:
        """Remove an admin account.

        Raises:
            InvalidInputError: If an admin tries to remove themselves
            NotFoundError: If the account doesn't exist
        """
        with logfire.span(
            "admin_service.remove_admin", actor_id=actor_id, admin_id=admin_id
        ):
            if actor_id == admin_id:
                raise InvalidInputError("Admins cannot remove their own account")

            if not await self.admin_repository.delete(admin_id):
                raise NotFoundError("Admin", admin_id)

            logfire.info("Admin removed", admin_id=admin_id, by=actor_id)

    async def change_password(
        self, actor_id: AdminId, admin_id: AdminId, new_password: str
    ) -> AdminAccount:
        """Change an admin's password.

        Admins can only change their own password.

        Raises:
            NotAuthorizedError: If the actor targets another account
            InvalidInputError: If the new password is too short
            NotFoundError: If the account doesn't exist
        """
        with logfire.span("admin_service.change_password", admin_id=admin_id):
            if actor_id != admin_id:
                logfire.warn(
                    "Password change for another admin",
                    actor_id=actor_id,
                    admin_id=admin_id,
                )
                raise NotAuthorizedError("change password of", "admin", admin_id)

            self._validate_password(new_password)
            account = await self.get_admin(admin_id)

            updated = account.model_copy(
                update={"password_hash": hash_password(new_password)}
            )
            saved = await self.admin_repository.save(updated)
            logfire.info("Admin password changed", admin_id=admin_id)
            return saved

    async def seed(self, accounts: list[SeedAdminAccount]) -> list[AdminAccount]:
        """Create configured accounts that are missing from the registry.

        Existing accounts are left untouched, so re-running is safe.

        Returns:
            Accounts that were created
        """
        created = []
        with logfire.span("admin_service.seed", configured=len(accounts)):
            for entry in accounts:
                if await self.is_admin(entry.id):
                    continue
                created.append(
                    await self.create_admin(entry.id, entry.name, entry.password)
                )
            logfire.info("Admin registry seeded", created=len(created))
        return created

    def _validate_password(self, password: str) -> None:
        minimum = self.admin_settings.min_password_length
        if len(password) < minimum:
            raise InvalidInputError(f"Password must be at least {minimum} characters")
        if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
            raise InvalidInputError(
                f"Password must be at most {_BCRYPT_MAX_BYTES} bytes"
            )
