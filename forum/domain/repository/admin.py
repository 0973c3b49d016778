"""Admin account repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.admin import AdminAccount
from forum.domain.value import AdminId


class AdminRepository(ABC):
    """Repository for admin accounts.

    The registry is small and rarely changes; every method is a single
    document operation.
    """

    @abstractmethod
    async def find_by_id(self, admin_id: AdminId) -> Optional[AdminAccount]:
        """Find an admin account by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[AdminAccount]:
        """List all admin accounts ordered by creation time."""
        pass

    @abstractmethod
    async def save(self, account: AdminAccount) -> AdminAccount:
        """Save an admin account (create or update)."""
        pass

    @abstractmethod
    async def delete(self, admin_id: AdminId) -> bool:
        """Delete an admin account.

        Returns:
            True if an account was deleted, False if none existed
        """
        pass
