"""In-memory admin account repository."""

from typing import Optional

from forum.domain.model.admin import AdminAccount
from forum.domain.repository.admin import AdminRepository
from forum.domain.value import AdminId


class InMemoryAdminRepository(AdminRepository):
    """In-memory implementation of AdminRepository."""

    def __init__(self) -> None:
        self._accounts: dict[AdminId, AdminAccount] = {}

    async def find_by_id(self, admin_id: AdminId) -> Optional[AdminAccount]:
        return self._accounts.get(admin_id)

    async def find_all(self) -> list[AdminAccount]:
        return sorted(self._accounts.values(), key=lambda a: a.created_at)

    async def save(self, account: AdminAccount) -> AdminAccount:
        self._accounts[account.id] = account
        return account

    async def delete(self, admin_id: AdminId) -> bool:
        return self._accounts.pop(admin_id, None) is not None
