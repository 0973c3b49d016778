"""Firestore implementation of AdminAccount repository."""

from typing import List, Optional

from google.api_core.exceptions import NotFound
from google.cloud import firestore

from forum.domain.model import AdminAccount
from forum.domain.repository.admin import AdminRepository
from forum.domain.value import AdminId
from forum.persistence.client import storage_errors
from forum.persistence.mappers import admin_to_document, document_to_admin


class FirestoreAdminRepository(AdminRepository):
    """Firestore implementation of AdminRepository.

    Accounts are keyed by their login ID.
    """

    def __init__(self, client: firestore.AsyncClient, collection: str) -> None:
        """Initialize repository.

        Args:
            client: Shared Firestore async client
            collection: Admins collection name
        """
        self.client = client
        self.collection = client.collection(collection)

    async def find_by_id(self, admin_id: AdminId) -> Optional[AdminAccount]:
        with storage_errors("find_admin"):
            snapshot = await self.collection.document(admin_id).get()
        if not snapshot.exists:
            return None
        return document_to_admin(snapshot.id, snapshot.to_dict())

    async def find_all(self) -> List[AdminAccount]:
        with storage_errors("list_admins"):
            accounts = [
                document_to_admin(snapshot.id, snapshot.to_dict())
                async for snapshot in self.collection.stream()
            ]
        return sorted(accounts, key=lambda a: a.created_at)

    async def save(self, account: AdminAccount) -> AdminAccount:
        with storage_errors("save_admin"):
            await self.collection.document(account.id).set(admin_to_document(account))
        return account

    async def delete(self, admin_id: AdminId) -> bool:
        with storage_errors("delete_admin"):
            try:
                await self.collection.document(admin_id).delete(
                    option=self.client.write_option(exists=True)
                )
            except NotFound:
                return False
        return True
