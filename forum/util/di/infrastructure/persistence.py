"""Persistence infrastructure providers."""

from dataclasses import dataclass

import logfire
from dishka import Scope, provide

from forum.config import StorageSettings
from forum.domain.repository import AdminRepository, PostRepository
from forum.persistence.client import create_client
from forum.persistence.repository import (
    FirestoreAdminRepository,
    FirestorePostRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryAdminRepository,
    InMemoryPostRepository,
)
from forum.util.di.base import ProviderBase


@dataclass(frozen=True)
class Repositories:
    """Repositories backed by one storage backend."""

    posts: PostRepository
    admins: AdminRepository


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Everything is APP-scoped: the Firestore client is safe for concurrent
    use, and the in-memory backend must outlive a single request.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_repositories(self, storage_settings: StorageSettings) -> Repositories:
        """Build the repositories for the configured backend.

        The Firestore client is only created when the Firestore backend is
        selected.
        """
        if storage_settings.backend == "memory":
            logfire.warn("Using in-memory storage, data is lost on restart")
            return Repositories(
                posts=InMemoryPostRepository(),
                admins=InMemoryAdminRepository(),
            )

        client = create_client(storage_settings)
        return Repositories(
            posts=FirestorePostRepository(client, storage_settings.posts_collection),
            admins=FirestoreAdminRepository(
                client, storage_settings.admins_collection
            ),
        )

    @provide(scope=Scope.APP)
    def get_post_repository(self, repositories: Repositories) -> PostRepository:
        """Provide Post repository."""
        return repositories.posts

    @provide(scope=Scope.APP)
    def get_admin_repository(self, repositories: Repositories) -> AdminRepository:
        """Provide AdminAccount repository."""
        return repositories.admins
