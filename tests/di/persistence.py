"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import AdminRepository, PostRepository
from forum.persistence.repository.inmemory import (
    InMemoryAdminRepository,
    InMemoryPostRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope keeps state across requests within one container, so API
    tests can create a post and read it back. Each test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_admin_repository(self) -> AdminRepository:
        """Provide in-memory admin repository."""
        return InMemoryAdminRepository()
