"""Unit tests for the Firestore admin repository, against an in-process client."""

from datetime import datetime, timezone

import pytest

from forum.domain.value import AdminId
from forum.persistence.repository.admin import FirestoreAdminRepository
from tests.conftest import make_admin
from tests.unit.persistence.repository.fake_firestore import FakeClient


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def repo(client):
    return FirestoreAdminRepository(client, "admins")


class TestFirestoreAdminRepository:
    """Accounts are stored under their login ID."""

    @pytest.mark.asyncio
    async def test_save_then_find(self, client, repo):
        # Arrange
        account = make_admin("root")

        # Act
        await repo.save(account)
        found = await repo.find_by_id(AdminId("root"))

        # Assert
        assert found == account
        assert client.collections["admins"]["root"]["passwordHash"] == account.password_hash

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, repo):
        assert await repo.find_by_id(AdminId("nobody")) is None

    @pytest.mark.asyncio
    async def test_find_all_is_oldest_first(self, repo):
        # Arrange
        newer = make_admin("second").model_copy(
            update={"created_at": datetime(2024, 6, 1, tzinfo=timezone.utc)}
        )
        await repo.save(newer)
        await repo.save(make_admin("first"))

        # Act
        accounts = await repo.find_all()

        # Assert
        assert [a.id for a in accounts] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_delete(self, client, repo):
        # Arrange
        await repo.save(make_admin("root"))

        # Act / Assert
        assert await repo.delete(AdminId("root")) is True
        assert "root" not in client.collections["admins"]
        assert await repo.delete(AdminId("root")) is False
