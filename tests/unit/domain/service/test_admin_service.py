"""Unit tests for AdminService."""

import pytest

from forum.config import SeedAdminAccount
from forum.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from forum.domain.repository import AdminRepository
from forum.domain.service import AdminService
from forum.domain.service.admin_service import hash_password, verify_password
from forum.domain.value import AdminId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPasswordHashing:
    """Tests for the bcrypt helpers."""

    def test_hash_is_salted(self):
        first = hash_password("hunter22")
        second = hash_password("hunter22")
        assert first != second
        assert verify_password("hunter22", first)
        assert verify_password("hunter22", second)

    def test_wrong_password(self):
        assert not verify_password("nope", hash_password("hunter22"))

    def test_garbage_hash_does_not_verify(self):
        assert not verify_password("hunter22", "not-a-bcrypt-hash")


class TestCreateAdmin:
    """Tests for create_admin."""

    @pytest.mark.asyncio
    async def test_create_stores_hash_only(self, unit_env):
        """The plain password is never stored."""
        # Arrange
        admin_service = await unit_env.get(AdminService)
        admin_repo = await unit_env.get(AdminRepository)

        # Act
        account = await admin_service.create_admin("root", "Root", "s3cret!")

        # Assert
        saved = await admin_repo.find_by_id(AdminId("root"))
        assert saved == account
        assert saved.password_hash != "s3cret!"
        assert verify_password("s3cret!", saved.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await admin_service.create_admin("root", "Other", "another1")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "admin_id,name,password",
        [("", "Root", "s3cret!"), ("root", "", "s3cret!"), ("root", "Root", "")],
    )
    async def test_missing_fields_rejected(self, unit_env, admin_id, name, password):
        admin_service = await unit_env.get(AdminService)
        with pytest.raises(InvalidInputError):
            await admin_service.create_admin(admin_id, name, password)

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        with pytest.raises(InvalidInputError):
            await admin_service.create_admin("root", "Root", "abc")

    @pytest.mark.asyncio
    async def test_overlong_password_rejected(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        with pytest.raises(InvalidInputError):
            await admin_service.create_admin("root", "Root", "x" * 73)


class TestCredentials:
    """Tests for is_admin and check_admin_password."""

    @pytest.mark.asyncio
    async def test_check_password(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act & Assert
        assert await admin_service.check_admin_password("root", "s3cret!") is True
        assert await admin_service.check_admin_password("root", "wrong!!") is False
        assert await admin_service.check_admin_password("ghost", "s3cret!") is False
        assert await admin_service.check_admin_password(None, None) is False

    @pytest.mark.asyncio
    async def test_is_admin(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act & Assert
        assert await admin_service.is_admin("root") is True
        assert await admin_service.is_admin("ghost") is False
        assert await admin_service.is_admin("") is False
        assert await admin_service.is_admin(None) is False


class TestRemoveAdmin:
    """Tests for remove_admin."""

    @pytest.mark.asyncio
    async def test_remove_other_admin(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        await admin_service.create_admin("mod", "Mod", "s3cret!")

        # Act
        await admin_service.remove_admin(AdminId("root"), AdminId("mod"))

        # Assert
        assert [a.id for a in await admin_service.list_admins()] == ["root"]

    @pytest.mark.asyncio
    async def test_cannot_remove_self(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await admin_service.remove_admin(AdminId("root"), AdminId("root"))
        assert await admin_service.is_admin("root")

    @pytest.mark.asyncio
    async def test_remove_missing(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        with pytest.raises(NotFoundError):
            await admin_service.remove_admin(AdminId("root"), AdminId("ghost"))


class TestChangePassword:
    """Tests for change_password."""

    @pytest.mark.asyncio
    async def test_change_own_password(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act
        await admin_service.change_password(AdminId("root"), AdminId("root"), "n3wpass")

        # Assert
        assert await admin_service.check_admin_password("root", "n3wpass")
        assert not await admin_service.check_admin_password("root", "s3cret!")

    @pytest.mark.asyncio
    async def test_cannot_change_another_admins_password(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        await admin_service.create_admin("mod", "Mod", "s3cret!")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await admin_service.change_password(AdminId("root"), AdminId("mod"), "n3wpass")
        assert await admin_service.check_admin_password("mod", "s3cret!")


class TestSeed:
    """Tests for seed."""

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        accounts = [
            SeedAdminAccount(id="root", name="Root", password="s3cret!"),
            SeedAdminAccount(id="mod", name="Mod", password="m0derate"),
        ]

        # Act
        first = await admin_service.seed(accounts)
        second = await admin_service.seed(accounts)

        # Assert
        assert {a.id for a in first} == {"root", "mod"}
        assert second == []
        assert len(await admin_service.list_admins()) == 2
