"""Unit tests for admin use cases."""

import pytest

from forum.application.usecase.admin import (
    AdminLoginRequest,
    AdminLoginUseCase,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    CreateAdminRequest,
    CreateAdminUseCase,
    GetCurrentAdminRequest,
    GetCurrentAdminUseCase,
    ListAdminsRequest,
    ListAdminsUseCase,
    RemoveAdminRequest,
    RemoveAdminUseCase,
)
from forum.domain.error import AuthenticationError, InvalidInputError, NotAuthorizedError
from forum.domain.service import AdminService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _login(unit_env, admin_id="root", password="s3cret!"):
    use_case = await unit_env.get(AdminLoginUseCase)
    response = await use_case.execute(
        AdminLoginRequest(admin_id=admin_id, password=password)
    )
    return response.token


class TestLogin:
    """Tests for AdminLoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_session(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        current = await unit_env.get(GetCurrentAdminUseCase)

        # Act
        token = await _login(unit_env)
        me = await current.execute(GetCurrentAdminRequest(admin_token=token))

        # Assert
        assert me.admin_id == "root"
        assert me.name == "Root"
        assert "password_hash" not in me.model_dump()

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await _login(unit_env, password="wrong!!")

    @pytest.mark.asyncio
    async def test_no_session(self, unit_env):
        current = await unit_env.get(GetCurrentAdminUseCase)
        with pytest.raises(AuthenticationError):
            await current.execute(GetCurrentAdminRequest())


class TestManageAdmins:
    """Tests for the admin registry use cases."""

    @pytest.mark.asyncio
    async def test_create_list_remove(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        token = await _login(unit_env)
        create = await unit_env.get(CreateAdminUseCase)
        listing = await unit_env.get(ListAdminsUseCase)
        remove = await unit_env.get(RemoveAdminUseCase)

        # Act
        created = await create.execute(
            CreateAdminRequest(admin_token=token, admin_id="mod", name="Mod", password="m0derate")
        )
        after_create = await listing.execute(ListAdminsRequest(admin_token=token))
        await remove.execute(RemoveAdminRequest(admin_token=token, admin_id="mod"))
        after_remove = await listing.execute(ListAdminsRequest(admin_token=token))

        # Assert
        assert created.admin_id == "mod"
        assert {a.admin_id for a in after_create.admins} == {"root", "mod"}
        assert [a.admin_id for a in after_remove.admins] == ["root"]

    @pytest.mark.asyncio
    async def test_registry_requires_session(self, unit_env):
        create = await unit_env.get(CreateAdminUseCase)
        with pytest.raises(AuthenticationError):
            await create.execute(
                CreateAdminRequest(admin_id="mod", name="Mod", password="m0derate")
            )

    @pytest.mark.asyncio
    async def test_cannot_remove_self(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        token = await _login(unit_env)
        remove = await unit_env.get(RemoveAdminUseCase)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await remove.execute(RemoveAdminRequest(admin_token=token, admin_id="root"))

    @pytest.mark.asyncio
    async def test_change_password_only_for_self(self, unit_env):
        # Arrange
        admin_service = await unit_env.get(AdminService)
        await admin_service.create_admin("root", "Root", "s3cret!")
        await admin_service.create_admin("mod", "Mod", "m0derate")
        token = await _login(unit_env)
        change = await unit_env.get(ChangePasswordUseCase)

        # Act
        await change.execute(
            ChangePasswordRequest(admin_token=token, admin_id="root", new_password="n3wpass")
        )

        # Assert
        assert await admin_service.check_admin_password("root", "n3wpass")
        with pytest.raises(NotAuthorizedError):
            await change.execute(
                ChangePasswordRequest(admin_token=token, admin_id="mod", new_password="n3wpass")
            )
