"""Admin use cases."""

from .get_current_admin import GetCurrentAdminRequest, GetCurrentAdminUseCase
from .login import AdminLoginRequest, AdminLoginResponse, AdminLoginUseCase
from .manage_admins import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    CreateAdminRequest,
    CreateAdminUseCase,
    ListAdminsRequest,
    ListAdminsResponse,
    ListAdminsUseCase,
    RemoveAdminRequest,
    RemoveAdminResponse,
    RemoveAdminUseCase,
)
from .session import require_admin, resolve_admin

__all__ = [
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminLoginUseCase",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "CreateAdminRequest",
    "CreateAdminUseCase",
    "GetCurrentAdminRequest",
    "GetCurrentAdminUseCase",
    "ListAdminsRequest",
    "ListAdminsResponse",
    "ListAdminsUseCase",
    "RemoveAdminRequest",
    "RemoveAdminResponse",
    "RemoveAdminUseCase",
    "require_admin",
    "resolve_admin",
]
