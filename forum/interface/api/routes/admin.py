"""Admin session and registry routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

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
    ListAdminsResponse,
    ListAdminsUseCase,
    RemoveAdminRequest,
    RemoveAdminResponse,
    RemoveAdminUseCase,
)
from forum.application.usecase.views import AdminView
from forum.config import Settings

ADMIN_COOKIE = "admin_token"

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminLoginAPIRequest(BaseModel):
    """API request for admin login."""

    admin_id: str
    password: str


class CreateAdminAPIRequest(BaseModel):
    """API request for registering an admin."""

    admin_id: str = ""
    name: str = ""
    password: str = ""


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing an admin password."""

    new_password: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool


@router.post("/login", response_model=AdminView)
async def login(
    request: AdminLoginAPIRequest,
    response: Response,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
    settings: FromDishka[Settings],
) -> AdminView:
    """Log in as an admin and set the session cookie."""
    result = await admin_login_use_case.execute(
        AdminLoginRequest(admin_id=request.admin_id, password=request.password)
    )

    is_production = settings.environment == "production"
    response.set_cookie(
        key=ADMIN_COOKIE,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logfire.info("Admin session cookie set", admin_id=result.admin.admin_id)
    return result.admin


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the admin session cookie."""
    response.delete_cookie(key=ADMIN_COOKIE, path="/")
    return LogoutResponse(success=True)


@router.get("/me", response_model=AdminView)
async def get_current_admin(
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    admin_token: str | None = Cookie(default=None),
) -> AdminView:
    """Get the admin behind the current session."""
    return await get_current_admin_use_case.execute(
        GetCurrentAdminRequest(admin_token=admin_token)
    )


@router.get("/accounts", response_model=ListAdminsResponse)
async def list_admins(
    list_admins_use_case: FromDishka[ListAdminsUseCase],
    admin_token: str | None = Cookie(default=None),
) -> ListAdminsResponse:
    """List every admin account."""
    return await list_admins_use_case.execute(
        ListAdminsRequest(admin_token=admin_token)
    )


@router.post(
    "/accounts", response_model=AdminView, status_code=status.HTTP_201_CREATED
)
async def create_admin(
    request: CreateAdminAPIRequest,
    create_admin_use_case: FromDishka[CreateAdminUseCase],
    admin_token: str | None = Cookie(default=None),
) -> AdminView:
    """Register a new admin."""
    return await create_admin_use_case.execute(
        CreateAdminRequest(admin_token=admin_token, **request.model_dump())
    )


@router.delete("/accounts/{admin_id}", response_model=RemoveAdminResponse)
async def remove_admin(
    admin_id: str,
    remove_admin_use_case: FromDishka[RemoveAdminUseCase],
    admin_token: str | None = Cookie(default=None),
) -> RemoveAdminResponse:
    """Remove another admin. Admins cannot remove themselves."""
    return await remove_admin_use_case.execute(
        RemoveAdminRequest(admin_token=admin_token, admin_id=admin_id)
    )


@router.put("/accounts/{admin_id}/password", response_model=AdminView)
async def change_password(
    admin_id: str,
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    admin_token: str | None = Cookie(default=None),
) -> AdminView:
    """Change an admin's own password."""
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            admin_token=admin_token,
            admin_id=admin_id,
            new_password=request.new_password,
        )
    )
