"""Schemas for user records and the admin user-management endpoints."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel, RequestModel


class UserOut(CamelModel):
    """Public view of a user. password_hash is deliberately absent."""

    id: int
    email: str
    full_name: str | None = None
    role: str | None = None
    plan: str | None = None
    created_at: datetime | None = None


class UserResponse(CamelModel):
    ok: bool = True
    user: UserOut


class UsersListResponse(CamelModel):
    """Response for GET /admin/users."""

    ok: bool = True
    users: list[UserOut]


class AdminCreateUserRequest(RequestModel):
    email: str | None = None
    full_name: str | None = None
    plan: str | None = None
    role: str | None = None
    password: str | None = None


class AdminCreateUserResponse(CamelModel):
    """initial_password is only present when the server generated the password."""

    ok: bool = True
    user: UserOut
    initial_password: str | None = Field(default=None)


class AdminUpdateUserRequest(RequestModel):
    """Every field is optional; absent (or null) fields are left untouched."""

    email: str | None = None
    full_name: str | None = None
    plan: str | None = None
    role: str | None = None
    password: str | None = None
