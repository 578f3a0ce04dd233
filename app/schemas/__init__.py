"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    IdentityOut,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UpdateSelfRequest,
)
from app.schemas.base import CamelModel, OkResponse, RequestModel
from app.schemas.health import HealthResponse
from app.schemas.resume import ResumeIn, ResumeOut, ResumeResponse, ResumesListResponse
from app.schemas.user import (
    AdminCreateUserRequest,
    AdminCreateUserResponse,
    AdminUpdateUserRequest,
    UserOut,
    UserResponse,
    UsersListResponse,
)

__all__ = [
    "AdminCreateUserRequest",
    "AdminCreateUserResponse",
    "AdminUpdateUserRequest",
    "AuthResponse",
    "CamelModel",
    "HealthResponse",
    "IdentityOut",
    "LoginRequest",
    "MeResponse",
    "OkResponse",
    "RequestModel",
    "RegisterRequest",
    "ResumeIn",
    "ResumeOut",
    "ResumeResponse",
    "ResumesListResponse",
    "UpdateSelfRequest",
    "UserOut",
    "UserResponse",
    "UsersListResponse",
]
