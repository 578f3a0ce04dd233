"""Request/response schemas for registration, login and the /me endpoints."""

from app.schemas.base import CamelModel, RequestModel
from app.schemas.user import UserOut


class RegisterRequest(RequestModel):
    """Registration body. Missing fields are reported as 400 by the handler."""

    email: str | None = None
    password: str | None = None
    full_name: str | None = None


class LoginRequest(RequestModel):
    """Credentials for login."""

    email: str | None = None
    password: str | None = None


class AuthResponse(CamelModel):
    """Bearer token plus the account it was issued for."""

    ok: bool = True
    token: str
    user: UserOut


class IdentityOut(CamelModel):
    """Identity as carried by the token (id, email)."""

    id: int
    email: str


class MeResponse(CamelModel):
    ok: bool = True
    user: IdentityOut


class UpdateSelfRequest(RequestModel):
    """Self-service update; only the display name can change."""

    full_name: str | None = None
