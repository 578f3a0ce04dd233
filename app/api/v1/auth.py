"""Registration, login and the auth dependencies (get_current_identity, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, status
from sqlalchemy.orm import Session

from app.core.config import AuthConfig, get_auth_config
from app.core.database import get_db
from app.core.errors import AuthenticationError, AuthorizationError, InvalidTokenError
from app.core.roles import is_admin
from app.core.security import TokenCodec, TokenIdentity
from app.models import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserOut
from app.services.accounts import authenticate, register_user
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter()

# Only this exact prefix is accepted; "bearer x" or "Basic x" count as no token.
BEARER_PREFIX = "Bearer "


def get_token_codec(
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> TokenCodec:
    return TokenCodec(config)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_current_identity(
    request: Request,
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenIdentity:
    """
    Dependency: require a valid Bearer token and return the identity it carries.

    Trusts the token alone and never reads the users table, so an account
    deleted after issuance still authenticates here. Raises 401 if the header
    is missing, uses another scheme, or the token fails verification.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("unauthorized")
    token = authorization[len(BEARER_PREFIX):]
    if not token:
        raise AuthenticationError("unauthorized")
    try:
        identity = codec.verify(token)
    except InvalidTokenError as e:
        logger.warning(
            "Rejected bearer token on %s %s: %s",
            request.method,
            request.url.path,
            e.reason,
        )
        raise AuthenticationError("invalid token") from e
    request.state.identity = identity
    return identity


def require_admin(
    request: Request,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
) -> User:
    """
    Dependency: require an authenticated admin and return their current User row.

    401 if the account behind the token no longer exists, 403 if it is not an admin.
    Handlers see the stored role and plan, not the token claims.
    """
    user = store.find_by_id(identity.id)
    if user is None:
        logger.warning("Token for missing user id=%s", identity.id)
        raise AuthenticationError("user not found")
    if not is_admin(user.role, user.email, config):
        logger.warning("Admin access denied for user id=%s role=%s", user.id, user.role)
        raise AuthorizationError("forbidden")
    request.state.user = user
    return user


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    store: Annotated[UserStore, Depends(get_user_store)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    body: RegisterRequest = RegisterRequest(),
) -> AuthResponse:
    """
    Create an account and return a bearer token for it.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = register_user(store, config, body.email, body.password, body.full_name)
    return AuthResponse(token=codec.issue(user), user=UserOut.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    store: Annotated[UserStore, Depends(get_user_store)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    body: LoginRequest = LoginRequest(),
) -> AuthResponse:
    """Authenticate with email and password; returns a fresh bearer token."""
    user = authenticate(store, body.email, body.password)
    return AuthResponse(token=codec.issue(user), user=UserOut.model_validate(user))
