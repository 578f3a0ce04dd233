"""Account operations: registration, password login and admin-created users."""

import logging
import secrets
from dataclasses import dataclass

from app.core.config import AuthConfig
from app.core.errors import AuthenticationError, ConflictError, ValidationError
from app.core.roles import DEFAULT_PLAN, normalize_email, role_for_new_user
from app.core.security import hash_password, verify_password
from app.models import User
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password.
INVALID_CREDENTIALS = "invalid email or password"

# Bytes of entropy in a generated initial password (16 url-safe characters).
INITIAL_PASSWORD_BYTES = 12


@dataclass(frozen=True)
class CreatedUser:
    """Result of an admin create: generated_password is set only when none was supplied."""

    user: User
    generated_password: str | None = None


def clean_text(value: str | None) -> str | None:
    """Trim a free-text field; empty becomes None."""
    if value is None:
        return None
    return value.strip() or None


def register_user(
    store: UserStore,
    config: AuthConfig,
    email: str | None,
    password: str | None,
    full_name: str | None = None,
) -> User:
    """
    Self-registration. New accounts get role 'user' and plan 'free', except the
    bootstrap admin email which always becomes 'super_admin'.
    """
    email = normalize_email(email or "")
    if not email or not password:
        raise ValidationError("email and password are required")
    if store.find_by_email(email) is not None:
        raise ConflictError("email already registered")
    role = role_for_new_user(email, None, config)
    user = store.insert(
        email=email,
        password_hash=hash_password(password, rounds=config.bcrypt_rounds),
        full_name=clean_text(full_name),
        role=role,
        plan=DEFAULT_PLAN,
    )
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate(store: UserStore, email: str | None, password: str | None) -> User:
    """Return the user for valid credentials; raise AuthenticationError otherwise."""
    email = normalize_email(email or "")
    if not email or not password:
        raise ValidationError("email and password are required")
    user = store.find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Login failed for email=%s", email)
        raise AuthenticationError(INVALID_CREDENTIALS)
    logger.info("Login succeeded for user id=%s", user.id)
    return user


def create_user_as_admin(
    store: UserStore,
    config: AuthConfig,
    email: str | None,
    full_name: str | None = None,
    plan: str | None = None,
    role: str | None = None,
    password: str | None = None,
) -> CreatedUser:
    """Admin create. Without a password, a random one is generated and returned once."""
    email = normalize_email(email or "")
    if not email:
        raise ValidationError("email is required")
    final_role = role_for_new_user(email, clean_text(role), config)
    if store.find_by_email(email) is not None:
        raise ConflictError("email already exists")
    generated = None
    if not password:
        generated = secrets.token_urlsafe(INITIAL_PASSWORD_BYTES)
    user = store.insert(
        email=email,
        password_hash=hash_password(password or generated, rounds=config.bcrypt_rounds),
        full_name=clean_text(full_name),
        role=final_role,
        plan=clean_text(plan) or DEFAULT_PLAN,
        conflict_message="email already exists",
    )
    return CreatedUser(user=user, generated_password=generated)
