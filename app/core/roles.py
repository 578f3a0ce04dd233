"""Role policy: who counts as an admin, and which role a new account starts with."""

from app.core.config import AuthConfig
from app.core.errors import ValidationError

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super_admin"
ROLE_VIEWER = "viewer"

ALLOWED_ROLES = (ROLE_SUPER_ADMIN, ROLE_ADMIN, ROLE_VIEWER, ROLE_USER)
ADMIN_ROLES = frozenset({ROLE_ADMIN, ROLE_SUPER_ADMIN})

DEFAULT_PLAN = "free"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def effective_role(role: str | None) -> str:
    """A NULL role is treated as a plain user."""
    return role or ROLE_USER


def is_bootstrap_admin(email: str | None, config: AuthConfig) -> bool:
    if not email:
        return False
    return normalize_email(email) == config.bootstrap_admin_email


def is_admin(role: str | None, email: str | None, config: AuthConfig) -> bool:
    """
    True for admin and super_admin roles.

    The bootstrap admin email passes regardless of its stored role while
    config.bootstrap_admin_override is on, so a corrupted role column can
    never lock every administrator out.
    """
    if effective_role(role) in ADMIN_ROLES:
        return True
    return config.bootstrap_admin_override and is_bootstrap_admin(email, config)


def validate_role(role: str) -> str:
    """Return role if it is one of ALLOWED_ROLES; raise ValidationError otherwise."""
    if role not in ALLOWED_ROLES:
        raise ValidationError("invalid role")
    return role


def role_for_new_user(
    email: str, requested_role: str | None, config: AuthConfig
) -> str:
    """The bootstrap email is always created as super_admin; otherwise the requested role or user."""
    if is_bootstrap_admin(email, config):
        return ROLE_SUPER_ADMIN
    if requested_role:
        return validate_role(requested_role)
    return ROLE_USER
