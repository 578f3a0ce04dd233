"""Configuration, database session, error taxonomy and credential primitives."""

from app.core.config import AuthConfig, get_auth_config, get_settings, settings
from app.core.database import get_db, session_scope
from app.core.errors import AppError, InvalidTokenError
from app.core.security import TokenCodec, TokenIdentity, hash_password, verify_password

__all__ = [
    "AppError",
    "AuthConfig",
    "InvalidTokenError",
    "TokenCodec",
    "TokenIdentity",
    "get_auth_config",
    "get_db",
    "get_settings",
    "hash_password",
    "session_scope",
    "settings",
    "verify_password",
]
