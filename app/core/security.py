"""Password hashing and JWT issuance/verification for authentication."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.config import AuthConfig
from app.core.errors import HashingError, InvalidTokenError

# Default bcrypt cost; AuthConfig.bcrypt_rounds overrides it at the call sites.
BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

# Claims every token must carry; PyJWT rejects tokens missing any of them.
REQUIRED_CLAIMS = ["exp", "iat", "userId", "email"]


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Every call uses a fresh salt."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")
    except (ValueError, TypeError) as e:
        raise HashingError("failed to hash password") from e


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenIdentity(BaseModel):
    """Identity carried by a bearer token."""

    id: int
    email: str


class TokenCodec:
    """
    Signs and verifies the stateless bearer tokens.

    Payload: userId, email, iat, exp (iat + token_ttl_days) and a random jti so
    that two tokens issued for the same user in the same second still differ.
    There is no revocation list; a verified, unexpired token is always honored.
    """

    def __init__(self, config: AuthConfig) -> None:
        self._secret = config.jwt_secret.get_secret_value()
        self._algorithm = config.jwt_algorithm
        self._ttl = timedelta(days=config.token_ttl_days)

    def issue(self, identity: Any, now: datetime | None = None) -> str:
        """Create a token for anything exposing ``id`` and ``email``."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "userId": identity.id,
            "email": identity.email,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode and validate a token; return the identity it carries.
        Raises InvalidTokenError on bad signature, malformed payload or expiry.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("expired") from e
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError("bad_signature") from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError("malformed") from e

        user_id = payload.get("userId")
        # bool is an int subclass; a boolean id is not a user id.
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise InvalidTokenError("malformed")
        try:
            return TokenIdentity(id=user_id, email=payload["email"])
        except PydanticValidationError as e:
            raise InvalidTokenError("malformed") from e
