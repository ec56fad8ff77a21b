"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import BaseModel

from ittools.core.config import settings
from ittools.core.errors import ExpiredTokenError, InvalidTokenError, MissingTokenError

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


class TokenIdentity(BaseModel):
    """Identity carried by a verified access token."""

    id: int
    username: str


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with id, username, iat and exp."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "id": user_id,
        "username": username,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (id, username, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp"]},
    )


def verify_token(token: str | None) -> TokenIdentity:
    """
    Verify a bearer token and return the identity it asserts.

    Raises MissingTokenError when no token is given, ExpiredTokenError when the
    signature is valid but the token is past its exp, and InvalidTokenError for
    anything else (bad signature, malformed token, missing id claim).
    """
    if not token or not token.strip():
        raise MissingTokenError()
    try:
        payload = decode_access_token(token.strip())
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    user_id = payload.get("id")
    username = payload.get("username")
    if isinstance(user_id, bool) or not isinstance(user_id, int) or not isinstance(username, str):
        raise InvalidTokenError("Invalid token payload")
    return TokenIdentity(id=user_id, username=username)
