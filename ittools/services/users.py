"""User accounts: creation, credential checks and lookup."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ittools.core.errors import ConflictError, RequestValidationFailed
from ittools.core.security import hash_password, verify_password
from ittools.models import User

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    username: str,
    password: str,
    *,
    is_premium: bool = False,
    is_admin: bool = False,
) -> User:
    """Create a user with a bcrypt-hashed password. Raises ConflictError if the username is taken."""
    username = username.strip()
    if not username:
        raise RequestValidationFailed("Username is required")
    if db.query(User).filter(User.username == username).first() is not None:
        raise ConflictError("Username already exists")
    user = User(
        username=username,
        password_hash=hash_password(password),
        is_premium=is_premium,
        is_admin=is_admin,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same name.
        db.rollback()
        raise ConflictError("Username already exists") from e
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "is_admin": is_admin})
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the user when username and password match, else None."""
    user = db.query(User).filter(User.username == username.strip()).first()
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)
