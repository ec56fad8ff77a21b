"""Signup, login and auth dependencies (get_current_user, get_optional_user, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ittools.core.database import get_db
from ittools.core.errors import AuthError, ForbiddenError, InvalidTokenError
from ittools.core.security import create_access_token, verify_token
from ittools.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserOut,
)
from ittools.services import users

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


def _token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials is not None else None


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the current user. Raises 401 otherwise."""
    try:
        identity = verify_token(_token(credentials))
    except AuthError as e:
        logger.info("Rejected bearer token: %s", type(e).__name__)
        raise
    user = users.get_user(db, identity.id)
    if user is None:
        raise InvalidTokenError("User not found")
    return CurrentUser.model_validate(user)


def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser | None:
    """
    Dependency: resolve the viewer if a usable token was sent, else None (anonymous).

    Never raises: a missing, invalid or expired token, a deleted user, or a
    failed user lookup all degrade to an anonymous viewer. Premium checks
    then fail closed.
    """
    token = _token(credentials)
    if token is None:
        return None
    try:
        identity = verify_token(token)
    except AuthError as e:
        logger.info("Treating request as anonymous: %s", type(e).__name__)
        return None
    try:
        user = users.get_user(db, identity.id)
    except SQLAlchemyError:
        logger.exception("User lookup failed; treating request as anonymous")
        db.rollback()
        return None
    return CurrentUser.model_validate(user) if user is not None else None


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with is_admin. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise ForbiddenError("Admin access required")
    return current_user


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    """Create an account. New users are neither premium nor admin."""
    user = users.create_user(db, body.username, body.password)
    return UserOut.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns the user and a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = users.authenticate(db, body.username, body.password)
    if user is None:
        raise AuthError("Invalid username or password")
    token = create_access_token(user.id, user.username)
    return LoginResponse(user=UserOut.model_validate(user), token=token)


@router.get("/user", response_model=UserOut)
def get_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserOut:
    """Return the profile of the token's user, including premium and admin flags."""
    return UserOut(**current_user.model_dump())
