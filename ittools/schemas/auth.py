"""Request/response schemas for signup, login and the current user."""

from pydantic import BaseModel, Field, field_validator


class SignupRequest(BaseModel):
    """Credentials for a new account."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=8, max_length=128, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must be non-empty")
        return v


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must be non-empty")
        return v


class UserOut(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    is_premium: bool
    is_admin: bool


class LoginResponse(BaseModel):
    """User record plus a bearer token valid for JWT_EXPIRE_MINUTES."""

    user: UserOut
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Authenticated viewer resolved from a bearer token and the users table."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    is_premium: bool = False
    is_admin: bool = False
