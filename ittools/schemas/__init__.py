"""Pydantic request/response schemas."""

from ittools.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserOut,
)
from ittools.schemas.catalog import (
    CategoryOut,
    CategoryWithTools,
    MessageResponse,
    ToolCreate,
    ToolDetails,
    ToolOut,
    ToolStatus,
)
from ittools.schemas.health import HealthResponse
from ittools.schemas.routes import RouteEntry, ToolRunRequest, ToolRunResponse
from ittools.schemas.upgrade import UpgradeRequestItem

__all__ = [
    "CategoryOut",
    "CategoryWithTools",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RouteEntry",
    "SignupRequest",
    "ToolCreate",
    "ToolDetails",
    "ToolOut",
    "ToolRunRequest",
    "ToolRunResponse",
    "ToolStatus",
    "UpgradeRequestItem",
    "UserOut",
]
