"""Pydantic schemas for composed client routes and widget runs."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class RouteEntry(BaseModel):
    """
    One navigable client route for an active tool.

    available is False when no widget handler is registered for the tool's
    identifier; the client renders a "tool unavailable" placeholder for it.
    access is the Access Gate outcome for the requesting viewer.
    """

    tool_id: int
    name: str
    path: str
    identifier: str
    is_premium: bool
    available: bool
    access: Literal["allowed", "blocked"]


class ToolRunRequest(BaseModel):
    params: dict[str, Any] = Field(default_factory=dict)


class ToolRunResponse(BaseModel):
    tool_id: int
    identifier: str
    result: dict[str, Any]
