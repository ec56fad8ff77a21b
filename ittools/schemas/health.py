"""Health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running process")
    database: Literal["connected", "disconnected"]
    widgets_registered: int = Field(description="Number of widget handlers in the manifest")
