"""Pydantic schemas for categories and tools."""

from pydantic import BaseModel, Field, field_validator


class ToolOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    category_id: int
    description: str
    route_path: str
    is_premium: bool
    is_active: bool
    icon: str | None = None


class CategoryOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str


class CategoryWithTools(CategoryOut):
    tools: list[ToolOut] = Field(default_factory=list)


class ToolDetails(BaseModel):
    """Name and description shown in a tool page header."""

    model_config = {"from_attributes": True}

    name: str
    description: str


class ToolStatus(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    is_active: bool
    is_premium: bool


class ToolCreate(BaseModel):
    """Admin request to add a catalog entry for an existing widget handler."""

    name: str = Field(..., min_length=1, max_length=255)
    category_id: int
    description: str = Field(..., min_length=1)
    route_path: str = Field(..., min_length=2, max_length=255)
    is_premium: bool = False
    icon: str | None = Field(default=None, max_length=255)

    @field_validator("name", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be non-empty")
        return v

    @field_validator("route_path")
    @classmethod
    def validate_route_path(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith("/") or any(c.isspace() for c in v):
            raise ValueError("route_path must start with '/' and contain no whitespace")
        return v


class MessageResponse(BaseModel):
    message: str
