"""Catalog endpoints: categories and tools, plus admin toggles, add and delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ittools.api.auth import get_optional_user, require_admin
from ittools.core.database import get_db
from ittools.core.errors import ForbiddenError, RequestValidationFailed
from ittools.schemas.auth import CurrentUser
from ittools.schemas.catalog import (
    CategoryOut,
    CategoryWithTools,
    MessageResponse,
    ToolCreate,
    ToolDetails,
    ToolOut,
    ToolStatus,
)
from ittools.services import catalog

router = APIRouter()


@router.get("/categories-with-tools", response_model=list[CategoryWithTools])
def get_categories_with_tools(
    db: Annotated[Session, Depends(get_db)],
    viewer: Annotated[CurrentUser | None, Depends(get_optional_user)],
    include_inactive: Annotated[bool, Query()] = False,
) -> list[CategoryWithTools]:
    """
    Return every category with its active tools.

    include_inactive=true also returns deactivated tools; it is reserved for
    admins (the admin page toggles them back on).
    """
    if include_inactive and (viewer is None or not viewer.is_admin):
        raise ForbiddenError("Admin access required to list inactive tools")
    return catalog.list_categories_with_tools(db, include_inactive=include_inactive)


@router.get("/categories", response_model=list[CategoryOut])
def get_categories(db: Annotated[Session, Depends(get_db)]) -> list[CategoryOut]:
    return [CategoryOut.model_validate(c) for c in catalog.list_categories(db)]


@router.get("/tool-details", response_model=ToolDetails)
def get_tool_details(
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query()] = None,
) -> ToolDetails:
    """Name and description for a tool page header, looked up case-insensitively by name."""
    if not name or not name.strip():
        raise RequestValidationFailed("Tool name is required")
    return ToolDetails.model_validate(catalog.get_tool_by_name(db, name))


@router.get("/tools/{tool_id}", response_model=ToolStatus)
def get_tool_status(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ToolStatus:
    return ToolStatus.model_validate(catalog.get_tool(db, tool_id))


@router.post("/add-tool", response_model=ToolOut, status_code=status.HTTP_201_CREATED)
def add_tool(
    body: ToolCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ToolOut:
    """
    Add a catalog entry (admin only). The name must map to a registered widget
    handler; unknown names are rejected with 400 instead of becoming dead routes.
    """
    return ToolOut.model_validate(catalog.add_tool(db, body))


@router.patch("/tools/{tool_id}/toggle-is_premium", response_model=ToolOut)
def toggle_is_premium(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ToolOut:
    return ToolOut.model_validate(catalog.toggle_premium(db, tool_id))


@router.patch("/tools/{tool_id}/toggle-is_active", response_model=ToolOut)
def toggle_is_active(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> ToolOut:
    return ToolOut.model_validate(catalog.toggle_active(db, tool_id))


@router.delete("/delete-tool/{tool_id}", response_model=MessageResponse)
def delete_tool(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Delete a tool (admin only). Favorites referencing it are removed with it."""
    catalog.delete_tool(db, tool_id)
    return MessageResponse(message="Tool deleted successfully")
