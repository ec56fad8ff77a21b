"""Composed client routes and gated widget execution."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ittools.api.auth import get_optional_user
from ittools.core.database import get_db
from ittools.core.errors import ForbiddenError, NotFoundError, RequestValidationFailed
from ittools.schemas.auth import CurrentUser
from ittools.schemas.routes import RouteEntry, ToolRunRequest, ToolRunResponse
from ittools.services import catalog
from ittools.services.access_gate import AccessDecision, decide_access
from ittools.services.route_composer import compose_routes
from ittools.widgets import WidgetInputError, manifest, tool_identifier

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/routes", response_model=list[RouteEntry])
def get_routes(
    db: Annotated[Session, Depends(get_db)],
    viewer: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> list[RouteEntry]:
    """
    Return one route per active tool, gated for the requesting viewer.

    Premium tools the viewer cannot open are returned with access="blocked"
    so the client renders them disabled. If the catalog cannot be read the
    response is an empty list rather than an error, so the shell still renders.
    """
    try:
        tools = catalog.list_active_tools(db)
    except SQLAlchemyError:
        logger.exception("Catalog fetch failed; composing no tool routes")
        db.rollback()
        return []
    return compose_routes(tools, viewer)


@router.post("/tools/{tool_id}/run", response_model=ToolRunResponse)
def run_tool(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
    viewer: Annotated[CurrentUser | None, Depends(get_optional_user)],
    body: Annotated[ToolRunRequest | None, Body()] = None,
) -> ToolRunResponse:
    """
    Execute a tool's widget with the given params.

    Inactive tools are reported as missing (404). Premium tools require a
    premium viewer (403). A tool with no registered widget is 404 "Tool unavailable".
    """
    tool = catalog.get_tool(db, tool_id)
    decision = decide_access(viewer, is_premium=tool.is_premium, is_active=tool.is_active)
    if decision is AccessDecision.HIDDEN:
        raise NotFoundError("Tool not found")
    if decision is AccessDecision.BLOCKED:
        raise ForbiddenError("Premium access required")

    identifier = tool_identifier(tool.name)
    handler = manifest.resolve(identifier)
    if handler is None:
        logger.warning("No widget handler for tool", extra={"tool_id": tool.id, "identifier": identifier})
        raise NotFoundError("Tool unavailable")

    params = body.params if body is not None else {}
    try:
        result = handler.run(params)
    except WidgetInputError as e:
        raise RequestValidationFailed(str(e)) from e
    return ToolRunResponse(tool_id=tool.id, identifier=handler.identifier, result=result)
