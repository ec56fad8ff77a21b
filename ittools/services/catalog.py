"""Catalog store: categories, tools, and the admin operations on them."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ittools.core.errors import ConflictError, NotFoundError, RequestValidationFailed
from ittools.models import Category, Favorite, Tool
from ittools.schemas.catalog import CategoryWithTools, ToolCreate, ToolOut
from ittools.widgets import manifest, tool_identifier

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.id).all()


def list_active_tools(db: Session) -> list[Tool]:
    """Active tools ordered by category then id (the order the catalog shows them in)."""
    return (
        db.query(Tool)
        .filter(Tool.is_active.is_(True))
        .order_by(Tool.category_id, Tool.id)
        .all()
    )


def list_categories_with_tools(
    db: Session,
    include_inactive: bool = False,
) -> list[CategoryWithTools]:
    """
    Return every category with its tools. Inactive tools are filtered in the
    query unless include_inactive is set (admin view).
    """
    categories = list_categories(db)
    query = db.query(Tool)
    if not include_inactive:
        query = query.filter(Tool.is_active.is_(True))
    tools = query.order_by(Tool.id).all()

    by_category: dict[int, list[ToolOut]] = {c.id: [] for c in categories}
    for tool in tools:
        by_category.setdefault(tool.category_id, []).append(ToolOut.model_validate(tool))
    return [
        CategoryWithTools(id=c.id, name=c.name, tools=by_category[c.id])
        for c in categories
    ]


def get_tool(db: Session, tool_id: int) -> Tool:
    tool = db.get(Tool, tool_id)
    if tool is None:
        raise NotFoundError("Tool not found")
    return tool


def get_tool_by_name(db: Session, name: str) -> Tool:
    """Case-insensitive lookup by display name."""
    tool = (
        db.query(Tool)
        .filter(func.lower(Tool.name) == name.strip().lower())
        .order_by(Tool.id)
        .first()
    )
    if tool is None:
        raise NotFoundError("Tool not found")
    return tool


def _toggle(db: Session, tool_id: int, attr: str) -> Tool:
    tool = get_tool(db, tool_id)
    setattr(tool, attr, not getattr(tool, attr))
    db.commit()
    db.refresh(tool)
    logger.info(
        "Tool flag toggled",
        extra={"tool_id": tool.id, "flag": attr, "value": getattr(tool, attr)},
    )
    return tool


def toggle_premium(db: Session, tool_id: int) -> Tool:
    return _toggle(db, tool_id, "is_premium")


def toggle_active(db: Session, tool_id: int) -> Tool:
    return _toggle(db, tool_id, "is_active")


def add_tool(db: Session, body: ToolCreate) -> Tool:
    """
    Add a catalog entry. The tool's identifier must resolve to a registered
    widget handler so the catalog never offers a tool nothing can serve.
    """
    identifier = tool_identifier(body.name)
    if manifest.resolve(identifier) is None:
        raise RequestValidationFailed(f"No widget handler registered for '{identifier}'")
    if db.get(Category, body.category_id) is None:
        raise NotFoundError("Category not found")
    if db.query(Tool).filter(Tool.route_path == body.route_path).first() is not None:
        raise ConflictError("A tool with this route_path already exists")

    tool = Tool(
        name=body.name,
        category_id=body.category_id,
        description=body.description,
        route_path=body.route_path,
        is_premium=body.is_premium,
        is_active=True,
        icon=body.icon,
    )
    db.add(tool)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("A tool with this route_path already exists") from e
    db.refresh(tool)
    logger.info("Tool added", extra={"tool_id": tool.id, "identifier": identifier})
    return tool


def delete_tool(db: Session, tool_id: int) -> None:
    """Delete a tool and every favorite that references it, in one transaction."""
    tool = get_tool(db, tool_id)
    removed = (
        db.query(Favorite)
        .filter(Favorite.tool_id == tool.id)
        .delete(synchronize_session=False)
    )
    db.delete(tool)
    db.commit()
    logger.info("Tool deleted", extra={"tool_id": tool_id, "favorites_removed": removed})
