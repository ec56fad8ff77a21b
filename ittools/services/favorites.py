"""Favorites store: the user <-> tool relation. Add and remove are idempotent."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ittools.core.errors import NotFoundError
from ittools.models import Favorite, Tool

logger = logging.getLogger(__name__)


def list_favorites(db: Session, user_id: int) -> list[Tool]:
    return (
        db.query(Tool)
        .join(Favorite, Favorite.tool_id == Tool.id)
        .filter(Favorite.user_id == user_id)
        .order_by(Tool.id)
        .all()
    )


def add_favorite(db: Session, user_id: int, tool_id: int) -> bool:
    """Favorite a tool. Returns False when the pair already existed (no-op)."""
    if db.get(Tool, tool_id) is None:
        raise NotFoundError("Tool not found")
    if db.get(Favorite, (user_id, tool_id)) is not None:
        return False
    db.add(Favorite(user_id=user_id, tool_id=tool_id))
    try:
        db.commit()
    except IntegrityError:
        # Concurrent add of the same pair; the primary key kept a single row.
        db.rollback()
        return False
    logger.info("Favorite added", extra={"user_id": user_id, "tool_id": tool_id})
    return True


def remove_favorite(db: Session, user_id: int, tool_id: int) -> bool:
    """Unfavorite a tool. Returns False when it was not a favorite (no-op)."""
    deleted = (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.tool_id == tool_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0
