"""ORM model for the user <-> tool favorites relation."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, func

from ittools.models.base import Base


class Favorite(Base):
    __tablename__ = "favorites"

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tool_id = Column(
        Integer,
        ForeignKey("tools.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
