"""ORM model for pending premium upgrade requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from ittools.models.base import Base

STATUS_PENDING = "pending"


class UpgradeRequest(Base):
    """
    A user's pending request to become premium.

    user_id is unique: at most one pending request per user. Resolving a
    request (approve or reject) deletes the row.
    """

    __tablename__ = "upgrade_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    status = Column(String(32), nullable=False, default=STATUS_PENDING, server_default=STATUS_PENDING)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
