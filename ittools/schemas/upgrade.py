"""Pydantic schemas for premium upgrade requests."""

from datetime import datetime

from pydantic import BaseModel


class UpgradeRequestItem(BaseModel):
    """Pending request as listed for admins."""

    user_id: int
    username: str
    status: str
    created_at: datetime | None = None
