"""Core app configuration and database."""

from ittools.core.config import get_settings, settings
from ittools.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
