"""SQLAlchemy ORM models."""

from ittools.models.base import Base
from ittools.models.category import Category
from ittools.models.favorite import Favorite
from ittools.models.tool import Tool
from ittools.models.upgrade_request import UpgradeRequest
from ittools.models.user import User

__all__ = ["Base", "Category", "Favorite", "Tool", "UpgradeRequest", "User"]
