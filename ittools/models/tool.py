"""ORM model for catalog tools."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, false, true
from sqlalchemy.orm import relationship

from ittools.models.base import Base


class Tool(Base):
    """
    One catalog entry backed by a widget handler.

    route_path is unique and stable. is_active hides the tool from the catalog
    without deleting it; is_premium restricts it to premium users.
    """

    __tablename__ = "tools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False, default="")
    route_path = Column(String(255), nullable=False, unique=True)
    is_premium = Column(Boolean, nullable=False, default=False, server_default=false())
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    icon = Column(String(255), nullable=True)

    category = relationship("Category", back_populates="tools")
