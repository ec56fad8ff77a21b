"""ORM model for tool categories."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ittools.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)

    tools = relationship("Tool", back_populates="category", order_by="Tool.id")
