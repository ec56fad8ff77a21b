"""ORM model for application users (credentials and capability flags)."""

from sqlalchemy import Boolean, Column, Integer, String, false

from ittools.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    is_premium is only flipped by an approved upgrade request; is_admin is set
    when the account is created (see ittools.scripts.create_user).
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    is_premium = Column(Boolean, nullable=False, default=False, server_default=false())
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
