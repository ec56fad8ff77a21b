"""Base TestCase for API tests: in-memory SQLite, get_db overridden, TestClient."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ittools.core.database import get_db
from ittools.core.security import create_access_token
from ittools.main import app
from ittools.models import Base, Category, Tool, User
from ittools.services.users import create_user

DEFAULT_PASSWORD = "correct-horse-battery"


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        # Cleanups run last-in-first-out, so sessions from session() close before these.
        self.addCleanup(self.engine.dispose)
        self.addCleanup(Base.metadata.drop_all, self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def session(self) -> Session:
        db = self.SessionLocal()
        self.addCleanup(db.close)
        return db

    def make_user(
        self,
        username: str,
        password: str = DEFAULT_PASSWORD,
        *,
        is_premium: bool = False,
        is_admin: bool = False,
    ) -> User:
        return create_user(self.session(), username, password, is_premium=is_premium, is_admin=is_admin)

    def make_category(self, name: str = "Converter") -> Category:
        db = self.session()
        category = Category(name=name)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category

    def make_tool(
        self,
        name: str,
        route_path: str,
        category: Category,
        *,
        is_premium: bool = False,
        is_active: bool = True,
    ) -> Tool:
        db = self.session()
        tool = Tool(
            name=name,
            category_id=category.id,
            description=f"{name} description",
            route_path=route_path,
            is_premium=is_premium,
            is_active=is_active,
        )
        db.add(tool)
        db.commit()
        db.refresh(tool)
        return tool

    def token_for(self, user: User) -> str:
        return create_access_token(user.id, user.username)

    def auth(self, user_or_token: "User | str") -> dict[str, str]:
        token = user_or_token if isinstance(user_or_token, str) else self.token_for(user_or_token)
        return {"Authorization": f"Bearer {token}"}

    def admin_headers(self) -> dict[str, str]:
        return self.auth(self.make_user("root-admin", is_admin=True))
