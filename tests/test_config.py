"""Tests for Settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from ittools.core.config import Settings


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings(unittest.TestCase):
    def test_accepts_postgres_and_sqlite_urls(self) -> None:
        for url in ("postgresql://u:p@db:5432/ittools", "postgresql+psycopg2://db/x", "sqlite://"):
            with self.subTest(url=url):
                self.assertEqual(make_settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_rejects_other_database_urls(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://db/x")

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(make_settings(LOG_LEVEL=" debug ").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            make_settings(LOG_LEVEL="LOUD")

    def test_api_prefix(self) -> None:
        self.assertEqual(make_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            make_settings(API_PREFIX="api")

    def test_jwt_settings(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET=" ")
        with self.assertRaises(ValidationError):
            make_settings(JWT_EXPIRE_MINUTES=0)

    def test_jwt_secret_has_no_builtin_default(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "JWT_SECRET"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValidationError):
                make_settings(APP_ENV="prod")
            self.assertEqual(
                make_settings(JWT_SECRET="from-the-deployment").JWT_SECRET.get_secret_value(),
                "from-the-deployment",
            )

    def test_bcrypt_rounds_range(self) -> None:
        self.assertEqual(make_settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            make_settings(BCRYPT_ROUNDS=3)

    def test_cors_origins(self) -> None:
        self.assertEqual(make_settings(APP_ENV="dev").cors_origins, ["*"])
        prod = make_settings(APP_ENV="prod", CORS_ORIGINS="https://a.example, https://b.example,")
        self.assertEqual(prod.cors_origins, ["https://a.example", "https://b.example"])


if __name__ == "__main__":
    unittest.main()
