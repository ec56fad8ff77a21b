"""API behavior when the store is unreachable: generic 500, empty routes, anonymous viewer."""

import unittest
from unittest.mock import patch

from api_case import ApiTestCase
from sqlalchemy.exc import OperationalError


def _store_down(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("could not connect to server"))


class TestStoreFailures(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        category = self.make_category("Crypto")
        self.premium_tool = self.make_tool("Token Generator", "/token-generator", category, is_premium=True)

    def test_store_error_is_generic_500(self) -> None:
        with patch("ittools.services.catalog.list_categories", side_effect=_store_down):
            resp = self.client.get("/api/categories")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Internal server error"})
        self.assertNotIn("could not connect", resp.text)

    def test_routes_fall_back_to_empty_list(self) -> None:
        with patch("ittools.services.catalog.list_active_tools", side_effect=_store_down):
            resp = self.client.get("/api/routes")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_failed_viewer_lookup_is_anonymous(self) -> None:
        headers = self.auth(self.make_user("paid-user", is_premium=True))
        with patch("ittools.services.users.get_user", side_effect=_store_down):
            routes = self.client.get("/api/routes", headers=headers).json()
            run = self.client.post(f"/api/tools/{self.premium_tool.id}/run", headers=headers)
        self.assertEqual([r["access"] for r in routes], ["blocked"])
        self.assertEqual(run.status_code, 403)


if __name__ == "__main__":
    unittest.main()
