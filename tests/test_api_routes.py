"""API tests for composed routes, gated tool execution, upgrade requests and health."""

import unittest

from api_case import DEFAULT_PASSWORD, ApiTestCase

from ittools.models import UpgradeRequest, User


class CatalogFixture(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        converter = self.make_category("Converter")
        crypto = self.make_category("Crypto")
        self.roman = self.make_tool("Roman Numeral Converter", "/roman-numeral-converter", converter)
        self.token_gen = self.make_tool("Token Generator", "/token-generator", crypto, is_premium=True)
        self.retired = self.make_tool("Temperature Converter", "/temperature-converter", converter, is_active=False)
        self.unmapped = self.make_tool("Crontab Generator", "/crontab-generator", converter)


class TestRoutes(CatalogFixture):
    def routes(self, headers: dict[str, str] | None = None) -> dict[int, dict]:
        resp = self.client.get("/api/routes", headers=headers or {})
        self.assertEqual(resp.status_code, 200)
        return {r["tool_id"]: r for r in resp.json()}

    def test_anonymous_viewer(self) -> None:
        routes = self.routes()
        self.assertNotIn(self.retired.id, routes)
        self.assertEqual(routes[self.roman.id]["access"], "allowed")
        self.assertEqual(routes[self.roman.id]["identifier"], "RomanNumeralConverter")
        self.assertEqual(routes[self.roman.id]["path"], "/roman-numeral-converter")
        self.assertEqual(routes[self.token_gen.id]["access"], "blocked")

    def test_free_and_premium_viewers(self) -> None:
        free = self.routes(self.auth(self.make_user("free-user")))
        self.assertEqual(free[self.token_gen.id]["access"], "blocked")

        premium = self.routes(self.auth(self.make_user("paid-user", is_premium=True)))
        self.assertEqual(premium[self.token_gen.id]["access"], "allowed")
        self.assertNotIn(self.retired.id, premium)

    def test_invalid_token_is_anonymous(self) -> None:
        routes = self.routes(self.auth("not-a-jwt"))
        self.assertEqual(routes[self.token_gen.id]["access"], "blocked")
        self.assertEqual(routes[self.roman.id]["access"], "allowed")

    def test_unmapped_tool_does_not_break_composition(self) -> None:
        routes = self.routes()
        self.assertFalse(routes[self.unmapped.id]["available"])
        self.assertTrue(routes[self.roman.id]["available"])
        self.assertTrue(routes[self.token_gen.id]["available"])

    def test_order_follows_catalog(self) -> None:
        resp = self.client.get("/api/routes")
        self.assertEqual(
            [r["tool_id"] for r in resp.json()],
            [self.roman.id, self.unmapped.id, self.token_gen.id],
        )


class TestRunTool(CatalogFixture):
    def run_tool(self, tool_id: int, params: dict | None = None, headers: dict[str, str] | None = None):
        return self.client.post(
            f"/api/tools/{tool_id}/run",
            json={"params": params or {}},
            headers=headers or {},
        )

    def test_free_tool_runs_for_anyone(self) -> None:
        resp = self.run_tool(self.roman.id, {"mode": "to_roman", "value": 1994})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["identifier"], "RomanNumeralConverter")
        self.assertEqual(body["result"], {"result": "MCMXCIV"})

    def test_body_is_optional(self) -> None:
        resp = self.client.post(f"/api/tools/{self.token_gen.id}/run", headers=self.auth(self.make_user("paid", is_premium=True)))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["result"]["token"]), 64)

    def test_premium_tool_is_blocked_for_non_premium(self) -> None:
        self.assertEqual(self.run_tool(self.token_gen.id).status_code, 403)
        headers = self.auth(self.make_user("free-user"))
        self.assertEqual(self.run_tool(self.token_gen.id, headers=headers).status_code, 403)

    def test_premium_tool_runs_for_premium(self) -> None:
        headers = self.auth(self.make_user("paid-user", is_premium=True))
        resp = self.run_tool(self.token_gen.id, {"length": 16}, headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["result"]["token"]), 16)

    def test_inactive_tool_is_404_even_for_premium(self) -> None:
        headers = self.auth(self.make_user("paid-user", is_premium=True))
        self.assertEqual(self.run_tool(self.retired.id, headers=headers).status_code, 404)

    def test_unmapped_tool_is_unavailable(self) -> None:
        resp = self.run_tool(self.unmapped.id)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Tool unavailable")

    def test_bad_params_are_400(self) -> None:
        resp = self.run_tool(self.roman.id, {"mode": "to_roman", "value": 4000})
        self.assertEqual(resp.status_code, 400)
        resp = self.run_tool(self.roman.id, {"mode": "sideways"})
        self.assertEqual(resp.status_code, 400)

    def test_unknown_tool_is_404(self) -> None:
        self.assertEqual(self.run_tool(9999).status_code, 404)


class TestUpgradeRequests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = self.make_user("frank")
        self.headers = self.auth(self.user)
        self.admin = self.admin_headers()

    def test_requires_token(self) -> None:
        self.assertEqual(self.client.post("/api/upgrade-request").status_code, 401)

    def test_duplicate_request_is_409_without_new_row(self) -> None:
        self.assertEqual(self.client.post("/api/upgrade-request", headers=self.headers).status_code, 201)
        self.assertEqual(self.client.post("/api/upgrade-request", headers=self.headers).status_code, 409)
        self.assertEqual(self.session().query(UpgradeRequest).count(), 1)

    def test_premium_user_cannot_request(self) -> None:
        headers = self.auth(self.make_user("rich", is_premium=True))
        self.assertEqual(self.client.post("/api/upgrade-request", headers=headers).status_code, 409)

    def test_listing_is_admin_only(self) -> None:
        self.client.post("/api/upgrade-request", headers=self.headers)
        self.assertEqual(self.client.get("/api/upgrade-requests", headers=self.headers).status_code, 403)

        resp = self.client.get("/api/upgrade-requests", headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        [item] = resp.json()
        self.assertEqual(item["user_id"], self.user.id)
        self.assertEqual(item["username"], "frank")
        self.assertEqual(item["status"], "pending")

    def test_reject_removes_request_without_premium(self) -> None:
        self.client.post("/api/upgrade-request", headers=self.headers)
        resp = self.client.post(f"/api/reject-request/{self.user.id}", headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.session().query(UpgradeRequest).count(), 0)
        self.assertFalse(self.session().get(User, self.user.id).is_premium)

        # A rejected user may ask again.
        self.assertEqual(self.client.post("/api/upgrade-request", headers=self.headers).status_code, 201)

    def test_approve_or_reject_without_pending_request_is_404(self) -> None:
        self.assertEqual(self.client.post(f"/api/approve-request/{self.user.id}", headers=self.admin).status_code, 404)
        self.assertEqual(self.client.post(f"/api/reject-request/{self.user.id}", headers=self.admin).status_code, 404)
        self.assertFalse(self.session().get(User, self.user.id).is_premium)

    def test_approve_requires_admin(self) -> None:
        self.client.post("/api/upgrade-request", headers=self.headers)
        resp = self.client.post(f"/api/approve-request/{self.user.id}", headers=self.headers)
        self.assertEqual(resp.status_code, 403)


class TestPremiumUpgradeJourney(ApiTestCase):
    def test_approval_unlocks_premium_tool_for_existing_token(self) -> None:
        crypto = self.make_category("Crypto")
        tool = self.make_tool("Token Generator", "/token-generator", crypto, is_premium=True)
        admin = self.admin_headers()

        resp = self.client.post("/api/signup", json={"username": "alice", "password": DEFAULT_PASSWORD})
        self.assertEqual(resp.status_code, 201)
        resp = self.client.post("/api/login", json={"username": "alice", "password": DEFAULT_PASSWORD})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]
        alice_id = resp.json()["user"]["id"]
        headers = self.auth(token)

        self.assertEqual(self.client.post(f"/api/tools/{tool.id}/run", headers=headers).status_code, 403)

        self.assertEqual(self.client.post("/api/upgrade-request", headers=headers).status_code, 201)
        self.assertEqual(self.client.post("/api/upgrade-request", headers=headers).status_code, 409)

        resp = self.client.post(f"/api/approve-request/{alice_id}", headers=admin)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(self.session().get(User, alice_id).is_premium)
        self.assertEqual(self.session().query(UpgradeRequest).count(), 0)

        self.assertTrue(self.client.get("/api/user", headers=headers).json()["is_premium"])
        routes = {r["tool_id"]: r for r in self.client.get("/api/routes", headers=headers).json()}
        self.assertEqual(routes[tool.id]["access"], "allowed")
        self.assertEqual(self.client.post(f"/api/tools/{tool.id}/run", headers=headers).status_code, 200)


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/api/health/")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertGreater(body["widgets_registered"], 0)

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "IT Tools API"})


if __name__ == "__main__":
    unittest.main()
