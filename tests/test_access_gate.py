"""Unit tests for ittools.services.access_gate: the premium/active decision table."""

import itertools
import unittest
from types import SimpleNamespace

from ittools.services.access_gate import AccessDecision, decide_access

PREMIUM = SimpleNamespace(is_premium=True)
FREE = SimpleNamespace(is_premium=False)


class TestInactiveTools(unittest.TestCase):
    """Inactive tools are hidden whoever is looking."""

    def test_hidden_for_every_viewer_and_flag(self) -> None:
        for viewer, tool_premium in itertools.product((None, FREE, PREMIUM), (False, True)):
            with self.subTest(viewer=viewer, tool_premium=tool_premium):
                decision = decide_access(viewer, is_premium=tool_premium, is_active=False)
                self.assertIs(decision, AccessDecision.HIDDEN)


class TestFreeTools(unittest.TestCase):
    def test_anonymous_allowed(self) -> None:
        self.assertIs(decide_access(None, is_premium=False, is_active=True), AccessDecision.ALLOWED)

    def test_signed_in_allowed(self) -> None:
        self.assertIs(decide_access(FREE, is_premium=False, is_active=True), AccessDecision.ALLOWED)
        self.assertIs(decide_access(PREMIUM, is_premium=False, is_active=True), AccessDecision.ALLOWED)


class TestPremiumTools(unittest.TestCase):
    def test_anonymous_blocked(self) -> None:
        self.assertIs(decide_access(None, is_premium=True, is_active=True), AccessDecision.BLOCKED)

    def test_non_premium_user_blocked(self) -> None:
        self.assertIs(decide_access(FREE, is_premium=True, is_active=True), AccessDecision.BLOCKED)

    def test_premium_user_allowed(self) -> None:
        self.assertIs(decide_access(PREMIUM, is_premium=True, is_active=True), AccessDecision.ALLOWED)


class TestAnonymousMatchesNonPremium(unittest.TestCase):
    """An anonymous viewer gets exactly the decisions of a user without premium."""

    def test_same_decision_for_all_tool_flags(self) -> None:
        for tool_premium, tool_active in itertools.product((False, True), repeat=2):
            with self.subTest(tool_premium=tool_premium, tool_active=tool_active):
                self.assertIs(
                    decide_access(None, is_premium=tool_premium, is_active=tool_active),
                    decide_access(FREE, is_premium=tool_premium, is_active=tool_active),
                )


if __name__ == "__main__":
    unittest.main()
