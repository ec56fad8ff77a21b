"""
Access gate: decide whether a viewer may open a tool.

Pure predicate over already-fetched data. An anonymous viewer is passed as
None and is treated exactly like a signed-in user without premium.

    is_active | tool premium | viewer premium | decision
    ----------+--------------+----------------+---------
    False     | any          | any            | HIDDEN
    True      | False        | any / anon     | ALLOWED
    True      | True         | False / anon   | BLOCKED
    True      | True         | True           | ALLOWED
"""

from enum import Enum
from typing import Protocol


class AccessDecision(str, Enum):
    ALLOWED = "allowed"
    BLOCKED = "blocked"
    HIDDEN = "hidden"


class Viewer(Protocol):
    is_premium: bool


def decide_access(
    viewer: Viewer | None,
    *,
    is_premium: bool,
    is_active: bool,
) -> AccessDecision:
    """Return the gate decision for viewer (None = anonymous) on a tool with these flags."""
    if not is_active:
        return AccessDecision.HIDDEN
    if not is_premium:
        return AccessDecision.ALLOWED
    if viewer is not None and viewer.is_premium:
        return AccessDecision.ALLOWED
    return AccessDecision.BLOCKED

