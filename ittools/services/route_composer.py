"""Compose access-gated client routes from the active tool catalog."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from ittools.schemas.routes import RouteEntry
from ittools.services.access_gate import AccessDecision, Viewer, decide_access
from ittools.widgets import manifest as default_manifest
from ittools.widgets import tool_identifier

if TYPE_CHECKING:
    from ittools.widgets import ToolManifest

logger = logging.getLogger(__name__)


class ToolLike(Protocol):
    id: int
    name: str
    route_path: str
    is_active: bool
    is_premium: bool


def compose_routes(
    tools: Iterable[ToolLike],
    viewer: Viewer | None,
    manifest: "ToolManifest | None" = None,
) -> list[RouteEntry]:
    """
    Build one RouteEntry per active tool, preserving input order.

    Inactive tools are skipped even if the caller did not filter them. A tool
    whose identifier has no registered handler still gets an entry, marked
    available=False, so one unmapped tool never prevents the others from
    being composed.
    """
    registry = manifest if manifest is not None else default_manifest
    routes: list[RouteEntry] = []
    for tool in tools:
        decision = decide_access(viewer, is_premium=tool.is_premium, is_active=tool.is_active)
        if decision is AccessDecision.HIDDEN:
            continue
        identifier = tool_identifier(tool.name)
        available = registry.resolve(identifier) is not None
        if not available:
            logger.warning(
                "No widget handler for tool",
                extra={"tool_id": tool.id, "identifier": identifier},
            )
        routes.append(
            RouteEntry(
                tool_id=tool.id,
                name=tool.name,
                path=tool.route_path,
                identifier=identifier,
                is_premium=tool.is_premium,
                available=available,
                access=decision.value,
            )
        )
    return routes
