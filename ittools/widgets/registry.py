"""
Static manifest of widget handlers.

Every catalog tool is served by a handler registered here under the tool's
identifier: its display name with all whitespace removed ("Hash Text" ->
"HashText"). Lookups are case-insensitive. The manifest is filled at import
time by the modules in ittools.widgets, so a tool without a handler can be
detected before deploy (see ittools.scripts.check_manifest).
"""

import re
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from pydantic import BaseModel

WidgetFn = Callable[[dict[str, Any]], dict[str, Any]]

_WHITESPACE = re.compile(r"\s+")


def tool_identifier(name: str) -> str:
    """Derive the manifest identifier from a tool display name."""
    return _WHITESPACE.sub("", name or "")


def _key(identifier: str) -> str:
    return identifier.casefold()


class WidgetInputError(ValueError):
    """Raised by a handler when its params are missing or malformed."""


class ToolHandler(BaseModel):
    """A registered widget plus the catalog metadata used to seed it."""

    model_config = {"frozen": True}

    identifier: str
    name: str
    category: str
    description: str
    route_path: str
    is_premium: bool = False
    icon: str | None = None
    run: WidgetFn


class ToolManifest:
    """Registry of widget handlers keyed by tool identifier."""

    def __init__(self) -> None:
        self._handlers: dict[str, ToolHandler] = {}

    def register(
        self,
        name: str,
        *,
        category: str,
        description: str,
        route_path: str,
        is_premium: bool = False,
        icon: str | None = None,
    ) -> Callable[[WidgetFn], WidgetFn]:
        """Decorator: register fn as the handler for the tool called name."""

        def decorator(fn: WidgetFn) -> WidgetFn:
            identifier = tool_identifier(name)
            if not identifier:
                raise ValueError("Tool name must contain non-whitespace characters")
            if _key(identifier) in self._handlers:
                raise ValueError(f"Duplicate widget identifier: {identifier}")
            if any(h.route_path == route_path for h in self._handlers.values()):
                raise ValueError(f"Duplicate widget route path: {route_path}")
            self._handlers[_key(identifier)] = ToolHandler(
                identifier=identifier,
                name=name,
                category=category,
                description=description,
                route_path=route_path,
                is_premium=is_premium,
                icon=icon,
                run=fn,
            )
            return fn

        return decorator

    def resolve(self, identifier: str) -> ToolHandler | None:
        return self._handlers.get(_key(identifier))

    def missing(self, names: Iterable[str]) -> list[str]:
        """Return identifiers (in input order, deduplicated) with no registered handler."""
        seen: set[str] = set()
        out: list[str] = []
        for name in names:
            identifier = tool_identifier(name)
            if _key(identifier) in seen:
                continue
            seen.add(_key(identifier))
            if self.resolve(identifier) is None:
                out.append(identifier)
        return out

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.resolve(identifier) is not None

    def __iter__(self) -> Iterator[ToolHandler]:
        return iter(self._handlers.values())

    def __len__(self) -> int:
        return len(self._handlers)


manifest = ToolManifest()


def require_str(params: dict[str, Any], key: str, *, allow_empty: bool = False) -> str:
    value = params.get(key)
    if not isinstance(value, str):
        raise WidgetInputError(f"'{key}' must be a string")
    if not allow_empty and not value.strip():
        raise WidgetInputError(f"'{key}' is required")
    return value


def optional_int(params: dict[str, Any], key: str, default: int, lo: int, hi: int) -> int:
    value = params.get(key, default)
    if isinstance(value, bool):
        raise WidgetInputError(f"'{key}' must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise WidgetInputError(f"'{key}' must be an integer") from e
    if not lo <= number <= hi:
        raise WidgetInputError(f"'{key}' must be between {lo} and {hi}")
    return number


def optional_choice(params: dict[str, Any], key: str, default: str, choices: Iterable[str]) -> str:
    allowed = tuple(choices)
    value = params.get(key, default)
    if not isinstance(value, str) or value.strip().lower() not in allowed:
        raise WidgetInputError(f"'{key}' must be one of {list(allowed)}")
    return value.strip().lower()
