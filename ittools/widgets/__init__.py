"""Widget handlers. Importing this package populates the manifest."""

from ittools.widgets import converters, generators, network, text  # noqa: F401
from ittools.widgets.registry import (
    ToolHandler,
    ToolManifest,
    WidgetInputError,
    manifest,
    tool_identifier,
)

__all__ = ["ToolHandler", "ToolManifest", "WidgetInputError", "manifest", "tool_identifier"]
