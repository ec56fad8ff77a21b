"""
Deploy-time check that every active catalog tool has a widget handler.
Exits 1 and lists the unmapped identifiers otherwise. Run before releasing:

  python -m ittools.scripts.check_manifest
"""

import logging
import sys

from sqlalchemy.orm import Session

from ittools.core.config import get_settings
from ittools.core.database import SessionLocal
from ittools.services.catalog import list_active_tools
from ittools.widgets import ToolManifest, manifest

logger = logging.getLogger(__name__)


def find_unmapped_tools(db: Session, registry: ToolManifest = manifest) -> list[str]:
    """Identifiers of active tools with no registered handler, in catalog order."""
    return registry.missing(tool.name for tool in list_active_tools(db))


def main() -> int:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    db = SessionLocal()
    try:
        unmapped = find_unmapped_tools(db)
    except Exception as e:
        logger.exception("Manifest check failed: %s", e)
        return 1
    finally:
        db.close()
    if unmapped:
        logger.error("Active tools without a widget handler: %s", ", ".join(unmapped))
        return 1
    logger.info("Manifest check passed: %s handlers registered", len(manifest))
    return 0


if __name__ == "__main__":
    sys.exit(main())
