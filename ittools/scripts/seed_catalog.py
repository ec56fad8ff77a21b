"""
Seed categories and tools from the widget manifest. Safe to re-run: existing
tools (matched by route_path) and categories (matched by name) are left as-is.

  python -m ittools.scripts.seed_catalog
"""

import logging
import sys

from sqlalchemy.orm import Session

from ittools.core.config import get_settings
from ittools.core.database import SessionLocal
from ittools.models import Category, Tool
from ittools.widgets import ToolManifest, manifest

logger = logging.getLogger(__name__)


def seed_catalog(db: Session, registry: ToolManifest = manifest) -> tuple[int, int]:
    """Insert missing categories and tools. Returns (categories_created, tools_created)."""
    categories = {c.name: c for c in db.query(Category).all()}
    existing_paths = {path for (path,) in db.query(Tool.route_path).all()}
    categories_created = 0
    tools_created = 0

    for handler in sorted(registry, key=lambda h: (h.category, h.name)):
        category = categories.get(handler.category)
        if category is None:
            category = Category(name=handler.category)
            db.add(category)
            db.flush()
            categories[handler.category] = category
            categories_created += 1
        if handler.route_path in existing_paths:
            continue
        db.add(
            Tool(
                name=handler.name,
                category_id=category.id,
                description=handler.description,
                route_path=handler.route_path,
                is_premium=handler.is_premium,
                is_active=True,
                icon=handler.icon,
            )
        )
        existing_paths.add(handler.route_path)
        tools_created += 1
    db.commit()
    return categories_created, tools_created


def main() -> int:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    db = SessionLocal()
    try:
        categories_created, tools_created = seed_catalog(db)
        logger.info(
            "Catalog seeded: categories_created=%s tools_created=%s",
            categories_created,
            tools_created,
        )
        return 0
    except Exception as e:
        logger.exception("Catalog seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
