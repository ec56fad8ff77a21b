"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from ittools.api import auth, catalog, favorites, health, routes, upgrades

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(catalog.router, tags=["catalog"])
router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
router.include_router(upgrades.router, tags=["upgrades"])
router.include_router(routes.router, tags=["routes"])
