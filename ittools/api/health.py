"""Health check endpoint with database connectivity and manifest size."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ittools.core.config import settings
from ittools.core.database import check_db_connected, get_db
from ittools.schemas.health import HealthResponse
from ittools.widgets import manifest

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """Used by load balancers and monitoring."""
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        widgets_registered=len(manifest),
    )
