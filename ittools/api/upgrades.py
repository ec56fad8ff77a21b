"""Premium upgrade request endpoints: users submit, admins approve or reject."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ittools.api.auth import get_current_user, require_admin
from ittools.core.database import get_db
from ittools.schemas.auth import CurrentUser
from ittools.schemas.catalog import MessageResponse
from ittools.schemas.upgrade import UpgradeRequestItem
from ittools.services import upgrades

router = APIRouter()


@router.post("/upgrade-request", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_upgrade_request(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Ask an admin for premium. 409 while a request is already pending."""
    upgrades.create_upgrade_request(db, current_user.id)
    return MessageResponse(message="Upgrade request submitted successfully")


@router.get("/upgrade-requests", response_model=list[UpgradeRequestItem])
def list_upgrade_requests(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[UpgradeRequestItem]:
    return upgrades.list_upgrade_requests(db)


@router.post("/approve-request/{user_id}", response_model=MessageResponse)
def approve_request(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    upgrades.approve_upgrade_request(db, user_id)
    return MessageResponse(message="Request approved successfully")


@router.post("/reject-request/{user_id}", response_model=MessageResponse)
def reject_request(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    upgrades.reject_upgrade_request(db, user_id)
    return MessageResponse(message="Request rejected successfully")
