"""
Premium upgrade requests.

States per user: none -> pending -> resolved. Approving sets the user's
is_premium flag; approving or rejecting deletes the pending row. The unique
constraint on upgrade_requests.user_id is what guarantees a single pending
request per user, so concurrent submissions cannot both succeed.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ittools.core.errors import ConflictError, NotFoundError
from ittools.models import UpgradeRequest, User
from ittools.models.upgrade_request import STATUS_PENDING
from ittools.schemas.upgrade import UpgradeRequestItem

logger = logging.getLogger(__name__)


def create_upgrade_request(db: Session, user_id: int) -> UpgradeRequest:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    if user.is_premium:
        raise ConflictError("User is already premium")

    request = UpgradeRequest(user_id=user_id, status=STATUS_PENDING)
    db.add(request)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Upgrade request already exists") from e
    db.refresh(request)
    logger.info("Upgrade request created", extra={"user_id": user_id})
    return request


def list_upgrade_requests(db: Session) -> list[UpgradeRequestItem]:
    rows = (
        db.query(UpgradeRequest, User.username)
        .join(User, User.id == UpgradeRequest.user_id)
        .order_by(UpgradeRequest.created_at, UpgradeRequest.id)
        .all()
    )
    return [
        UpgradeRequestItem(
            user_id=req.user_id,
            username=username,
            status=req.status,
            created_at=req.created_at,
        )
        for req, username in rows
    ]


def _pending(db: Session, user_id: int) -> UpgradeRequest:
    request = db.query(UpgradeRequest).filter(UpgradeRequest.user_id == user_id).first()
    if request is None:
        raise NotFoundError("No pending upgrade request for this user")
    return request


def approve_upgrade_request(db: Session, user_id: int) -> User:
    """Grant premium and remove the pending request in a single commit."""
    request = _pending(db, user_id)
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    user.is_premium = True
    db.delete(request)
    db.commit()
    db.refresh(user)
    logger.info("Upgrade request approved", extra={"user_id": user_id})
    return user


def reject_upgrade_request(db: Session, user_id: int) -> None:
    request = _pending(db, user_id)
    db.delete(request)
    db.commit()
    logger.info("Upgrade request rejected", extra={"user_id": user_id})
