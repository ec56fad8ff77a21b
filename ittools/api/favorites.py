"""Favorites endpoints for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ittools.api.auth import get_current_user
from ittools.core.database import get_db
from ittools.schemas.auth import CurrentUser
from ittools.schemas.catalog import MessageResponse, ToolOut
from ittools.services import favorites

router = APIRouter()


@router.get("", response_model=list[ToolOut])
def list_favorites(
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[ToolOut]:
    return [ToolOut.model_validate(t) for t in favorites.list_favorites(db, current_user.id)]


@router.post("/{tool_id}", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    tool_id: int,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Favorite a tool. Re-adding an existing favorite is a no-op answered with 200."""
    created = favorites.add_favorite(db, current_user.id, tool_id)
    if not created:
        response.status_code = status.HTTP_200_OK
        return MessageResponse(message="Tool already in favorites")
    return MessageResponse(message="Tool added to favorites")


@router.delete("/{tool_id}", response_model=MessageResponse)
def remove_favorite(
    tool_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MessageResponse:
    """Unfavorite a tool. Removing a tool that is not a favorite is a no-op."""
    favorites.remove_favorite(db, current_user.id, tool_id)
    return MessageResponse(message="Tool removed from favorites")
