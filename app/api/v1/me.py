"""Self-service endpoints for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.auth import get_current_identity, get_user_store
from app.core.errors import NotFoundError, ValidationError
from app.core.security import TokenIdentity
from app.schemas.auth import IdentityOut, MeResponse, UpdateSelfRequest
from app.schemas.user import UserOut, UserResponse
from app.services.accounts import clean_text
from app.services.user_store import UserStore

router = APIRouter()


@router.get("", response_model=MeResponse)
def get_me(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
) -> MeResponse:
    """Return the identity carried by the bearer token."""
    return MeResponse(user=IdentityOut(id=identity.id, email=identity.email))


@router.patch("", response_model=UserResponse)
def update_me(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    store: Annotated[UserStore, Depends(get_user_store)],
    body: UpdateSelfRequest = UpdateSelfRequest(),
) -> UserResponse:
    """Update the caller's display name. An empty name clears it."""
    if body.full_name is None:
        raise ValidationError("no fields to update")
    user = store.update(identity.id, full_name=clean_text(body.full_name))
    if user is None:
        raise NotFoundError("not found")
    return UserResponse(user=UserOut.model_validate(user))
