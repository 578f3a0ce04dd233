"""Admin user management. Every route requires require_admin."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.v1.auth import get_user_store, require_admin
from app.core.config import AuthConfig, get_auth_config
from app.core.errors import NotFoundError, ValidationError
from app.core.roles import validate_role
from app.core.security import hash_password
from app.models import User
from app.schemas.base import OkResponse
from app.schemas.user import (
    AdminCreateUserRequest,
    AdminCreateUserResponse,
    AdminUpdateUserRequest,
    UserOut,
    UserResponse,
    UsersListResponse,
)
from app.services.accounts import clean_text, create_user_as_admin
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[User, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UsersListResponse:
    """List all users, newest first."""
    users = store.list_all()
    return UsersListResponse(users=[UserOut.model_validate(u) for u in users])


@router.post(
    "/users",
    response_model=AdminCreateUserResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    admin: Annotated[User, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
    body: AdminCreateUserRequest = AdminCreateUserRequest(),
) -> AdminCreateUserResponse:
    """
    Create a user. When no password is given a random one is generated and
    returned once as initialPassword.
    """
    created = create_user_as_admin(
        store,
        config,
        email=body.email,
        full_name=body.full_name,
        plan=body.plan,
        role=body.role,
        password=body.password,
    )
    logger.info("Admin id=%s created user id=%s", admin.id, created.user.id)
    response = AdminCreateUserResponse(ok=True, user=UserOut.model_validate(created.user))
    if created.generated_password is not None:
        response.initial_password = created.generated_password
    return response


@router.patch("/users/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    admin: Annotated[User, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
    config: Annotated[AuthConfig, Depends(get_auth_config)],
    body: AdminUpdateUserRequest = AdminUpdateUserRequest(),
) -> UserResponse:
    """
    Update any of email, fullName, plan, role, password.
    Empty fullName or plan clears the column; an empty email or password is ignored.
    """
    fields: dict[str, str | None] = {}
    email = (body.email or "").strip().lower()
    if email:
        fields["email"] = email
    if body.full_name is not None:
        fields["full_name"] = clean_text(body.full_name)
    if body.plan is not None:
        fields["plan"] = clean_text(body.plan)
    if body.role is not None:
        fields["role"] = validate_role(body.role.strip())
    if body.password:
        fields["password_hash"] = hash_password(body.password, rounds=config.bcrypt_rounds)
    if not fields:
        raise ValidationError("no fields to update")

    user = store.update(user_id, **fields)
    if user is None:
        raise NotFoundError("not found")
    logger.info("Admin id=%s updated user id=%s", admin.id, user.id)
    return UserResponse(user=UserOut.model_validate(user))


@router.delete("/users/{user_id}", response_model=OkResponse)
def delete_user(
    user_id: int,
    admin: Annotated[User, Depends(require_admin)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> OkResponse:
    """Hard-delete a user. Their resumes are left untouched."""
    if not store.delete(user_id):
        raise NotFoundError("not found")
    logger.info("Admin id=%s deleted user id=%s", admin.id, user_id)
    return OkResponse()
