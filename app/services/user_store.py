"""
Credential store: persistence of user accounts.

Routes and guards never query the users table directly; they go through
UserStore so email normalization and uniqueness handling live in one place.
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.core.roles import DEFAULT_PLAN, ROLE_USER, normalize_email
from app.models import User

logger = logging.getLogger(__name__)

# Columns an admin update may touch. id and created_at are immutable.
UPDATABLE_FIELDS = frozenset({"email", "full_name", "plan", "role", "password_hash"})


class UserStore:
    """Repository for User rows bound to one SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return (
            self.session.query(User)
            .filter(User.email == normalize_email(email))
            .first()
        )

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def list_all(self) -> list[User]:
        """All users, newest first."""
        return (
            self.session.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .all()
        )

    def insert(
        self,
        email: str,
        password_hash: str,
        full_name: str | None = None,
        role: str = ROLE_USER,
        plan: str = DEFAULT_PLAN,
        conflict_message: str = "email already registered",
    ) -> User:
        """Create a user. Raises ConflictError if the email is taken."""
        email = normalize_email(email)
        if self.find_by_email(email) is not None:
            raise ConflictError(conflict_message)
        user = User(
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            role=role,
            plan=plan,
        )
        self.session.add(user)
        self._commit(conflict_message)
        self.session.refresh(user)
        logger.info("Created user id=%s role=%s", user.id, user.role)
        return user

    def update(self, user_id: int, **fields: Any) -> User | None:
        """
        Apply the given column updates; return the updated user or None if absent.
        Raises ConflictError when the new email belongs to another account.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        user = self.find_by_id(user_id)
        if user is None:
            return None
        if "email" in fields:
            fields["email"] = normalize_email(fields["email"])
            existing = self.find_by_email(fields["email"])
            if existing is not None and existing.id != user.id:
                raise ConflictError("email already exists")
        for name, value in fields.items():
            setattr(user, name, value)
        self._commit("email already exists")
        self.session.refresh(user)
        logger.info("Updated user id=%s fields=%s", user.id, sorted(fields))
        return user

    def delete(self, user_id: int) -> bool:
        """Hard-delete a user. Resumes keep their user_id; nothing cascades."""
        user = self.find_by_id(user_id)
        if user is None:
            return False
        self.session.delete(user)
        self.session.commit()
        logger.info("Deleted user id=%s", user_id)
        return True

    def _commit(self, conflict_message: str) -> None:
        # The unique index still guards against a concurrent insert of the same email.
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(conflict_message) from e
