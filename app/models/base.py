"""Declarative Base with a constraint naming convention shared with the Alembic migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Index names (ix_users_email, ix_resumes_user_id) must match alembic/versions.
NAMING_CONVENTION = {"ix": "ix_%(column_0_label)s"}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
