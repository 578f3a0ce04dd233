"""ORM model for user accounts (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.models.base import Base


class User(Base):
    """
    User account for bearer-token authentication and role-based access control.

    email is stored trimmed and lower-cased. role is one of
    'user', 'admin', 'super_admin', 'viewer' (NULL is read as 'user').
    password_hash never leaves the service.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    full_name = Column(Text, nullable=True)
    role = Column(String(32), nullable=True, default="user")
    plan = Column(Text, nullable=True, default="free")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role!r}>"
