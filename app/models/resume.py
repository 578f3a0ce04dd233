"""ORM model for stored resume documents."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.models.base import Base


class Resume(Base):
    """
    Resume document owned by a user.

    user_id holds the owner's id as text and is not a foreign key: deleting a
    user leaves their resumes in place.
    """

    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
