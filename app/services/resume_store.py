"""Resume persistence, always scoped to the owning user."""

from sqlalchemy.orm import Query, Session

from app.models import Resume

# GET /resumes returns at most this many documents.
RECENT_RESUMES_LIMIT = 20


class ResumeStore:
    """Resume queries for one owner; rows belonging to other users are invisible."""

    def __init__(self, session: Session, owner_id: int | str) -> None:
        self.session = session
        self.owner_id = str(owner_id)

    def _owned(self) -> Query:
        return self.session.query(Resume).filter(Resume.user_id == self.owner_id)

    def create(self, title: str | None, content: str) -> Resume:
        resume = Resume(user_id=self.owner_id, title=title or None, content=content)
        self.session.add(resume)
        self.session.commit()
        self.session.refresh(resume)
        return resume

    def list_recent(self, limit: int = RECENT_RESUMES_LIMIT) -> list[Resume]:
        return (
            self._owned()
            .order_by(Resume.created_at.desc(), Resume.id.desc())
            .limit(limit)
            .all()
        )

    def get(self, resume_id: int) -> Resume | None:
        return self._owned().filter(Resume.id == resume_id).first()

    def update(self, resume_id: int, title: str | None, content: str) -> Resume | None:
        """Replace title and content. A missing title clears it."""
        resume = self.get(resume_id)
        if resume is None:
            return None
        resume.title = title or None
        resume.content = content
        self.session.commit()
        self.session.refresh(resume)
        return resume

    def delete(self, resume_id: int) -> bool:
        resume = self.get(resume_id)
        if resume is None:
            return False
        self.session.delete(resume)
        self.session.commit()
        return True
