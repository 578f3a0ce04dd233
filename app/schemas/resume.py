"""Schemas for resume documents."""

from datetime import datetime

from app.schemas.base import CamelModel, RequestModel


class ResumeIn(RequestModel):
    title: str | None = None
    content: str | None = None


class ResumeOut(CamelModel):
    id: int
    user_id: str
    title: str | None = None
    content: str
    created_at: datetime | None = None


class ResumeResponse(CamelModel):
    ok: bool = True
    resume: ResumeOut


class ResumesListResponse(CamelModel):
    ok: bool = True
    resumes: list[ResumeOut]
