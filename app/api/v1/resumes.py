"""Resume CRUD for the authenticated user. Rows are scoped to the token's user id."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_identity
from app.core.database import get_db
from app.core.errors import NotFoundError, ValidationError
from app.core.security import TokenIdentity
from app.schemas.base import OkResponse
from app.schemas.resume import ResumeIn, ResumeOut, ResumeResponse, ResumesListResponse
from app.services.resume_store import ResumeStore

logger = logging.getLogger(__name__)
router = APIRouter()


def get_resume_store(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> ResumeStore:
    return ResumeStore(db, owner_id=identity.id)


def _require_content(body: ResumeIn) -> str:
    if not body.content:
        raise ValidationError("content is required")
    return body.content


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume(
    store: Annotated[ResumeStore, Depends(get_resume_store)],
    body: ResumeIn = ResumeIn(),
) -> ResumeResponse:
    content = _require_content(body)
    resume = store.create(body.title, content)
    logger.info("Created resume id=%s for user id=%s", resume.id, store.owner_id)
    return ResumeResponse(resume=ResumeOut.model_validate(resume))


@router.get("", response_model=ResumesListResponse)
def list_resumes(
    store: Annotated[ResumeStore, Depends(get_resume_store)],
) -> ResumesListResponse:
    """The caller's most recent resumes, newest first."""
    return ResumesListResponse(
        resumes=[ResumeOut.model_validate(r) for r in store.list_recent()]
    )


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(
    resume_id: int,
    store: Annotated[ResumeStore, Depends(get_resume_store)],
) -> ResumeResponse:
    resume = store.get(resume_id)
    if resume is None:
        raise NotFoundError("not found")
    return ResumeResponse(resume=ResumeOut.model_validate(resume))


@router.put("/{resume_id}", response_model=ResumeResponse)
def replace_resume(
    resume_id: int,
    store: Annotated[ResumeStore, Depends(get_resume_store)],
    body: ResumeIn = ResumeIn(),
) -> ResumeResponse:
    content = _require_content(body)
    resume = store.update(resume_id, body.title, content)
    if resume is None:
        raise NotFoundError("not found")
    return ResumeResponse(resume=ResumeOut.model_validate(resume))


@router.delete("/{resume_id}", response_model=OkResponse)
def delete_resume(
    resume_id: int,
    store: Annotated[ResumeStore, Depends(get_resume_store)],
) -> OkResponse:
    if not store.delete(resume_id):
        raise NotFoundError("not found")
    logger.info("Deleted resume id=%s for user id=%s", resume_id, store.owner_id)
    return OkResponse()
