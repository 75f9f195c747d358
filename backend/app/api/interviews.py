"""Interview endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..domain import schemas
from ..services.store import PipelineStore
from .deps import get_store

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("", response_model=List[schemas.Interview])
async def list_interviews(store: PipelineStore = Depends(get_store)):
    """Return every interview in insertion order."""
    return [schemas.Interview.model_validate(i) for i in store.list_interviews()]


@router.get("/{interview_id}", response_model=schemas.Interview)
async def get_interview(interview_id: str, store: PipelineStore = Depends(get_store)):
    """Return one interview by id."""
    return schemas.Interview.model_validate(store.get_interview(interview_id))


@router.post(
    "",
    response_model=schemas.Interview,
    status_code=status.HTTP_201_CREATED,
)
async def schedule_interview(
    body: schemas.InterviewCreate, store: PipelineStore = Depends(get_store)
):
    """Book an interview and move an early-stage candidate to ``interview``."""
    interview = store.schedule_interview(body.model_dump(mode="json"))
    return schemas.Interview.model_validate(interview)


@router.put("/{interview_id}", response_model=schemas.Interview)
async def update_interview(
    interview_id: str,
    body: schemas.InterviewUpdate,
    store: PipelineStore = Depends(get_store),
):
    """Merge the supplied fields into the interview."""
    patch = body.model_dump(mode="json", exclude_unset=True)
    return schemas.Interview.model_validate(store.update_interview(interview_id, patch))


@router.delete(
    "/{interview_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def cancel_interview(interview_id: str, store: PipelineStore = Depends(get_store)):
    """Remove an interview."""
    store.cancel_interview(interview_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{interview_id}/send-reminder", response_model=schemas.ReminderResult)
async def send_reminder(interview_id: str, store: PipelineStore = Depends(get_store)):
    """Flag the reminder as sent. No email is delivered."""
    receipt = store.send_reminder(interview_id)
    return schemas.ReminderResult(success=receipt.success, message=receipt.message)
