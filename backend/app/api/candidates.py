"""Candidate endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..domain import schemas
from ..services.store import PipelineStore
from .deps import get_store

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=List[schemas.Candidate])
async def list_candidates(store: PipelineStore = Depends(get_store)):
    """Return every candidate in insertion order."""
    return [schemas.Candidate.model_validate(c) for c in store.list_candidates()]


@router.get("/{candidate_id}", response_model=schemas.Candidate)
async def get_candidate(candidate_id: str, store: PipelineStore = Depends(get_store)):
    """Return one candidate by id."""
    return schemas.Candidate.model_validate(store.get_candidate(candidate_id))


@router.post(
    "",
    response_model=schemas.Candidate,
    status_code=status.HTTP_201_CREATED,
)
async def create_candidate(
    body: schemas.CandidateCreate, store: PipelineStore = Depends(get_store)
):
    """Add a candidate at the ``applied`` stage."""
    candidate = store.create_candidate(body.model_dump(mode="json"))
    return schemas.Candidate.model_validate(candidate)


@router.put("/{candidate_id}", response_model=schemas.Candidate)
async def update_candidate(
    candidate_id: str,
    body: schemas.CandidateUpdate,
    store: PipelineStore = Depends(get_store),
):
    """Merge the supplied fields into the candidate."""
    patch = body.model_dump(mode="json", exclude_unset=True)
    return schemas.Candidate.model_validate(store.update_candidate(candidate_id, patch))


@router.patch("/{candidate_id}/stage", response_model=schemas.Candidate)
async def set_candidate_stage(
    candidate_id: str,
    body: schemas.StageChange,
    store: PipelineStore = Depends(get_store),
):
    """Move the candidate to a pipeline stage."""
    candidate = store.set_candidate_stage(candidate_id, body.stage.value)
    return schemas.Candidate.model_validate(candidate)


@router.delete(
    "/{candidate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_candidate(candidate_id: str, store: PipelineStore = Depends(get_store)):
    """Remove a candidate; their interviews are kept."""
    store.delete_candidate(candidate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
