"""Pipeline statistics endpoint."""

from fastapi import APIRouter, Depends

from ..domain import schemas
from ..services.store import PipelineStore
from .deps import get_store

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=schemas.PipelineStats)
async def get_stats(store: PipelineStore = Depends(get_store)):
    """Return candidate counts per stage and upcoming interview counts."""
    return schemas.PipelineStats.model_validate(store.compute_stats())
