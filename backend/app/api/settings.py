"""Company settings endpoints."""

from fastapi import APIRouter, Depends

from ..domain import schemas
from ..services.store import PipelineStore
from .deps import get_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=schemas.CompanySettings)
async def get_settings(store: PipelineStore = Depends(get_store)):
    """Return the company settings."""
    return schemas.CompanySettings.model_validate(store.get_settings())


@router.put("", response_model=schemas.CompanySettings)
async def update_settings(
    body: schemas.CompanySettingsUpdate, store: PipelineStore = Depends(get_store)
):
    """Merge the supplied settings; ``emailTemplates`` is replaced whole."""
    patch = body.model_dump(mode="json", exclude_unset=True)
    return schemas.CompanySettings.model_validate(store.update_settings(patch))
