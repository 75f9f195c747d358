"""Liveness probe, served outside the API prefix."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    """Report that the process is serving requests."""
    return {"status": "ok"}
