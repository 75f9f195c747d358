"""HTTP routers."""

from fastapi import APIRouter

from . import calendar, candidates, interviews, settings, stats
from .health import router as health_router

api_router = APIRouter()
api_router.include_router(candidates.router)
api_router.include_router(interviews.router)
api_router.include_router(settings.router)
api_router.include_router(stats.router)
api_router.include_router(calendar.router)

__all__ = ["api_router", "health_router"]
