"""Request dependencies shared by the routers."""

from fastapi import Request

from ..services.store import PipelineStore


def get_store(request: Request) -> PipelineStore:
    """Return the store created for this application instance."""
    return request.app.state.store
