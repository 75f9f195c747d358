"""Domain errors and their HTTP mapping."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when an id-addressed record does not exist.

    Example:
        >>> str(NotFoundError("Candidate", "42"))
        'Candidate not found'
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.message = f"{entity} not found"
        super().__init__(self.message)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Render a missing record as a 404 with a short error body."""
    logger.info(
        "%s %s: %s id=%s",
        request.method,
        request.url.path,
        exc.message,
        exc.entity_id,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
