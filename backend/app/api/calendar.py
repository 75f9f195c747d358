"""Calendar connection endpoint.

Calendar sync is simulated: no OAuth flow takes place.
"""

from fastapi import APIRouter

from ..domain import schemas

router = APIRouter(prefix="/calendar", tags=["calendar"])

SIMULATED_MESSAGE = (
    "In production, this would redirect to Google OAuth. "
    "For demo purposes, calendar sync is simulated."
)


@router.get("/auth", response_model=schemas.CalendarAuth)
async def calendar_auth() -> schemas.CalendarAuth:
    """Report a simulated calendar connection."""
    return schemas.CalendarAuth(auth_url="#", message=SIMULATED_MESSAGE, connected=True)
