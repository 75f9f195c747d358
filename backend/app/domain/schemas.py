"""Pydantic models used for request and response bodies.

These data transfer objects (DTOs) mirror the domain models and map the
snake_case attribute names to the camelCase keys used on the wire.
Requests accept either spelling. Payload fields are free-form and
optional: a missing field is stored as ``null``.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .models import Stage


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CandidateFields(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    resume_url: Optional[str] = None
    notes: Optional[str] = None


class CandidateCreate(CandidateFields):
    """Payload for a new candidate.

    ``id``, ``stage`` and ``appliedDate`` are assigned by the server and
    ignored if supplied.

    Example:
        >>> CandidateCreate(name="Carol", email="c@example.com")
    """

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Carol",
                "email": "c@example.com",
                "phone": "555-0101",
                "position": "Senior Developer",
                "resumeUrl": "#",
                "notes": "Strong React experience",
            }
        }


class CandidateUpdate(CandidateFields):
    """Partial candidate update; only supplied fields are changed."""

    stage: Optional[Stage] = None
    applied_date: Optional[str] = None


class StageChange(CamelModel):
    """Body of the stage transition endpoint.

    Example:
        >>> StageChange(stage="offer")
    """

    stage: Stage


class Candidate(CandidateFields):
    """Candidate as returned by the API."""

    id: str
    stage: str
    applied_date: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": "3",
                "name": "Emily Davis",
                "email": "emily.d@email.com",
                "phone": "555-0103",
                "position": "UX Designer",
                "stage": "applied",
                "appliedDate": "2026-01-20",
                "resumeUrl": "#",
                "notes": "Great portfolio",
            }
        }


class InterviewFields(CamelModel):
    candidate_id: Optional[str] = None
    candidate_name: Optional[str] = None
    position: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    duration: Optional[int] = None
    type: Optional[str] = None
    interviewers: Optional[List[str]] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class InterviewCreate(InterviewFields):
    """Payload for scheduling an interview.

    ``candidateName`` and ``position`` are only used when ``candidateId``
    does not match a known candidate.

    Example:
        >>> InterviewCreate(candidateId="1", date="2026-01-24", time="10:00")
    """

    class Config:
        json_schema_extra = {
            "example": {
                "candidateId": "1",
                "date": "2026-01-24",
                "time": "10:00",
                "duration": 60,
                "type": "Technical Interview",
                "interviewers": ["John Smith", "Jane Doe"],
                "location": "Google Meet",
                "notes": "Focus on system design",
            }
        }


class InterviewUpdate(InterviewFields):
    """Partial interview update; only supplied fields are changed."""

    status: Optional[str] = None
    reminder_sent: Optional[bool] = None


class Interview(InterviewFields):
    """Interview as returned by the API."""

    id: str
    interviewers: List[str] = []
    status: str
    reminder_sent: bool


class ReminderResult(CamelModel):
    success: bool
    message: str


class CompanySettingsUpdate(CamelModel):
    """Partial settings update.

    ``emailTemplates`` replaces the whole template mapping when present.
    """

    company_name: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    reminder_hours: Optional[int] = None
    email_templates: Optional[Dict[str, str]] = None


class CompanySettings(CamelModel):
    company_name: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    reminder_hours: Optional[int] = None
    email_templates: Dict[str, str] = {}


class PipelineStats(CamelModel):
    """Aggregate pipeline counts.

    Example:
        >>> PipelineStats(
        ...     total=3,
        ...     by_stage={"applied": 2, "interview": 1},
        ...     upcoming_interviews=1,
        ...     this_week_interviews=0,
        ... )
    """

    total: int
    by_stage: Dict[str, int]
    upcoming_interviews: int
    this_week_interviews: int


class CalendarAuth(CamelModel):
    auth_url: str
    message: str
    connected: bool
