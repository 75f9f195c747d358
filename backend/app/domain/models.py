"""Core domain entities represented as immutable dataclasses.

Records are never mutated in place. The store replaces a record with a
merged copy (``dataclasses.replace``) on every write, so a value handed
out by the store is a stable snapshot.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Stage(str, Enum):
    """Hiring pipeline stage, in pipeline order."""

    APPLIED = "applied"
    PHONE_SCREEN = "phone_screen"
    INTERVIEW = "interview"
    OFFER = "offer"
    HIRED = "hired"


STAGES: Tuple[str, ...] = tuple(stage.value for stage in Stage)

# Stages that scheduling an interview promotes to ``Stage.INTERVIEW``.
PRE_INTERVIEW_STAGES = frozenset({Stage.APPLIED.value, Stage.PHONE_SCREEN.value})

SCHEDULED = "scheduled"


@dataclass(frozen=True)
class Candidate:
    """Job applicant moving through the pipeline.

    Example:
        >>> Candidate(id="1", name="Carol", stage="applied")
    """

    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    position: str | None = None
    resume_url: str | None = None
    notes: str | None = None
    stage: str = Stage.APPLIED.value
    applied_date: str | None = None


@dataclass(frozen=True)
class Interview:
    """Interview slot booked for a candidate.

    ``candidate_name`` and ``position`` are copied from the candidate when
    the interview is scheduled and are not kept in sync afterwards.

    Example:
        >>> Interview(
        ...     id="1",
        ...     candidate_id="1",
        ...     candidate_name="Carol",
        ...     date="2026-01-24",
        ...     interviewers=("John Smith",),
        ... )
    """

    id: str
    candidate_id: str | None = None
    candidate_name: str | None = None
    position: str | None = None
    date: str | None = None
    time: str | None = None
    duration: int | None = None
    type: str | None = None
    interviewers: Tuple[str, ...] = ()
    location: str | None = None
    notes: str | None = None
    status: str = SCHEDULED
    reminder_sent: bool = False


DEFAULT_EMAIL_TEMPLATES: Dict[str, str] = {
    "interviewInvite": (
        "Dear {{candidateName}},\n\n"
        "We are pleased to invite you for an interview for the "
        "{{position}} position.\n\n"
        "Date: {{date}}\nTime: {{time}}\nLocation: {{location}}\n\n"
        "Please confirm your attendance.\n\n"
        "Best regards,\n{{companyName}} Recruitment Team"
    ),
    "reminder": (
        "Dear {{candidateName}},\n\n"
        "This is a reminder about your upcoming interview tomorrow.\n\n"
        "Date: {{date}}\nTime: {{time}}\nLocation: {{location}}\n\n"
        "We look forward to meeting you!\n\n"
        "Best regards,\n{{companyName}} Recruitment Team"
    ),
}


@dataclass(frozen=True)
class CompanySettings:
    """Tenant branding and notification preferences."""

    company_name: str = "Your Company"
    logo: str = ""
    primary_color: str = "#2563eb"
    reminder_hours: int = 24
    email_templates: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_EMAIL_TEMPLATES)
    )


@dataclass(frozen=True)
class PipelineStats:
    """Aggregate counts over the current pipeline."""

    total: int
    by_stage: Dict[str, int]
    upcoming_interviews: int
    this_week_interviews: int


@dataclass(frozen=True)
class ReminderReceipt:
    """Outcome of a simulated reminder send."""

    success: bool
    message: str
    body: str = ""
