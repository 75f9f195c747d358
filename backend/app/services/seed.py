"""Demo pipeline loaded at start-up so the UI has something to show."""

from __future__ import annotations

from ..domain.models import Candidate, CompanySettings, Interview
from .store import PipelineStore

DEMO_CANDIDATES = (
    Candidate(
        id="1",
        name="Sarah Johnson",
        email="sarah.j@email.com",
        phone="555-0101",
        position="Senior Developer",
        stage="interview",
        applied_date="2026-01-15",
        resume_url="#",
        notes="Strong React experience",
    ),
    Candidate(
        id="2",
        name="Michael Chen",
        email="mchen@email.com",
        phone="555-0102",
        position="Product Manager",
        stage="phone_screen",
        applied_date="2026-01-18",
        resume_url="#",
        notes="Ex-Google PM",
    ),
    Candidate(
        id="3",
        name="Emily Davis",
        email="emily.d@email.com",
        phone="555-0103",
        position="UX Designer",
        stage="applied",
        applied_date="2026-01-20",
        resume_url="#",
        notes="Great portfolio",
    ),
    Candidate(
        id="4",
        name="James Wilson",
        email="jwilson@email.com",
        phone="555-0104",
        position="Senior Developer",
        stage="offer",
        applied_date="2026-01-10",
        resume_url="#",
        notes="Negotiating salary",
    ),
    Candidate(
        id="5",
        name="Lisa Martinez",
        email="lisa.m@email.com",
        phone="555-0105",
        position="Data Analyst",
        stage="hired",
        applied_date="2026-01-05",
        resume_url="#",
        notes="Started Jan 20",
    ),
    Candidate(
        id="6",
        name="David Brown",
        email="dbrown@email.com",
        phone="555-0106",
        position="DevOps Engineer",
        stage="applied",
        applied_date="2026-01-21",
        resume_url="#",
        notes="AWS certified",
    ),
)

DEMO_INTERVIEWS = (
    Interview(
        id="1",
        candidate_id="1",
        candidate_name="Sarah Johnson",
        position="Senior Developer",
        date="2026-01-24",
        time="10:00",
        duration=60,
        type="Technical Interview",
        interviewers=("John Smith", "Jane Doe"),
        location="Google Meet",
        notes="Focus on system design",
    ),
    Interview(
        id="2",
        candidate_id="2",
        candidate_name="Michael Chen",
        position="Product Manager",
        date="2026-01-23",
        time="14:00",
        duration=30,
        type="Phone Screen",
        interviewers=("HR Team",),
        location="Phone Call",
        notes="Initial screening",
        reminder_sent=True,
    ),
)


def seed_demo_data(store: PipelineStore) -> PipelineStore:
    """Load the demo candidates, interviews and default settings."""
    store.load(DEMO_CANDIDATES, DEMO_INTERVIEWS, CompanySettings())
    return store
