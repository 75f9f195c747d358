"""Smoke tests for domain models, schemas and template rendering."""

from app.domain import models, schemas
from app.services.templates import reminder_context, render_template


def test_models_and_schemas_compile() -> None:
    """Instantiate domain models and map them onto API schemas."""

    candidate = models.Candidate(
        id="cand_1", name="Carol", resume_url="#", applied_date="2026-01-20"
    )
    interview = models.Interview(
        id="int_1",
        candidate_id=candidate.id,
        candidate_name="Carol",
        interviewers=("Asha", "Diego"),
    )
    settings = models.CompanySettings()

    dumped = schemas.Candidate.model_validate(candidate).model_dump(by_alias=True)
    assert dumped["resumeUrl"] == "#"
    assert dumped["appliedDate"] == "2026-01-20"
    assert dumped["stage"] == "applied"

    dumped = schemas.Interview.model_validate(interview).model_dump(by_alias=True)
    assert dumped["candidateId"] == "cand_1"
    assert dumped["interviewers"] == ["Asha", "Diego"]
    assert dumped["reminderSent"] is False

    dumped = schemas.CompanySettings.model_validate(settings).model_dump(by_alias=True)
    assert dumped["primaryColor"] == "#2563eb"
    assert dumped["emailTemplates"] == models.DEFAULT_EMAIL_TEMPLATES


def test_requests_accept_both_spellings() -> None:
    camel = schemas.CandidateCreate.model_validate({"resumeUrl": "a"})
    snake = schemas.CandidateCreate.model_validate({"resume_url": "a"})
    assert camel == snake


def test_stage_vocabulary_order() -> None:
    assert models.STAGES == ("applied", "phone_screen", "interview", "offer", "hired")


def test_settings_default_templates_are_independent() -> None:
    first = models.CompanySettings()
    first.email_templates["reminder"] = "changed"
    assert models.CompanySettings().email_templates["reminder"] != "changed"


def test_render_template() -> None:
    assert render_template("Hi {{ name }}!", {"name": "Ann"}) == "Hi Ann!"
    assert render_template("{{a}}{{b}}", {"a": None}) == "{{ b }}"
    assert render_template("no tokens", {"x": 1}) == "no tokens"


def test_invite_template_renders_fully() -> None:
    settings = models.CompanySettings(company_name="Acme")
    interview = models.Interview(
        id="1",
        candidate_name="Carol",
        position="UX Designer",
        date="2026-01-22",
        time="10:00",
        location="Google Meet",
    )
    body = render_template(
        settings.email_templates["interviewInvite"],
        reminder_context(interview, settings),
    )
    assert "{{" not in body
    assert "the UX Designer position" in body
    assert body.endswith("Acme Recruitment Team")
