"""Rendering of the email templates held in settings."""

from __future__ import annotations

from typing import Mapping

from jinja2 import DebugUndefined, Environment

from ..domain.models import CompanySettings, Interview

# Unknown placeholders render back as ``{{ name }}``; None renders empty.
_env = Environment(
    undefined=DebugUndefined,
    finalize=lambda value: "" if value is None else value,
)


def render_template(template: str, context: Mapping[str, object]) -> str:
    """Render a ``{{ key }}`` template against ``context``.

    Example:
        >>> render_template("Hi {{name}}, {{missing}}", {"name": "Ann"})
        'Hi Ann, {{ missing }}'
    """
    return _env.from_string(template).render(**context)


def reminder_context(
    interview: Interview, settings: CompanySettings
) -> dict[str, object]:
    return {
        "candidateName": interview.candidate_name,
        "position": interview.position,
        "date": interview.date,
        "time": interview.time,
        "location": interview.location,
        "companyName": settings.company_name,
    }
