"""In-memory repository for candidates, interviews and company settings."""

from __future__ import annotations

import functools
import logging
import threading
import uuid
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Dict, Iterable, List, Mapping

import pytz

from ..core.errors import NotFoundError
from ..domain.models import (
    PRE_INTERVIEW_STAGES,
    SCHEDULED,
    STAGES,
    Candidate,
    CompanySettings,
    Interview,
    PipelineStats,
    ReminderReceipt,
    Stage,
)
from .templates import reminder_context, render_template

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

WEEK = timedelta(days=7)

# Fields the store assigns itself on create; caller values are dropped.
_CANDIDATE_SERVER_FIELDS = frozenset({"id", "stage", "applied_date"})
_INTERVIEW_SERVER_FIELDS = frozenset({"id", "status", "reminder_sent"})

# Fields that always hold a value; a null in a patch leaves them as they are.
_CANDIDATE_REQUIRED = frozenset({"stage"})
_INTERVIEW_REQUIRED = frozenset({"status", "reminder_sent"})
_SETTINGS_REQUIRED = frozenset({"email_templates"})


def _locked(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def _without(fields: Mapping[str, Any], excluded: Iterable[str]) -> Dict[str, Any]:
    excluded = frozenset(excluded)
    return {key: value for key, value in fields.items() if key not in excluded}


def _patch(
    fields: Mapping[str, Any], required: Iterable[str]
) -> Dict[str, Any]:
    required = frozenset(required)
    return {
        key: value
        for key, value in fields.items()
        if key != "id" and not (key in required and value is None)
    }


def _stage_value(stage: Any) -> Any:
    return stage.value if isinstance(stage, Stage) else stage


def _candidate_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    if "stage" in fields:
        fields["stage"] = _stage_value(fields["stage"])
    return fields


def _interview_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    if "interviewers" in fields:
        fields["interviewers"] = tuple(fields["interviewers"] or ())
    return fields


class PipelineStore:
    """Volatile store holding the hiring pipeline.

    Each public operation runs under one re-entrant lock, so a store may
    be shared by request handlers running on a threadpool. Records are
    kept in insertion order; writes swap in a merged copy of the record.

    Args:
        tz: Zone used for "today" and for reading interview dates.
        clock: Returns the current aware datetime. Defaults to the wall
            clock in ``tz``.
        id_factory: Produces fresh record ids.
    """

    def __init__(
        self,
        tz: pytz.BaseTzInfo | None = None,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._tz = tz or pytz.utc
        self._clock = clock or (lambda: datetime.now(self._tz))
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))
        self._lock = threading.RLock()
        self._candidates: Dict[str, Candidate] = {}
        self._interviews: Dict[str, Interview] = {}
        self._settings = CompanySettings()

    @_locked
    def load(
        self,
        candidates: Iterable[Candidate] = (),
        interviews: Iterable[Interview] = (),
        settings: CompanySettings | None = None,
    ) -> None:
        """Insert prepared records as they are, keeping their ids."""
        for candidate in candidates:
            self._candidates[candidate.id] = candidate
        for interview in interviews:
            self._interviews[interview.id] = interview
        if settings is not None:
            self._settings = settings

    def today(self) -> str:
        return self._clock().astimezone(self._tz).date().isoformat()

    # Candidates

    @_locked
    def list_candidates(self) -> List[Candidate]:
        return list(self._candidates.values())

    @_locked
    def get_candidate(self, candidate_id: str) -> Candidate:
        candidate = self._candidates.get(candidate_id)
        if candidate is None:
            raise NotFoundError("Candidate", candidate_id)
        return candidate

    @_locked
    def create_candidate(self, fields: Mapping[str, Any]) -> Candidate:
        """Add a candidate at the ``applied`` stage, dated today."""
        candidate = Candidate(
            id=self._new_id(),
            stage=Stage.APPLIED.value,
            applied_date=self.today(),
            **_without(fields, _CANDIDATE_SERVER_FIELDS),
        )
        self._candidates[candidate.id] = candidate
        logger.info("candidate created", extra={"candidate_id": candidate.id})
        return candidate

    @_locked
    def update_candidate(self, candidate_id: str, patch: Mapping[str, Any]) -> Candidate:
        """Shallow-merge ``patch`` over the candidate. ``id`` is not patchable."""
        candidate = replace(
            self.get_candidate(candidate_id),
            **_candidate_fields(_patch(patch, _CANDIDATE_REQUIRED)),
        )
        self._candidates[candidate_id] = candidate
        logger.info(
            "candidate updated fields=%s",
            sorted(patch),
            extra={"candidate_id": candidate_id},
        )
        return candidate

    @_locked
    def set_candidate_stage(self, candidate_id: str, stage: str) -> Candidate:
        """Move a candidate to ``stage``. Any stage may follow any other."""
        stage = _stage_value(stage)
        candidate = replace(self.get_candidate(candidate_id), stage=stage)
        self._candidates[candidate_id] = candidate
        logger.info(
            "candidate stage set",
            extra={"candidate_id": candidate_id, "stage": stage},
        )
        return candidate

    @_locked
    def delete_candidate(self, candidate_id: str) -> None:
        # Interviews keep their candidate_id; there is no cascade.
        self.get_candidate(candidate_id)
        del self._candidates[candidate_id]
        logger.info("candidate deleted", extra={"candidate_id": candidate_id})

    # Interviews

    @_locked
    def list_interviews(self) -> List[Interview]:
        return list(self._interviews.values())

    @_locked
    def get_interview(self, interview_id: str) -> Interview:
        interview = self._interviews.get(interview_id)
        if interview is None:
            raise NotFoundError("Interview", interview_id)
        return interview

    @_locked
    def schedule_interview(self, fields: Mapping[str, Any]) -> Interview:
        """Book an interview.

        When ``candidate_id`` names a known candidate, the candidate's
        name and position are copied onto the interview, and a candidate
        still at ``applied`` or ``phone_screen`` is promoted to
        ``interview``. Otherwise the supplied name and position are kept.
        """
        data = _interview_fields(_without(fields, _INTERVIEW_SERVER_FIELDS))
        candidate = self._candidates.get(data.get("candidate_id"))
        if candidate is not None:
            data["candidate_name"] = candidate.name
            data["position"] = candidate.position

        interview = Interview(
            id=self._new_id(), status=SCHEDULED, reminder_sent=False, **data
        )
        self._interviews[interview.id] = interview
        logger.info(
            "interview scheduled",
            extra={
                "interview_id": interview.id,
                "candidate_id": interview.candidate_id,
            },
        )

        if candidate is not None and candidate.stage in PRE_INTERVIEW_STAGES:
            self._candidates[candidate.id] = replace(
                candidate, stage=Stage.INTERVIEW.value
            )
            logger.info(
                "candidate promoted",
                extra={"candidate_id": candidate.id, "stage": Stage.INTERVIEW.value},
            )
        return interview

    @_locked
    def update_interview(self, interview_id: str, patch: Mapping[str, Any]) -> Interview:
        """Shallow-merge ``patch`` over the interview.

        Candidate snapshot fields are not re-derived.
        """
        data = _interview_fields(_patch(patch, _INTERVIEW_REQUIRED))
        interview = replace(self.get_interview(interview_id), **data)
        self._interviews[interview_id] = interview
        logger.info(
            "interview updated fields=%s",
            sorted(data),
            extra={"interview_id": interview_id},
        )
        return interview

    @_locked
    def cancel_interview(self, interview_id: str) -> None:
        self.get_interview(interview_id)
        del self._interviews[interview_id]
        logger.info("interview cancelled", extra={"interview_id": interview_id})

    @_locked
    def send_reminder(self, interview_id: str) -> ReminderReceipt:
        """Mark the reminder as sent and render its body.

        Nothing is delivered; the rendered text is only logged.
        """
        interview = replace(self.get_interview(interview_id), reminder_sent=True)
        template = self._settings.email_templates.get("reminder", "")
        body = render_template(template, reminder_context(interview, self._settings))
        self._interviews[interview_id] = interview
        logger.info("reminder sent", extra={"interview_id": interview_id})
        logger.debug("reminder body: %s", body, extra={"interview_id": interview_id})
        return ReminderReceipt(
            success=True,
            message=f"Reminder sent to {interview.candidate_name}",
            body=body,
        )

    # Settings

    @_locked
    def get_settings(self) -> CompanySettings:
        return self._settings

    @_locked
    def update_settings(self, patch: Mapping[str, Any]) -> CompanySettings:
        """Shallow-merge settings; ``email_templates`` is replaced wholesale."""
        changes = _patch(patch, _SETTINGS_REQUIRED)
        if "email_templates" in changes:
            changes["email_templates"] = dict(changes["email_templates"])
        self._settings = replace(self._settings, **changes)
        logger.info("settings updated fields=%s", sorted(changes))
        return self._settings

    # Statistics

    def _midnight(self, value: str | None) -> datetime | None:
        try:
            day = date.fromisoformat(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        return self._tz.localize(datetime.combine(day, time.min))

    @_locked
    def compute_stats(self) -> PipelineStats:
        """Count candidates per stage and interviews coming up.

        ``this_week_interviews`` counts interviews whose date, taken at
        midnight, lies within ``[now, now + 7 days]``. An interview later
        today is therefore not counted.
        """
        candidates = list(self._candidates.values())
        interviews = list(self._interviews.values())

        by_stage = {stage: 0 for stage in STAGES}
        for candidate in candidates:
            if candidate.stage in by_stage:
                by_stage[candidate.stage] += 1

        now = self._clock()
        horizon = now + WEEK
        this_week = 0
        for interview in interviews:
            start = self._midnight(interview.date)
            if start is not None and now <= start <= horizon:
                this_week += 1

        return PipelineStats(
            total=len(candidates),
            by_stage=by_stage,
            upcoming_interviews=sum(1 for i in interviews if i.status == SCHEDULED),
            this_week_interviews=this_week,
        )
