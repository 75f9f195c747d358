"""Candidate operations of the pipeline store."""

from dataclasses import replace

import pytest

from app.core.errors import NotFoundError
from app.domain.models import Interview, Stage
from conftest import TODAY


def test_created_ids_are_unique(store):
    ids = {store.create_candidate({"name": f"C{n}"}).id for n in range(25)}
    assert len(ids) == 25


def test_create_forces_stage_and_applied_date(store):
    candidate = store.create_candidate(
        {"id": "mine", "stage": "hired", "applied_date": "2000-01-01", "name": "X"}
    )
    assert candidate.stage == "applied"
    assert candidate.applied_date == TODAY
    assert candidate.id != "mine"
    assert candidate.name == "X"
    assert store.get_candidate(candidate.id) == candidate


def test_missing_fields_are_stored_as_none(store):
    candidate = store.create_candidate({})
    assert candidate.name is None
    assert candidate.email is None


def test_list_keeps_insertion_order(store):
    names = ["Ann", "Bob", "Cyd"]
    for name in names:
        store.create_candidate({"name": name})
    assert [c.name for c in store.list_candidates()] == names


def test_update_changes_only_supplied_fields(store):
    original = store.create_candidate(
        {"name": "Ann", "email": "ann@example.com", "notes": "old"}
    )
    updated = store.update_candidate(original.id, {"notes": "new"})
    assert updated == replace(original, notes="new")
    assert store.get_candidate(original.id) == updated


def test_update_may_override_stage_and_date_but_not_id(store):
    original = store.create_candidate({"name": "Ann"})
    updated = store.update_candidate(
        original.id,
        {"id": "other", "stage": "offer", "applied_date": "2025-12-31"},
    )
    assert updated.id == original.id
    assert updated.stage == "offer"
    assert updated.applied_date == "2025-12-31"
    with pytest.raises(NotFoundError):
        store.get_candidate("other")


def test_update_accepts_stage_enum(store):
    original = store.create_candidate({"name": "Ann"})
    updated = store.update_candidate(original.id, {"stage": Stage.HIRED})
    assert updated.stage == "hired"
    assert type(updated.stage) is str


def test_set_stage_allows_any_jump(store):
    candidate = store.create_candidate({"name": "Ann"})
    assert store.set_candidate_stage(candidate.id, "hired").stage == "hired"
    assert store.set_candidate_stage(candidate.id, "applied").stage == "applied"


def test_set_stage_does_not_check_vocabulary(store):
    candidate = store.create_candidate({"name": "Ann"})
    assert store.set_candidate_stage(candidate.id, "archived").stage == "archived"


def test_delete_removes_candidate(store):
    keep = store.create_candidate({"name": "Keep"})
    gone = store.create_candidate({"name": "Gone"})
    assert store.delete_candidate(gone.id) is None
    assert store.list_candidates() == [keep]


def test_delete_leaves_interviews_orphaned(store):
    candidate = store.create_candidate({"name": "Ann"})
    interview = store.schedule_interview({"candidate_id": candidate.id})
    store.delete_candidate(candidate.id)
    orphan = store.get_interview(interview.id)
    assert isinstance(orphan, Interview)
    assert orphan.candidate_id == candidate.id


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.get_candidate("nonexistent"),
        lambda s: s.update_candidate("nonexistent", {"notes": "x"}),
        lambda s: s.set_candidate_stage("nonexistent", "hired"),
        lambda s: s.delete_candidate("nonexistent"),
    ],
)
def test_unknown_candidate_is_not_found(store, call):
    with pytest.raises(NotFoundError) as excinfo:
        call(store)
    assert str(excinfo.value) == "Candidate not found"
    assert excinfo.value.entity_id == "nonexistent"


def test_update_ignores_null_stage(store):
    candidate = store.create_candidate({"name": "Ann"})
    updated = store.update_candidate(candidate.id, {"stage": None, "phone": None})
    assert updated.stage == "applied"
    assert updated.phone is None
