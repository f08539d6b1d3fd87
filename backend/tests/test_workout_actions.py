from datetime import datetime

from sqlalchemy.exc import OperationalError

from liftlog.actions.result import FailureKind
from liftlog.actions.workouts import (
    NOT_FOUND_OR_FORBIDDEN,
    create_workout,
    delete_workout,
    update_workout,
)
from liftlog.repositories.workout_repo import WorkoutRepository

def test_create_success(db):
    r = create_workout(db, "user_a", {"name": "  Push day ", "date": "2025-09-01", "duration_minutes": "60"})
    assert r.success
    assert r.data.name == "Push day"
    assert r.data.user_id == "user_a"
    assert r.data.date == datetime(2025, 9, 1)
    assert r.data.duration_minutes == 60

def test_blank_and_missing_duration_mean_not_provided(db):
    for form in ({"name": "A", "date": "2025-09-01"},
                 {"name": "B", "date": "2025-09-01", "duration_minutes": ""},
                 {"name": "C", "date": "2025-09-01", "duration_minutes": "  "},
                 {"name": "D", "date": "2025-09-01", "duration_minutes": "abc"}):
        r = create_workout(db, "user_a", form)
        assert r.success, r.errors
        assert r.data.duration_minutes is None

def test_validation_errors_are_keyed_by_field(db):
    r = create_workout(db, "user_a", {"name": "", "date": "yesterday-ish", "duration_minutes": "0"})
    assert not r.success
    assert r.kind == FailureKind.validation
    assert r.errors == {
        "name": ["Workout name is required"],
        "date": ["Invalid date format"],
        "duration_minutes": ["Duration must be a positive number of minutes"],
    }

def test_name_too_long(db):
    r = create_workout(db, "user_a", {"name": "x" * 256, "date": "2025-09-01"})
    assert r.errors == {"name": ["Workout name is too long"]}
    assert create_workout(db, "user_a", {"name": "x" * 255, "date": "2025-09-01"}).success

def test_missing_fields_reported(db):
    r = create_workout(db, "user_a", {})
    assert set(r.errors) == {"name", "date"}

def test_client_supplied_user_id_is_ignored(db):
    r = create_workout(db, "user_a", {"name": "A", "date": "2025-09-01", "user_id": "user_b"})
    assert r.data.user_id == "user_a"

def test_requires_principal(db):
    r = create_workout(db, None, {"name": "A", "date": "2025-09-01"})
    assert r.kind == FailureKind.unauthenticated
    assert r.errors == "Authentication required"

def test_update_not_owned_looks_like_missing(db, make_workout):
    wid = make_workout("user_b")
    form = {"name": "Mine now", "date": "2025-09-01"}
    not_owned = update_workout(db, wid, "user_a", form)
    missing = update_workout(db, 999999, "user_a", form)
    assert not_owned.success is missing.success is False
    assert not_owned.kind == missing.kind == FailureKind.not_found
    assert not_owned.errors == missing.errors == NOT_FOUND_OR_FORBIDDEN

def test_update_validates_before_touching_store(db, make_workout):
    wid = make_workout("user_a", name="Keep")
    r = update_workout(db, wid, "user_a", {"name": "", "date": "2025-09-01"})
    assert r.kind == FailureKind.validation
    assert WorkoutRepository(db).get_for_user(wid, "user_a").name == "Keep"

def test_delete_not_owned(db, make_workout):
    wid = make_workout("user_b")
    assert delete_workout(db, wid, "user_a").kind == FailureKind.not_found
    assert delete_workout(db, wid, "user_b").success

def test_store_failure_is_reported_not_raised(db, monkeypatch):
    def boom(self, **kwargs):
        raise OperationalError("INSERT", {}, Exception("server closed the connection"))
    monkeypatch.setattr(WorkoutRepository, "create", boom)
    r = create_workout(db, "user_a", {"name": "A", "date": "2025-09-01"})
    assert r.kind == FailureKind.unavailable
    assert r.errors == "Failed to create workout. Please try again."

def test_duration_keeps_leading_whole_minutes(db):
    for raw, expected in (("45 min", 45), ("1.5", 1), (" 60", 60), ("+30", 30), (90.0, 90), (12.7, 12)):
        r = create_workout(db, "user_a", {"name": "A", "date": "2025-09-01", "duration_minutes": raw})
        assert r.success, raw
        assert r.data.duration_minutes == expected

def test_duration_with_non_positive_leading_number_is_rejected(db):
    for raw in ("-5 min", "0.9"):
        r = create_workout(db, "user_a", {"name": "A", "date": "2025-09-01", "duration_minutes": raw})
        assert r.kind == FailureKind.validation
        assert r.errors == {"duration_minutes": ["Duration must be a positive number of minutes"]}

def test_failed_mutation_leaves_store_untouched(db):
    assert create_workout(db, "user_a", {"name": "", "date": "2025-09-01"}).kind == FailureKind.validation
    assert WorkoutRepository(db).list_for_user_on_date("user_a", datetime(2025, 9, 1)) == []
