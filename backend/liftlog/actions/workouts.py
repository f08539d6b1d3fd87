# liftlog/actions/workouts.py
"""
Create/update/delete workflows behind the workout routes.

Nothing here raises for user-correctable problems: callers get an
``ActionResult`` and map it to a response.
"""
from __future__ import annotations
import logging
from typing import Any, Mapping

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.actions.result import ActionResult, FailureKind, field_errors
from liftlog.models import Workout
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutForm

log = logging.getLogger("uvicorn")

AUTH_REQUIRED = "Authentication required"
NOT_FOUND_OR_FORBIDDEN = "Workout not found or you do not have permission to edit it"

def _validate(form: Mapping[str, Any]) -> WorkoutForm | ActionResult:
    try:
        return WorkoutForm.model_validate(dict(form))
    except ValidationError as e:
        return ActionResult.fail(field_errors(e), FailureKind.validation)

def _store_failure(db: Session, verb: str) -> ActionResult:
    db.rollback()
    log.exception("Failed to %s workout", verb)
    return ActionResult.fail(f"Failed to {verb} workout. Please try again.", FailureKind.unavailable)

def create_workout(db: Session, user_id: str | None, form: Mapping[str, Any]) -> ActionResult[Workout]:
    if not user_id:
        return ActionResult.fail(AUTH_REQUIRED, FailureKind.unauthenticated)
    parsed = _validate(form)
    if isinstance(parsed, ActionResult):
        return parsed

    try:
        workout = WorkoutRepository(db).create(
            user_id=user_id,
            name=parsed.name,
            date=parsed.date,
            duration_minutes=parsed.duration_minutes,
        )
    except SQLAlchemyError:
        return _store_failure(db, "create")

    return ActionResult.ok(workout)

def update_workout(
    db: Session, workout_id: int, user_id: str | None, form: Mapping[str, Any]
) -> ActionResult[Workout]:
    if not user_id:
        return ActionResult.fail(AUTH_REQUIRED, FailureKind.unauthenticated)
    parsed = _validate(form)
    if isinstance(parsed, ActionResult):
        return parsed

    try:
        workout = WorkoutRepository(db).update_for_user(
            workout_id,
            user_id,
            name=parsed.name,
            date=parsed.date,
            duration_minutes=parsed.duration_minutes,
        )
    except SQLAlchemyError:
        return _store_failure(db, "update")

    if workout is None:
        return ActionResult.fail(NOT_FOUND_OR_FORBIDDEN, FailureKind.not_found)

    return ActionResult.ok(workout)

def delete_workout(db: Session, workout_id: int, user_id: str | None) -> ActionResult[None]:
    if not user_id:
        return ActionResult.fail(AUTH_REQUIRED, FailureKind.unauthenticated)
    try:
        deleted = WorkoutRepository(db).delete_for_user(workout_id, user_id)
    except SQLAlchemyError:
        return _store_failure(db, "delete")

    if not deleted:
        return ActionResult.fail(NOT_FOUND_OR_FORBIDDEN, FailureKind.not_found)

    return ActionResult.ok()
