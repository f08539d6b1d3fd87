from datetime import date as date_type
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from liftlog.actions.result import ActionResult, FailureKind
from liftlog.actions.workouts import create_workout, update_workout, delete_workout
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.routers.dashboard import NO_STORE
from liftlog.schemas.workout import WorkoutRead, WorkoutWithDetails, ActionErrorBody

router = APIRouter(prefix="/workouts", tags=["workouts"])

FAILURE_STATUS = {
    FailureKind.validation: status.HTTP_422_UNPROCESSABLE_ENTITY,
    FailureKind.not_found: status.HTTP_404_NOT_FOUND,
    FailureKind.unauthenticated: status.HTTP_401_UNAUTHORIZED,
    FailureKind.unavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}

def failure_response(result: ActionResult) -> JSONResponse:
    body = ActionErrorBody(errors=result.errors)
    return JSONResponse(status_code=FAILURE_STATUS[result.kind], content=body.model_dump())

_failures = {code: {"model": ActionErrorBody} for code in (401, 404, 422, 503)}

@router.get("", response_model=list[WorkoutWithDetails])
def list_workouts_on_date(
    response: Response,
    day: date_type | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    response.headers["Cache-Control"] = NO_STORE
    return WorkoutRepository(db).list_for_user_on_date(user_id, day or date_type.today())

@router.get("/{workout_id}", response_model=WorkoutWithDetails)
def get_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workout = WorkoutRepository(db).get_for_user(workout_id, user_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED, responses=_failures)
def add_workout(
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    # user_id comes from the token only; a client-sent "user_id" is ignored by the form
    result = create_workout(db, user_id, payload)
    if not result.success:
        return failure_response(result)
    return result.data

@router.put("/{workout_id}", response_model=WorkoutRead, responses=_failures)
def edit_workout(
    workout_id: int,
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    result = update_workout(db, workout_id, user_id, payload)
    if not result.success:
        return failure_response(result)
    return result.data

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_failures)
def remove_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    result = delete_workout(db, workout_id, user_id)
    if not result.success:
        return failure_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
