from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.exercise import ExercisePage

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=ExercisePage, dependencies=[Depends(get_current_user_id)])
def list_exercises(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = ExerciseRepository(db).list(limit=limit, offset=offset)
    return ExercisePage(items=page.items, total=page.total, limit=page.limit, offset=page.offset)
