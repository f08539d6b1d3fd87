from datetime import date

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.deps.preferences import get_weight_unit
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.dashboard import DashboardView
from liftlog.utils.weights import WeightUnit
from liftlog.views.dashboard import build_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

# Listings are per-user and change on every write; browsers and proxies must not keep them
NO_STORE = "private, no-store"

@router.get("", response_model=DashboardView)
def dashboard(
    response: Response,
    day: date | None = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    unit: WeightUnit = Depends(get_weight_unit),
):
    day = day or date.today()
    workouts = WorkoutRepository(db).list_for_user_on_date(user_id, day)
    response.headers["Cache-Control"] = NO_STORE
    return build_dashboard(workouts, unit, day)
