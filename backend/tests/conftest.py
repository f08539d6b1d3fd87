"""
Point the app at a throwaway SQLite file before anything imports liftlog,
and rebuild the schema around every test.
"""
import os
import tempfile
import uuid
from datetime import datetime
from decimal import Decimal

os.environ["DB_URL"] = f"sqlite:///{os.path.join(tempfile.gettempdir(), f'liftlog-test-{uuid.uuid4().hex[:8]}.db')}"
os.environ["ENV"] = "test"

import pytest

from liftlog import models  # noqa: F401  # registers tables
from liftlog.db import Base, SessionLocal, engine
from liftlog.models import Exercise, Workout, WorkoutExercise, ExerciseSet
from liftlog.security import create_access_token


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth():
    """auth("user_a") -> Authorization header for that identity-provider id."""
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers


@pytest.fixture
def make_workout(db):
    """
    Insert a workout straight into the store, bypassing the API.

    exercises: [(exercise_name, order_index, [(set_number, reps, weight_lbs), ...]), ...]
    """
    def _make(user_id, *, name="Session", date=datetime(2025, 9, 1, 18, 0), duration_minutes=None, exercises=()):
        now = datetime.now()
        workout = Workout(user_id=user_id, name=name, date=date, duration_minutes=duration_minutes,
                          created_at=now, updated_at=now)
        db.add(workout)
        db.flush()
        for ex_name, order_index, sets in exercises:
            exercise = db.query(Exercise).filter_by(name=ex_name).one_or_none()
            if exercise is None:
                exercise = Exercise(name=ex_name, muscle_group="Legs")
                db.add(exercise)
                db.flush()
            we = WorkoutExercise(workout_id=workout.id, exercise_id=exercise.id, order_index=order_index)
            db.add(we)
            db.flush()
            for set_number, reps, weight in sets:
                db.add(ExerciseSet(workout_exercise_id=we.id, set_number=set_number, reps=reps,
                                   weight=Decimal(str(weight))))
        db.commit()
        return workout.id
    return _make
