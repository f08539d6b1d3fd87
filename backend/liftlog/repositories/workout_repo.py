# liftlog/repositories/workout_repo.py
"""
Workout reads and writes.

Every statement carries ``user_id`` in its WHERE clause; ownership is never
checked after the fact. A missing row and another user's row look the same
(``None``) to callers.
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import select, update, delete
from sqlalchemy.orm import selectinload

from liftlog.models import Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository
from liftlog.schemas.workout import WorkoutWithDetails, ExerciseDetails, SetDetails
from liftlog.utils.dates import day_bounds

def _to_details(workout: Workout) -> WorkoutWithDetails:
    return WorkoutWithDetails(
        id=workout.id,
        name=workout.name,
        date=workout.date,
        duration_minutes=workout.duration_minutes,
        exercises=[
            ExerciseDetails(
                id=we.exercise.id,
                workout_exercise_id=we.id,
                name=we.exercise.name,
                description=we.exercise.description,
                muscle_group=we.exercise.muscle_group,
                order_index=we.order_index,
                sets=[
                    SetDetails(id=s.id, set_number=s.set_number, reps=s.reps, weight=s.weight)
                    for s in we.sets
                ],
            )
            for we in workout.workout_exercises
        ],
    )

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def _owned(self, user_id: str):
        """SELECT of this user's workouts with exercises and sets eagerly loaded."""
        return (
            select(Workout)
            .where(Workout.user_id == user_id)
            .options(
                selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.exercise),
                selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets),
            )
        )

    # READS
    def list_for_user_on_date(self, user_id: str, day: date | datetime) -> list[WorkoutWithDetails]:
        start, end = day_bounds(day)
        stmt = (
            self._owned(user_id)
            .where(Workout.date >= start, Workout.date < end)
            .order_by(Workout.date.desc(), Workout.id.asc())
        )
        return [_to_details(w) for w in self.db.execute(stmt).scalars().all()]

    def get_for_user(self, workout_id: int, user_id: str) -> Optional[WorkoutWithDetails]:
        stmt = self._owned(user_id).where(Workout.id == workout_id)
        workout = self.db.execute(stmt).scalar_one_or_none()
        return _to_details(workout) if workout else None

    # WRITES
    def create(
        self,
        *,
        user_id: str,
        name: str,
        date: datetime,
        duration_minutes: int | None = None,
    ) -> Workout:
        now = datetime.now()
        workout = Workout(
            user_id=user_id,
            name=name,
            date=date,
            duration_minutes=duration_minutes,
            created_at=now,
            updated_at=now,
        )
        return self.add_and_commit(workout)

    def update_for_user(
        self,
        workout_id: int,
        user_id: str,
        *,
        name: str,
        date: datetime,
        duration_minutes: int | None,
    ) -> Optional[Workout]:
        """Full replace of the editable fields. Zero matched rows -> None."""
        stmt = (
            update(Workout)
            .where(Workout.id == workout_id, Workout.user_id == user_id)
            .values(name=name, date=date, duration_minutes=duration_minutes, updated_at=datetime.now())
            .returning(Workout)
        )
        workout = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if workout is None:
            return None
        self.db.refresh(workout)
        return workout

    def delete_for_user(self, workout_id: int, user_id: str) -> bool:
        # Exercises and sets go with it via ON DELETE CASCADE
        stmt = delete(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        deleted = self.db.execute(stmt).rowcount
        self.db.commit()
        return deleted > 0
