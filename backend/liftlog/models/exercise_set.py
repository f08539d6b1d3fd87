from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Numeric, DateTime, Index, func
from liftlog.db import Base

class ExerciseSet(Base):
    __tablename__ = "sets"
    __table_args__ = (Index("idx_sets_workout_exercise_id", "workout_exercise_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_exercise_id: Mapped[int] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-based
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    # Always pounds; the display unit is a request preference
    weight: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())

    workout_exercise = relationship("WorkoutExercise", back_populates="sets")
