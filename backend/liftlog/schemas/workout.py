import math
import re
from typing import Any
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from liftlog.utils.dates import parse_date_input

NAME_MAX = 255
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

class WorkoutForm(BaseModel):
    """Create/update input. Raw form values in, typed values out."""
    name: str
    date: datetime
    duration_minutes: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def name_rules(cls, v: Any) -> str:
        v2 = v.strip() if isinstance(v, str) else ""
        if not v2:
            raise ValueError("Workout name is required")
        if len(v2) > NAME_MAX:
            raise ValueError("Workout name is too long")
        return v2

    @field_validator("date", mode="before")
    @classmethod
    def date_parseable(cls, v: Any) -> datetime:
        if isinstance(v, datetime):
            return v
        if not isinstance(v, str):
            raise ValueError("Invalid date format")
        try:
            return parse_date_input(v)
        except ValueError:
            raise ValueError("Invalid date format") from None

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def duration_optional(cls, v: Any) -> int | None:
        # Blank or non-numeric means "not provided", never zero
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            # leading integer, so "45 min" is 45 and "1.5" is 1
            m = _LEADING_INT.match(v)
            if m is None:
                return None
            v = int(m.group(1))
        elif isinstance(v, float):
            if not math.isfinite(v):
                return None
            v = int(v)
        elif not isinstance(v, int):
            return None
        if v < 1:
            raise ValueError("Duration must be a positive number of minutes")
        return v

class WorkoutRead(BaseModel):
    id: int
    user_id: str
    name: str
    date: datetime
    duration_minutes: int | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class SetDetails(BaseModel):
    id: int
    set_number: int
    reps: int
    weight: Decimal  # pounds

class ExerciseDetails(BaseModel):
    id: int  # catalog exercise id
    workout_exercise_id: int
    name: str
    description: str | None = None
    muscle_group: str | None = None
    order_index: int
    sets: list[SetDetails] = Field(default_factory=list)

class WorkoutWithDetails(BaseModel):
    id: int
    name: str
    date: datetime
    duration_minutes: int | None = None
    exercises: list[ExerciseDetails] = Field(default_factory=list)

# Failure body for 4xx/5xx responses from the mutation routes
class ActionErrorBody(BaseModel):
    errors: dict[str, list[str]] | str
