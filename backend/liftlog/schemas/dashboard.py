from datetime import date
from pydantic import BaseModel, Field
from liftlog.utils.weights import WeightUnit

class SetRow(BaseModel):
    id: int
    set_number: int
    reps: int
    weight: str  # converted to the view's unit, one decimal

class ExerciseBlock(BaseModel):
    position: int  # 1-based display number
    name: str
    muscle_group: str | None = None
    sets: list[SetRow] = Field(default_factory=list)

class WorkoutCard(BaseModel):
    id: int
    name: str
    edit_path: str
    duration_minutes: int | None = None
    duration_label: str
    exercises: list[ExerciseBlock] = Field(default_factory=list)

class DashboardView(BaseModel):
    date: date
    date_label: str
    unit: WeightUnit
    weight_header: str
    empty_message: str | None = None
    workouts: list[WorkoutCard] = Field(default_factory=list)
