from datetime import datetime
from pydantic import BaseModel

class ExerciseRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    muscle_group: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}

class ExercisePage(BaseModel):
    items: list[ExerciseRead]
    total: int
    limit: int
    offset: int
