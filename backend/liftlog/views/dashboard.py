from datetime import date

from liftlog.schemas.dashboard import DashboardView, WorkoutCard, ExerciseBlock, SetRow
from liftlog.schemas.workout import WorkoutWithDetails
from liftlog.utils.dates import format_date, format_duration
from liftlog.utils.weights import WeightUnit, CANONICAL_UNIT, convert_weight, format_weight_value

def build_dashboard(workouts: list[WorkoutWithDetails], unit: WeightUnit, selected_date: date) -> DashboardView:
    """Dashboard payload for one day; weights arrive in pounds and leave in ``unit``."""
    cards = [
        WorkoutCard(
            id=w.id,
            name=w.name,
            edit_path=f"/dashboard/workout/{w.id}",
            duration_minutes=w.duration_minutes,
            duration_label=format_duration(w.duration_minutes),
            exercises=[
                ExerciseBlock(
                    position=idx,
                    name=ex.name,
                    muscle_group=ex.muscle_group,
                    sets=[
                        SetRow(
                            id=s.id,
                            set_number=s.set_number,
                            reps=s.reps,
                            weight=format_weight_value(convert_weight(s.weight, CANONICAL_UNIT, unit)),
                        )
                        for s in ex.sets
                    ],
                )
                for idx, ex in enumerate(w.exercises, start=1)
            ],
        )
        for w in workouts
    ]
    label = format_date(selected_date)
    return DashboardView(
        date=selected_date,
        date_label=label,
        unit=unit,
        weight_header=f"Weight ({unit.value})",
        empty_message=None if cards else f"No workouts logged for {label}",
        workouts=cards,
    )
