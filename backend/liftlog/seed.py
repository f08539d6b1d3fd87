"""
Seed the exercise catalog.

Run: cd backend && python -m liftlog.seed
Existing names are skipped, so re-running is safe.
"""
import logging

from sqlalchemy.orm import Session

from liftlog.db import SessionLocal
from liftlog.repositories.exercise_repo import ExerciseRepository

log = logging.getLogger("liftlog.seed")

INITIAL_EXERCISES = [
    {"name": "Bench Press", "muscle_group": "Chest", "description": "Barbell bench press"},
    {"name": "Squat", "muscle_group": "Legs", "description": "Barbell back squat"},
    {"name": "Deadlift", "muscle_group": "Back", "description": "Conventional deadlift"},
    {"name": "Overhead Press", "muscle_group": "Shoulders", "description": "Standing barbell press"},
    {"name": "Barbell Row", "muscle_group": "Back", "description": "Bent-over barbell row"},
    {"name": "Pull-ups", "muscle_group": "Back", "description": "Bodyweight pull-ups"},
    {"name": "Dips", "muscle_group": "Chest", "description": "Bodyweight or weighted dips"},
    {"name": "Romanian Deadlift", "muscle_group": "Hamstrings", "description": "RDL variation"},
    {"name": "Leg Press", "muscle_group": "Legs", "description": "Machine leg press"},
    {"name": "Lat Pulldown", "muscle_group": "Back", "description": "Cable lat pulldown"},
]

def seed_exercises(db: Session) -> int:
    """Insert missing catalog entries. Returns how many were added."""
    repo = ExerciseRepository(db)
    added = 0
    for row in INITIAL_EXERCISES:
        if repo.get_by_name(row["name"]):
            continue
        try:
            repo.create(**row)
        except ValueError:
            # inserted concurrently by another seeder
            continue
        added += 1
    return added

def main():
    logging.basicConfig(level=logging.INFO)
    log.info("Seeding exercises...")
    with SessionLocal() as db:
        added = seed_exercises(db)
    log.info("Seeding complete! %d new exercise(s)", added)

if __name__ == "__main__":
    main()
