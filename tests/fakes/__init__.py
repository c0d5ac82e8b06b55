"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, make_workout

    repo = FakeWorkoutRepository([make_workout(date(2024, 3, 4), 500)])
"""
from datetime import date
from typing import List, Optional, Sequence, Tuple
import uuid

from domain.models import DayType, ExerciseRecord, SetRecord, WorkoutRecord
from tests.fakes.workout_repository import FakeWorkoutRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_workout(
    workout_date: date,
    total_kg: float,
    day_type: DayType = DayType.PULL,
    *,
    workout_id: Optional[str] = None,
    exercises: Sequence[Tuple[str, Sequence[Tuple[int, float]]]] = (),
) -> WorkoutRecord:
    """
    Build a WorkoutRecord for tests.

    Args:
        workout_date: Session date
        total_kg: Stored total (not recomputed from exercises)
        day_type: Split category
        workout_id: Explicit ID (random if omitted)
        exercises: (name, [(reps, weight_kg), ...]) pairs

    Returns:
        WorkoutRecord
    """
    wid = workout_id or str(uuid.uuid4())
    records: List[ExerciseRecord] = []
    for name, sets in exercises:
        exercise_id = str(uuid.uuid4())
        records.append(
            ExerciseRecord(
                id=exercise_id,
                workout_id=wid,
                name=name,
                sets=[
                    SetRecord(id=str(uuid.uuid4()), exercise_id=exercise_id, reps=r, weight_kg=w)
                    for r, w in sets
                ],
            )
        )
    return WorkoutRecord(
        id=wid,
        date=workout_date,
        day_type=day_type,
        total_kg=total_kg,
        exercises=records,
    )


def create_workout_repo(
    workouts: Optional[List[WorkoutRecord]] = None,
) -> FakeWorkoutRepository:
    """Create a FakeWorkoutRepository, optionally pre-populated."""
    return FakeWorkoutRepository(workouts)


__all__ = [
    "FakeWorkoutRepository",
    "make_workout",
    "create_workout_repo",
]
