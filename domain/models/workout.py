"""
Workout aggregate - the main domain entity.

A logged training session as it exists in the data store: one WorkoutRecord
owning its ExerciseRecords, each owning its SetRecords. Records are immutable
snapshots; creation and deletion happen wholesale through the repository.
"""

import datetime as dt
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class DayType(str, Enum):
    """Training split category of a session."""

    PULL = "pull"
    PUSH = "push"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    OFF = "off"


class SetRecord(BaseModel):
    """A single stored set: reps at a weight."""

    id: str
    exercise_id: str
    reps: int = Field(..., description="Repetitions performed")
    weight_kg: float = Field(..., description="Weight lifted, in kilograms")
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def volume_kg(self) -> float:
        """Load moved by this set (reps x weight)."""
        return self.reps * self.weight_kg


class ExerciseRecord(BaseModel):
    """A stored exercise and its sets, in entry order."""

    id: str
    workout_id: str
    name: str
    sets: List[SetRecord] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def volume_kg(self) -> float:
        return sum(s.volume_kg for s in self.sets)


class WorkoutRecord(BaseModel):
    """
    Aggregate root representing a logged session.

    ``total_kg`` is precomputed at creation time and stored on the workout row;
    it is not recomputed from the nested sets when read back.

    Examples:
        >>> workout = WorkoutRecord(
        ...     id="w-1",
        ...     date=dt.date(2024, 3, 4),
        ...     day_type=DayType.PULL,
        ...     total_kg=1200.0,
        ... )
        >>> workout.exercise_count
        0
    """

    id: str
    date: dt.date
    day_type: DayType
    total_kg: float = Field(..., description="Sum of reps x weight over counted sets")
    exercises: List[ExerciseRecord] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def set_count(self) -> int:
        return sum(len(e.sets) for e in self.exercises)
