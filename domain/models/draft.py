"""
Workout draft: the editable state behind the "add workout" form.

A draft is mutable while the user edits it and is turned into stored records
by LogWorkoutUseCase. Only counted sets (reps > 0 and weight > 0) of
persistable exercises (non-blank name, at least one counted set) are stored,
and the stored total is computed over exactly those sets.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout import DayType


class SetEntry(BaseModel):
    """One row of the set grid."""

    reps: int = Field(default=0, ge=0, description="Repetitions")
    weight_kg: float = Field(default=0, ge=0, description="Weight in kilograms")

    @property
    def is_counted(self) -> bool:
        """Whether this set is stored and contributes to the total."""
        return self.reps > 0 and self.weight_kg > 0

    @property
    def volume_kg(self) -> float:
        return self.reps * self.weight_kg


class ExerciseEntry(BaseModel):
    """An exercise being entered, with its set grid."""

    name: str = ""
    sets: List[SetEntry] = Field(default_factory=lambda: [SetEntry()], min_length=1)

    @property
    def counted_sets(self) -> List[SetEntry]:
        return [s for s in self.sets if s.is_counted]

    @property
    def is_persistable(self) -> bool:
        return bool(self.name.strip()) and bool(self.counted_sets)


class WorkoutDraft(BaseModel):
    """
    Editable workout before it is logged.

    Mirrors the entry form: it always holds at least one exercise and every
    exercise holds at least one set row. Editing methods take zero-based
    indexes and raise IndexError for out-of-range positions.

    Examples:
        >>> draft = WorkoutDraft(day_type=DayType.LEGS)
        >>> draft.rename_exercise(0, "Squat")
        >>> draft.update_set(0, 0, reps=5, weight_kg=100)
        >>> draft.add_set(0)
        >>> draft.update_set(0, 1, reps=5, weight_kg=110)
        >>> draft.total_kg
        1050.0
    """

    date: dt.date = Field(default_factory=dt.date.today)
    day_type: DayType = DayType.PULL
    exercises: List[ExerciseEntry] = Field(
        default_factory=lambda: [ExerciseEntry()], min_length=1
    )

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_exercise(self) -> None:
        self.exercises.append(ExerciseEntry())

    def remove_exercise(self, index: int) -> None:
        self._exercise(index)
        if len(self.exercises) == 1:
            raise ValueError("A workout draft must keep at least one exercise")
        del self.exercises[index]

    def rename_exercise(self, index: int, name: str) -> None:
        self._exercise(index).name = name

    def add_set(self, exercise_index: int) -> None:
        self._exercise(exercise_index).sets.append(SetEntry())

    def remove_set(self, exercise_index: int, set_index: int) -> None:
        exercise = self._exercise(exercise_index)
        self._set(exercise, set_index)
        if len(exercise.sets) == 1:
            raise ValueError("An exercise must keep at least one set")
        del exercise.sets[set_index]

    def update_set(
        self,
        exercise_index: int,
        set_index: int,
        *,
        reps: Optional[int] = None,
        weight_kg: Optional[float] = None,
    ) -> None:
        """Replace reps and/or weight of one set, re-validating the row."""
        exercise = self._exercise(exercise_index)
        current = self._set(exercise, set_index)
        exercise.sets[set_index] = SetEntry(
            reps=current.reps if reps is None else reps,
            weight_kg=current.weight_kg if weight_kg is None else weight_kg,
        )

    def _exercise(self, index: int) -> ExerciseEntry:
        if not 0 <= index < len(self.exercises):
            raise IndexError(f"No exercise at position {index}")
        return self.exercises[index]

    @staticmethod
    def _set(exercise: ExerciseEntry, index: int) -> SetEntry:
        if not 0 <= index < len(exercise.sets):
            raise IndexError(f"No set at position {index}")
        return exercise.sets[index]

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def persistable_exercises(self) -> List[ExerciseEntry]:
        """Exercises as they will be stored: stripped names, counted sets only."""
        return [
            ExerciseEntry(name=e.name.strip(), sets=e.counted_sets)
            for e in self.exercises
            if e.is_persistable
        ]

    @property
    def total_kg(self) -> float:
        """Total load of the stored part of the draft."""
        return float(
            sum(s.volume_kg for e in self.persistable_exercises() for s in e.sets)
        )
