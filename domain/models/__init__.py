"""
Domain models for LiftLog.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

- WorkoutRecord: a stored session (aggregate root) with its exercises and sets
- ExerciseRecord / SetRecord: nested stored entities
- DayType: the training split category
- WorkoutDraft / ExerciseEntry / SetEntry: editable form state before logging

Usage:
    >>> from domain.models import WorkoutDraft, DayType

    >>> draft = WorkoutDraft(day_type=DayType.PUSH)
    >>> draft.rename_exercise(0, "Bench Press")
    >>> draft.update_set(0, 0, reps=5, weight_kg=80)
    >>> draft.total_kg
    400.0
"""

from domain.models.draft import ExerciseEntry, SetEntry, WorkoutDraft
from domain.models.workout import DayType, ExerciseRecord, SetRecord, WorkoutRecord

__all__ = [
    # Stored entities
    "WorkoutRecord",
    "ExerciseRecord",
    "SetRecord",
    # Form state
    "WorkoutDraft",
    "ExerciseEntry",
    "SetEntry",
    # Enums
    "DayType",
]
