"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from datetime import date
from typing import List, Optional, Protocol, Sequence

from domain.models import DayType, ExerciseEntry, WorkoutRecord


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    This protocol defines the contract for workout storage and retrieval.
    Implementations must provide all methods defined here and must raise
    application.exceptions errors on store failures rather than returning
    sentinel values.
    """

    def list_workouts(self) -> List[WorkoutRecord]:
        """
        Get all workouts with their exercises and sets.

        Returns:
            Workout records ordered by date, newest first

        Raises:
            WorkoutStoreError: If the store cannot be read
        """
        ...

    def get_workout(self, workout_id: str) -> Optional[WorkoutRecord]:
        """
        Get a single workout with its exercises and sets.

        Args:
            workout_id: Workout UUID

        Returns:
            Workout record or None if not found

        Raises:
            WorkoutStoreError: If the store cannot be read
        """
        ...

    def create_workout(
        self,
        workout_date: date,
        day_type: DayType,
        total_kg: float,
        exercises: Sequence[ExerciseEntry],
    ) -> WorkoutRecord:
        """
        Insert a workout, then each exercise followed by its sets.

        Writes are not transactional. A failure after the workout row is
        written leaves the rows written so far in place.

        Args:
            workout_date: Calendar date of the session
            day_type: Split category
            total_kg: Precomputed total load
            exercises: Exercises to store; only counted sets are written

        Returns:
            The created workout record with nested exercises and sets

        Raises:
            WorkoutCreationError: If any insert fails
        """
        ...

    def delete_workout(self, workout_id: str) -> None:
        """
        Delete a workout with its exercises and sets, children first.

        Steps run in order: sets, exercises, workout. A failure stops the
        sequence and is reported with the stages already completed.

        Args:
            workout_id: Workout UUID

        Raises:
            WorkoutNotFoundError: If no workout row was deleted, or the id
                is not one the store can match
            WorkoutDeletionError: If a step fails
        """
        ...
