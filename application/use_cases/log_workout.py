"""
LogWorkout Use Case.

Turns an edited WorkoutDraft into stored records: validates that something
is left to store, computes the total load over counted sets, and persists
the workout with its exercises and sets through the repository.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import WorkoutRepository
from domain.models import WorkoutDraft, WorkoutRecord

logger = logging.getLogger(__name__)


@dataclass
class LogWorkoutResult:
    """Result of the LogWorkout use case execution."""

    success: bool
    workout: Optional[WorkoutRecord] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class LogWorkoutUseCase:
    """
    Use case for logging a workout from a draft.

    Orchestrates the following workflow:
    1. Reduce the draft to persistable exercises and counted sets
    2. Reject drafts with nothing to store
    3. Persist workout, exercises and sets via the repository
    4. Return the created record

    Store failures are not caught here; WorkoutCreationError propagates
    to the caller with the partial-write details.

    Usage:
        >>> use_case = LogWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(draft)
        >>> if result.success:
        ...     print(f"Logged workout: {result.workout.id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def execute(self, draft: WorkoutDraft) -> LogWorkoutResult:
        """
        Execute the log workout workflow.

        Args:
            draft: Edited workout form state

        Returns:
            LogWorkoutResult with the created workout, or validation errors

        Raises:
            WorkoutCreationError: If the store rejects any insert
        """
        validation_errors = self._validate_draft(draft)
        if validation_errors:
            logger.warning(f"Workout draft rejected: {validation_errors}")
            return LogWorkoutResult(
                success=False,
                error="Workout validation failed",
                validation_errors=validation_errors,
            )

        exercises = draft.persistable_exercises()
        total_kg = draft.total_kg
        logger.info(
            f"Logging {draft.day_type.value} workout for {draft.date.isoformat()}: "
            f"{len(exercises)} exercise(s), {total_kg} kg"
        )

        workout = self._workout_repo.create_workout(
            workout_date=draft.date,
            day_type=draft.day_type,
            total_kg=total_kg,
            exercises=exercises,
        )
        return LogWorkoutResult(success=True, workout=workout)

    def _validate_draft(self, draft: WorkoutDraft) -> List[str]:
        """
        Validate draft business rules.

        Pydantic handles structural validation (non-negative reps and weight).
        This method handles the rules about what gets stored.
        """
        errors: List[str] = []

        if not draft.persistable_exercises():
            errors.append(
                "Workout must contain at least one named exercise "
                "with a set of positive reps and weight"
            )

        return errors
