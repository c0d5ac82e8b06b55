"""
DeleteWorkout Use Case.

Removes a workout with its exercises and sets. The repository runs the
cascade child-first; this use case only logs the outcome. Failures are
surfaced unchanged so the caller can report a partially deleted workout.
"""

import logging

from application.exceptions import WorkoutDeletionError
from application.ports import WorkoutRepository

logger = logging.getLogger(__name__)


class DeleteWorkoutUseCase:
    """Use case for deleting a logged workout."""

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo

    def execute(self, workout_id: str) -> None:
        """
        Delete a workout and everything under it.

        Raises:
            WorkoutNotFoundError: If the workout does not exist
            WorkoutDeletionError: If a cascade step fails
        """
        try:
            self._workout_repo.delete_workout(workout_id)
        except WorkoutDeletionError as e:
            if e.completed_stages:
                logger.error(
                    f"Workout {workout_id} left partially deleted: "
                    f"completed {[s.value for s in e.completed_stages]}, "
                    f"failed at {e.failed_stage.value}"
                )
            raise
        logger.info(f"Workout {workout_id} deleted")
