"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Store failures are never retried or swallowed: they carry enough state for
the caller to tell the user exactly what was and was not written.
"""
from enum import Enum
from typing import List, Optional, Sequence


class DeleteStage(str, Enum):
    """Steps of the cascading workout delete, in execution order."""

    SETS = "sets"
    EXERCISES = "exercises"
    WORKOUT = "workout"


class WorkoutStoreError(Exception):
    """A call to the workout data store failed.

    The underlying client error, when there is one, is chained as __cause__.
    """

    pass


class WorkoutNotFoundError(WorkoutStoreError):
    """No workout exists with the requested id."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class WorkoutCreationError(WorkoutStoreError):
    """Error while inserting a workout with its exercises and sets.

    Inserts are not rolled back. ``workout_id`` is set when the workout row
    was written before the failure and ``created_exercise_ids`` lists the
    exercise rows written so far.
    """

    def __init__(
        self,
        message: str,
        *,
        workout_id: Optional[str] = None,
        created_exercise_ids: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.workout_id = workout_id
        self.created_exercise_ids = created_exercise_ids or []

    @property
    def is_partial(self) -> bool:
        """True when some rows were written before the failure."""
        return self.workout_id is not None


class WorkoutDeletionError(WorkoutStoreError):
    """Error part-way through the cascading delete.

    Stages in ``completed_stages`` have already been applied; the store is
    left in that intermediate state.
    """

    def __init__(
        self,
        workout_id: str,
        failed_stage: DeleteStage,
        completed_stages: Sequence[DeleteStage] = (),
    ):
        done = ", ".join(s.value for s in completed_stages) or "none"
        super().__init__(
            f"Deleting workout {workout_id} failed at stage '{failed_stage.value}' "
            f"(completed: {done})"
        )
        self.workout_id = workout_id
        self.failed_stage = failed_stage
        self.completed_stages = list(completed_stages)
