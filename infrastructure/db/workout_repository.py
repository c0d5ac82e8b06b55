"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for workout persistence.
The client is constructor-injected; nothing here reaches for a global handle.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import (
    DeleteStage,
    WorkoutCreationError,
    WorkoutDeletionError,
    WorkoutNotFoundError,
    WorkoutStoreError,
)
from domain.converters import (
    db_row_to_workout,
    exercise_to_db_row,
    sets_to_db_rows,
    workout_to_db_row,
)
from domain.models import DayType, ExerciseEntry, WorkoutRecord

logger = logging.getLogger(__name__)

WORKOUTS_TABLE = "workouts"
EXERCISES_TABLE = "exercises"
SETS_TABLE = "sets"

# Embedded select: workout -> exercises -> sets in one round trip
WORKOUT_WITH_CHILDREN = "*, exercises(*, sets(*))"

# Postgres invalid_text_representation: an id that is not a UUID matches no row
INVALID_TEXT_REPRESENTATION = "22P02"


def _is_malformed_id(error: Exception) -> bool:
    return isinstance(error, APIError) and error.code == INVALID_TEXT_REPRESENTATION


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    # =========================================================================
    # Reads
    # =========================================================================

    def list_workouts(self) -> List[WorkoutRecord]:
        """Get all workouts with exercises and sets, newest date first."""
        try:
            result = self._client.table(WORKOUTS_TABLE) \
                .select(WORKOUT_WITH_CHILDREN) \
                .order("date", desc=True) \
                .execute()
        except Exception as e:
            logger.error(f"Failed to fetch workouts: {e}")
            raise WorkoutStoreError("Failed to fetch workouts") from e

        rows = result.data or []
        logger.debug(f"Fetched {len(rows)} workout(s)")
        return [db_row_to_workout(row) for row in rows]

    def get_workout(self, workout_id: str) -> Optional[WorkoutRecord]:
        """Get a single workout by ID."""
        try:
            result = self._client.table(WORKOUTS_TABLE) \
                .select(WORKOUT_WITH_CHILDREN) \
                .eq("id", workout_id) \
                .limit(1) \
                .execute()
        except Exception as e:
            if _is_malformed_id(e):
                logger.info(f"Workout id {workout_id!r} is not a valid id; treating as missing")
                return None
            logger.error(f"Failed to fetch workout {workout_id}: {e}")
            raise WorkoutStoreError(f"Failed to fetch workout {workout_id}") from e

        if not result.data:
            return None
        return db_row_to_workout(result.data[0])

    # =========================================================================
    # Writes
    # =========================================================================

    def create_workout(
        self,
        workout_date: date,
        day_type: DayType,
        total_kg: float,
        exercises: Sequence[ExerciseEntry],
    ) -> WorkoutRecord:
        """
        Insert the workout row, then each exercise followed by its counted sets.

        Nothing is rolled back on failure; the raised WorkoutCreationError
        reports which rows exist.
        """
        workout_row = self._insert_one(
            WORKOUTS_TABLE,
            workout_to_db_row(workout_date, day_type, total_kg),
            on_error=lambda: WorkoutCreationError("Failed to insert workout"),
        )
        workout_id = str(workout_row["id"])
        logger.info(f"Workout {workout_id} inserted ({day_type.value}, {total_kg} kg)")

        created_ids: List[str] = []
        exercise_rows: List[Dict[str, Any]] = []

        def partial(what: str) -> WorkoutCreationError:
            return WorkoutCreationError(
                f"Workout {workout_id} was created but {what} failed",
                workout_id=workout_id,
                created_exercise_ids=list(created_ids),
            )

        for exercise in exercises:
            exercise_row = self._insert_one(
                EXERCISES_TABLE,
                exercise_to_db_row(workout_id, exercise),
                on_error=lambda: partial(f"inserting exercise '{exercise.name.strip()}'"),
            )
            exercise_id = str(exercise_row["id"])
            created_ids.append(exercise_id)

            set_rows = sets_to_db_rows(exercise_id, exercise)
            inserted_sets: List[Dict[str, Any]] = []
            if set_rows:
                try:
                    result = self._client.table(SETS_TABLE).insert(set_rows).execute()
                except Exception as e:
                    logger.error(f"Failed to insert sets for exercise {exercise_id}: {e}")
                    raise partial(f"inserting sets for '{exercise.name.strip()}'") from e
                inserted_sets = result.data or []

            exercise_rows.append({**exercise_row, "sets": inserted_sets})

        logger.info(f"Workout {workout_id} saved with {len(exercise_rows)} exercise(s)")
        return db_row_to_workout({**workout_row, "exercises": exercise_rows})

    def delete_workout(self, workout_id: str) -> None:
        """
        Delete a workout and its children: sets, then exercises, then the workout.

        Referential constraints in the store require child rows to go first.
        A failing step aborts the sequence without retrying.
        """
        completed: List[DeleteStage] = []

        def run(stage: DeleteStage, step: Callable[[], Any]) -> Any:
            try:
                outcome = step()
            except Exception as e:
                if _is_malformed_id(e):
                    logger.warning(f"Workout id {workout_id!r} is not a valid id; nothing to delete")
                    raise WorkoutNotFoundError(workout_id) from e
                logger.error(f"Delete of workout {workout_id} failed at {stage.value}: {e}")
                raise WorkoutDeletionError(workout_id, stage, completed) from e
            completed.append(stage)
            return outcome

        logger.info(f"Attempting to delete workout {workout_id}")
        run(DeleteStage.SETS, lambda: self._delete_sets(workout_id))
        run(
            DeleteStage.EXERCISES,
            lambda: self._client.table(EXERCISES_TABLE)
            .delete()
            .eq("workout_id", workout_id)
            .execute(),
        )
        result = run(
            DeleteStage.WORKOUT,
            lambda: self._client.table(WORKOUTS_TABLE)
            .delete()
            .eq("id", workout_id)
            .execute(),
        )

        if not result.data:
            logger.warning(f"No workout found with id {workout_id} (0 rows deleted)")
            raise WorkoutNotFoundError(workout_id)
        logger.info(f"Workout {workout_id} deleted successfully")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _delete_sets(self, workout_id: str) -> None:
        result = self._client.table(EXERCISES_TABLE) \
            .select("id") \
            .eq("workout_id", workout_id) \
            .execute()
        exercise_ids = [row["id"] for row in (result.data or [])]
        if exercise_ids:
            self._client.table(SETS_TABLE).delete().in_("exercise_id", exercise_ids).execute()

    def _insert_one(
        self,
        table: str,
        row: Dict[str, Any],
        *,
        on_error: Callable[[], WorkoutStoreError],
    ) -> Dict[str, Any]:
        try:
            result = self._client.table(table).insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to insert into {table}: {e}")
            raise on_error() from e
        if not result.data:
            logger.error(f"Insert into {table} returned no row")
            raise on_error()
        return result.data[0]
