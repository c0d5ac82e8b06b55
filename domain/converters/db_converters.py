"""
Converters: Database row format <-> domain WorkoutRecord.

Provides conversion between Supabase rows and the workout domain models.

Database schema:
- workouts: id (UUID), date (DATE), day_type (TEXT), total_kg (NUMERIC), created_at
- exercises: id (UUID), workout_id -> workouts.id, name (TEXT), created_at
- sets: id (UUID), exercise_id -> exercises.id, reps (INT), weight_kg (NUMERIC), created_at

Bulk reads embed children with PostgREST resource embedding
(``*, exercises(*, sets(*))``), so a workout row carries an ``exercises``
list and every exercise row a ``sets`` list.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from domain.models import DayType, ExerciseEntry, ExerciseRecord, SetRecord, WorkoutRecord


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            # Try ISO format with Z suffix
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _creation_order(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Order embedded rows by created_at; rows without one keep store order at the end."""
    # PostgREST timestamps share one ISO format, so they sort as strings
    indexed = sorted(
        enumerate(rows),
        key=lambda item: (
            item[1].get("created_at") is None,
            item[1].get("created_at") or "",
            item[0],
        ),
    )
    return [row for _, row in indexed]


def db_row_to_set(row: Dict[str, Any]) -> SetRecord:
    return SetRecord(
        id=str(row["id"]),
        exercise_id=str(row["exercise_id"]),
        reps=row["reps"],
        weight_kg=row["weight_kg"],
        created_at=_parse_datetime(row.get("created_at")),
    )


def db_row_to_exercise(row: Dict[str, Any]) -> ExerciseRecord:
    sets = [db_row_to_set(s) for s in _creation_order(row.get("sets") or [])]
    return ExerciseRecord(
        id=str(row["id"]),
        workout_id=str(row["workout_id"]),
        name=row["name"],
        sets=sets,
        created_at=_parse_datetime(row.get("created_at")),
    )


def db_row_to_workout(row: Dict[str, Any]) -> WorkoutRecord:
    """
    Convert a workouts row (optionally with embedded children) to WorkoutRecord.

    Args:
        row: Dictionary from the workouts table, as returned by PostgREST.

    Returns:
        WorkoutRecord with exercises and sets in creation order.

    Raises:
        KeyError: If a required column is missing.
        pydantic.ValidationError: If a column holds an unparseable value.

    Examples:
        >>> row = {
        ...     "id": "w-1",
        ...     "date": "2024-03-04",
        ...     "day_type": "pull",
        ...     "total_kg": 500,
        ...     "exercises": [{
        ...         "id": "e-1",
        ...         "workout_id": "w-1",
        ...         "name": "Row",
        ...         "sets": [{"id": "s-1", "exercise_id": "e-1", "reps": 10, "weight_kg": 50}],
        ...     }],
        ... }
        >>> db_row_to_workout(row).exercises[0].sets[0].volume_kg
        500.0
    """
    exercises = [db_row_to_exercise(e) for e in _creation_order(row.get("exercises") or [])]
    return WorkoutRecord(
        id=str(row["id"]),
        date=row["date"],
        day_type=DayType(row["day_type"]),
        total_kg=row["total_kg"],
        exercises=exercises,
        created_at=_parse_datetime(row.get("created_at")),
    )


def workout_to_db_row(
    workout_date: date,
    day_type: DayType,
    total_kg: float,
) -> Dict[str, Any]:
    """Build the insert payload for the workouts table."""
    return {
        "date": workout_date.isoformat(),
        "day_type": day_type.value,
        "total_kg": total_kg,
    }


def exercise_to_db_row(workout_id: str, exercise: ExerciseEntry) -> Dict[str, Any]:
    """Build the insert payload for the exercises table."""
    return {
        "workout_id": workout_id,
        "name": exercise.name.strip(),
    }


def sets_to_db_rows(exercise_id: str, exercise: ExerciseEntry) -> List[Dict[str, Any]]:
    """Build insert payloads for the counted sets of an exercise."""
    return [
        {
            "exercise_id": exercise_id,
            "reps": s.reps,
            "weight_kg": s.weight_kg,
        }
        for s in exercise.sets
        if s.is_counted
    ]
