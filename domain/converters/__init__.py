"""
Domain converters between Supabase rows and the workout domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_workout, workout_to_db_row

    >>> workout = db_row_to_workout(row)
    >>> payload = workout_to_db_row(draft.date, draft.day_type, draft.total_kg)
"""

from domain.converters.db_converters import (
    db_row_to_exercise,
    db_row_to_set,
    db_row_to_workout,
    exercise_to_db_row,
    sets_to_db_rows,
    workout_to_db_row,
)

__all__ = [
    "db_row_to_workout",
    "db_row_to_exercise",
    "db_row_to_set",
    "workout_to_db_row",
    "exercise_to_db_row",
    "sets_to_db_rows",
]
