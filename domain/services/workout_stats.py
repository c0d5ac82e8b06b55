"""
Workout statistics aggregation.

Pure summary statistics over a snapshot of logged workouts:
- lifetime totals and average load per workout
- totals for the Monday-to-Sunday week containing a reference instant
- last 7 days vs the 7 days before that, with a percentage trend
- session count per day type

The aggregator never validates its input. Arithmetic anomalies in stored
totals (NaN, inf) flow through to the result unchanged.
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, Optional, Tuple

from domain.models import DayType, WorkoutRecord


WINDOW = timedelta(days=7)


# =============================================================================
# Result DTO
# =============================================================================


@dataclass(frozen=True)
class WorkoutStats:
    """Summary statistics for a non-empty set of workouts."""
    total_workouts: int
    total_kg: float
    avg_kg_per_workout: float
    this_week_workouts: int
    this_week_kg: float
    last_7_days_kg: float
    previous_7_days_kg: float
    trend_percent: float
    day_type_breakdown: Dict[DayType, int] = field(default_factory=dict)


# =============================================================================
# Date helpers
# =============================================================================


def week_bounds(reference: date) -> Tuple[date, date]:
    """Return (monday, sunday) of the week containing ``reference``."""
    monday = reference - timedelta(days=reference.weekday())
    return monday, monday + timedelta(days=6)


def workout_instant(workout_date: date, now: datetime) -> datetime:
    """Local midnight of ``workout_date`` in the timezone of ``now``."""
    return datetime.combine(workout_date, time.min, tzinfo=now.tzinfo)


def calculate_trend(last_kg: float, previous_kg: float) -> float:
    """
    Percentage change from the previous window to the last one.

    Returns 0.0 when the previous window has no load at all, so
    "no baseline" and "no change" read the same.
    """
    if previous_kg == 0:
        return 0.0
    return (last_kg - previous_kg) / previous_kg * 100


# =============================================================================
# Aggregator
# =============================================================================


def compute_workout_stats(
    workouts: Iterable[WorkoutRecord],
    now: datetime,
) -> Optional[WorkoutStats]:
    """
    Aggregate workouts into summary statistics relative to ``now``.

    Windows:
        this week:        monday <= date <= sunday of the week containing now
        last 7 days:      now - 7d  <= midnight(date) < now
        previous 7 days:  now - 14d <= midnight(date) < now - 7d

    Args:
        workouts: Workout records in any order
        now: Reference instant; naive or timezone-aware

    Returns:
        WorkoutStats, or None when there are no workouts
    """
    monday, sunday = week_bounds(now.date())
    last_start = now - WINDOW
    previous_start = now - 2 * WINDOW

    count = 0
    total_kg = 0.0
    this_week_workouts = 0
    this_week_kg = 0.0
    last_7_days_kg = 0.0
    previous_7_days_kg = 0.0
    breakdown: Counter = Counter()

    for workout in workouts:
        count += 1
        total_kg += workout.total_kg
        breakdown[workout.day_type] += 1

        if monday <= workout.date <= sunday:
            this_week_workouts += 1
            this_week_kg += workout.total_kg

        instant = workout_instant(workout.date, now)
        if last_start <= instant < now:
            last_7_days_kg += workout.total_kg
        elif previous_start <= instant < last_start:
            previous_7_days_kg += workout.total_kg

    if count == 0:
        return None

    return WorkoutStats(
        total_workouts=count,
        total_kg=total_kg,
        avg_kg_per_workout=total_kg / count,
        this_week_workouts=this_week_workouts,
        this_week_kg=this_week_kg,
        last_7_days_kg=last_7_days_kg,
        previous_7_days_kg=previous_7_days_kg,
        trend_percent=calculate_trend(last_7_days_kg, previous_7_days_kg),
        day_type_breakdown=dict(breakdown),
    )
