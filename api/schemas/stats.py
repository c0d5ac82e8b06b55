"""
Statistics Schemas.

GET /stats returns ``has_data: false`` with no stats when nothing is logged,
so clients render an empty state instead of a row of zeros.
"""

from typing import Dict, Optional

from pydantic import BaseModel

from domain.models import DayType
from domain.services import WorkoutStats


class StatsBody(BaseModel):
    """Summary statistics over all logged workouts."""
    total_workouts: int
    total_kg: float
    avg_kg_per_workout: float
    this_week_workouts: int
    this_week_kg: float
    last_7_days_kg: float
    previous_7_days_kg: float
    trend_percent: float
    day_type_breakdown: Dict[DayType, int]

    @classmethod
    def from_stats(cls, stats: WorkoutStats) -> "StatsBody":
        return cls(
            total_workouts=stats.total_workouts,
            total_kg=stats.total_kg,
            avg_kg_per_workout=stats.avg_kg_per_workout,
            this_week_workouts=stats.this_week_workouts,
            this_week_kg=stats.this_week_kg,
            last_7_days_kg=stats.last_7_days_kg,
            previous_7_days_kg=stats.previous_7_days_kg,
            trend_percent=stats.trend_percent,
            day_type_breakdown=stats.day_type_breakdown,
        )


class StatsResponse(BaseModel):
    """Response for GET /stats."""
    has_data: bool
    stats: Optional[StatsBody] = None
