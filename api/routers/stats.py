"""
Stats router for summary statistics.

- GET /stats - Totals, this week, 7-day trend and day-type breakdown
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_stats_use_case
from api.schemas import StatsBody, StatsResponse
from application.exceptions import WorkoutStoreError
from application.use_cases import GetWorkoutStatsUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Stats"],
)


@router.get("/stats", response_model=StatsResponse)
def get_stats_endpoint(
    use_case: GetWorkoutStatsUseCase = Depends(get_stats_use_case),
):
    """
    Get summary statistics over all logged workouts.

    Returns ``has_data: false`` when no workouts are logged.
    """
    try:
        stats = use_case.execute()
    except WorkoutStoreError as e:
        logger.error(f"Stats unavailable: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    if stats is None:
        return StatsResponse(has_data=False)
    return StatsResponse(has_data=True, stats=StatsBody.from_stats(stats))
