"""
GetWorkoutStats Use Case.

Reads a fresh snapshot of all workouts and aggregates it relative to the
current time. The clock is injected so the reference instant is testable.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from application.ports import WorkoutRepository
from domain.services import WorkoutStats, compute_workout_stats

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class GetWorkoutStatsUseCase:
    """
    Use case for computing summary statistics.

    Usage:
        >>> use_case = GetWorkoutStatsUseCase(workout_repo=workout_repo)
        >>> stats = use_case.execute()
        >>> if stats is None:
        ...     print("No stats available")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        clock: Clock = datetime.now,
    ) -> None:
        self._workout_repo = workout_repo
        self._clock = clock

    def execute(self, now: Optional[datetime] = None) -> Optional[WorkoutStats]:
        """
        Compute statistics over all stored workouts.

        Args:
            now: Reference instant; defaults to the injected clock

        Returns:
            WorkoutStats, or None when no workouts are stored

        Raises:
            WorkoutStoreError: If the workouts cannot be read
        """
        reference = now if now is not None else self._clock()
        workouts = self._workout_repo.list_workouts()
        stats = compute_workout_stats(workouts, reference)
        logger.debug(f"Computed stats over {len(workouts)} workout(s) at {reference.isoformat()}")
        return stats
