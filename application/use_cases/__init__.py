"""
Application Use Cases for LiftLog.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import (
        LogWorkoutUseCase,
        DeleteWorkoutUseCase,
        GetWorkoutStatsUseCase,
    )

    # Log a workout from an edited draft
    result = LogWorkoutUseCase(workout_repo=workout_repo).execute(draft)

    # Delete a workout and its exercises and sets
    DeleteWorkoutUseCase(workout_repo=workout_repo).execute("w-123")

    # Summary statistics (None when nothing is logged)
    stats = GetWorkoutStatsUseCase(workout_repo=workout_repo).execute()
"""

from application.use_cases.delete_workout import DeleteWorkoutUseCase
from application.use_cases.get_stats import Clock, GetWorkoutStatsUseCase
from application.use_cases.log_workout import LogWorkoutResult, LogWorkoutUseCase

__all__ = [
    # LogWorkout
    "LogWorkoutUseCase",
    "LogWorkoutResult",
    # DeleteWorkout
    "DeleteWorkoutUseCase",
    # GetWorkoutStats
    "GetWorkoutStatsUseCase",
    "Clock",
]
