"""
FastAPI Dependency Providers for LiftLog.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- The clock is a dependency so tests can pin "now"

Usage in routers:
    from api.deps import get_workout_repo
    from application.ports import WorkoutRepository

    @router.get("/workouts")
    def list_workouts(
        workout_repo: WorkoutRepository = Depends(get_workout_repo),
    ):
        return workout_repo.list_workouts()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from datetime import datetime
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import WorkoutRepository
from application.use_cases import (
    Clock,
    DeleteWorkoutUseCase,
    GetWorkoutStatsUseCase,
    LogWorkoutUseCase,
)

# Concrete implementations
from infrastructure import SupabaseWorkoutRepository

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured. The client is created
    once per process and handed to repositories explicitly.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.has_database:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository instance with injected client.
    The return type is the Protocol to enable easy faking.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutRepository: Repository for workout persistence
    """
    return SupabaseWorkoutRepository(client)


# =============================================================================
# Clock Provider
# =============================================================================


def get_clock() -> Clock:
    """Get the clock used as the reference instant for statistics."""
    return datetime.now


# =============================================================================
# Use Case Providers
# =============================================================================


def get_log_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> LogWorkoutUseCase:
    """Get LogWorkoutUseCase with injected repository."""
    return LogWorkoutUseCase(workout_repo=workout_repo)


def get_delete_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> DeleteWorkoutUseCase:
    """Get DeleteWorkoutUseCase with injected repository."""
    return DeleteWorkoutUseCase(workout_repo=workout_repo)


def get_stats_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: Clock = Depends(get_clock),
) -> GetWorkoutStatsUseCase:
    """Get GetWorkoutStatsUseCase with injected repository and clock."""
    return GetWorkoutStatsUseCase(workout_repo=workout_repo, clock=clock)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    # Clock
    "get_clock",
    # Use cases
    "get_log_workout_use_case",
    "get_delete_workout_use_case",
    "get_stats_use_case",
]
