"""
API package for LiftLog.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_clock,
    get_delete_workout_use_case,
    get_log_workout_use_case,
    get_settings,
    get_stats_use_case,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
)

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
