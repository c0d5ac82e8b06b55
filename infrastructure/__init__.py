"""
Infrastructure Layer for LiftLog.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseWorkoutRepository

__all__ = [
    "SupabaseWorkoutRepository",
]
