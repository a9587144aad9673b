"""
Infrastructure Layer for the Overload Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseProgramRepository,
    SupabaseWorkoutLogRepository,
    SupabaseStatsRepository,
)

__all__ = [
    "SupabaseProgramRepository",
    "SupabaseWorkoutLogRepository",
    "SupabaseStatsRepository",
]
