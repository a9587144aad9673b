"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseProgramRepository,
        SupabaseWorkoutLogRepository,
        SupabaseStatsRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    program_repo = SupabaseProgramRepository(client)
    log_repo = SupabaseWorkoutLogRepository(client)
    stats_repo = SupabaseStatsRepository(client)
"""

from infrastructure.db.program_repository import SupabaseProgramRepository
from infrastructure.db.workout_log_repository import SupabaseWorkoutLogRepository
from infrastructure.db.stats_repository import SupabaseStatsRepository

__all__ = [
    # Program structure and weight sync
    "SupabaseProgramRepository",

    # Workout logs and sets
    "SupabaseWorkoutLogRepository",

    # Streak and force grade procedures
    "SupabaseStatsRepository",
]
