"""
API package for the Overload Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_program_repo,
    get_workout_log_repo,
    get_stats_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_program_repo",
    "get_workout_log_repo",
    "get_stats_repo",
    # Authentication
    "get_current_user",
]
