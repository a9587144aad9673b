"""
FastAPI Dependency Providers for the Overload Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers wire repositories into use cases
- Auth provider wraps backend.auth

Usage in routers:
    from api.deps import get_resolve_session_use_case, get_current_user
    from application.use_cases import ResolveSessionUseCase

    @router.get("/sessions/{workout_date}")
    def get_session(
        workout_date: date,
        user_id: str = Depends(get_current_user),
        use_case: ResolveSessionUseCase = Depends(get_resolve_session_use_case),
    ):
        return use_case.execute(user_id, workout_date)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_program_repo] = lambda: FakeProgramRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ProgramRepository,
    StatsRepository,
    WorkoutLogRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseProgramRepository,
    SupabaseStatsRepository,
    SupabaseWorkoutLogRepository,
)

from application.use_cases import (
    CommitSessionUseCase,
    GetHomeSummaryUseCase,
    GetProgressChartUseCase,
    ListChartExercisesUseCase,
    ResolveSessionUseCase,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

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
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

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


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    """
    Get ProgramRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseProgramRepository(client)


def get_workout_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutLogRepository:
    """Get WorkoutLogRepository implementation."""
    return SupabaseWorkoutLogRepository(client)


def get_stats_repo(
    client: Client = Depends(get_supabase_client_required),
) -> StatsRepository:
    """Get StatsRepository implementation."""
    return SupabaseStatsRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_resolve_session_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
    workout_log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
) -> ResolveSessionUseCase:
    return ResolveSessionUseCase(
        program_repo=program_repo,
        workout_log_repo=workout_log_repo,
    )


def get_commit_session_use_case(
    workout_log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
    stats_repo: StatsRepository = Depends(get_stats_repo),
) -> CommitSessionUseCase:
    return CommitSessionUseCase(
        workout_log_repo=workout_log_repo,
        program_repo=program_repo,
        stats_repo=stats_repo,
    )


def get_home_summary_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
    workout_log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
    stats_repo: StatsRepository = Depends(get_stats_repo),
) -> GetHomeSummaryUseCase:
    return GetHomeSummaryUseCase(
        program_repo=program_repo,
        workout_log_repo=workout_log_repo,
        stats_repo=stats_repo,
    )


def get_progress_chart_use_case(
    workout_log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
) -> GetProgressChartUseCase:
    return GetProgressChartUseCase(workout_log_repo=workout_log_repo)


def get_chart_exercises_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> ListChartExercisesUseCase:
    return ListChartExercisesUseCase(program_repo=program_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports Supabase access tokens and API keys.

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


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
    "get_program_repo",
    "get_workout_log_repo",
    "get_stats_repo",
    # Use cases
    "get_resolve_session_use_case",
    "get_commit_session_use_case",
    "get_home_summary_use_case",
    "get_progress_chart_use_case",
    # Authentication
    "get_current_user",
]
