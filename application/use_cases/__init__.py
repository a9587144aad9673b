"""
Application Use Cases for the Overload Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models or result objects, not API responses

Usage:
    from application.use_cases import (
        ResolveSessionUseCase,
        CommitSessionUseCase,
        CommitSessionResult,
    )

    # Resolve what the session screen shows for a date
    resolve = ResolveSessionUseCase(
        program_repo=program_repo,
        workout_log_repo=log_repo,
    )
    session = resolve.execute(user_id="user-123", workout_date=date(2026, 3, 2))

    # Save the entered sets
    commit = CommitSessionUseCase(
        workout_log_repo=log_repo,
        program_repo=program_repo,
        stats_repo=stats_repo,
    )
    result = commit.execute_for_date(
        user_id="user-123",
        workout_date=date(2026, 3, 2),
        entered_sets={"ex-1": [SetEntry(weight=80, reps=10)]},
    )
"""

from application.use_cases.resolve_session import ResolveSessionUseCase
from application.use_cases.commit_session import (
    CommitSessionResult,
    CommitSessionUseCase,
    build_session_sets,
)
from application.use_cases.get_home_summary import (
    GetHomeSummaryUseCase,
    HomeSummary,
)
from application.use_cases.get_progress_chart import (
    ChartView,
    GetProgressChartUseCase,
    ListChartExercisesUseCase,
    ProgressChart,
)

__all__ = [
    # ResolveSession
    "ResolveSessionUseCase",
    # CommitSession
    "CommitSessionUseCase",
    "CommitSessionResult",
    "build_session_sets",
    # Statistics
    "GetHomeSummaryUseCase",
    "HomeSummary",
    "GetProgressChartUseCase",
    "ListChartExercisesUseCase",
    "ProgressChart",
    "ChartView",
]
