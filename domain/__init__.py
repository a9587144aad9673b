"""
Domain layer for the Overload Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    ExercisePlan,
    Program,
    ProgramDay,
    ResolvedSession,
    SessionState,
    SetEntry,
    WeightIncrement,
    WorkoutLog,
    WorkoutSet,
)

__all__ = [
    "Exercise",
    "ExercisePlan",
    "Program",
    "ProgramDay",
    "ResolvedSession",
    "SessionState",
    "SetEntry",
    "WeightIncrement",
    "WorkoutLog",
    "WorkoutSet",
]
