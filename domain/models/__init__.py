"""
Domain models for the Overload Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Program: A user's training program, owning one ProgramDay per weekday
- ProgramDay: A weekday's training session, owning ordered Exercises
- Exercise: Sets x reps prescription with a working weight and increment
- WorkoutLog / WorkoutSet: What was actually performed on a date
- SetEntry / ResolvedSession: View models exchanged with the UI

Usage:
    >>> from domain.models import Exercise, ProgramDay

    >>> day = ProgramDay(
    ...     id="d-1",
    ...     day_number=1,
    ...     exercises=[
    ...         Exercise(
    ...             id="ex-1",
    ...             name="Squat",
    ...             target_sets=5,
    ...             target_reps=5,
    ...             current_weight_kg=100,
    ...         )
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = day.model_dump_json(indent=2)
"""

from domain.models.exercise import Exercise, WeightIncrement
from domain.models.program import Program, ProgramDay
from domain.models.session import (
    ExercisePlan,
    ResolvedSession,
    SessionState,
    SetEntry,
)
from domain.models.workout_log import WorkoutLog, WorkoutSet

__all__ = [
    # Program structure
    "Program",
    "ProgramDay",
    "Exercise",
    "WeightIncrement",
    # Logged sessions
    "WorkoutLog",
    "WorkoutSet",
    # Session view models
    "SetEntry",
    "SessionState",
    "ExercisePlan",
    "ResolvedSession",
]
