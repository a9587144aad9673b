"""
Repository Interfaces (Ports) for the Overload Tracker API.

This package defines abstract interfaces that decouple the scheduling
engine from infrastructure (database, backend procedures). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ProgramRepository, WorkoutLogRepository

    class SessionService:
        def __init__(self, log_repo: WorkoutLogRepository):
            self.log_repo = log_repo
"""

# Program structure
from application.ports.program_repository import ProgramRepository

# Workout logs and sets
from application.ports.workout_log_repository import WorkoutLogRepository

# Backend aggregates (streak, grade)
from application.ports.stats_repository import StatsRepository

__all__ = [
    "ProgramRepository",
    "WorkoutLogRepository",
    "StatsRepository",
]
