"""
Stats Repository Interface (Port).

Aggregates (streak, force grade) are computed by backend procedures. Calling
them both recomputes and returns the stored value.
"""
from typing import Optional, Protocol


class StatsRepository(Protocol):
    """Abstract interface for backend-computed aggregates."""

    def calculate_streak(self, user_id: str) -> Optional[int]:
        """
        Recompute and return the user's consecutive-days streak.

        Raises:
            PersistenceError: If the procedure call fails
        """
        ...

    def calculate_force_grade(self, user_id: str) -> Optional[str]:
        """
        Recompute and return the user's force grade name.

        Raises:
            PersistenceError: If the procedure call fails
        """
        ...
