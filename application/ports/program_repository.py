"""
Program Repository Interface (Port).

This module defines the abstract interface for reading the user's programs
and writing back exercise working weights.
"""
from typing import List, Optional, Protocol

from domain.models import Exercise, Program


class ProgramRepository(Protocol):
    """
    Abstract interface for program data access.

    Program editing is owned elsewhere; the scheduling engine only reads
    the active program and syncs exercise weights after a session.
    """

    def get_active_program(self, user_id: str) -> Optional[Program]:
        """
        Get the user's active program with its days and exercises.

        Args:
            user_id: User ID (Supabase auth user ID)

        Returns:
            Program with program_days and exercises ordered by sort_order,
            or None if the user has no active program
        """
        ...

    def update_exercise_weight(self, exercise_id: str, weight_kg: float) -> None:
        """
        Store a new working weight on an exercise.

        Args:
            exercise_id: Exercise UUID
            weight_kg: New current_weight_kg value

        Raises:
            PersistenceError: If the update fails
        """
        ...

    def list_exercises(self, user_id: str) -> List[Exercise]:
        """
        List every exercise across the user's programs, ordered by name.

        Args:
            user_id: User ID (Supabase auth user ID)

        Raises:
            PersistenceError: If the query fails
        """
        ...
