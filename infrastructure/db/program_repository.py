"""
Supabase Program Repository Implementation.

This module implements the ProgramRepository protocol using Supabase.
Reads the programs, program_days and exercises tables through embedded
selects.
"""
import logging
from typing import List, Optional

from supabase import Client

from application.exceptions import PersistenceError
from domain.converters import db_row_to_exercise, db_row_to_program
from domain.models import Exercise, Program

logger = logging.getLogger(__name__)

PROGRAM_SELECT = (
    "id, user_id, name, is_active, "
    "program_days(id, program_id, day_number, day_label, is_rest_day, "
    "exercises(id, program_day_id, name, target_sets, target_reps, "
    "current_weight_kg, weight_increment, sort_order))"
)

# Inner joins keep only exercises whose program belongs to the user.
EXERCISE_LIST_SELECT = (
    "id, program_day_id, name, target_sets, target_reps, current_weight_kg, "
    "weight_increment, sort_order, program_days!inner(programs!inner(user_id))"
)


class SupabaseProgramRepository:
    """
    Supabase-backed program repository.

    Queries against:
    - programs: Program metadata and the is_active flag
    - program_days: Weekday slots within a program
    - exercises: Prescriptions within a day
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def get_active_program(self, user_id: str) -> Optional[Program]:
        try:
            response = (
                self._client.table("programs")
                .select(PROGRAM_SELECT)
                .eq("user_id", user_id)
                .eq("is_active", True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching active program for user {user_id}: {e}")
            raise PersistenceError(
                f"Failed to load active program: {e}",
                operation="get_active_program",
            ) from e

        if not response.data:
            return None
        return db_row_to_program(response.data[0])

    def update_exercise_weight(self, exercise_id: str, weight_kg: float) -> None:
        try:
            self._client.table("exercises") \
                .update({"current_weight_kg": weight_kg}) \
                .eq("id", exercise_id) \
                .execute()
        except Exception as e:
            logger.exception(f"Error updating weight of exercise {exercise_id}: {e}")
            raise PersistenceError(
                f"Failed to update exercise weight: {e}",
                operation="update_exercise_weight",
            ) from e

    def list_exercises(self, user_id: str) -> List[Exercise]:
        try:
            response = (
                self._client.table("exercises")
                .select(EXERCISE_LIST_SELECT)
                .eq("program_days.programs.user_id", user_id)
                .order("name")
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error listing exercises for user {user_id}: {e}")
            raise PersistenceError(
                f"Failed to list exercises: {e}",
                operation="list_exercises",
            ) from e

        return [db_row_to_exercise(row) for row in response.data or []]
