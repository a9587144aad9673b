"""
Supabase Workout Log Repository Implementation.

This module implements the WorkoutLogRepository protocol using Supabase.
Logs live in workout_logs (unique on user_id, program_day_id, workout_date)
and their sets in workout_sets. Set replacement deletes the log's rows and
inserts the new ones as two table calls; PostgREST offers no transaction
across them, so a failed insert leaves the log without sets until the next
save.
"""
import logging
from datetime import date
from typing import List, Optional

from supabase import Client

from application.exceptions import PersistenceError
from domain.converters import (
    db_row_to_workout_log,
    db_row_to_workout_set,
    workout_log_to_db_row,
    workout_sets_to_db_rows,
)
from domain.models import WorkoutLog, WorkoutSet

logger = logging.getLogger(__name__)

LOG_NATURAL_KEY = "user_id,program_day_id,workout_date"

LOG_COLUMNS = "id, user_id, program_day_id, workout_date, completed, is_skipped"
SET_COLUMNS = "id, workout_log_id, exercise_id, set_number, weight_kg, reps, is_amrap, notes"
LOG_WITH_SETS = f"{LOG_COLUMNS}, workout_sets({SET_COLUMNS})"


class SupabaseWorkoutLogRepository:
    """
    Supabase implementation of WorkoutLogRepository.

    Every failure is wrapped in PersistenceError carrying the operation name.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    # =========================================================================
    # Reads
    # =========================================================================

    def get_log(
        self,
        user_id: str,
        workout_date: date,
        program_day_id: str,
    ) -> Optional[WorkoutLog]:
        try:
            response = (
                self._client.table("workout_logs")
                .select(LOG_WITH_SETS)
                .eq("user_id", user_id)
                .eq("program_day_id", program_day_id)
                .eq("workout_date", workout_date.isoformat())
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching log for {workout_date}: {e}")
            raise PersistenceError(f"Failed to load log: {e}", operation="get_log") from e

        if not response.data:
            return None
        return db_row_to_workout_log(response.data[0])

    def get_most_recent_completed_log(
        self,
        user_id: str,
        program_day_id: str,
        *,
        before_date: Optional[date] = None,
    ) -> Optional[WorkoutLog]:
        try:
            query = (
                self._client.table("workout_logs")
                .select(LOG_COLUMNS)
                .eq("user_id", user_id)
                .eq("program_day_id", program_day_id)
                .eq("completed", True)
            )
            if before_date is not None:
                query = query.lt("workout_date", before_date.isoformat())
            response = query.order("workout_date", desc=True).limit(1).execute()
        except Exception as e:
            logger.exception(f"Error fetching previous log of day {program_day_id}: {e}")
            raise PersistenceError(
                f"Failed to load previous log: {e}",
                operation="get_most_recent_completed_log",
            ) from e

        if not response.data:
            return None
        return db_row_to_workout_log(response.data[0])

    def get_sets_for_log(self, log_id: str, exercise_id: str) -> List[WorkoutSet]:
        try:
            response = (
                self._client.table("workout_sets")
                .select(SET_COLUMNS)
                .eq("workout_log_id", log_id)
                .eq("exercise_id", exercise_id)
                .order("set_number")
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching sets of log {log_id}: {e}")
            raise PersistenceError(
                f"Failed to load sets: {e}",
                operation="get_sets_for_log",
            ) from e

        return [db_row_to_workout_set(row) for row in response.data or []]

    def list_logs(
        self,
        user_id: str,
        *,
        completed_only: bool = True,
        since: Optional[date] = None,
    ) -> List[WorkoutLog]:
        try:
            query = (
                self._client.table("workout_logs")
                .select(LOG_WITH_SETS)
                .eq("user_id", user_id)
            )
            if completed_only:
                query = query.eq("completed", True)
            if since is not None:
                query = query.gte("workout_date", since.isoformat())
            response = query.order("workout_date").execute()
        except Exception as e:
            logger.exception(f"Error listing logs for user {user_id}: {e}")
            raise PersistenceError(f"Failed to list logs: {e}", operation="list_logs") from e

        return [db_row_to_workout_log(row) for row in response.data or []]

    # =========================================================================
    # Writes
    # =========================================================================

    def upsert_log(self, log: WorkoutLog) -> WorkoutLog:
        try:
            response = self._client.table("workout_logs").upsert(
                workout_log_to_db_row(log),
                on_conflict=LOG_NATURAL_KEY,
            ).execute()
        except Exception as e:
            logger.exception(f"Error upserting log for {log.workout_date}: {e}")
            raise PersistenceError(f"Failed to save log: {e}", operation="upsert_log") from e

        if not response.data:
            raise PersistenceError("Log upsert returned no data", operation="upsert_log")
        return db_row_to_workout_log(response.data[0])

    def replace_sets(self, log_id: str, sets: List[WorkoutSet]) -> List[WorkoutSet]:
        try:
            self._client.table("workout_sets") \
                .delete() \
                .eq("workout_log_id", log_id) \
                .execute()

            if not sets:
                return []

            response = self._client.table("workout_sets").insert(
                workout_sets_to_db_rows(sets, log_id)
            ).execute()
        except Exception as e:
            logger.exception(f"Error replacing sets of log {log_id}: {e}")
            raise PersistenceError(
                f"Failed to replace sets: {e}",
                operation="replace_sets",
            ) from e

        return [db_row_to_workout_set(row) for row in response.data or []]
