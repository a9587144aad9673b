"""
Workout Log Repository Interface (Port).

This module defines the abstract interface for reading and writing workout
logs and their sets. Used by the session resolver (reads), the commit
workflow (writes) and the statistics use cases (history).
"""
from datetime import date
from typing import List, Optional, Protocol

from domain.models import WorkoutLog, WorkoutSet


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for workout log persistence.

    A log is unique per (user_id, program_day_id, workout_date). Its sets are
    always replaced as a whole, never patched.
    """

    def get_log(
        self,
        user_id: str,
        workout_date: date,
        program_day_id: str,
    ) -> Optional[WorkoutLog]:
        """
        Get the log of a date for a program day, including its sets.

        Returns:
            WorkoutLog with workout_sets, or None if nothing was saved
        """
        ...

    def get_most_recent_completed_log(
        self,
        user_id: str,
        program_day_id: str,
        *,
        before_date: Optional[date] = None,
    ) -> Optional[WorkoutLog]:
        """
        Get the latest completed log of a program day.

        Args:
            user_id: User ID
            program_day_id: Program day UUID
            before_date: Only consider logs strictly before this date

        Returns:
            Most recent completed WorkoutLog (sets not required), or None
        """
        ...

    def get_sets_for_log(self, log_id: str, exercise_id: str) -> List[WorkoutSet]:
        """
        Get the sets of one exercise in a log, ordered by set_number.
        """
        ...

    def upsert_log(self, log: WorkoutLog) -> WorkoutLog:
        """
        Insert or update a log by its natural key.

        Returns:
            The persisted log carrying its ID

        Raises:
            PersistenceError: If the write fails
        """
        ...

    def replace_sets(self, log_id: str, sets: List[WorkoutSet]) -> List[WorkoutSet]:
        """
        Atomically delete every set of a log and insert ``sets``.

        An empty ``sets`` list deletes all sets.

        Returns:
            The inserted sets

        Raises:
            PersistenceError: If the replacement fails
        """
        ...

    def list_logs(
        self,
        user_id: str,
        *,
        completed_only: bool = True,
        since: Optional[date] = None,
    ) -> List[WorkoutLog]:
        """
        List a user's logs with their sets, ordered by date ascending.

        Args:
            user_id: User ID
            completed_only: Skip logs not marked completed
            since: Only include logs on or after this date
        """
        ...
