"""
ResolveSession Use Case.

Loads everything needed to render one calendar date of the session screen
and hands it to the pure session resolver. Read-only: calling it twice
without an intervening write yields the same result.
"""

import logging
from typing import Dict, List, Optional

from application.ports import ProgramRepository, WorkoutLogRepository
from backend.core.session_resolver import find_scheduled_day, resolve_session
from backend.core.week_mapper import DateLike, as_date
from domain.models import Program, ResolvedSession, WorkoutSet

logger = logging.getLogger(__name__)


class ResolveSessionUseCase:
    """
    Use case for resolving the session of a date.

    Orchestrates the following workflow:
    1. Load the active program (none => rest day)
    2. Find the program day scheduled on the date's weekday
    3. Load the log saved for (date, day)
    4. Without a log, load the most recent prior completed log of the day
       and its sets per exercise
    5. Resolve initial sets through the progression rules

    Usage:
        >>> use_case = ResolveSessionUseCase(
        ...     program_repo=program_repo,
        ...     workout_log_repo=log_repo,
        ... )
        >>> session = use_case.execute(user_id="user-123", workout_date=date(2026, 3, 2))
        >>> session.state
        <SessionState.UNLOGGED_WITH_HISTORY: 'unlogged_with_history'>
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        workout_log_repo: WorkoutLogRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            program_repo: Repository for the active program
            workout_log_repo: Repository for workout logs and sets
        """
        self._program_repo = program_repo
        self._workout_log_repo = workout_log_repo

    def execute(
        self,
        user_id: str,
        workout_date: DateLike,
        *,
        program: Optional[Program] = None,
    ) -> ResolvedSession:
        """
        Resolve the session for a date.

        Args:
            user_id: Current user ID
            workout_date: Date being viewed
            program: Already-loaded active program, to avoid a refetch when
                navigating between dates

        Returns:
            ResolvedSession view model
        """
        workout_date = as_date(workout_date)

        if program is None:
            program = self._program_repo.get_active_program(user_id)

        if program is None:
            logger.info("No active program for user %s", user_id)
            return resolve_session(workout_date, [], has_program=False)

        program_days = program.program_days
        day = find_scheduled_day(workout_date, program_days)
        if day is None:
            return resolve_session(workout_date, program_days)

        log = self._workout_log_repo.get_log(user_id, workout_date, day.id)
        if log is not None:
            return resolve_session(workout_date, program_days, log=log)

        prior_log = self._workout_log_repo.get_most_recent_completed_log(
            user_id,
            day.id,
            before_date=workout_date,
        )
        prior_sets: Dict[str, List[WorkoutSet]] = {}
        if prior_log is not None and prior_log.id:
            for exercise in day.exercises:
                prior_sets[exercise.id] = self._workout_log_repo.get_sets_for_log(
                    prior_log.id, exercise.id
                )

        return resolve_session(
            workout_date,
            program_days,
            prior_sets=prior_sets,
            has_history=prior_log is not None,
        )
