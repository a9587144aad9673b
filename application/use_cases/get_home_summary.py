"""
GetHomeSummary Use Case.

Builds the dashboard figures: streak, force grade, lifted volume, today's
session and progress toward the next grade.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports import ProgramRepository, StatsRepository, WorkoutLogRepository
from backend.core.session_resolver import find_scheduled_day
from backend.core.training_stats import grade_for_volume, grade_progress, next_grade, total_volume
from backend.core.week_mapper import DateLike, as_date

logger = logging.getLogger(__name__)

REST_LABEL = "Rest"


@dataclass
class HomeSummary:
    """Dashboard figures for one user."""

    streak: int
    grade: str
    total_volume_kg: float
    today_label: str
    is_rest_day: bool
    grade_progress: float
    next_grade: Optional[str] = None
    has_program: bool = True


class GetHomeSummaryUseCase:
    """
    Use case for the home dashboard.

    The streak and grade come from the backend aggregates. When the grade
    procedure returns nothing, the grade is derived locally from lifetime
    volume.
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        workout_log_repo: WorkoutLogRepository,
        stats_repo: StatsRepository,
    ) -> None:
        self._program_repo = program_repo
        self._workout_log_repo = workout_log_repo
        self._stats_repo = stats_repo

    def execute(self, user_id: str, today: DateLike) -> HomeSummary:
        """
        Build the summary for ``today``.

        Raises:
            PersistenceError: If a repository call fails
        """
        today = as_date(today)

        streak = self._stats_repo.calculate_streak(user_id) or 0
        logs = self._workout_log_repo.list_logs(user_id, completed_only=True)
        volume = total_volume(logs)

        grade = self._stats_repo.calculate_force_grade(user_id)
        if not grade:
            grade = grade_for_volume(volume)
            logger.debug("No stored grade for user %s, derived %s", user_id, grade)

        program = self._program_repo.get_active_program(user_id)
        day = find_scheduled_day(today, program.program_days) if program else None

        upcoming = next_grade(grade)
        return HomeSummary(
            streak=streak,
            grade=grade,
            total_volume_kg=volume,
            today_label=day.display_label if day else REST_LABEL,
            is_rest_day=day is None,
            grade_progress=grade_progress(grade, volume),
            next_grade=upcoming.name if upcoming else None,
            has_program=program is not None,
        )
