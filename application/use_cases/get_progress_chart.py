"""
GetProgressChart Use Case.

Two views over the user's logs:
- volume: lifted volume of each completed session
- exercise: heaviest weight used for one exercise on each date, whether or
  not the session was completed

ListChartExercisesUseCase supplies the exercises the second view can pick.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from application.ports import ProgramRepository, WorkoutLogRepository
from backend.core.training_stats import (
    DEFAULT_CHART_POINTS,
    ChartPoint,
    exercise_weight_series,
    volume_series,
)
from backend.core.week_mapper import DateLike, as_date
from domain.models import Exercise

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30


class ChartView(str, Enum):
    VOLUME = "volume"
    EXERCISE = "exercise"


@dataclass
class ProgressChart:
    view: ChartView
    points: List[ChartPoint] = field(default_factory=list)
    exercise_id: Optional[str] = None


class GetProgressChartUseCase:
    """Use case for the progress charts."""

    def __init__(self, workout_log_repo: WorkoutLogRepository) -> None:
        self._workout_log_repo = workout_log_repo

    def execute(
        self,
        user_id: str,
        view: ChartView = ChartView.VOLUME,
        *,
        exercise_id: Optional[str] = None,
        months: Optional[int] = None,
        today: Optional[DateLike] = None,
        limit: int = DEFAULT_CHART_POINTS,
    ) -> ProgressChart:
        """
        Build a chart series.

        Args:
            user_id: Current user ID
            view: Which series to build
            exercise_id: Required for the exercise view
            months: Only include logs from the last ``months`` months
            today: Reference date for the month window (defaults to today)
            limit: Maximum number of points, most recent kept

        Raises:
            ValueError: If the exercise view is requested without exercise_id
            PersistenceError: If loading logs fails
        """
        view = ChartView(view)
        if view is ChartView.EXERCISE and not exercise_id:
            raise ValueError("exercise_id is required for the exercise view")

        since: Optional[date] = None
        if months:
            reference = as_date(today) if today is not None else date.today()
            since = reference - timedelta(days=months * DAYS_PER_MONTH)

        logs = self._workout_log_repo.list_logs(
            user_id,
            completed_only=view is ChartView.VOLUME,
            since=since,
        )

        if view is ChartView.VOLUME:
            points = volume_series(logs, limit=limit)
        else:
            points = exercise_weight_series(logs, exercise_id, limit=limit)

        return ProgressChart(view=view, points=points, exercise_id=exercise_id)


class ListChartExercisesUseCase:
    """Exercises offered by the exercise chart, one per name."""

    def __init__(self, program_repo: ProgramRepository) -> None:
        self._program_repo = program_repo

    def execute(self, user_id: str) -> List[Exercise]:
        """
        List the user's exercises ordered by name.

        The same lift can appear on several program days; only the first
        exercise of each name is kept.

        Raises:
            PersistenceError: If loading exercises fails
        """
        seen = set()
        exercises: List[Exercise] = []
        for exercise in self._program_repo.list_exercises(user_id):
            if exercise.name in seen:
                continue
            seen.add(exercise.name)
            exercises.append(exercise)
        return exercises
