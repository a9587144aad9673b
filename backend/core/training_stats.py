"""
Training statistics: lifted volume, force grades and chart series.

The authoritative force grade is computed by the backend RPC; the
threshold table here drives the progress bar toward the next grade and
serves as a fallback when the RPC returns nothing.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from backend.core.week_mapper import iso_day_string
from domain.models import WorkoutLog

DEFAULT_CHART_POINTS = 10


@dataclass(frozen=True)
class GradeThreshold:
    """Minimum lifetime volume (kg) needed to hold a grade."""

    name: str
    volume_kg: float


GRADE_THRESHOLDS: Tuple[GradeThreshold, ...] = (
    GradeThreshold("Gringalet", 0),
    GradeThreshold("Crevette", 10_000),
    GradeThreshold("Costaud", 50_000),
    GradeThreshold("Guerrier", 150_000),
    GradeThreshold("Machine", 500_000),
    GradeThreshold("Titan", 1_000_000),
    GradeThreshold("Hulk", 2_500_000),
)

DEFAULT_GRADE = GRADE_THRESHOLDS[0].name


# =============================================================================
# Volume
# =============================================================================


def total_volume(logs: Iterable[WorkoutLog]) -> float:
    """Sum of weight x reps over every set of every log."""
    return sum(log.total_volume_kg for log in logs)


# =============================================================================
# Grades
# =============================================================================


def grade_for_volume(volume_kg: float) -> str:
    """Highest grade whose threshold ``volume_kg`` reaches."""
    grade = DEFAULT_GRADE
    for threshold in GRADE_THRESHOLDS:
        if volume_kg >= threshold.volume_kg:
            grade = threshold.name
    return grade


def next_grade(grade: str) -> Optional[GradeThreshold]:
    """Threshold following ``grade``, or None for the top grade."""
    names = [t.name for t in GRADE_THRESHOLDS]
    try:
        index = names.index(grade)
    except ValueError:
        return None
    if index + 1 >= len(GRADE_THRESHOLDS):
        return None
    return GRADE_THRESHOLDS[index + 1]


def grade_progress(grade: str, volume_kg: float) -> float:
    """
    Percentage (0-100) of the way from ``grade`` to the next one.

    The top grade, or an unknown grade, reports 100 once any volume is
    lifted.
    """
    upcoming = next_grade(grade)
    if upcoming is None:
        return 100.0 if volume_kg > 0 else 0.0
    if upcoming.volume_kg <= 0:
        return 100.0
    return round(min(100.0, volume_kg / upcoming.volume_kg * 100), 1)


# =============================================================================
# Chart series
# =============================================================================


@dataclass
class ChartPoint:
    """One point of a progress chart."""

    date: str
    value: float


def volume_series(
    logs: Iterable[WorkoutLog],
    limit: int = DEFAULT_CHART_POINTS,
) -> List[ChartPoint]:
    """Volume of each completed log, oldest first, last ``limit`` points."""
    ordered = sorted(
        (log for log in logs if log.completed),
        key=lambda log: log.workout_date,
    )
    points = [
        ChartPoint(date=iso_day_string(log.workout_date), value=log.total_volume_kg)
        for log in ordered
    ]
    return points[-limit:] if limit else points


def exercise_weight_series(
    logs: Iterable[WorkoutLog],
    exercise_id: str,
    limit: int = DEFAULT_CHART_POINTS,
) -> List[ChartPoint]:
    """Heaviest weight used for one exercise per date, oldest first."""
    by_date: "OrderedDict[str, float]" = OrderedDict()
    for log in sorted(logs, key=lambda log: log.workout_date):
        sets = log.sets_for_exercise(exercise_id)
        if not sets:
            continue
        key = iso_day_string(log.workout_date)
        heaviest = max(s.weight_or_zero for s in sets)
        by_date[key] = max(by_date.get(key, 0.0), heaviest)

    points = [ChartPoint(date=d, value=w) for d, w in by_date.items()]
    return points[-limit:] if limit else points
