"""
WorkoutLog aggregate and its WorkoutSet children.

A log records one calendar date's session for a program day. Its sets are
never patched individually: every save replaces the whole collection.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkoutSet(BaseModel):
    """A single performed set."""

    id: Optional[str] = Field(default=None, description="Set UUID, None before insert")
    workout_log_id: Optional[str] = Field(default=None)
    exercise_id: str = Field(..., min_length=1)
    set_number: int = Field(..., ge=1, description="1-based, contiguous per exercise")
    weight_kg: Optional[float] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    is_amrap: bool = Field(default=False, description="As-many-reps-as-possible set")
    notes: Optional[str] = Field(default=None)

    @property
    def reps_or_zero(self) -> int:
        """Reps achieved, treating a missing value as zero."""
        return self.reps or 0

    @property
    def weight_or_zero(self) -> float:
        """Weight used, treating a missing value as zero."""
        return self.weight_kg or 0.0

    @property
    def volume_kg(self) -> float:
        """Lifted volume (weight x reps)."""
        return self.weight_or_zero * self.reps_or_zero


class WorkoutLog(BaseModel):
    """
    One date's session attempt for a program day.

    Examples:
        >>> log = WorkoutLog(
        ...     user_id="user-1",
        ...     program_day_id="d-1",
        ...     workout_date=date(2026, 3, 2),
        ...     completed=True,
        ...     workout_sets=[
        ...         WorkoutSet(exercise_id="ex-1", set_number=2, weight_kg=80, reps=9),
        ...         WorkoutSet(exercise_id="ex-1", set_number=1, weight_kg=80, reps=10),
        ...     ],
        ... )
        >>> [s.set_number for s in log.sets_for_exercise("ex-1")]
        [1, 2]
    """

    id: Optional[str] = Field(default=None, description="Log UUID, None before insert")
    user_id: str = Field(..., min_length=1)
    program_day_id: str = Field(..., min_length=1)
    workout_date: date = Field(..., description="Calendar day of the session")
    completed: bool = Field(default=False)
    is_skipped: bool = Field(default=False)
    workout_sets: List[WorkoutSet] = Field(default_factory=list)

    def sets_for_exercise(self, exercise_id: str) -> List[WorkoutSet]:
        """Sets recorded for one exercise, ordered by set number."""
        return sorted(
            (s for s in self.workout_sets if s.exercise_id == exercise_id),
            key=lambda s: s.set_number,
        )

    @property
    def total_volume_kg(self) -> float:
        """Lifted volume across all sets of the log."""
        return sum(s.volume_kg for s in self.workout_sets)

    def with_sets(self, sets: List[WorkoutSet]) -> "WorkoutLog":
        """Return a copy holding a new set collection."""
        return self.model_copy(update={"workout_sets": list(sets)})
