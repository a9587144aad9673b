"""
Session view models exchanged with the UI layer.

These are recomputed on every navigation and never stored.
"""

from datetime import date
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise
from domain.models.program import ProgramDay
from domain.models.workout_log import WorkoutLog


class SetEntry(BaseModel):
    """
    One editable set row.

    ``weight`` and ``reps`` are None when the user left the field blank.
    """

    weight: Optional[float] = Field(default=None, ge=0, description="Weight in kg")
    reps: Optional[int] = Field(default=None, ge=0, description="Reps achieved")
    is_amrap: bool = Field(default=False)

    @property
    def is_blank(self) -> bool:
        """True when neither weight nor reps was entered."""
        return self.weight is None and self.reps is None


class SessionState(str, Enum):
    """Resolved state of a calendar date."""

    REST_DAY = "rest_day"
    UNLOGGED_FIRST_TIME = "unlogged_first_time"
    UNLOGGED_WITH_HISTORY = "unlogged_with_history"
    ALREADY_LOGGED = "already_logged"


class ExercisePlan(BaseModel):
    """An exercise together with the rows pre-filled for the session."""

    exercise: Exercise
    sets: List[SetEntry] = Field(default_factory=list)
    source: Literal["logged", "progression", "default"] = "default"
    prescribed_weight_kg: Optional[float] = Field(
        default=None,
        description="Weight proposed before logging; None for logged sessions",
    )


class ResolvedSession(BaseModel):
    """Everything the session screen needs to render one date."""

    workout_date: date
    weekday: int = Field(..., ge=1, le=7)
    state: SessionState
    scheduled_day: Optional[ProgramDay] = None
    log: Optional[WorkoutLog] = None
    is_skipped: bool = False
    has_program: bool = True
    exercises: List[ExercisePlan] = Field(default_factory=list)

    @property
    def is_rest_day(self) -> bool:
        return self.state == SessionState.REST_DAY

    @property
    def initial_sets(self) -> Dict[str, List[SetEntry]]:
        """Pre-filled rows keyed by exercise ID."""
        return {plan.exercise.id: plan.sets for plan in self.exercises}

    @property
    def session_label(self) -> Optional[str]:
        """Label of the scheduled day, or None on rest days."""
        if self.scheduled_day is None:
            return None
        return self.scheduled_day.display_label
