"""
Program and ProgramDay entities.

A user owns programs; at most one is active at a time (enforced by the
backend). A program owns one ProgramDay per weekday it trains on, and each
day owns an ordered list of exercises.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import Exercise


class ProgramDay(BaseModel):
    """
    A scheduled training day within a program.

    ``day_number`` follows ISO weekday numbering (1=Monday ... 7=Sunday) and
    determines which calendar dates the day applies to.
    """

    id: str = Field(..., min_length=1, description="Program day UUID")
    program_id: Optional[str] = Field(default=None, description="Owning program UUID")
    day_number: int = Field(..., ge=1, le=7, description="Weekday, 1=Monday..7=Sunday")
    day_label: Optional[str] = Field(default=None, description="Free-text label")
    is_rest_day: bool = Field(default=False, description="Explicit rest day marker")
    exercises: List[Exercise] = Field(
        default_factory=list, description="Exercises ordered by sort_order"
    )

    @field_validator("exercises")
    @classmethod
    def sort_exercises(cls, v: List[Exercise]) -> List[Exercise]:
        """Keep exercises in their configured order."""
        return sorted(v, key=lambda ex: ex.sort_order)

    @property
    def display_label(self) -> str:
        """Label shown for the day, falling back to its number."""
        if self.day_label and self.day_label.strip():
            return self.day_label.strip()
        return f"Day {self.day_number}"

    def get_exercise(self, exercise_id: str) -> Optional[Exercise]:
        """Find an exercise of this day by ID."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None


class Program(BaseModel):
    """
    A user's training program.

    Examples:
        >>> program = Program(
        ...     id="p-1",
        ...     user_id="user-1",
        ...     name="Upper/Lower",
        ...     program_days=[
        ...         ProgramDay(id="d-1", day_number=1, day_label="Upper"),
        ...         ProgramDay(id="d-2", day_number=4, day_label="Lower"),
        ...     ],
        ... )
        >>> [d.display_label for d in program.program_days]
        ['Upper', 'Lower']
    """

    id: str = Field(..., min_length=1, description="Program UUID")
    user_id: Optional[str] = Field(default=None, description="Owner user ID")
    name: str = Field(default="", description="Program name")
    is_active: bool = Field(default=True)
    program_days: List[ProgramDay] = Field(default_factory=list)
