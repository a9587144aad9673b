"""
Exercise entity and weight increment enumeration.

An Exercise is a prescription owned by one ProgramDay: how many sets of how
many reps at which working weight, and by how much the weight moves when the
lifter earns a progression.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class WeightIncrement(str, Enum):
    """
    Allowed weight increments in kilograms.

    Stored as strings by the backend (e.g. "2.5"). Any value outside this
    set is a configuration error and fails model validation.
    """

    KG_1_25 = "1.25"
    KG_2_5 = "2.5"
    KG_3_75 = "3.75"
    KG_5 = "5"
    KG_6_25 = "6.25"
    KG_7_5 = "7.5"
    KG_8_75 = "8.75"
    KG_10 = "10"

    @property
    def kg(self) -> float:
        """Increment as a number of kilograms."""
        return float(self.value)


class Exercise(BaseModel):
    """
    An exercise prescribed on a program day.

    Examples:
        >>> squat = Exercise(
        ...     id="ex-1",
        ...     name="Squat",
        ...     target_sets=4,
        ...     target_reps=10,
        ...     current_weight_kg=80,
        ...     weight_increment="2.5",
        ... )
        >>> str(squat)
        'Squat 4x10 @ 80.0kg'
    """

    # Identity
    id: str = Field(..., min_length=1, description="Exercise UUID")
    program_day_id: Optional[str] = Field(
        default=None, description="Owning program day UUID"
    )
    name: str = Field(..., min_length=1, description="Display name")

    # Prescription
    target_sets: int = Field(..., gt=0, description="Number of prescribed sets")
    target_reps: int = Field(..., gt=0, description="Reps prescribed per set")
    current_weight_kg: float = Field(
        default=0.0, ge=0, description="Current working weight in kg"
    )
    weight_increment: WeightIncrement = Field(
        default=WeightIncrement.KG_2_5,
        description="Step added to the working weight on progression",
    )

    # Ordering
    sort_order: int = Field(default=0, description="Position within the day")

    @field_validator("weight_increment", mode="before")
    @classmethod
    def normalize_increment(cls, v):
        """Accept numeric increments from the backend (2.5 -> "2.5", "5.00" -> "5")."""
        if isinstance(v, WeightIncrement) or isinstance(v, bool):
            return v
        if isinstance(v, (int, float, str)):
            try:
                return f"{float(v):.2f}".rstrip("0").rstrip(".")
            except ValueError:
                return v
        return v

    def __str__(self) -> str:
        return (
            f"{self.name} {self.target_sets}x{self.target_reps} "
            f"@ {self.current_weight_kg}kg"
        )
