"""
Progressive overload rules.

Two separate decisions live here and must not be merged:

- ``next_weight``: the weight PRESCRIBED before a session, derived from the
  last completed session. Strict: every recorded set must reach the rep
  target and at least ``target_sets`` sets must have been done.
- ``last_valid_performance``: the weight SYNCED back onto the exercise
  after a session is saved. Lenient by one rep, and it follows whatever
  weight the lifter actually used.
"""

from typing import List, Optional, Sequence, Union

from domain.models import Exercise, SetEntry, WeightIncrement, WorkoutSet

# Reps a set may miss the target by and still count
PRESCRIPTION_REP_TOLERANCE = 0
WEIGHT_SYNC_REP_TOLERANCE = 1


class InvalidWeightIncrementError(ValueError):
    """Raised when a weight increment is not one of the allowed values."""

    def __init__(self, value):
        allowed = ", ".join(inc.value for inc in WeightIncrement)
        super().__init__(
            f"Invalid weight increment {value!r}; expected one of: {allowed}"
        )
        self.value = value


def parse_increment(value: Union[str, float, WeightIncrement]) -> float:
    """
    Parse a weight increment into kilograms.

    Never defaults: a malformed increment is a configuration error.

    Raises:
        InvalidWeightIncrementError: If the value is not an allowed increment.

    Examples:
        >>> parse_increment("2.5")
        2.5
        >>> parse_increment(WeightIncrement.KG_10)
        10.0
    """
    if isinstance(value, WeightIncrement):
        return value.kg
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvalidWeightIncrementError(value)
    for increment in WeightIncrement:
        if increment.kg == amount:
            return amount
    raise InvalidWeightIncrementError(value)


# =============================================================================
# Default sets
# =============================================================================


def prescribe_sets(exercise: Exercise, weight_kg: float) -> List[SetEntry]:
    """``target_sets`` fresh rows at ``weight_kg`` with reps left blank."""
    return [
        SetEntry(weight=weight_kg, reps=None, is_amrap=False)
        for _ in range(exercise.target_sets)
    ]


def generate_default_sets(exercise: Exercise) -> List[SetEntry]:
    """Rows for an exercise with no history to seed from."""
    return prescribe_sets(exercise, exercise.current_weight_kg)


def copy_previous_set(entries: Sequence[SetEntry], index: int) -> List[SetEntry]:
    """
    Copy weight and reps of row ``index - 1`` into row ``index``.

    The AMRAP flag of the target row is kept. The first row and
    out-of-range indexes leave the rows unchanged.
    """
    rows = list(entries)
    if index <= 0 or index >= len(rows):
        return rows
    previous = rows[index - 1]
    rows[index] = rows[index].model_copy(
        update={"weight": previous.weight, "reps": previous.reps}
    )
    return rows


# =============================================================================
# Prescription (before a session)
# =============================================================================


def meets_rep_target(reps: Optional[int], target_reps: int, tolerance: int = 0) -> bool:
    """True when ``reps`` (missing counts as 0) reaches ``target_reps - tolerance``."""
    return (reps or 0) >= target_reps - tolerance


def next_weight(exercise: Exercise, prior_completed_sets: Sequence[WorkoutSet]) -> float:
    """
    Weight to prescribe given the sets of the last completed session.

    The weight goes up by exactly one increment when the lifter did at
    least ``target_sets`` sets AND every recorded set (extra sets included)
    reached ``target_reps``. Otherwise it stays where it is. No history
    never advances.

    Examples:
        >>> squat = Exercise(id="ex-1", name="Squat", target_sets=4,
        ...                  target_reps=10, current_weight_kg=80,
        ...                  weight_increment="2.5")
        >>> sets = [WorkoutSet(exercise_id="ex-1", set_number=i + 1, reps=10)
        ...         for i in range(4)]
        >>> next_weight(squat, sets)
        82.5
    """
    enough_sets = len(prior_completed_sets) >= exercise.target_sets
    all_reps_hit = all(
        meets_rep_target(s.reps, exercise.target_reps, PRESCRIPTION_REP_TOLERANCE)
        for s in prior_completed_sets
    )
    if enough_sets and all_reps_hit:
        increment = parse_increment(exercise.weight_increment)
        return round(exercise.current_weight_kg + increment, 2)
    return exercise.current_weight_kg


# =============================================================================
# Weight sync (after a session)
# =============================================================================


def last_valid_performance(
    exercise: Exercise,
    entries: Sequence[SetEntry],
) -> Optional[SetEntry]:
    """
    Last set of the session that counts as a valid performance.

    Scans from the last row to the first and returns the first row with a
    positive weight and reps within one of the target. Returns None when no
    row qualifies.
    """
    for entry in reversed(entries):
        weight = entry.weight or 0.0
        if weight > 0 and meets_rep_target(
            entry.reps, exercise.target_reps, WEIGHT_SYNC_REP_TOLERANCE
        ):
            return entry
    return None


def synced_weight(exercise: Exercise, entries: Sequence[SetEntry]) -> Optional[float]:
    """Weight to store on the exercise after saving ``entries``, or None."""
    performance = last_valid_performance(exercise, entries)
    if performance is None:
        return None
    return performance.weight
