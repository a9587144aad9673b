"""
Converters: Database row format <-> domain models.

Provides bidirectional conversion between Supabase rows and the
program / workout-log domain models.

Database schema:
- programs: id, user_id, name, is_active, created_at
- program_days: id, program_id, day_number, day_label, is_rest_day
- exercises: id, program_day_id, name, target_sets, target_reps,
  current_weight_kg, weight_increment, sort_order
- workout_logs: id, user_id, program_day_id, workout_date (DATE),
  completed, is_skipped, created_at
- workout_sets: id, workout_log_id, exercise_id, set_number, weight_kg,
  reps, is_amrap, notes

Nested selects (``program_days(exercises(...))``, ``workout_sets(*)``) are
returned by PostgREST as embedded lists and are converted recursively.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from domain.models import Exercise, Program, ProgramDay, WorkoutLog, WorkoutSet


def _parse_date(value: Any) -> date:
    """Parse a DATE column (``YYYY-MM-DD``) without any timezone shift."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Invalid workout_date: {value!r}")


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


# =============================================================================
# Program structure
# =============================================================================


def db_row_to_exercise(row: Dict[str, Any]) -> Exercise:
    """
    Convert an exercises row to an Exercise.

    Raises:
        pydantic.ValidationError: If the row holds an unknown weight
            increment or invalid targets (configuration error).
    """
    return Exercise(
        id=str(row["id"]),
        program_day_id=row.get("program_day_id"),
        name=row.get("name") or "",
        target_sets=row.get("target_sets"),
        target_reps=row.get("target_reps"),
        current_weight_kg=_optional_float(row.get("current_weight_kg")) or 0.0,
        weight_increment=row.get("weight_increment"),
        sort_order=row.get("sort_order") or 0,
    )


def db_row_to_program_day(row: Dict[str, Any]) -> ProgramDay:
    """Convert a program_days row (with embedded exercises) to a ProgramDay."""
    return ProgramDay(
        id=str(row["id"]),
        program_id=row.get("program_id"),
        day_number=row["day_number"],
        day_label=row.get("day_label"),
        is_rest_day=bool(row.get("is_rest_day") or False),
        exercises=[db_row_to_exercise(ex) for ex in row.get("exercises") or []],
    )


def db_row_to_program(row: Dict[str, Any]) -> Program:
    """Convert a programs row (with embedded program_days) to a Program."""
    return Program(
        id=str(row["id"]),
        user_id=row.get("user_id"),
        name=row.get("name") or "",
        is_active=bool(row.get("is_active", True)),
        program_days=[db_row_to_program_day(d) for d in row.get("program_days") or []],
    )


# =============================================================================
# Workout logs
# =============================================================================


def db_row_to_workout_set(row: Dict[str, Any]) -> WorkoutSet:
    """Convert a workout_sets row to a WorkoutSet."""
    return WorkoutSet(
        id=row.get("id"),
        workout_log_id=row.get("workout_log_id"),
        exercise_id=str(row["exercise_id"]),
        set_number=row["set_number"],
        weight_kg=_optional_float(row.get("weight_kg")),
        reps=_optional_int(row.get("reps")),
        is_amrap=bool(row.get("is_amrap") or False),
        notes=row.get("notes"),
    )


def db_row_to_workout_log(row: Dict[str, Any]) -> WorkoutLog:
    """Convert a workout_logs row (with optional embedded workout_sets)."""
    return WorkoutLog(
        id=row.get("id"),
        user_id=row["user_id"],
        program_day_id=row["program_day_id"],
        workout_date=_parse_date(row["workout_date"]),
        completed=bool(row.get("completed") or False),
        is_skipped=bool(row.get("is_skipped") or False),
        workout_sets=[db_row_to_workout_set(s) for s in row.get("workout_sets") or []],
    )


def workout_log_to_db_row(log: WorkoutLog) -> Dict[str, Any]:
    """
    Convert a WorkoutLog to a workout_logs row for upsert.

    Child sets are not included; they are written separately.
    """
    row: Dict[str, Any] = {
        "user_id": log.user_id,
        "program_day_id": log.program_day_id,
        "workout_date": log.workout_date.isoformat(),
        "completed": log.completed,
        "is_skipped": log.is_skipped,
    }
    if log.id:
        row["id"] = log.id
    return row


def workout_set_to_db_row(
    workout_set: WorkoutSet,
    workout_log_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Convert a WorkoutSet to a workout_sets row for insert."""
    return {
        "workout_log_id": workout_log_id or workout_set.workout_log_id,
        "exercise_id": workout_set.exercise_id,
        "set_number": workout_set.set_number,
        "weight_kg": workout_set.weight_kg,
        "reps": workout_set.reps,
        "is_amrap": workout_set.is_amrap,
        "notes": workout_set.notes,
    }


def workout_sets_to_db_rows(
    sets: List[WorkoutSet],
    workout_log_id: str,
) -> List[Dict[str, Any]]:
    """Convert a set collection to rows bound to one log."""
    return [workout_set_to_db_row(s, workout_log_id) for s in sets]
