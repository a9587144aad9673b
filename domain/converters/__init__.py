"""
Domain converters between Supabase rows and domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_program, workout_log_to_db_row

    >>> program = db_row_to_program({"id": "p-1", "program_days": []})
    >>> workout_log_to_db_row(program_log)  # doctest: +SKIP
"""

from domain.converters.db_converters import (
    db_row_to_exercise,
    db_row_to_program,
    db_row_to_program_day,
    db_row_to_workout_log,
    db_row_to_workout_set,
    workout_log_to_db_row,
    workout_set_to_db_row,
    workout_sets_to_db_rows,
)

__all__ = [
    "db_row_to_exercise",
    "db_row_to_program",
    "db_row_to_program_day",
    "db_row_to_workout_log",
    "db_row_to_workout_set",
    "workout_log_to_db_row",
    "workout_set_to_db_row",
    "workout_sets_to_db_rows",
]
