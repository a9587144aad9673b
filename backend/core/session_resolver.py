"""
Session resolver: what to show for a calendar date.

Given the program days, the log stored for the date (if any) and the sets of
the most recent prior completed log for the same day, decide the resolved
state of the date and pre-fill every exercise's rows.

The state is never stored; it is recomputed on every navigation:

- REST_DAY: no training day falls on the date's weekday
- ALREADY_LOGGED: a log exists for (date, day)
- UNLOGGED_WITH_HISTORY: no log yet, a prior completed log exists
- UNLOGGED_FIRST_TIME: no log yet and no prior completed log
"""

import logging
from typing import Dict, List, Optional, Sequence

from backend.core.progression_rules import (
    generate_default_sets,
    next_weight,
    prescribe_sets,
)
from backend.core.week_mapper import DateLike, as_date, weekday_ordinal
from domain.models import (
    ExercisePlan,
    ProgramDay,
    ResolvedSession,
    SessionState,
    SetEntry,
    WorkoutLog,
    WorkoutSet,
)

logger = logging.getLogger(__name__)


def find_scheduled_day(
    workout_date: DateLike,
    program_days: Sequence[ProgramDay],
) -> Optional[ProgramDay]:
    """
    Training day scheduled on the weekday of ``workout_date``, or None.

    Days flagged as rest days never match. Duplicate weekdays are an
    upstream data problem; the lowest day ID is picked so the result stays
    deterministic.
    """
    weekday = weekday_ordinal(workout_date)
    matches = [
        day for day in program_days
        if day.day_number == weekday and not day.is_rest_day
    ]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "%d program days share weekday %d; using lowest id",
            len(matches),
            weekday,
        )
    return min(matches, key=lambda day: day.id)


def _logged_rows(sets: List[WorkoutSet]) -> List[SetEntry]:
    return [
        SetEntry(weight=s.weight_kg, reps=s.reps, is_amrap=s.is_amrap)
        for s in sets
    ]


def resolve_session(
    workout_date: DateLike,
    program_days: Sequence[ProgramDay],
    log: Optional[WorkoutLog] = None,
    prior_sets: Optional[Dict[str, List[WorkoutSet]]] = None,
    *,
    has_history: bool = False,
    has_program: bool = True,
) -> ResolvedSession:
    """
    Resolve the session view model for a date.

    Args:
        workout_date: Date being viewed
        program_days: Days of the active program (empty without a program)
        log: Log stored for (date, scheduled day), if any
        prior_sets: Sets of the most recent prior completed log, keyed by
            exercise ID. Only used when ``log`` is None.
        has_history: Whether a prior completed log exists for the day
        has_program: Whether the user has an active program

    Returns:
        ResolvedSession with one ExercisePlan per exercise of the day
    """
    workout_date = as_date(workout_date)
    weekday = weekday_ordinal(workout_date)
    scheduled_day = find_scheduled_day(workout_date, program_days)

    if scheduled_day is None:
        return ResolvedSession(
            workout_date=workout_date,
            weekday=weekday,
            state=SessionState.REST_DAY,
            has_program=has_program,
        )

    plans: List[ExercisePlan] = []

    if log is not None:
        for exercise in scheduled_day.exercises:
            logged = log.sets_for_exercise(exercise.id)
            if logged:
                plans.append(
                    ExercisePlan(exercise=exercise, sets=_logged_rows(logged), source="logged")
                )
            else:
                plans.append(
                    ExercisePlan(
                        exercise=exercise,
                        sets=generate_default_sets(exercise),
                        source="default",
                        prescribed_weight_kg=exercise.current_weight_kg,
                    )
                )
        return ResolvedSession(
            workout_date=workout_date,
            weekday=weekday,
            state=SessionState.ALREADY_LOGGED,
            scheduled_day=scheduled_day,
            log=log,
            is_skipped=log.is_skipped,
            has_program=has_program,
            exercises=plans,
        )

    prior_sets = prior_sets or {}
    for exercise in scheduled_day.exercises:
        previous = prior_sets.get(exercise.id) or []
        if previous:
            weight = next_weight(exercise, previous)
            plans.append(
                ExercisePlan(
                    exercise=exercise,
                    sets=prescribe_sets(exercise, weight),
                    source="progression",
                    prescribed_weight_kg=weight,
                )
            )
        else:
            plans.append(
                ExercisePlan(
                    exercise=exercise,
                    sets=generate_default_sets(exercise),
                    source="default",
                    prescribed_weight_kg=exercise.current_weight_kg,
                )
            )

    state = (
        SessionState.UNLOGGED_WITH_HISTORY
        if has_history
        else SessionState.UNLOGGED_FIRST_TIME
    )
    return ResolvedSession(
        workout_date=workout_date,
        weekday=weekday,
        state=state,
        scheduled_day=scheduled_day,
        has_program=has_program,
        exercises=plans,
    )
