"""
CommitSession Use Case.

Persists a session the user confirmed (or skipped), syncs exercise working
weights and triggers the backend aggregates. Steps run strictly in order,
each depending on the previous one, and the first failure stops the
workflow:

    log upsert -> set replacement -> weight sync -> aggregate recompute
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from application.ports import ProgramRepository, StatsRepository, WorkoutLogRepository
from backend.core.progression_rules import synced_weight
from backend.core.session_resolver import find_scheduled_day
from backend.core.week_mapper import DateLike, as_date
from domain.models import Exercise, ProgramDay, SetEntry, WorkoutLog, WorkoutSet

logger = logging.getLogger(__name__)

STEP_UPSERT_LOG = "upsert_log"
STEP_REPLACE_SETS = "replace_sets"
STEP_SYNC_WEIGHTS = "sync_weights"
STEP_RECOMPUTE_AGGREGATES = "recompute_aggregates"


@dataclass
class CommitSessionResult:
    """Result of the CommitSession use case execution."""

    success: bool
    log: Optional[WorkoutLog] = None
    saved_sets: List[WorkoutSet] = field(default_factory=list)
    weight_updates: Dict[str, float] = field(default_factory=dict)
    is_skipped: bool = False
    error: Optional[str] = None
    failed_step: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


def build_session_sets(
    scheduled_day: ProgramDay,
    entered_sets: Mapping[str, Sequence[SetEntry]],
) -> Tuple[List[WorkoutSet], Dict[str, List[SetEntry]]]:
    """
    Turn entered rows into sets to persist.

    Blank rows are dropped and the remaining rows are renumbered 1..n per
    exercise, so set numbers stay contiguous. Fields left blank are stored
    as null. Rows for exercises that do not belong to the day are ignored.

    Returns:
        (sets to insert, kept rows keyed by exercise ID)
    """
    for exercise_id in entered_sets:
        if scheduled_day.get_exercise(exercise_id) is None:
            logger.warning(
                "Ignoring sets for exercise %s not on program day %s",
                exercise_id,
                scheduled_day.id,
            )

    sets: List[WorkoutSet] = []
    kept: Dict[str, List[SetEntry]] = {}
    for exercise in scheduled_day.exercises:
        rows = [row for row in entered_sets.get(exercise.id, []) if not row.is_blank]
        if not rows:
            continue
        kept[exercise.id] = rows
        for number, row in enumerate(rows, start=1):
            sets.append(
                WorkoutSet(
                    exercise_id=exercise.id,
                    set_number=number,
                    weight_kg=row.weight,
                    reps=row.reps,
                    is_amrap=row.is_amrap,
                )
            )
    return sets, kept


class CommitSessionUseCase:
    """
    Use case for saving or skipping a session.

    Orchestrates the following workflow:
    1. Upsert the log (completed or skipped)
    2. Replace its sets wholesale (none when skipped)
    3. Sync each touched exercise's working weight to its last valid set
    4. Recompute streak and force grade

    Failures are returned, never raised, and nothing after the failing step
    runs. There is no automatic retry.

    Usage:
        >>> use_case = CommitSessionUseCase(
        ...     workout_log_repo=log_repo,
        ...     program_repo=program_repo,
        ...     stats_repo=stats_repo,
        ... )
        >>> result = use_case.execute(
        ...     user_id="user-123",
        ...     workout_date=date(2026, 3, 2),
        ...     scheduled_day=day,
        ...     entered_sets={"ex-1": [SetEntry(weight=80, reps=10)]},
        ... )
        >>> if result.success:
        ...     print(f"Saved log: {result.log.id}")
    """

    def __init__(
        self,
        workout_log_repo: WorkoutLogRepository,
        program_repo: ProgramRepository,
        stats_repo: StatsRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_log_repo: Repository for logs and sets
            program_repo: Repository for exercise weight updates
            stats_repo: Backend aggregates (streak, grade)
        """
        self._workout_log_repo = workout_log_repo
        self._program_repo = program_repo
        self._stats_repo = stats_repo

    def execute(
        self,
        user_id: str,
        workout_date: DateLike,
        scheduled_day: Optional[ProgramDay],
        entered_sets: Mapping[str, Sequence[SetEntry]],
        *,
        skipped: bool = False,
    ) -> CommitSessionResult:
        """
        Execute the commit workflow.

        Args:
            user_id: Current user ID
            workout_date: Date of the session
            scheduled_day: Program day scheduled on that date
            entered_sets: Rows entered by the user, keyed by exercise ID
            skipped: True to record the session as skipped

        Returns:
            CommitSessionResult with success status and what was written
        """
        workout_date = as_date(workout_date)

        if scheduled_day is None:
            return CommitSessionResult(
                success=False,
                is_skipped=skipped,
                error="No session is scheduled on this date",
                validation_errors=["Rest day: nothing to save"],
            )

        step = STEP_UPSERT_LOG
        try:
            # Step 1: Log
            log = self._workout_log_repo.upsert_log(
                WorkoutLog(
                    user_id=user_id,
                    program_day_id=scheduled_day.id,
                    workout_date=workout_date,
                    completed=not skipped,
                    is_skipped=skipped,
                )
            )
            if not log.id:
                raise RuntimeError("Log upsert returned no id")

            # Step 2: Sets
            step = STEP_REPLACE_SETS
            if skipped:
                new_sets: List[WorkoutSet] = []
                kept: Dict[str, List[SetEntry]] = {}
            else:
                new_sets, kept = build_session_sets(scheduled_day, entered_sets)
            saved_sets = self._workout_log_repo.replace_sets(log.id, new_sets)

            # Step 3: Weight sync
            step = STEP_SYNC_WEIGHTS
            weight_updates = {}
            if not skipped:
                weight_updates = self._sync_weights(scheduled_day.exercises, kept)

            # Step 4: Aggregates
            step = STEP_RECOMPUTE_AGGREGATES
            self._stats_repo.calculate_streak(user_id)
            self._stats_repo.calculate_force_grade(user_id)

        except Exception as e:
            logger.exception(f"CommitSession failed at step '{step}': {e}")
            return CommitSessionResult(
                success=False,
                is_skipped=skipped,
                error=str(e),
                failed_step=step,
            )

        logger.info(
            "Session %s on %s for user %s: %d sets, %d weight updates",
            "skipped" if skipped else "saved",
            workout_date.isoformat(),
            user_id,
            len(saved_sets),
            len(weight_updates),
        )
        return CommitSessionResult(
            success=True,
            log=log.with_sets(saved_sets),
            saved_sets=saved_sets,
            weight_updates=weight_updates,
            is_skipped=skipped,
        )

    def execute_for_date(
        self,
        user_id: str,
        workout_date: DateLike,
        entered_sets: Mapping[str, Sequence[SetEntry]],
        *,
        skipped: bool = False,
    ) -> CommitSessionResult:
        """
        Convenience method resolving the scheduled day from the active program.

        Args:
            user_id: Current user ID
            workout_date: Date of the session
            entered_sets: Rows entered by the user, keyed by exercise ID
            skipped: True to record the session as skipped

        Returns:
            CommitSessionResult; a date without a scheduled day is rejected
        """
        try:
            program = self._program_repo.get_active_program(user_id)
        except Exception as e:
            logger.exception(f"Failed to load active program: {e}")
            return CommitSessionResult(
                success=False,
                is_skipped=skipped,
                error=str(e),
                failed_step="load_program",
            )

        days = program.program_days if program else []
        scheduled_day = find_scheduled_day(workout_date, days)
        return self.execute(
            user_id,
            workout_date,
            scheduled_day,
            entered_sets,
            skipped=skipped,
        )

    def _sync_weights(
        self,
        exercises: Sequence[Exercise],
        kept: Mapping[str, List[SetEntry]],
    ) -> Dict[str, float]:
        """Store the last valid weight of every exercise touched this session."""
        updates: Dict[str, float] = {}
        for exercise in exercises:
            rows = kept.get(exercise.id)
            if not rows:
                continue
            weight = synced_weight(exercise, rows)
            if weight is None:
                continue
            self._program_repo.update_exercise_weight(exercise.id, weight)
            updates[exercise.id] = weight
        return updates
