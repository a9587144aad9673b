"""
Unit tests for CommitSessionUseCase.

Tests for:
- Saving: log flags, set replacement, weight sync, aggregate recompute
- Skipping: no sets, no weight change
- Blank row handling and set renumbering
- A failing step stops every later step
- Saved sets resolve back to the same rows
"""

from datetime import date

import pytest

from application.use_cases import (
    CommitSessionUseCase,
    ResolveSessionUseCase,
    build_session_sets,
)
from application.use_cases.commit_session import (
    STEP_RECOMPUTE_AGGREGATES,
    STEP_REPLACE_SETS,
    STEP_SYNC_WEIGHTS,
    STEP_UPSERT_LOG,
)
from domain.models import SessionState, SetEntry
from tests.fakes import (
    BENCH_ID,
    MONDAY_DAY_ID,
    SQUAT_ID,
    TEST_USER_ID,
    FakeProgramRepository,
    FakeStatsRepository,
    FakeWorkoutLogRepository,
    create_program,
)

pytestmark = pytest.mark.unit

MONDAY = date(2026, 3, 2)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def use_case(
    log_repo: FakeWorkoutLogRepository,
    program_repo: FakeProgramRepository,
    stats_repo: FakeStatsRepository,
) -> CommitSessionUseCase:
    """Create CommitSessionUseCase with fake dependencies."""
    return CommitSessionUseCase(
        workout_log_repo=log_repo,
        program_repo=program_repo,
        stats_repo=stats_repo,
    )


@pytest.fixture
def monday():
    return next(d for d in create_program().program_days if d.id == MONDAY_DAY_ID)


@pytest.fixture
def entries():
    return {
        SQUAT_ID: [
            SetEntry(weight=82.5, reps=10),
            SetEntry(weight=82.5, reps=10),
            SetEntry(weight=82.5, reps=9),
            SetEntry(weight=85, reps=7),
        ],
        BENCH_ID: [
            SetEntry(weight=60, reps=8),
            SetEntry(weight=60, reps=8),
            SetEntry(weight=60, reps=8, is_amrap=True),
        ],
    }


# =============================================================================
# Save
# =============================================================================


class TestCommitSave:
    def test_saves_completed_log(self, use_case, log_repo, monday, entries):
        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.success is True
        assert result.error is None
        log = log_repo.get_log(TEST_USER_ID, MONDAY, MONDAY_DAY_ID)
        assert log.completed is True
        assert log.is_skipped is False
        assert len(log.workout_sets) == 7
        assert result.log.id == log.id

    def test_syncs_last_valid_weight(self, use_case, program_repo, monday, entries):
        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        # 85x7 misses the grace margin, 82.5x9 is within one rep
        assert result.weight_updates == {SQUAT_ID: 82.5, BENCH_ID: 60}
        assert program_repo.get_exercise(SQUAT_ID).current_weight_kg == 82.5

    def test_no_valid_set_leaves_weight(self, use_case, program_repo, monday):
        entries = {SQUAT_ID: [SetEntry(weight=100, reps=3)]}

        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.weight_updates == {}
        assert program_repo.weight_updates == []
        assert program_repo.get_exercise(SQUAT_ID).current_weight_kg == 80

    def test_recomputes_aggregates(self, use_case, stats_repo, monday, entries):
        use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert stats_repo.calls == [
            ("calculate_streak", TEST_USER_ID),
            ("calculate_force_grade", TEST_USER_ID),
        ]

    def test_second_save_replaces_sets(self, use_case, log_repo, monday, entries):
        first = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)
        second = use_case.execute(
            TEST_USER_ID, MONDAY, monday, {SQUAT_ID: [SetEntry(weight=80, reps=10)]}
        )

        assert second.log.id == first.log.id
        assert len(log_repo.all_logs()) == 1
        log = log_repo.get_log(TEST_USER_ID, MONDAY, MONDAY_DAY_ID)
        assert len(log.workout_sets) == 1

    def test_unknown_exercise_is_ignored(self, use_case, log_repo, monday, caplog):
        entries = {"ex-unknown": [SetEntry(weight=50, reps=5)]}

        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.success is True
        assert result.saved_sets == []
        assert "ex-unknown" in caplog.text

    def test_rest_day_touches_nothing(self, use_case, log_repo, stats_repo, entries):
        result = use_case.execute(TEST_USER_ID, date(2026, 3, 3), None, entries)

        assert result.success is False
        assert result.validation_errors
        assert log_repo.write_calls == []
        assert stats_repo.calls == []


# =============================================================================
# Skip
# =============================================================================


class TestCommitSkip:
    def test_skip_records_skipped_log_without_sets(
        self, use_case, log_repo, program_repo, monday, entries
    ):
        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries, skipped=True)

        assert result.success is True
        assert result.is_skipped is True
        log = log_repo.get_log(TEST_USER_ID, MONDAY, MONDAY_DAY_ID)
        assert log.completed is False
        assert log.is_skipped is True
        assert log.workout_sets == []
        assert program_repo.weight_updates == []

    def test_skip_after_save_deletes_sets(self, use_case, log_repo, monday, entries):
        use_case.execute(TEST_USER_ID, MONDAY, monday, entries)
        use_case.execute(TEST_USER_ID, MONDAY, monday, {}, skipped=True)

        log = log_repo.get_log(TEST_USER_ID, MONDAY, MONDAY_DAY_ID)
        assert log.is_skipped is True
        assert log.workout_sets == []

    def test_skip_still_recomputes_aggregates(self, use_case, stats_repo, monday):
        use_case.execute(TEST_USER_ID, MONDAY, monday, {}, skipped=True)
        assert len(stats_repo.calls) == 2


# =============================================================================
# Blank rows
# =============================================================================


class TestBuildSessionSets:
    def test_blank_rows_dropped_and_renumbered(self, monday):
        entries = {
            SQUAT_ID: [
                SetEntry(weight=80, reps=10),
                SetEntry(),
                SetEntry(weight=80, reps=None),
                SetEntry(weight=None, reps=8),
            ]
        }

        sets, kept = build_session_sets(monday, entries)

        assert [s.set_number for s in sets] == [1, 2, 3]
        assert [(s.weight_kg, s.reps) for s in sets] == [(80, 10), (80, None), (None, 8)]
        assert len(kept[SQUAT_ID]) == 3

    def test_all_blank_exercise_has_no_sets(self, monday):
        sets, kept = build_session_sets(monday, {SQUAT_ID: [SetEntry(), SetEntry()]})

        assert sets == []
        assert SQUAT_ID not in kept

    def test_set_numbers_restart_per_exercise(self, monday, entries):
        sets, _ = build_session_sets(monday, entries)

        squat = [s.set_number for s in sets if s.exercise_id == SQUAT_ID]
        bench = [s.set_number for s in sets if s.exercise_id == BENCH_ID]
        assert squat == [1, 2, 3, 4]
        assert bench == [1, 2, 3]


# =============================================================================
# Failures
# =============================================================================


class TestCommitFailures:
    @pytest.mark.parametrize(
        "operation,step",
        [("upsert_log", STEP_UPSERT_LOG), ("replace_sets", STEP_REPLACE_SETS)],
    )
    def test_log_write_failure_stops_later_steps(
        self, use_case, log_repo, program_repo, stats_repo, monday, entries, operation, step
    ):
        log_repo.fail_on.add(operation)

        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.success is False
        assert result.failed_step == step
        assert "simulated" in result.error
        assert program_repo.weight_updates == []
        assert stats_repo.calls == []

    def test_weight_sync_failure_stops_aggregates(
        self, use_case, program_repo, stats_repo, monday, entries
    ):
        program_repo.fail_on_update = True

        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.success is False
        assert result.failed_step == STEP_SYNC_WEIGHTS
        assert stats_repo.calls == []

    def test_aggregate_failure_is_reported(self, use_case, log_repo, stats_repo, monday, entries):
        stats_repo.fail_on.add("calculate_force_grade")

        result = use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        assert result.success is False
        assert result.failed_step == STEP_RECOMPUTE_AGGREGATES
        # earlier steps are not rolled back
        assert log_repo.get_log(TEST_USER_ID, MONDAY, MONDAY_DAY_ID) is not None


# =============================================================================
# execute_for_date
# =============================================================================


class TestExecuteForDate:
    def test_resolves_scheduled_day(self, use_case, log_repo, entries):
        result = use_case.execute_for_date(TEST_USER_ID, MONDAY, entries)

        assert result.success is True
        assert result.log.program_day_id == MONDAY_DAY_ID

    def test_rest_day_is_rejected(self, use_case, log_repo, entries):
        result = use_case.execute_for_date(TEST_USER_ID, date(2026, 3, 3), entries)

        assert result.success is False
        assert result.validation_errors
        assert log_repo.all_logs() == []

    def test_program_load_failure(self, use_case, program_repo, entries):
        program_repo.fail_on_load = True

        result = use_case.execute_for_date(TEST_USER_ID, MONDAY, entries)

        assert result.success is False
        assert result.failed_step == "load_program"


# =============================================================================
# Round trip
# =============================================================================


class TestCommitThenResolve:
    def test_saved_rows_come_back_unchanged(self, use_case, program_repo, log_repo, monday):
        entries = {
            SQUAT_ID: [
                SetEntry(weight=82.5, reps=10),
                SetEntry(weight=82.5, reps=None, is_amrap=True),
            ],
            BENCH_ID: [SetEntry(weight=None, reps=12)],
        }
        use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        resolver = ResolveSessionUseCase(program_repo=program_repo, workout_log_repo=log_repo)
        session = resolver.execute(TEST_USER_ID, MONDAY)

        assert session.state == SessionState.ALREADY_LOGGED
        assert session.initial_sets == entries

    def test_next_week_progresses_from_saved_session(
        self, use_case, program_repo, log_repo, monday
    ):
        entries = {SQUAT_ID: [SetEntry(weight=80, reps=10) for _ in range(4)]}
        use_case.execute(TEST_USER_ID, MONDAY, monday, entries)

        resolver = ResolveSessionUseCase(program_repo=program_repo, workout_log_repo=log_repo)
        session = resolver.execute(TEST_USER_ID, date(2026, 3, 9))

        assert session.state == SessionState.UNLOGGED_WITH_HISTORY
        plans = {p.exercise.id: p for p in session.exercises}
        assert plans[SQUAT_ID].prescribed_weight_kg == 82.5
