"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection to simulate backend errors at a given step
- Factory functions for common test scenarios

Usage:
    from tests.fakes import create_program_repo, create_workout_log_repo

    program_repo = create_program_repo(user_id="user1")
    log_repo = create_workout_log_repo()
"""
from typing import Optional

from domain.models import Exercise, Program, ProgramDay

from tests.fakes.program_repository import FakeProgramRepository
from tests.fakes.workout_log_repository import FakeWorkoutLogRepository
from tests.fakes.stats_repository import FakeStatsRepository


# =============================================================================
# Sample Data
# =============================================================================

TEST_USER_ID = "test_user"

MONDAY_DAY_ID = "day-mon"
THURSDAY_DAY_ID = "day-thu"
SQUAT_ID = "ex-squat"
BENCH_ID = "ex-bench"
DEADLIFT_ID = "ex-deadlift"


def create_program(
    *,
    user_id: str = TEST_USER_ID,
    program_id: str = "prog-1",
) -> Program:
    """
    Build a two-day program.

    Monday "Lower": Squat 4x10 @ 80kg (+2.5), Bench 3x8 @ 60kg (+5)
    Thursday (no label): Deadlift 3x5 @ 100kg (+10)
    """
    return Program(
        id=program_id,
        user_id=user_id,
        name="Test Program",
        program_days=[
            ProgramDay(
                id=MONDAY_DAY_ID,
                program_id=program_id,
                day_number=1,
                day_label="Lower",
                exercises=[
                    Exercise(
                        id=BENCH_ID,
                        program_day_id=MONDAY_DAY_ID,
                        name="Bench Press",
                        target_sets=3,
                        target_reps=8,
                        current_weight_kg=60,
                        weight_increment="5",
                        sort_order=2,
                    ),
                    Exercise(
                        id=SQUAT_ID,
                        program_day_id=MONDAY_DAY_ID,
                        name="Squat",
                        target_sets=4,
                        target_reps=10,
                        current_weight_kg=80,
                        weight_increment="2.5",
                        sort_order=1,
                    ),
                ],
            ),
            ProgramDay(
                id=THURSDAY_DAY_ID,
                program_id=program_id,
                day_number=4,
                exercises=[
                    Exercise(
                        id=DEADLIFT_ID,
                        program_day_id=THURSDAY_DAY_ID,
                        name="Deadlift",
                        target_sets=3,
                        target_reps=5,
                        current_weight_kg=100,
                        weight_increment="10",
                    ),
                ],
            ),
        ],
    )


# =============================================================================
# Factory Functions
# =============================================================================


def create_program_repo(
    *,
    user_id: str = TEST_USER_ID,
    program: Optional[Program] = None,
    with_program: bool = True,
) -> FakeProgramRepository:
    """
    Create a FakeProgramRepository, seeded with the sample program by default.

    Args:
        user_id: Owner of the seeded program
        program: Program to seed instead of the sample one
        with_program: False to leave the user without an active program
    """
    repo = FakeProgramRepository()
    if with_program:
        repo.seed(program or create_program(user_id=user_id))
    return repo


def create_workout_log_repo() -> FakeWorkoutLogRepository:
    """Create an empty FakeWorkoutLogRepository."""
    return FakeWorkoutLogRepository()


def create_stats_repo(
    *,
    streak: Optional[int] = 0,
    grade: Optional[str] = None,
) -> FakeStatsRepository:
    """Create a FakeStatsRepository returning the given aggregates."""
    return FakeStatsRepository(streak=streak, grade=grade)


__all__ = [
    # Fakes
    "FakeProgramRepository",
    "FakeWorkoutLogRepository",
    "FakeStatsRepository",
    # Sample data
    "TEST_USER_ID",
    "MONDAY_DAY_ID",
    "THURSDAY_DAY_ID",
    "SQUAT_ID",
    "BENCH_ID",
    "DEADLIFT_ID",
    "create_program",
    # Factories
    "create_program_repo",
    "create_workout_log_repo",
    "create_stats_repo",
]
