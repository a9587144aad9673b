"""
Unit tests for GetHomeSummaryUseCase, GetProgressChartUseCase and
ListChartExercisesUseCase.
"""

from datetime import date

import pytest

from application.exceptions import PersistenceError
from application.use_cases import (
    ChartView,
    GetHomeSummaryUseCase,
    GetProgressChartUseCase,
    ListChartExercisesUseCase,
)
from domain.models import Exercise, ProgramDay, WorkoutLog, WorkoutSet
from tests.fakes import (
    BENCH_ID,
    DEADLIFT_ID,
    MONDAY_DAY_ID,
    SQUAT_ID,
    TEST_USER_ID,
    create_program,
    create_program_repo,
    create_stats_repo,
)

pytestmark = pytest.mark.unit


def _seed(log_repo, day, weight, reps, completed=True):
    return log_repo.seed(
        WorkoutLog(
            user_id=TEST_USER_ID,
            program_day_id=MONDAY_DAY_ID,
            workout_date=day,
            completed=completed,
            workout_sets=[
                WorkoutSet(exercise_id=SQUAT_ID, set_number=1, weight_kg=weight, reps=reps),
            ],
        )
    )


class TestHomeSummary:
    def test_training_day(self, program_repo, log_repo):
        _seed(log_repo, date(2026, 2, 23), 100, 50)
        stats_repo = create_stats_repo(streak=4, grade="Gringalet")
        use_case = GetHomeSummaryUseCase(program_repo, log_repo, stats_repo)

        summary = use_case.execute(TEST_USER_ID, date(2026, 3, 2))

        assert summary.streak == 4
        assert summary.grade == "Gringalet"
        assert summary.total_volume_kg == 5_000
        assert summary.today_label == "Lower"
        assert summary.is_rest_day is False
        assert summary.grade_progress == 50.0
        assert summary.next_grade == "Crevette"

    def test_unlabelled_day_uses_day_number(self, program_repo, log_repo, stats_repo):
        use_case = GetHomeSummaryUseCase(program_repo, log_repo, stats_repo)

        summary = use_case.execute(TEST_USER_ID, date(2026, 3, 5))

        assert summary.today_label == "Day 4"

    def test_rest_day(self, program_repo, log_repo, stats_repo):
        use_case = GetHomeSummaryUseCase(program_repo, log_repo, stats_repo)

        summary = use_case.execute(TEST_USER_ID, date(2026, 3, 3))

        assert summary.is_rest_day is True
        assert summary.today_label == "Rest"

    def test_grade_falls_back_to_volume(self, program_repo, log_repo):
        _seed(log_repo, date(2026, 2, 23), 200, 60)
        _seed(log_repo, date(2026, 2, 24), 500, 100, completed=False)
        stats_repo = create_stats_repo(streak=None, grade=None)
        use_case = GetHomeSummaryUseCase(program_repo, log_repo, stats_repo)

        summary = use_case.execute(TEST_USER_ID, date(2026, 3, 2))

        assert summary.streak == 0
        assert summary.total_volume_kg == 12_000
        assert summary.grade == "Crevette"

    def test_without_program(self, log_repo, stats_repo):
        use_case = GetHomeSummaryUseCase(
            create_program_repo(with_program=False), log_repo, stats_repo
        )

        summary = use_case.execute(TEST_USER_ID, date(2026, 3, 2))

        assert summary.has_program is False
        assert summary.is_rest_day is True

    def test_failure_propagates(self, program_repo, log_repo, stats_repo):
        stats_repo.fail_on.add("calculate_streak")
        use_case = GetHomeSummaryUseCase(program_repo, log_repo, stats_repo)

        with pytest.raises(PersistenceError):
            use_case.execute(TEST_USER_ID, date(2026, 3, 2))


class TestProgressChart:
    def test_volume_view(self, log_repo):
        _seed(log_repo, date(2026, 2, 23), 80, 10)
        _seed(log_repo, date(2026, 3, 2), 82.5, 10)

        chart = GetProgressChartUseCase(log_repo).execute(TEST_USER_ID)

        assert chart.view is ChartView.VOLUME
        assert [p.value for p in chart.points] == [800, 825]

    def test_exercise_view(self, log_repo):
        _seed(log_repo, date(2026, 2, 23), 80, 10)
        _seed(log_repo, date(2026, 3, 2), 82.5, 10)

        chart = GetProgressChartUseCase(log_repo).execute(
            TEST_USER_ID, "exercise", exercise_id=SQUAT_ID
        )

        assert chart.view is ChartView.EXERCISE
        assert [p.value for p in chart.points] == [80, 82.5]

    def test_exercise_view_includes_incomplete_sessions(self, log_repo):
        _seed(log_repo, date(2026, 2, 23), 80, 10)
        _seed(log_repo, date(2026, 3, 2), 82.5, 6, completed=False)

        exercise = GetProgressChartUseCase(log_repo).execute(
            TEST_USER_ID, "exercise", exercise_id=SQUAT_ID
        )
        volume = GetProgressChartUseCase(log_repo).execute(TEST_USER_ID)

        assert [p.date for p in exercise.points] == ["2026-02-23", "2026-03-02"]
        assert [p.date for p in volume.points] == ["2026-02-23"]

    def test_exercise_view_requires_exercise(self, log_repo):
        with pytest.raises(ValueError):
            GetProgressChartUseCase(log_repo).execute(TEST_USER_ID, ChartView.EXERCISE)

    def test_unknown_view(self, log_repo):
        with pytest.raises(ValueError):
            GetProgressChartUseCase(log_repo).execute(TEST_USER_ID, "calories")

    def test_month_window(self, log_repo):
        _seed(log_repo, date(2025, 12, 1), 80, 10)
        _seed(log_repo, date(2026, 2, 23), 80, 10)

        chart = GetProgressChartUseCase(log_repo).execute(
            TEST_USER_ID, months=1, today=date(2026, 3, 2)
        )

        assert [p.date for p in chart.points] == ["2026-02-23"]


class TestChartExercises:
    def test_ordered_by_name(self, program_repo):
        exercises = ListChartExercisesUseCase(program_repo).execute(TEST_USER_ID)

        assert [ex.id for ex in exercises] == [BENCH_ID, DEADLIFT_ID, SQUAT_ID]

    def test_same_name_listed_once(self):
        program = create_program()
        extra_day = ProgramDay(
            id="day-sat",
            day_number=6,
            exercises=[
                Exercise(id="ex-squat-2", name="Squat", target_sets=5, target_reps=5),
            ],
        )
        program = program.model_copy(
            update={"program_days": program.program_days + [extra_day]}
        )
        repo = create_program_repo(program=program)

        exercises = ListChartExercisesUseCase(repo).execute(TEST_USER_ID)

        assert [ex.name for ex in exercises] == ["Bench Press", "Deadlift", "Squat"]
        assert exercises[-1].id == SQUAT_ID

    def test_without_program(self):
        repo = create_program_repo(with_program=False)
        assert ListChartExercisesUseCase(repo).execute(TEST_USER_ID) == []

    def test_failure_propagates(self, program_repo):
        program_repo.fail_on_load = True

        with pytest.raises(PersistenceError) as exc_info:
            ListChartExercisesUseCase(program_repo).execute(TEST_USER_ID)

        assert exc_info.value.operation == "list_exercises"
