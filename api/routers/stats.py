"""
Statistics router.

This router provides:
- Home dashboard summary (streak, force grade, volume, today's session)
- Progress charts (session volume, exercise weight)
- Exercises the weight chart can show
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import (
    get_chart_exercises_use_case,
    get_current_user,
    get_home_summary_use_case,
    get_progress_chart_use_case,
)
from application.exceptions import PersistenceError
from application.use_cases import (
    ChartView,
    GetHomeSummaryUseCase,
    GetProgressChartUseCase,
    ListChartExercisesUseCase,
)

router = APIRouter(
    tags=["Statistics"],
)


# =============================================================================
# Response Models
# =============================================================================


class HomeSummaryResponse(BaseModel):
    streak: int
    grade: str
    next_grade: Optional[str] = None
    grade_progress: float
    total_volume_kg: float
    today_label: str
    is_rest_day: bool
    has_program: bool


class ChartPointResponse(BaseModel):
    date: str
    value: float


class ProgressChartResponse(BaseModel):
    view: ChartView
    exercise_id: Optional[str] = None
    points: List[ChartPointResponse]


class ChartExerciseResponse(BaseModel):
    id: str
    name: str


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/home/summary", response_model=HomeSummaryResponse)
def get_home_summary(
    today: Optional[date] = Query(None, description="Reference date (defaults to today)"),
    user_id: str = Depends(get_current_user),
    use_case: GetHomeSummaryUseCase = Depends(get_home_summary_use_case),
) -> HomeSummaryResponse:
    try:
        summary = use_case.execute(user_id, today or date.today())
    except PersistenceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return HomeSummaryResponse(
        streak=summary.streak,
        grade=summary.grade,
        next_grade=summary.next_grade,
        grade_progress=summary.grade_progress,
        total_volume_kg=summary.total_volume_kg,
        today_label=summary.today_label,
        is_rest_day=summary.is_rest_day,
        has_program=summary.has_program,
    )


@router.get("/progress/charts", response_model=ProgressChartResponse)
def get_progress_chart(
    view: ChartView = Query(ChartView.VOLUME),
    exercise_id: Optional[str] = Query(None),
    months: Optional[int] = Query(None, ge=1, le=120),
    user_id: str = Depends(get_current_user),
    use_case: GetProgressChartUseCase = Depends(get_progress_chart_use_case),
) -> ProgressChartResponse:
    """
    Progress chart series, oldest point first.

    The exercise view requires ``exercise_id``.
    """
    try:
        chart = use_case.execute(user_id, view, exercise_id=exercise_id, months=months)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return ProgressChartResponse(
        view=chart.view,
        exercise_id=chart.exercise_id,
        points=[ChartPointResponse(date=p.date, value=p.value) for p in chart.points],
    )


@router.get("/progress/exercises", response_model=List[ChartExerciseResponse])
def list_chart_exercises(
    user_id: str = Depends(get_current_user),
    use_case: ListChartExercisesUseCase = Depends(get_chart_exercises_use_case),
) -> List[ChartExerciseResponse]:
    """Exercises across the user's programs, one per name, ordered by name."""
    try:
        exercises = use_case.execute(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return [ChartExerciseResponse(id=ex.id, name=ex.name) for ex in exercises]
