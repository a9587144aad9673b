"""
Calendar router.

This router provides:
- The two-week date strip starting at an ISO week
- The (week, year) options of the week picker
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from api.deps import get_current_user, get_program_repo
from application.exceptions import PersistenceError
from application.ports import ProgramRepository
from backend.core.week_mapper import (
    build_date_strip,
    iso_week_year,
    shift_week,
    week_number,
    week_options,
)

router = APIRouter(
    prefix="/calendar",
    tags=["Calendar"],
)


# =============================================================================
# Response Models
# =============================================================================


class WeekRef(BaseModel):
    week: int
    year: int


class DayCellResponse(BaseModel):
    date: date
    weekday: int
    is_today: bool
    has_training: bool


class DateStripResponse(BaseModel):
    """Fourteen dates starting on the Monday of the requested week."""
    week: int
    year: int
    previous: WeekRef
    next: WeekRef
    days: List[DayCellResponse]


class WeekOptionsResponse(BaseModel):
    current: WeekRef
    options: List[WeekRef]


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/weeks", response_model=WeekOptionsResponse)
def list_weeks(
    today: Optional[date] = Query(None, description="Reference date (defaults to today)"),
    years: int = Query(2, ge=1, le=5),
    user_id: str = Depends(get_current_user),
) -> WeekOptionsResponse:
    """Week picker options from the reference year onward."""
    today = today or date.today()
    iso_year = iso_week_year(today)
    return WeekOptionsResponse(
        current=WeekRef(week=week_number(today), year=iso_year),
        options=[WeekRef(week=w, year=y) for w, y in week_options(iso_year, years)],
    )


@router.get("/weeks/{year}/{week}", response_model=DateStripResponse)
def get_week(
    year: int = Path(..., ge=1, le=9998),
    week: int = Path(..., ge=-520, le=520),
    today: Optional[date] = Query(None, description="Date highlighted as today"),
    user_id: str = Depends(get_current_user),
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> DateStripResponse:
    """
    Two-week date strip.

    Week numbers past the end of a year roll over into the next one.
    Weeks that land outside the supported date range return 422.
    """
    try:
        program = program_repo.get_active_program(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    program_days = program.program_days if program else []
    try:
        cells = build_date_strip(week, year, program_days, today or date.today())

        # Normalise the requested week after any rollover
        first = cells[0].date.isocalendar()
        prev_week, prev_year = shift_week(first[1], first[0], -1)
        next_week, next_year = shift_week(first[1], first[0], 1)
    except (ValueError, OverflowError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return DateStripResponse(
        week=first[1],
        year=first[0],
        previous=WeekRef(week=prev_week, year=prev_year),
        next=WeekRef(week=next_week, year=next_year),
        days=[
            DayCellResponse(
                date=cell.date,
                weekday=cell.weekday,
                is_today=cell.is_today,
                has_training=cell.has_training,
            )
            for cell in cells
        ],
    )
