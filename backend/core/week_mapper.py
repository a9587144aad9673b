"""
Week mapper: calendar navigation for sessions.

Maps ISO (week, year) pairs to calendar dates and dates to the weekday
ordinals used by program days (1=Monday ... 7=Sunday). Everything here is
pure and deterministic.

Dates are always read from their own calendar fields. An aware datetime
late in the evening in a UTC+ zone is still "today" locally, so values are
never converted to UTC before formatting.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Tuple, Union

from domain.models import ProgramDay

DAYS_IN_WINDOW = 14

DateLike = Union[date, datetime]


# =============================================================================
# Week arithmetic
# =============================================================================


def as_date(day: DateLike) -> date:
    """Drop the time part, keeping the value's own calendar fields."""
    if isinstance(day, datetime):
        return date(day.year, day.month, day.day)
    return day


def week_number(day: DateLike) -> int:
    """
    ISO-8601 week number of a date.

    Weeks start on Monday; week 1 is the week holding the year's first
    Thursday, so early January dates can belong to the previous year's
    week 52/53.
    """
    return as_date(day).isocalendar()[1]


def iso_week_year(day: DateLike) -> int:
    """ISO week-numbering year of a date (may differ from the calendar year)."""
    return as_date(day).isocalendar()[0]


def start_of_week(week: int, year: int) -> date:
    """
    Monday beginning ISO week ``week`` of ``year``.

    Week numbers outside the year's range roll over instead of raising:
    week 0 is the last week of the previous year and week 53 of a 52-week
    year is week 1 of the next.

    Raises:
        ValueError: If the week falls outside the supported date range
    """
    first_monday = date.fromisocalendar(year, 1, 1)
    try:
        return first_monday + timedelta(weeks=week - 1)
    except OverflowError as e:
        raise ValueError(f"Week {week} of {year} is out of range") from e


def dates_for_two_week_window(week: int, year: int) -> List[date]:
    """The 14 consecutive dates starting on the Monday of ``week``."""
    start = start_of_week(week, year)
    return [start + timedelta(days=i) for i in range(DAYS_IN_WINDOW)]


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in a year (52 or 53)."""
    # Dec 28 always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def shift_week(week: int, year: int, delta: int) -> Tuple[int, int]:
    """
    Move ``delta`` weeks from (week, year), rolling over year boundaries.

    Returns:
        (week, year) of the target ISO week
    """
    target = start_of_week(week, year) + timedelta(weeks=delta)
    iso_year, iso_week, _ = target.isocalendar()
    return iso_week, iso_year


def week_options(start_year: int, years: int = 2) -> List[Tuple[int, int]]:
    """(week, year) pairs offered by the week picker, in order."""
    options: List[Tuple[int, int]] = []
    for year in range(start_year, start_year + years):
        options.extend((week, year) for week in range(1, weeks_in_year(year) + 1))
    return options


# =============================================================================
# Day mapping
# =============================================================================


def iso_day_string(day: DateLike) -> str:
    """
    Persistence key for a date: ``YYYY-MM-DD``.

    Examples:
        >>> iso_day_string(date(2026, 1, 5))
        '2026-01-05'
    """
    d = as_date(day)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def weekday_ordinal(day: DateLike) -> int:
    """Weekday of a date, Monday=1 ... Sunday=7."""
    return as_date(day).isoweekday()


def ordinal_from_native_dow(native_dow: int) -> int:
    """
    Convert Sunday=0..Saturday=6 numbering to Monday=1..Sunday=7.

    Clients built on JavaScript ``Date.getDay()`` send this numbering.
    """
    if not 0 <= native_dow <= 6:
        raise ValueError(f"Day of week must be in 0..6, got {native_dow}")
    return (native_dow + 6) % 7 + 1


# =============================================================================
# Date strip
# =============================================================================


@dataclass
class DayCell:
    """One date of the two-week strip."""

    date: date
    weekday: int
    is_today: bool
    has_training: bool


def build_date_strip(
    week: int,
    year: int,
    program_days: Iterable[ProgramDay],
    today: DateLike,
) -> List[DayCell]:
    """
    Cells for the two-week window starting at ``week``.

    A date has training when any non-rest program day falls on its weekday.
    """
    training_weekdays = {d.day_number for d in program_days if not d.is_rest_day}
    today_key = iso_day_string(today)

    cells = []
    for day in dates_for_two_week_window(week, year):
        weekday = weekday_ordinal(day)
        cells.append(
            DayCell(
                date=day,
                weekday=weekday,
                is_today=iso_day_string(day) == today_key,
                has_training=weekday in training_weekdays,
            )
        )
    return cells
