"""Calendar arithmetic for week, month and calendar-grid views.

Weeks follow ISO-8601: they start on Monday and are numbered within the
ISO week-numbering year, which can differ from the calendar year for the
first and last days of December/January.
"""

from datetime import date, timedelta
from typing import List, Tuple


def week_bounds(ref: date) -> Tuple[date, date]:
    """Return Monday and Sunday of the ISO week containing ``ref``."""
    monday = ref - timedelta(days=ref.weekday())
    return monday, monday + timedelta(days=6)


def iso_week(ref: date) -> Tuple[int, int]:
    """Return ``(iso_year, iso_week)`` for ``ref``."""
    iso_year, week_number, _ = ref.isocalendar()
    return iso_year, week_number


def week_start(year: int, week_number: int) -> date:
    """Return the Monday of ISO week ``week_number`` of ``year``."""
    return date.fromisocalendar(year, week_number, 1)


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """Return first and last day of a calendar month.

    Raises:
        ValueError: If ``month`` is not in 1..12.
    """
    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return first, next_first - timedelta(days=1)


def calendar_days(year: int, month: int) -> List[date]:
    """Return every date shown on a Monday-start month calendar grid.

    The grid starts on the Monday on or before the 1st and ends on the
    Sunday on or after the last day, so its length is a multiple of 7.
    """
    first, last = month_bounds(year, month)
    start, _ = week_bounds(first)
    _, end = week_bounds(last)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def today() -> date:
    """Current local date; a seam for tests."""
    return date.today()
