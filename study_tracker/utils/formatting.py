"""Korean display formatting for durations and dates."""

from datetime import date

WEEKDAY_NAMES = ("월요일", "화요일", "수요일", "목요일", "금요일", "토요일", "일요일")
WEEKDAY_SHORT_NAMES = ("월", "화", "수", "목", "금", "토", "일")


def format_duration(minutes: int) -> str:
    """Format a minute count as a Korean duration string.

    Examples:
        >>> format_duration(45)
        '45분'
        >>> format_duration(60)
        '1시간'
        >>> format_duration(125)
        '2시간 5분'
    """
    if minutes < 60:
        return f"{minutes}분"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}시간"
    return f"{hours}시간 {mins}분"


def format_date(value: date) -> str:
    """Short date label, e.g. ``1월 5일``."""
    return f"{value.month}월 {value.day}일"


def format_date_full(value: date) -> str:
    """Long date label with weekday, e.g. ``2024년 1월 1일 (월요일)``."""
    return (
        f"{value.year}년 {value.month}월 {value.day}일 "
        f"({WEEKDAY_NAMES[value.weekday()]})"
    )


def format_week_range(start: date, end: date) -> str:
    """Week range label used by the stats header, e.g. ``1/1 - 1/7``."""
    return f"{start.month}/{start.day} - {end.month}/{end.day}"
