# betterrest/utils/time_utils.py
from datetime import date, datetime, time, timedelta

SECONDS_PER_HOUR = 60 * 60

# Any fixed day works; only the time of day is kept after arithmetic
_REFERENCE_DATE = date(2000, 1, 2)


def seconds_since_midnight(hour: int, minute: int) -> int:
    """Convert an hour/minute pair to seconds since midnight."""
    return hour * SECONDS_PER_HOUR + minute * 60


def subtract_hours(clock_time: time, hours: float) -> time:
    """
    Subtract a (possibly fractional) number of hours from a time of day.

    The result wraps around midnight, e.g. 06:00 minus 8 hours is 22:00.
    """
    anchor = datetime.combine(_REFERENCE_DATE, clock_time)
    return (anchor - timedelta(hours=hours)).time()


def format_short_time(clock_time: time, clock: str = '12h') -> str:
    """
    Format a time of day without any date component.

    Args:
        clock_time: Time to format
        clock: '12h' gives "11:48 PM", '24h' gives "23:48"
    """
    if clock == '24h':
        return clock_time.strftime('%H:%M')
    if clock == '12h':
        return clock_time.strftime('%I:%M %p').lstrip('0')
    raise ValueError(f"Unsupported clock format: {clock}")


def format_hours_label(hours: float) -> str:
    """Label a sleep amount the way the form stepper shows it ("8.25 hours")."""
    return f"{hours:g} hours"
