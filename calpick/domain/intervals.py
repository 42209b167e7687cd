"""Pure functions for day enumeration and interval tests.

All comparisons are by calendar day. Plain date/datetime values are accepted
and reduced to CalendarDate first, so two datetimes on the same day compare
equal regardless of time of day.
"""

from datetime import date, datetime

from calpick.domain.errors import InvalidArgumentError
from calpick.domain.models import INCLUSIVITIES, CalendarDate, Inclusivity

DateLike = CalendarDate | date | datetime


def as_calendar_date(value: DateLike) -> CalendarDate:
    """Reduce a date-like value to a CalendarDate."""
    if isinstance(value, CalendarDate):
        return value
    return CalendarDate.from_date(value)


def dates_between(start: DateLike, end: DateLike) -> list[CalendarDate]:
    """List every day from start to end, both inclusive, ascending.

    The arguments are not reordered: if start is after end the result is
    empty. Callers dragging backwards must pass the earlier day first.

    Args:
        start: First day.
        end: Last day.

    Returns:
        One CalendarDate per day.
    """
    current = as_calendar_date(start)
    last = as_calendar_date(end)

    days: list[CalendarDate] = []
    while current <= last:
        days.append(current)
        current = current.add_days(1)
    return days


def is_between(
    value: DateLike,
    from_: DateLike,
    to: DateLike,
    inclusivity: Inclusivity = "()",
) -> bool:
    """Check whether value lies between from_ and to.

    Args:
        value: Day to test.
        from_: Lower bound.
        to: Upper bound.
        inclusivity: "[" / "]" make a bound inclusive, "(" / ")" exclusive.

    Returns:
        True if from_ <op> value <op> to holds.

    Raises:
        InvalidArgumentError: If inclusivity is not a recognized symbol.
    """
    if inclusivity not in INCLUSIVITIES:
        raise InvalidArgumentError(
            f"Inclusivity must be one of {', '.join(INCLUSIVITIES)}, got {inclusivity!r}"
        )

    day = as_calendar_date(value)
    lower = as_calendar_date(from_)
    upper = as_calendar_date(to)

    lower_ok = lower <= day if inclusivity[0] == "[" else lower < day
    upper_ok = day <= upper if inclusivity[1] == "]" else day < upper
    return lower_ok and upper_ok
