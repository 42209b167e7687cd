"""Pure functions for checking days and spans against disabled entries.

A disabled entry is either a SingleDate or a RangeEntry. Range entries are
checked per drag direction: a forward drag only collides with a disabled
range if it sweeps over the range's start, a backward drag only if it sweeps
over the range's end. A selection can therefore stop right at the edge of a
disabled range.
"""

from collections.abc import Iterable

from calpick.domain.intervals import is_between
from calpick.domain.models import CalendarDate, DisabledEntry, RangeEntry, SingleDate


def is_disabled(day: CalendarDate, entries: Iterable[DisabledEntry]) -> bool:
    """Check whether a single day is disabled.

    Args:
        day: Day to check.
        entries: Disabled entries.

    Returns:
        True if day equals a SingleDate or lies inside a RangeEntry (inclusive).
    """
    for entry in entries:
        if isinstance(entry, SingleDate):
            if entry.date == day:
                return True
        elif isinstance(entry, RangeEntry):
            if is_between(day, entry.start_date, entry.end_date, "[]"):
                return True
        else:
            raise TypeError(f"Unknown disabled entry: {entry!r}")
    return False


def span_collides_with_disabled(
    span_start: CalendarDate,
    span_end: CalendarDate,
    entries: Iterable[DisabledEntry],
    check_start_boundary: bool,
) -> bool:
    """Check whether a candidate selection span runs into a disabled entry.

    Single dates only count when strictly inside the span; the span's own
    endpoints are exempt. For a range entry only one boundary is checked,
    against the whole span inclusive: its start when check_start_boundary is
    True (forward drag), its end otherwise (backward drag).

    Args:
        span_start: Earlier end of the span.
        span_end: Later end of the span.
        entries: Disabled entries.
        check_start_boundary: Which boundary of disabled ranges to check.

    Returns:
        True if the span collides.
    """
    for entry in entries:
        if isinstance(entry, SingleDate):
            if is_between(entry.date, span_start, span_end, "()"):
                return True
        elif isinstance(entry, RangeEntry):
            boundary = entry.start_date if check_start_boundary else entry.end_date
            if is_between(boundary, span_start, span_end, "[]"):
                return True
        else:
            raise TypeError(f"Unknown disabled entry: {entry!r}")
    return False
