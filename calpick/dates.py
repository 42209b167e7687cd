"""Date utilities for calpick.

Pure functions for the visible calendar window and month navigation.
"""

from datetime import datetime

from calpick.domain.intervals import dates_between
from calpick.domain.models import CalendarDate

# Six rows of seven days, so every month renders at the same height
WINDOW_SIZE = 42

WEEKDAY_HEADERS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def first_of_month(day: CalendarDate) -> CalendarDate:
    """First day of the month containing day."""
    return CalendarDate(day.year, day.month, 1)


def shift_month(day: CalendarDate, months: int) -> CalendarDate:
    """First day of the month that is `months` away from day's month.

    Args:
        day: Any day in the starting month.
        months: Months to move, negative moves backwards.

    Returns:
        First day of the target month.
    """
    index = day.year * 12 + (day.month - 1) + months
    return CalendarDate(index // 12, index % 12 + 1, 1)


def parse_month(month: str) -> CalendarDate:
    """Parse a YYYY-MM string into the first day of that month.

    Raises:
        ValueError: If the text is not a valid month.
    """
    return CalendarDate.from_date(datetime.strptime(month, "%Y-%m"))


def month_label(day: CalendarDate) -> str:
    """Human-readable month, e.g. "March 2024"."""
    return day.to_date().strftime("%B %Y")


def compute_window(target: CalendarDate) -> list[CalendarDate]:
    """Calculate the days shown for target's month.

    Args:
        target: Any day inside the month to show.

    Returns:
        42 consecutive days starting on the Monday on or before the first of
        the month.
    """
    first = first_of_month(target)
    start = first.add_days(-first.weekday())
    return dates_between(start, start.add_days(WINDOW_SIZE - 1))
