"""Domain types for calpick.

- CalendarDate: a day-granularity date, ordered by calendar day
- DateRange: an ordered pair of CalendarDates (start <= end)
- SingleDate / RangeEntry: the two kinds of disabled entries
- SelectionState / SelectionChange: what the selection engine holds and emits
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Literal, Union

from calpick.domain.errors import InvalidArgumentError

# Bound symbols: "[" / "]" inclusive, "(" / ")" exclusive
Inclusivity = Literal["()", "[]", "(]", "[)"]

INCLUSIVITIES: tuple[Inclusivity, ...] = ("()", "[]", "(]", "[)")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable calendar day.

    Field order (year, month, day) gives chronological ordering.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # Raises ValueError for days that do not exist (e.g. 2025-02-30)
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date | datetime) -> "CalendarDate":
        """Build from a date or datetime, discarding any time of day."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """Parse a YYYY-MM-DD string.

        Raises:
            ValueError: If the text is not a valid ISO day.
        """
        return cls.from_date(datetime.strptime(text, "%Y-%m-%d"))

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def add_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def weekday(self) -> int:
        """Day of week, Monday is 0."""
        return self.to_date().weekday()

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class DateRange:
    """Immutable date range, both ends inclusive."""

    start_date: CalendarDate
    end_date: CalendarDate

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise InvalidArgumentError(
                f"Range start {self.start_date} is after range end {self.end_date}"
            )

    def __str__(self) -> str:
        return f"{self.start_date} → {self.end_date}"


@dataclass(frozen=True)
class SingleDate:
    """A single disabled day."""

    date: CalendarDate


@dataclass(frozen=True)
class RangeEntry:
    """A disabled span of days."""

    range: DateRange

    @property
    def start_date(self) -> CalendarDate:
        return self.range.start_date

    @property
    def end_date(self) -> CalendarDate:
        return self.range.end_date


DisabledEntry = Union[SingleDate, RangeEntry]


@dataclass(frozen=True)
class SelectionState:
    """Raw engine state: the fixed anchor and the dragged far endpoint."""

    anchor: CalendarDate | None = None
    far: CalendarDate | None = None


@dataclass(frozen=True)
class SelectionChange:
    """Normalized selection snapshot sent to the host.

    end_date is None while only the anchor is set; both are None once the
    selection is cleared.
    """

    start_date: CalendarDate | None = None
    end_date: CalendarDate | None = None

    @property
    def is_empty(self) -> bool:
        return self.start_date is None

    def as_range(self) -> DateRange | None:
        """Complete range, or None if either end is missing."""
        if self.start_date is None or self.end_date is None:
            return None
        return DateRange(self.start_date, self.end_date)
