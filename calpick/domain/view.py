"""Pure functions for classifying the cells of a calendar grid."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from calpick.domain.disabled import is_disabled
from calpick.domain.intervals import is_between
from calpick.domain.models import CalendarDate, DisabledEntry, SelectionChange


class CellVariant(str, Enum):
    """How a day cell is drawn."""

    DEFAULT = "default"
    SELECTED = "selected"
    DISABLED = "disabled"


@dataclass(frozen=True)
class DayCell:
    """Immutable view data for one day in the grid."""

    date: CalendarDate
    in_month: bool
    variant: CellVariant

    @property
    def disabled(self) -> bool:
        return self.variant is CellVariant.DISABLED


def is_selected(day: CalendarDate, start: CalendarDate | None, end: CalendarDate | None) -> bool:
    """Check whether day is inside the current selection.

    A selection with only a start covers just that day.
    """
    if start is None:
        return False
    return is_between(day, start, end or start, "[]")


def cell_variant(selected: bool, disabled: bool) -> CellVariant:
    if disabled:
        return CellVariant.DISABLED
    if selected:
        return CellVariant.SELECTED
    return CellVariant.DEFAULT


def build_cells(
    window: Sequence[CalendarDate],
    month: CalendarDate,
    selection: SelectionChange,
    entries: Iterable[DisabledEntry],
) -> list[DayCell]:
    """Classify every day of a view window.

    Args:
        window: Days to show, usually from compute_window.
        month: Any day in the displayed month.
        selection: Current selection snapshot.
        entries: Disabled entries.

    Returns:
        One DayCell per day, in window order.
    """
    entries = tuple(entries)
    return [
        DayCell(
            date=day,
            in_month=(day.year, day.month) == (month.year, month.month),
            variant=cell_variant(
                is_selected(day, selection.start_date, selection.end_date),
                is_disabled(day, entries),
            ),
        )
        for day in window
    ]
