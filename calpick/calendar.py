"""Calendar controller: the displayed month plus a range selector."""

from collections.abc import Iterable

from calpick.dates import compute_window, first_of_month, month_label, shift_month
from calpick.domain.disabled import is_disabled
from calpick.domain.models import CalendarDate, DisabledEntry, SelectionChange
from calpick.domain.selection import ChangeCallback, RangeSelector
from calpick.domain.view import DayCell, build_cells


class Calendar:
    """Month view with drag selection.

    Pointer events on disabled days are dropped here, before they reach the
    selector.
    """

    def __init__(
        self,
        disabled_entries: Iterable[DisabledEntry] = (),
        month: CalendarDate | None = None,
        on_change: ChangeCallback | None = None,
    ):
        self._disabled = tuple(disabled_entries)
        self._month = first_of_month(month or CalendarDate.today())
        self.selector = RangeSelector(self._disabled, on_change=on_change)

    @property
    def month(self) -> CalendarDate:
        return self._month

    @property
    def label(self) -> str:
        return month_label(self._month)

    @property
    def window(self) -> list[CalendarDate]:
        return compute_window(self._month)

    @property
    def selection(self) -> SelectionChange:
        return self.selector.selection

    @property
    def cells(self) -> list[DayCell]:
        return build_cells(self.window, self._month, self.selection, self._disabled)

    def previous_month(self) -> None:
        self._month = shift_month(self._month, -1)

    def next_month(self) -> None:
        self._month = shift_month(self._month, 1)

    def go_to(self, month: CalendarDate) -> None:
        self._month = first_of_month(month)

    def set_disabled_entries(self, entries: Iterable[DisabledEntry]) -> None:
        self._disabled = tuple(entries)
        self.selector.set_disabled_entries(self._disabled)

    def press(self, day: CalendarDate) -> None:
        if is_disabled(day, self._disabled):
            return
        self.selector.on_pointer_down(day)

    def drag_over(self, day: CalendarDate) -> None:
        if is_disabled(day, self._disabled):
            return
        self.selector.on_pointer_drag_over(day)

    def sweep(self, start: CalendarDate, end: CalendarDate) -> SelectionChange:
        """Replay a drag from start to end, one day at a time.

        Args:
            start: Day the pointer goes down on.
            end: Day the pointer is released on, before or after start.

        Returns:
            Selection after the last drag-over.
        """
        self.press(start)
        step = 1 if end >= start else -1
        day = start
        while day != end:
            day = day.add_days(step)
            self.drag_over(day)
        return self.selection
