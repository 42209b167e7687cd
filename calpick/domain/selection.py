"""Range selection state machine driven by pointer events.

The selector keeps two endpoints: the anchor, fixed by pointer-down, and the
far endpoint, moved by dragging. Every drag-over re-checks the whole candidate
span against the disabled entries, so a gesture is dropped the moment it
sweeps over a disabled day.

Phases:
- IDLE: no anchor
- ANCHOR_SET: anchor only
- RANGE_SELECTED: anchor and far endpoint
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from calpick.domain.disabled import span_collides_with_disabled
from calpick.domain.models import CalendarDate, DisabledEntry, SelectionChange, SelectionState

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[SelectionChange], None]


class SelectionPhase(str, Enum):
    """Where the selector is in a gesture."""

    IDLE = "IDLE"
    ANCHOR_SET = "ANCHOR_SET"
    RANGE_SELECTED = "RANGE_SELECTED"


def normalize(state: SelectionState) -> SelectionChange:
    """Turn raw anchor/far state into an ordered selection snapshot.

    Args:
        state: Current selector state.

    Returns:
        (earlier, later) when both ends are set, (anchor, None) with only an
        anchor, (None, None) when empty.
    """
    if state.anchor is None:
        return SelectionChange()
    if state.far is None:
        return SelectionChange(start_date=state.anchor, end_date=None)
    return SelectionChange(
        start_date=min(state.anchor, state.far),
        end_date=max(state.anchor, state.far),
    )


class RangeSelector:
    """Pointer-drag range selection over a read-only set of disabled entries.

    The host forwards pointer-down and drag-over events. Each event that
    changes the anchor or far endpoint is reported through on_change with the
    normalized selection.
    """

    def __init__(
        self,
        disabled_entries: Iterable[DisabledEntry] = (),
        on_change: ChangeCallback | None = None,
    ):
        """
        Args:
            disabled_entries: Days and ranges that may not be selected across.
            on_change: Called with the new selection after every change.
        """
        self._disabled: tuple[DisabledEntry, ...] = tuple(disabled_entries)
        self.on_change = on_change
        self._state = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def disabled_entries(self) -> tuple[DisabledEntry, ...]:
        return self._disabled

    @property
    def phase(self) -> SelectionPhase:
        if self._state.anchor is None:
            return SelectionPhase.IDLE
        if self._state.far is None:
            return SelectionPhase.ANCHOR_SET
        return SelectionPhase.RANGE_SELECTED

    @property
    def selection(self) -> SelectionChange:
        return normalize(self._state)

    def set_disabled_entries(self, entries: Iterable[DisabledEntry]) -> None:
        """Replace the disabled entries used by later gestures.

        The current selection is left as is.
        """
        self._disabled = tuple(entries)

    def on_pointer_down(self, day: CalendarDate) -> None:
        """Start a gesture on day, or clear the selection if day is the anchor."""
        anchor = self._state.anchor

        if anchor is not None and day == anchor:
            logger.debug("Pointer down on anchor %s, clearing selection", day)
            self._transition(SelectionState())
            return

        self._transition(SelectionState(anchor=day, far=None))

    def on_pointer_drag_over(self, day: CalendarDate) -> None:
        """Extend the gesture to day, pivoting the anchor on backward drags."""
        anchor, far = self._state.anchor, self._state.far

        if anchor is None:
            logger.debug("Drag over %s with no anchor, ignored", day)
            return
        if day == anchor:
            return

        if day < anchor:
            if span_collides_with_disabled(day, anchor, self._disabled, check_start_boundary=False):
                logger.debug("Backward drag %s..%s hits a disabled date, clearing", day, anchor)
                self._transition(SelectionState())
                return

            # The old anchor becomes the far end the first time we pass behind it
            new_far = far if far is not None else anchor
            self._transition(SelectionState(anchor=day, far=new_far))
            return

        if span_collides_with_disabled(anchor, day, self._disabled, check_start_boundary=True):
            logger.debug("Forward drag %s..%s hits a disabled date, clearing", anchor, day)
            self._transition(SelectionState())
            return

        self._transition(SelectionState(anchor=anchor, far=day))

    def _transition(self, new_state: SelectionState) -> None:
        if new_state == self._state:
            return

        self._state = new_state
        change = normalize(new_state)
        logger.debug("Selection is now %s..%s (%s)", change.start_date, change.end_date, self.phase.value)

        if self.on_change is not None:
            self.on_change(change)
