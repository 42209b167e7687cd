"""Domain models and pure logic for calpick.

This package contains the functional core:
- Date arithmetic with calendar-day granularity
- Disabled date classification
- The range selection state machine
- No I/O operations
"""

from calpick.domain.errors import CalpickError, ConfigError, InvalidArgumentError
from calpick.domain.models import (
    CalendarDate,
    DateRange,
    DisabledEntry,
    RangeEntry,
    SelectionChange,
    SelectionState,
    SingleDate,
)
from calpick.domain.selection import RangeSelector, SelectionPhase

__all__ = [
    "CalendarDate",
    "CalpickError",
    "ConfigError",
    "DateRange",
    "DisabledEntry",
    "InvalidArgumentError",
    "RangeEntry",
    "RangeSelector",
    "SelectionChange",
    "SelectionPhase",
    "SelectionState",
    "SingleDate",
]
