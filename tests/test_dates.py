"""Tests for calpick.dates pure functions."""

import pytest

from calpick.dates import (
    WEEKDAY_HEADERS,
    WINDOW_SIZE,
    compute_window,
    first_of_month,
    month_label,
    parse_month,
    shift_month,
)
from calpick.domain.models import CalendarDate


class TestComputeWindow:
    """Tests for compute_window."""

    def test_month_starting_midweek(self) -> None:
        """Should start on the Monday before a Friday first."""
        window = compute_window(CalendarDate(2024, 3, 17))

        assert window[0] == CalendarDate(2024, 2, 26)
        assert window[-1] == CalendarDate(2024, 4, 7)

    def test_month_starting_on_monday(self) -> None:
        """Should start on the first itself when it is a Monday."""
        window = compute_window(CalendarDate(2024, 4, 30))

        assert window[0] == CalendarDate(2024, 4, 1)

    def test_month_starting_on_sunday(self) -> None:
        """Should go back six days when the first is a Sunday."""
        window = compute_window(CalendarDate(2024, 9, 1))

        assert window[0] == CalendarDate(2024, 8, 26)

    def test_all_months_have_42_consecutive_days_from_monday(self) -> None:
        """Should always give 42 consecutive days starting on a Monday."""
        for year in (2023, 2024):
            for month in range(1, 13):
                window = compute_window(CalendarDate(year, month, 1))

                assert len(window) == WINDOW_SIZE
                assert window[0].weekday() == 0
                assert all(later == earlier.add_days(1) for earlier, later in zip(window, window[1:]))
                assert CalendarDate(year, month, 1) in window

    def test_short_february_still_six_rows(self) -> None:
        """Should pad a four-week February to six rows."""
        window = compute_window(CalendarDate(2021, 2, 1))

        assert window[0] == CalendarDate(2021, 2, 1)
        assert window[-1] == CalendarDate(2021, 3, 14)


class TestMonthHelpers:
    """Tests for month navigation helpers."""

    def test_first_of_month(self) -> None:
        """Should return the first day of the month."""
        assert first_of_month(CalendarDate(2024, 3, 17)) == CalendarDate(2024, 3, 1)

    def test_shift_forward_crosses_year(self) -> None:
        """Should wrap December into January."""
        assert shift_month(CalendarDate(2024, 12, 31), 1) == CalendarDate(2025, 1, 1)

    def test_shift_backward_crosses_year(self) -> None:
        """Should wrap January back into December."""
        assert shift_month(CalendarDate(2025, 1, 15), -1) == CalendarDate(2024, 12, 1)

    def test_shift_many_months(self) -> None:
        """Should move across several years."""
        assert shift_month(CalendarDate(2024, 3, 1), -27) == CalendarDate(2021, 12, 1)

    def test_month_label(self) -> None:
        """Should format the month and year."""
        assert month_label(CalendarDate(2024, 3, 10)) == "March 2024"

    def test_parse_month(self) -> None:
        """Should parse YYYY-MM into the first of the month."""
        assert parse_month("2025-01") == CalendarDate(2025, 1, 1)

    def test_parse_invalid_month_raises_valueerror(self) -> None:
        """Should raise ValueError for an invalid month number."""
        with pytest.raises(ValueError):
            parse_month("2025-13")

    def test_weekday_headers_start_on_monday(self) -> None:
        """Should list seven headers starting on Monday."""
        assert WEEKDAY_HEADERS[0] == "Mon"
        assert len(WEEKDAY_HEADERS) == 7
