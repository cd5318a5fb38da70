import pytest
from datetime import date, datetime, timezone as dt_timezone

from apps.billing.domain.periods import (
    month_bounds,
    month_key,
    month_label,
    month_window,
    shift_month,
)


class TestShiftMonth:

    def test_same_year(self):
        assert shift_month(date(2025, 5, 20), -2) == date(2025, 3, 1)

    def test_across_year_backwards(self):
        assert shift_month(date(2025, 2, 28), -3) == date(2024, 11, 1)

    def test_across_year_forwards(self):
        assert shift_month(date(2024, 12, 31), 1) == date(2025, 1, 1)


class TestMonthWindow:

    def test_window_is_oldest_first_and_includes_current_month(self):
        window = month_window(date(2025, 2, 14), 3)

        assert window == [date(2024, 12, 1), date(2025, 1, 1), date(2025, 2, 1)]

    @pytest.mark.parametrize("months", [1, 6, 12, 24])
    def test_window_length(self, months):
        assert len(month_window(date(2025, 7, 1), months)) == months

    def test_window_must_be_positive(self):
        with pytest.raises(ValueError):
            month_window(date(2025, 7, 1), 0)


class TestMonthHelpers:

    def test_month_bounds_are_half_open(self):
        start, end = month_bounds(date(2025, 1, 1), date(2025, 3, 1))

        assert start.date() == date(2025, 1, 1)
        assert end.date() == date(2025, 4, 1)
        assert start.tzinfo is not None

    def test_month_label(self):
        assert month_label(date(2025, 1, 1)) == "Jan 2025"

    def test_month_key_from_datetime(self):
        assert month_key(datetime(2025, 3, 1, tzinfo=dt_timezone.utc)) == date(2025, 3, 1)

    def test_month_key_from_date(self):
        assert month_key(date(2025, 3, 17)) == date(2025, 3, 1)
