"""
Tests for lookback window arithmetic.
"""

from datetime import datetime, timedelta

import pytest

from badbehavior.validation import TimeWindow


REFERENCE_DATES = [
    datetime(2024, 3, 15, 14, 30, 12),
    datetime(2024, 3, 31, 23, 59, 59),
    datetime(2024, 1, 1, 0, 0, 0),
    datetime(2023, 12, 31, 6, 5, 4),
    datetime(2024, 2, 29, 12, 0, 0),
]


class TestHours:
    """Tests for hour windows."""

    def test_exact_subtraction(self):
        """Test hour windows subtract exactly."""
        reference = datetime(2024, 3, 15, 14, 30)
        assert TimeWindow.hours(24).start_date(reference) == datetime(2024, 3, 14, 14, 30)

    def test_keeps_time_of_day(self):
        """Test hour windows are not truncated."""
        reference = datetime(2024, 3, 15, 14, 30, 45)
        assert TimeWindow.hours(1).start_date(reference) == reference - timedelta(hours=1)


class TestCalendarDays:
    """Tests for calendar-day windows."""

    def test_starts_at_midnight(self):
        """Test 90 calendar days back from mid-afternoon starts at midnight."""
        reference = datetime(2024, 3, 15, 14, 30)
        assert TimeWindow.calendar_days(90).start_date(reference) == datetime(2023, 12, 16)

    def test_zero_days_is_start_of_today(self):
        """Test a zero-day window opens at today's midnight."""
        reference = datetime(2024, 3, 15, 14, 30)
        assert TimeWindow.calendar_days(0).start_date(reference) == datetime(2024, 3, 15)

    @pytest.mark.parametrize('reference', REFERENCE_DATES)
    @pytest.mark.parametrize('days', [1, 30, 90, 365])
    def test_always_midnight(self, reference, days):
        """Test calendar-day windows always start at 00:00:00."""
        start = TimeWindow.calendar_days(days).start_date(reference)
        assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)
        assert start <= reference - timedelta(days=days)


class TestCalendarMonths:
    """Tests for calendar-month windows."""

    def test_starts_on_first_of_month(self):
        """Test 24 calendar months back lands on the 1st of that month."""
        reference = datetime(2024, 6, 15, 10, 0)
        assert TimeWindow.calendar_months(24).start_date(reference) == datetime(2022, 6, 1)

    def test_end_of_month_reference(self):
        """Test a month back from March 31 is February 1."""
        reference = datetime(2024, 3, 31, 18, 0)
        assert TimeWindow.calendar_months(1).start_date(reference) == datetime(2024, 2, 1)

    def test_crosses_year_boundary(self):
        """Test 6 calendar months back from February."""
        reference = datetime(2024, 2, 10)
        assert TimeWindow.calendar_months(6).start_date(reference) == datetime(2023, 8, 1)

    @pytest.mark.parametrize('reference', REFERENCE_DATES)
    @pytest.mark.parametrize('months', [1, 2, 4, 6, 12, 24])
    def test_always_first_of_month(self, reference, months):
        """Test calendar-month windows always start on the 1st at midnight."""
        start = TimeWindow.calendar_months(months).start_date(reference)
        assert start.day == 1
        assert (start.hour, start.minute, start.second) == (0, 0, 0)
        months_back = (reference.year - start.year) * 12 + reference.month - start.month
        assert months_back == months


def test_str():
    """Test windows describe themselves."""
    assert str(TimeWindow.calendar_months(6)) == '6 calendar months'
    assert str(TimeWindow.hours(24)) == '24 hours'
