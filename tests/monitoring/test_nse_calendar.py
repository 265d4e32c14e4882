"""
Unit tests for NSE market hours.

2026-10-15 is a Thursday; 2026-10-17 is a Saturday.
"""

from datetime import date, datetime, timezone

import pytest

from src.chain_alerts.monitoring.nse_calendar import IST, NSECalendar


@pytest.fixture
def calendar():
    return NSECalendar(holidays=[date(2026, 10, 20)])


@pytest.mark.parametrize(
    "hour,minute,expected",
    [
        (9, 14, False),
        (9, 15, True),
        (12, 0, True),
        (15, 30, True),
        (15, 31, False),
        (20, 0, False),
    ],
)
def test_market_hours_boundaries(calendar, hour, minute, expected):
    check = datetime(2026, 10, 15, hour, minute, tzinfo=IST)
    assert calendar.is_market_open(check) is expected


def test_closing_minute_counts_as_open(calendar):
    assert calendar.is_market_open(datetime(2026, 10, 15, 15, 30, 45, tzinfo=IST))


def test_weekend_closed(calendar):
    assert not calendar.is_trading_day(date(2026, 10, 17))
    assert not calendar.is_market_open(datetime(2026, 10, 17, 11, 0, tzinfo=IST))


def test_holiday_closed(calendar):
    assert not calendar.is_trading_day(date(2026, 10, 20))
    assert not calendar.is_market_open(datetime(2026, 10, 20, 11, 0, tzinfo=IST))
    assert calendar.is_trading_day(date(2026, 10, 21))


def test_utc_converted_to_ist(calendar):
    # 05:00 UTC = 10:30 IST, 11:00 UTC = 16:30 IST
    assert calendar.is_market_open(datetime(2026, 10, 15, 5, 0, tzinfo=timezone.utc))
    assert not calendar.is_market_open(datetime(2026, 10, 15, 11, 0, tzinfo=timezone.utc))


def test_naive_datetime_taken_as_ist(calendar):
    assert calendar.is_market_open(datetime(2026, 10, 15, 10, 30))


def test_to_ist():
    converted = NSECalendar.to_ist(datetime(2026, 10, 15, 4, 0, tzinfo=timezone.utc))

    assert converted.hour == 9
    assert converted.minute == 30
