"""
NSE Trading Calendar Utility

Determines trading days and market hours for the National Stock Exchange
of India.

Usage:
    from src.chain_alerts.monitoring.nse_calendar import NSECalendar

    cal = NSECalendar()

    if cal.is_market_open():
        print("Market is open now!")
"""

from datetime import date, datetime, time
from typing import Iterable, Optional

from src.chain_alerts.models.chain import IST


class NSECalendar:
    """
    NSE trading calendar with market hours.

    **Trading Hours (IST):**
    - Regular Session: 9:15 AM - 3:30 PM (both ends inclusive)

    Weekends are closed. Exchange holidays are supplied by the caller since
    the NSE publishes them yearly.
    """

    MARKET_OPEN = time(9, 15)   # 9:15 AM IST
    MARKET_CLOSE = time(15, 30)  # 3:30 PM IST

    def __init__(self, holidays: Optional[Iterable[date]] = None):
        """
        Initialize NSE calendar.

        Args:
            holidays: Exchange holidays (market closed all day)
        """
        self.holidays = frozenset(holidays or ())

    @staticmethod
    def to_ist(check_time: datetime) -> datetime:
        """Convert to IST; naive datetimes are taken to already be IST."""
        if check_time.tzinfo is None:
            return check_time.replace(tzinfo=IST)
        return check_time.astimezone(IST)

    def is_trading_day(self, check_date: Optional[date] = None) -> bool:
        """
        Check if a date is a trading day.

        Args:
            check_date: Date to check (default: today in IST)

        Returns:
            True if it's a trading day, False otherwise
        """
        if check_date is None:
            check_date = datetime.now(IST).date()

        # Weekend
        if check_date.weekday() >= 5:  # Saturday = 5, Sunday = 6
            return False

        return check_date not in self.holidays

    def is_market_open(self, check_time: Optional[datetime] = None) -> bool:
        """
        Check if market is open (9:15 AM - 3:30 PM IST).

        Args:
            check_time: Time to check (default: now)

        Returns:
            True if market is open, False otherwise
        """
        ist_time = self.to_ist(check_time or datetime.now(IST))

        if not self.is_trading_day(ist_time.date()):
            return False

        current = ist_time.time().replace(second=0, microsecond=0)
        return self.MARKET_OPEN <= current <= self.MARKET_CLOSE
