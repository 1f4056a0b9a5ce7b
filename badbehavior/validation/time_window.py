"""
Lookback windows for currency rules.

FARs phrase recency requirements three ways, and each one computes its
start date differently:

- "in any 24-consecutive-hour period": exact subtraction.
- "within the preceding 90 days": counted in whole calendar days, so the
  window opens at local midnight N days before the reference date.
- "within the preceding 24 calendar months": counted in whole calendar
  months, so the window opens on the 1st of the month N months back.

Dates are naive local datetimes, matching how pilots log them.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta


class WindowUnit(str, Enum):
    HOURS = 'hours'
    CALENDAR_DAYS = 'calendar_days'
    CALENDAR_MONTHS = 'calendar_months'


@dataclass(frozen=True)
class TimeWindow:
    """A lookback of some number of hours, calendar days or calendar months."""
    unit: WindowUnit
    count: int

    @classmethod
    def hours(cls, count: int) -> 'TimeWindow':
        return cls(WindowUnit.HOURS, count)

    @classmethod
    def calendar_days(cls, count: int) -> 'TimeWindow':
        return cls(WindowUnit.CALENDAR_DAYS, count)

    @classmethod
    def calendar_months(cls, count: int) -> 'TimeWindow':
        return cls(WindowUnit.CALENDAR_MONTHS, count)

    def start_date(self, reference: datetime) -> datetime:
        """Earliest date inside the window ending at reference."""
        if self.unit == WindowUnit.HOURS:
            return reference - timedelta(hours=self.count)

        midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        if self.unit == WindowUnit.CALENDAR_DAYS:
            return midnight - timedelta(days=self.count)
        return (midnight - relativedelta(months=self.count)).replace(day=1)

    def __str__(self) -> str:
        return f"{self.count} {self.unit.value.replace('_', ' ')}"
