"""
FAR 61.55(b): second-in-command recency in type-rated aircraft.
"""

from typing import Optional

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation


class NoSICCurrency(ViolationChecker):
    """
    Acting as SIC of a type-rated aircraft needs 3 takeoffs and 3 landings
    in type within 90 days. Flights with passengers aboard are not checked.
    """

    violation = Violation.NO_SIC_CURRENCY
    window = TimeWindow.calendar_days(90)

    def check(self, flight: Flight) -> Optional[Violation]:
        aircraft = flight.aircraft
        if aircraft is None:
            return None
        if not flight.is_sic or not aircraft.requires_type_rating:
            return None
        if flight.has_passengers:
            return None

        eligible = self.flights_within(self.window, flight, MatchCriteria.full(flight))
        takeoffs = sum(f.total_takeoffs for f in eligible)
        landings = sum(f.total_landings for f in eligible)
        if takeoffs < 3 or landings < 3:
            return self.violation
        return None
