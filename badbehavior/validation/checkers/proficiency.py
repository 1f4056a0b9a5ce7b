"""
FAR 61.58: proficiency checks for aircraft that require a type rating.
"""

from typing import Optional

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation


class _ProficiencyCheckRule(ViolationChecker):
    window: TimeWindow

    def criteria(self, flight: Flight) -> Optional[MatchCriteria]:
        return None

    def check(self, flight: Flight) -> Optional[Violation]:
        aircraft = flight.aircraft
        if aircraft is None:
            return None
        if flight.is_dual_received or flight.is_proficiency_check:
            return None
        if not aircraft.requires_type_rating:
            return None

        eligible = self.flights_within(self.window, flight, self.criteria(flight))
        if any(f.is_proficiency_check for f in eligible):
            return None
        return self.violation


class NoProficiencyCheck(_ProficiencyCheckRule):
    """61.58(a)(1): a proficiency check in any type-rated aircraft within 12 calendar months."""

    violation = Violation.NO_PROFICIENCY_CHECK
    window = TimeWindow.calendar_months(12)


class NoProficiencyCheckInType(_ProficiencyCheckRule):
    """61.58(a)(2): a proficiency check in this type within 24 calendar months."""

    violation = Violation.NO_PROFICIENCY_CHECK_IN_TYPE
    window = TimeWindow.calendar_months(24)

    def criteria(self, flight: Flight) -> Optional[MatchCriteria]:
        return MatchCriteria.type_only(flight)
