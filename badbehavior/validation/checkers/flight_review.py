"""
FAR 61.56(c): flight review within the preceding 24 calendar months.
"""

from typing import Optional

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation


class NoFlightReview(ViolationChecker):
    """
    Acting as PIC requires a flight review (or a checkride, which counts as
    one) in any aircraft within the preceding 24 calendar months. Student
    solos are exempt.
    """

    violation = Violation.NO_FLIGHT_REVIEW
    window = TimeWindow.calendar_months(24)

    def check(self, flight: Flight) -> Optional[Violation]:
        if flight.aircraft is None:
            return None
        if not self.acting_as_pic(flight):
            return None
        if flight.is_student_solo or flight.is_flight_review or flight.is_checkride:
            return None

        for prior in self.flights_within(self.window, flight):
            if prior.is_flight_review or prior.is_checkride:
                return None
        return self.violation
