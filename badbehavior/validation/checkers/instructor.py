"""
FAR 61.195: flight instructor limitations.
"""

from typing import Optional

from badbehavior.records import AircraftClass, Category, Flight, MULTI_ENGINE_CLASSES
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation

MAX_DUAL_GIVEN_HOURS = 8.0
REQUIRED_MINUTES_IN_TYPE = 5 * 60


class DualGiven8In24(ViolationChecker):
    """61.195(a): no more than 8 hours of instruction in any 24 consecutive hours."""

    violation = Violation.DUAL_GIVEN_8_IN_24
    window = TimeWindow.hours(24)

    def check(self, flight: Flight) -> Optional[Violation]:
        if flight.aircraft is None:
            return None
        if not flight.is_dual_given or not flight.is_pic:
            return None

        # The flight's own instruction counts toward the limit
        recent = self.flight_index.flights_including_self(self.window, flight)
        dual_given_hours = sum(f.dual_given_time for f in recent) / 60.0
        return self.violation if dual_given_hours > MAX_DUAL_GIVEN_HOURS else None


class DualGivenTimeInType(ViolationChecker):
    """
    61.195(f): 5 hours PIC in make and model before instructing in a
    multiengine airplane, helicopter or powered-lift.
    """

    violation = Violation.DUAL_GIVEN_TIME_IN_TYPE

    def check(self, flight: Flight) -> Optional[Violation]:
        if not flight.is_dual_given or not flight.is_pic:
            return None
        aircraft = flight.aircraft
        if aircraft is None or not self._requires_time_in_type(aircraft.type.category,
                                                               aircraft.type.aircraft_class):
            return None

        minutes_in_type = sum(
            f.pic_time for f in self.flight_index.flights_before(flight)
            if f.type_code == aircraft.type.type_code
        )
        return self.violation if minutes_in_type < REQUIRED_MINUTES_IN_TYPE else None

    @staticmethod
    def _requires_time_in_type(category: Category,
                               aircraft_class: Optional[AircraftClass]) -> bool:
        if category == Category.AIRPLANE:
            return aircraft_class in MULTI_ENGINE_CLASSES
        return category in (Category.ROTORCRAFT, Category.POWERED_LIFT)
