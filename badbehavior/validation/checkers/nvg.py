"""
FAR 61.57(f): night vision goggle recency.

A pilot using NVGs must have made 3 NVG takeoffs and 3 NVG landings, or
passed an NVG proficiency check (61.31(k)) in the same category, within
4 calendar months; 2 calendar months to carry passengers.
"""

from typing import Optional

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation

REQUIRED_NVG_TAKEOFFS = 3
REQUIRED_NVG_LANDINGS = 3


def same_nvg_category(flight: Flight, check_flight: Flight) -> bool:
    """Whether check_flight was in the same category, simulators resolved to what they simulate."""
    if flight.aircraft is None or check_flight.aircraft is None:
        return False
    return flight.aircraft.type.effective_category == check_flight.aircraft.type.effective_category


class NoNVGCurrency(ViolationChecker):
    """NVG takeoffs and landings without NVG currency."""

    violation = Violation.NO_NVG_CURRENCY
    window = TimeWindow.calendar_months(4)

    def applies_to(self, flight: Flight) -> bool:
        if flight.aircraft is None or not self.acting_as_pic(flight):
            return False
        return flight.nvg_takeoffs > 0 and flight.nvg_landings > 0

    def check(self, flight: Flight) -> Optional[Violation]:
        if not self.applies_to(flight):
            return None

        eligible = self.flights_within(self.window, flight)
        takeoffs = sum(f.nvg_takeoffs for f in eligible)
        landings = sum(f.nvg_landings for f in eligible)
        if takeoffs >= REQUIRED_NVG_TAKEOFFS and landings >= REQUIRED_NVG_LANDINGS:
            return None

        checked = any(
            f.is_nvg_proficiency_check and same_nvg_category(flight, f)
            for f in eligible
        )
        return None if checked else self.violation


class NoNVGPassengerCurrency(NoNVGCurrency):
    """Same as NoNVGCurrency with passengers aboard, over a shorter window."""

    violation = Violation.NO_NVG_PASSENGER_CURRENCY
    window = TimeWindow.calendar_months(2)

    def applies_to(self, flight: Flight) -> bool:
        return flight.has_passengers and super().applies_to(flight)
