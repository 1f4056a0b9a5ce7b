"""
FAR 61.57(a) and (b): takeoff and landing recency to carry passengers.

Both rules count experience in the same category, class and (when
type-rated) type over the preceding 90 days. In a tailwheel airplane the
experience must also have been in tailwheel airplanes with full-stop
landings.

Night currency has an alternate path, FAR 61.57(e)(4), for experienced
pilots of turbine-powered aircraft that need more than one pilot: the
lookback stretches to 6 calendar months when the pilot has 1,500 hours
total and 15 hours in type in the last 90 days. The logbook has no
"multi-crew" field, so "requires a type rating and is turbine-powered"
stands in for it. That proxy is approximate and errs toward granting the
alternate path.
"""

from typing import Callable, Iterable, Optional

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation

REQUIRED_TAKEOFFS = 3
REQUIRED_LANDINGS = 3

ALTERNATE_TOTAL_HOURS = 1500
ALTERNATE_HOURS_IN_TYPE = 15

Counter = Callable[[Flight], int]


def has_landing_currency(
    flight: Flight,
    eligible: Iterable[Flight],
    takeoffs: Counter,
    landings: Counter,
    tailwheel_landings: Counter,
) -> bool:
    """
    Whether eligible flights hold 3 takeoffs and 3 landings.

    For a tailwheel flight, the tailwheel flights among them must also hold
    3 takeoffs and 3 landings counted with tailwheel_landings (full stops).
    """
    eligible = list(eligible)
    if sum(takeoffs(f) for f in eligible) < REQUIRED_TAKEOFFS:
        return False
    if sum(landings(f) for f in eligible) < REQUIRED_LANDINGS:
        return False

    if flight.is_tailwheel:
        tailwheel = [f for f in eligible if f.is_tailwheel]
        if sum(takeoffs(f) for f in tailwheel) < REQUIRED_TAKEOFFS:
            return False
        if sum(tailwheel_landings(f) for f in tailwheel) < REQUIRED_LANDINGS:
            return False
    return True


class NoPassengerCurrency(ViolationChecker):
    """3 takeoffs and 3 landings in the preceding 90 days to carry passengers."""

    violation = Violation.NO_PASSENGER_CURRENCY
    window = TimeWindow.calendar_days(90)

    def check(self, flight: Flight) -> Optional[Violation]:
        if flight.aircraft is None:
            return None
        if not self.acting_as_pic(flight):
            return None
        if not flight.has_passengers:
            return None

        eligible = self.flights_within(self.window, flight, MatchCriteria.full(flight))
        current = has_landing_currency(
            flight,
            eligible,
            takeoffs=lambda f: f.total_takeoffs,
            landings=lambda f: f.total_landings,
            tailwheel_landings=lambda f: f.full_stop_landings,
        )
        return None if current else self.violation


class NoNightPassengerCurrency(ViolationChecker):
    """3 night takeoffs and 3 night full-stop landings to carry passengers at night."""

    violation = Violation.NO_NIGHT_PASSENGER_CURRENCY
    window = TimeWindow.calendar_days(90)
    alternate_window = TimeWindow.calendar_months(6)

    def check(self, flight: Flight) -> Optional[Violation]:
        if flight.aircraft is None:
            return None
        if not self.acting_as_pic(flight):
            return None
        if not flight.has_passengers or not flight.is_night:
            return None

        if self._has_night_currency(flight, self.window):
            return None
        if self.qualifies_for_alternate(flight) and \
                self._has_night_currency(flight, self.alternate_window):
            return None
        return self.violation

    def _has_night_currency(self, flight: Flight, window: TimeWindow) -> bool:
        eligible = self.flights_within(window, flight, MatchCriteria.full(flight))
        return has_landing_currency(
            flight,
            eligible,
            takeoffs=lambda f: f.night_takeoffs,
            landings=lambda f: f.night_full_stop_landings,
            tailwheel_landings=lambda f: f.night_full_stop_landings,
        )

    def qualifies_for_alternate(self, flight: Flight) -> bool:
        """FAR 61.57(e)(4) experience test (turbine type-rated aircraft only)."""
        aircraft = flight.aircraft
        if aircraft is None:
            return False
        if not aircraft.requires_type_rating or not aircraft.type.is_turbine_powered:
            return False

        prior = self.flight_index.flights_before(flight)
        total_minutes = sum(f.pic_time + f.sic_time for f in prior)
        if total_minutes / 60.0 < ALTERNATE_TOTAL_HOURS:
            return False

        recent = self.flights_within(self.window, flight, MatchCriteria.full(flight))
        minutes_in_type = sum(
            f.pic_time + f.sic_time for f in recent
            if f.type_code == aircraft.type.type_code
        )
        return minutes_in_type / 60.0 >= ALTERNATE_HOURS_IN_TYPE
