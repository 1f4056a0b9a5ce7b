"""
Base class for currency rules.

A checker is built once per validation run with the shared FlightIndex,
gets one setup() call before any checking starts, and then has check()
called for every flight, possibly from several threads at once. check()
must only read the index and whatever setup() prepared.
"""

from typing import List, Optional

from badbehavior.records import Flight
from badbehavior.validation.flight_index import FlightIndex
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation


class ViolationChecker:
    """One FAR requirement."""

    violation: Violation

    def __init__(self, flight_index: FlightIndex):
        self.flight_index = flight_index

    @property
    def name(self) -> str:
        return type(self).__name__

    def setup(self) -> None:
        """One-time precomputation. Runs before any check() call."""

    def check(self, flight: Flight) -> Optional[Violation]:
        """Return the violation flight commits, or None if exempt or compliant."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers shared by the concrete rules
    # ------------------------------------------------------------------

    def flights_within(
        self,
        window: TimeWindow,
        flight: Flight,
        criteria: Optional[MatchCriteria] = None,
    ) -> List[Flight]:
        return self.flight_index.flights_within(window, flight, criteria)

    @staticmethod
    def acting_as_pic(flight: Flight) -> bool:
        """PIC time logged and not receiving instruction."""
        return flight.is_pic and not flight.is_dual_received
