"""
FAR 61.57(c): instrument currency.

To act as PIC under IFR a pilot needs, within the preceding 6 calendar
months, 6 instrument approaches and holding procedures, or an instrument
proficiency check (IPC).

The catch is that approaches flown while *not* current only count if they
fall inside the 12-month grace period: a pilot who lets currency lapse for
longer than that must take an IPC. Whether a flight's approaches count
therefore depends on whether the pilot was within the grace period when
flying it, which in turn depends on the approaches of earlier flights.

Design notes:
    Every flight depends only on flights at lower positions in the index
    (same-instant flights logged after it never feed its total), so "counts" is
    resolved in one oldest-to-newest pass in setup() and stored in a NumPy
    bool array indexed by position in the FlightIndex. After setup() the
    array is only read, which is what makes check() safe to call from
    several worker threads.
"""

import logging
import time
from typing import List, Optional

import numpy as np

from badbehavior.records import Flight
from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.flight_index import FlightIndex
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.violations import Violation

logger = logging.getLogger(__name__)

REQUIRED_APPROACHES = 6
REQUIRED_HOLDS = 1


class NoIFRCurrency(ViolationChecker):
    """IFR flight without 6 approaches and a hold, or an IPC, in 6 calendar months."""

    violation = Violation.NO_IFR_CURRENCY
    window = TimeWindow.calendar_months(6)
    grace_window = TimeWindow.calendar_months(12)

    def __init__(self, flight_index: FlightIndex):
        super().__init__(flight_index)
        count = len(flight_index)
        self._counts = np.zeros(count, dtype=bool)
        self._resolved = np.zeros(count, dtype=bool)
        self._approaches = np.array([f.approach_count for f in flight_index], dtype=np.int64)
        self._holds = np.array([f.holds for f in flight_index], dtype=np.int64)

    # ------------------------------------------------------------------
    # Grace period table
    # ------------------------------------------------------------------

    def setup(self) -> None:
        """Resolve whether every flight counts toward IFR currency, oldest first."""
        started = time.perf_counter()
        self._counts[:] = False
        self._resolved[:] = False

        for position in range(len(self.flight_index)):
            self._counts[position] = self._compute_counts(position)
            self._resolved[position] = True

        elapsed = (time.perf_counter() - started) * 1000
        logger.debug(
            f'IFR grace period resolved for {len(self._counts)} flights '
            f'({int(self._counts.sum())} counting) in {elapsed:.1f}ms'
        )

    def counts_toward_currency(self, flight: Flight) -> bool:
        """Whether flight's approaches, holds or IPC count toward IFR currency."""
        return self._counts_at(self.flight_index.position(flight))

    def _counts_at(self, position: int) -> bool:
        if not self._resolved[position]:
            # Only reached when check() runs without setup()
            self._counts[position] = self._compute_counts(position)
            self._resolved[position] = True
        return bool(self._counts[position])

    def _compute_counts(self, position: int) -> bool:
        flight = self.flight_index[position]
        if flight.is_ipc:
            return True
        if not flight.has_approaches and not flight.has_holds:
            return False

        grace = self._grace_positions(flight)
        if any(self.flight_index[p].is_ipc for p in grace):
            return True

        # Only entries earlier in the index feed the sum. Flights at the same
        # instant but later in the index don't count yet, so every lookup
        # goes to a strictly lower position and the resolution can't cycle.
        prior = [p for p in grace if p < position]
        if not prior:
            return False

        mask = np.fromiter((self._counts_at(p) for p in prior), dtype=bool, count=len(prior))
        counting = np.asarray(prior, dtype=np.int64)[mask]
        approaches = int(self._approaches[counting].sum())
        holds = int(self._holds[counting].sum())
        return approaches >= REQUIRED_APPROACHES and holds >= REQUIRED_HOLDS

    def _grace_positions(self, flight: Flight) -> List[int]:
        return self.flight_index.positions_within(
            self.grace_window, flight, MatchCriteria.category(flight)
        )

    # ------------------------------------------------------------------
    # Check
    # ------------------------------------------------------------------

    def check(self, flight: Flight) -> Optional[Violation]:
        if flight.aircraft is None:
            return None
        if not self.acting_as_pic(flight):
            return None
        # Simulated instrument with a safety pilot is practice, not IFR
        if not flight.is_ifr or flight.safety_pilot_onboard or flight.is_ipc:
            return None

        positions = self.flight_index.positions_within(
            self.window, flight, MatchCriteria.category(flight)
        )
        eligible = [
            self.flight_index[p] for p in positions
            if self._has_instrument_experience(self.flight_index[p]) and self._counts_at(p)
        ]

        if any(f.is_ipc for f in eligible):
            return None
        approaches = sum(f.approach_count for f in eligible)
        holds = sum(f.holds for f in eligible)
        if approaches >= REQUIRED_APPROACHES and holds >= REQUIRED_HOLDS:
            return None
        return self.violation

    @staticmethod
    def _has_instrument_experience(flight: Flight) -> bool:
        return flight.has_approaches or flight.has_holds or flight.is_ipc
