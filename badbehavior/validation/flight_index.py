"""
Chronological index over every flight in a logbook.

Currency rules repeatedly ask "which flights happened in the N days
(or months, or hours) before this one?". Scanning the whole logbook for
each of those questions is O(N) per query and O(N^2) per validation run.
Instead the flight dates are held in a sorted NumPy datetime64 array and
each window is located with np.searchsorted, so a query costs
O(log N + K) where K is the number of flights inside the window.

The index is immutable once built. It is shared read-only by every rule
and every worker thread.
"""

import logging
from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np

from badbehavior.records import Flight
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow

logger = logging.getLogger(__name__)


def _to_datetime64(value: datetime) -> np.datetime64:
    return np.datetime64(value, 'us')


class FlightIndex:
    """
    Flights sorted oldest to newest, with binary-search range queries.

    Flights logged at the same instant keep the order they were given in.
    """

    def __init__(self, flights: Iterable[Flight]):
        self._flights: Sequence[Flight] = tuple(sorted(flights, key=lambda f: f.date))
        self._dates = np.array(
            [_to_datetime64(f.date) for f in self._flights],
            dtype='datetime64[us]',
        )
        self._positions = {flight: i for i, flight in enumerate(self._flights)}
        logger.debug(f'Indexed {len(self._flights)} flights')

    @property
    def flights(self) -> Sequence[Flight]:
        return self._flights

    def __len__(self) -> int:
        return len(self._flights)

    def __iter__(self) -> Iterator[Flight]:
        return iter(self._flights)

    def __getitem__(self, position: int) -> Flight:
        return self._flights[position]

    def position(self, flight: Flight) -> int:
        """Position of flight in chronological order. KeyError if not indexed."""
        return self._positions[flight]

    # ------------------------------------------------------------------
    # Binary search
    # ------------------------------------------------------------------

    def lower_bound(self, date: datetime) -> int:
        """First position whose date is >= date."""
        return int(np.searchsorted(self._dates, _to_datetime64(date), side='left'))

    def upper_bound(self, date: datetime) -> int:
        """First position whose date is > date."""
        return int(np.searchsorted(self._dates, _to_datetime64(date), side='right'))

    # ------------------------------------------------------------------
    # Range queries
    # ------------------------------------------------------------------

    def positions_within(
        self,
        window: TimeWindow,
        flight: Flight,
        criteria: Optional[MatchCriteria] = None,
        include_self: bool = False,
    ) -> List[int]:
        """
        Positions of flights dated from window start through flight.date.

        The reference flight itself is left out unless include_self is
        set. Flights logged at the same instant as the reference are
        included regardless of their order.
        """
        start = self.lower_bound(window.start_date(flight.date))
        end = self.upper_bound(flight.date)

        positions = []
        for position in range(start, end):
            candidate = self._flights[position]
            if candidate is flight:
                if include_self:
                    positions.append(position)
                continue
            if criteria is None or criteria.matches(candidate):
                positions.append(position)
        return positions

    def flights_within(
        self,
        window: TimeWindow,
        flight: Flight,
        criteria: Optional[MatchCriteria] = None,
    ) -> List[Flight]:
        """Flights inside window before flight, excluding flight itself."""
        return [self._flights[i] for i in self.positions_within(window, flight, criteria)]

    def flights_including_self(
        self,
        window: TimeWindow,
        flight: Flight,
        criteria: Optional[MatchCriteria] = None,
    ) -> List[Flight]:
        """Like flights_within, but the reference flight is part of the result."""
        positions = self.positions_within(window, flight, criteria, include_self=True)
        return [self._flights[i] for i in positions]

    def flights_before(self, flight: Flight) -> Sequence[Flight]:
        """Every flight dated strictly earlier than flight."""
        return self._flights[:self.lower_bound(flight.date)]
