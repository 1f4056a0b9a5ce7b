"""
Aircraft equivalence for currency checks.

Most recency requirements only count experience in the same category,
class, and (for type-rated aircraft) type as the flight being checked.
A session in a Full Flight Simulator counts as experience in whatever
it simulates; lower-level devices never substitute for an aircraft.
"""

from dataclasses import dataclass

from badbehavior.records import Category, Flight


@dataclass(frozen=True)
class MatchCriteria:
    """
    Which aircraft a candidate flight must have been flown in to count
    toward the reference flight's currency.

    Each axis is toggled independently. If either flight has no aircraft,
    any enabled axis fails to match.
    """
    reference: Flight
    match_category: bool = False
    match_class: bool = False
    match_type_if_required: bool = False

    @classmethod
    def none(cls, flight: Flight) -> 'MatchCriteria':
        """Any aircraft counts."""
        return cls(flight)

    @classmethod
    def category(cls, flight: Flight) -> 'MatchCriteria':
        return cls(flight, match_category=True)

    @classmethod
    def full(cls, flight: Flight) -> 'MatchCriteria':
        """Same category, class and (when type-rated) type."""
        return cls(
            flight,
            match_category=True,
            match_class=True,
            match_type_if_required=True,
        )

    @classmethod
    def type_only(cls, flight: Flight) -> 'MatchCriteria':
        return cls(flight, match_type_if_required=True)

    def matches(self, candidate: Flight) -> bool:
        """Whether candidate counts toward the reference flight's currency."""
        if candidate is self.reference:
            return False
        if self.match_category and not self._matches_category(candidate):
            return False
        if self.match_class and not self._matches_class(candidate):
            return False
        if self.match_type_if_required and not self._matches_type(candidate):
            return False
        return True

    # ------------------------------------------------------------------
    # Per-axis checks
    # ------------------------------------------------------------------

    def _matches_category(self, candidate: Flight) -> bool:
        current = self.reference.aircraft
        other = candidate.aircraft
        if current is None or other is None:
            return False

        # A simulator session is checked against any prior experience
        if current.type.category == Category.SIMULATOR:
            return True
        if current.type.category == other.type.category:
            return True
        if other.type.is_full_flight_simulator:
            return other.type.sim_category == current.type.category
        return False

    def _matches_class(self, candidate: Flight) -> bool:
        current = self.reference.aircraft
        other = candidate.aircraft
        if current is None or other is None:
            return False

        if current.type.aircraft_class == other.type.aircraft_class:
            return True
        if other.type.is_full_flight_simulator:
            return other.type.sim_class == current.type.aircraft_class
        return False

    def _matches_type(self, candidate: Flight) -> bool:
        current = self.reference.aircraft
        other = candidate.aircraft
        if current is None or other is None:
            return False

        if not current.requires_type_rating:
            return True
        # An FFS carries the designator of the type it simulates, so this
        # also credits simulator sessions in that type.
        return current.type.type_code == other.type.type_code
