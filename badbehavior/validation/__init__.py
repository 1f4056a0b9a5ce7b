"""
Currency validation engine.

Given every flight in a logbook, finds the flights that were flown without
meeting a FAR recency requirement:
- time_window     calendar-aware lookback windows
- match_criteria  category/class/type equivalence, with simulator credit
- flight_index    sorted flights with binary-search range queries
- checkers/       one rule per regulation
- validator       runs all rules over all flights on a thread pool
"""

from badbehavior.validation.flight_index import FlightIndex
from badbehavior.validation.match_criteria import MatchCriteria
from badbehavior.validation.time_window import TimeWindow
from badbehavior.validation.validator import Validator, validate
from badbehavior.validation.violations import FlightViolations, Violation

__all__ = [
    'FlightIndex',
    'FlightViolations',
    'MatchCriteria',
    'TimeWindow',
    'Validator',
    'Violation',
    'validate',
]
