"""
Currency rules.

Each checker covers one FAR requirement. CHECKERS is the full catalogue,
in the order violations are reported for a flight.
"""

from badbehavior.validation.checkers.base import ViolationChecker
from badbehavior.validation.checkers.flight_review import NoFlightReview
from badbehavior.validation.checkers.passenger import NoPassengerCurrency, NoNightPassengerCurrency
from badbehavior.validation.checkers.ifr import NoIFRCurrency
from badbehavior.validation.checkers.proficiency import NoProficiencyCheck, NoProficiencyCheckInType
from badbehavior.validation.checkers.nvg import NoNVGCurrency, NoNVGPassengerCurrency
from badbehavior.validation.checkers.instructor import DualGiven8In24, DualGivenTimeInType
from badbehavior.validation.checkers.sic import NoSICCurrency

CHECKERS = (
    NoFlightReview,
    NoPassengerCurrency,
    NoNightPassengerCurrency,
    NoIFRCurrency,
    NoProficiencyCheck,
    NoProficiencyCheckInType,
    NoNVGCurrency,
    NoNVGPassengerCurrency,
    DualGiven8In24,
    DualGivenTimeInType,
    NoSICCurrency,
)

__all__ = [
    'CHECKERS',
    'ViolationChecker',
    'NoFlightReview',
    'NoPassengerCurrency',
    'NoNightPassengerCurrency',
    'NoIFRCurrency',
    'NoProficiencyCheck',
    'NoProficiencyCheckInType',
    'NoNVGCurrency',
    'NoNVGPassengerCurrency',
    'DualGiven8In24',
    'DualGivenTimeInType',
    'NoSICCurrency',
]
