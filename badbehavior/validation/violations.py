"""
Violation kinds and the per-flight violation report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from badbehavior.records import Flight


class Violation(str, Enum):
    """A FAR requirement a flight was flown without meeting."""
    NO_FLIGHT_REVIEW = 'noFlightReview'
    NO_PASSENGER_CURRENCY = 'noPassengerCurrency'
    NO_NIGHT_PASSENGER_CURRENCY = 'noNightPassengerCurrency'
    NO_IFR_CURRENCY = 'noIFRCurrency'
    NO_PROFICIENCY_CHECK = 'noPPC'
    NO_PROFICIENCY_CHECK_IN_TYPE = 'noPPCInType'
    NO_NVG_CURRENCY = 'noNVGCurrency'
    NO_NVG_PASSENGER_CURRENCY = 'noNVGPassengerCurrency'
    DUAL_GIVEN_8_IN_24 = 'dualGiven8in24'
    DUAL_GIVEN_TIME_IN_TYPE = 'dualGivenTimeInType'
    NO_SIC_CURRENCY = 'noSICCurrency'

    @property
    def regulation(self) -> str:
        return _REGULATIONS[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_REGULATIONS = {
    Violation.NO_FLIGHT_REVIEW: '61.56(c)',
    Violation.NO_PASSENGER_CURRENCY: '61.57(a)',
    Violation.NO_NIGHT_PASSENGER_CURRENCY: '61.57(b)',
    Violation.NO_IFR_CURRENCY: '61.57(c)',
    Violation.NO_PROFICIENCY_CHECK: '61.58(a)(1)',
    Violation.NO_PROFICIENCY_CHECK_IN_TYPE: '61.58(a)(2)',
    Violation.NO_NVG_CURRENCY: '61.57(f)',
    Violation.NO_NVG_PASSENGER_CURRENCY: '61.57(f)',
    Violation.DUAL_GIVEN_8_IN_24: '61.195(a)',
    Violation.DUAL_GIVEN_TIME_IN_TYPE: '61.195(f)',
    Violation.NO_SIC_CURRENCY: '61.55(b)',
}

_DESCRIPTIONS = {
    Violation.NO_FLIGHT_REVIEW:
        'Flight review not accomplished within prior 24 calendar months',
    Violation.NO_PASSENGER_CURRENCY:
        'Carried passengers without having completed required takeoffs and landings',
    Violation.NO_NIGHT_PASSENGER_CURRENCY:
        'Carried passengers at night without having completed required takeoffs and landings',
    Violation.NO_IFR_CURRENCY:
        'Flew under IFR without having completed required approaches/holds or IPC',
    Violation.NO_PROFICIENCY_CHECK:
        'Flew a type-rated aircraft without having completed a FAR 61.58 check',
    Violation.NO_PROFICIENCY_CHECK_IN_TYPE:
        'Flew a type-rated aircraft without having completed a FAR 61.58 check in type',
    Violation.NO_NVG_CURRENCY:
        'Made a takeoff or landing under NVGs without having the required NVG '
        'takeoffs and landings or proficiency checks',
    Violation.NO_NVG_PASSENGER_CURRENCY:
        'Made a takeoff or landing under NVGs with passengers without having the '
        'required NVG takeoffs and landings or proficiency checks',
    Violation.DUAL_GIVEN_8_IN_24:
        'Exceeded maximum 8 hours of dual given in a 24-hour period',
    Violation.DUAL_GIVEN_TIME_IN_TYPE:
        'Gave training in a multi-engine, helicopter, or powered-lift aircraft '
        'without having 5 hours in type',
    Violation.NO_SIC_CURRENCY:
        'Acted as SIC in type-rated aircraft without required takeoffs and landings',
}


@dataclass(frozen=True)
class FlightViolations:
    """A flight and the (non-empty) violations found on it, in checker order."""
    flight: Flight
    violations: Tuple[Violation, ...]
