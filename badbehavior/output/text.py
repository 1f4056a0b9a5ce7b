"""
Human-readable violation report.

    2 violations total.

    03/14/24 N12345 SQL → OAK
    Night currency flight

    - Carried passengers at night without ... [61.57(b)]
"""

from typing import Sequence, TextIO

from badbehavior.output.base import MISSING, OutputGenerator
from badbehavior.records import Flight
from badbehavior.validation import FlightViolations, Violation


def describe_flight(flight: Flight) -> str:
    registration = flight.aircraft.registration if flight.aircraft else MISSING
    origin = flight.origin.identifier if flight.origin else MISSING
    destination = flight.destination.identifier if flight.destination else MISSING
    return f"{flight.date:%m/%d/%y} {registration} {origin} → {destination}"


def describe_violation(violation: Violation) -> str:
    return f"{violation.description} [{violation.regulation}]"


class TextOutputGenerator(OutputGenerator):

    def processing_message(self, stream: TextIO) -> None:
        print('Processing…', file=stream)

    def generate(self, violations_list: Sequence[FlightViolations], stream: TextIO) -> None:
        print(f"{len(violations_list)} violations total.", file=stream)
        print(file=stream)

        for entry in violations_list:
            print(describe_flight(entry.flight), file=stream)
            if entry.flight.remarks:
                print(entry.flight.remarks, file=stream)
            print(file=stream)

            for violation in entry.violations:
                print(f"- {describe_violation(violation)}", file=stream)
            print(file=stream)
            print(file=stream)
