"""
Report generator interface.
"""

from typing import Sequence, TextIO

from badbehavior.validation import FlightViolations

MISSING = '????'


class OutputGenerator:
    """Renders violations, already sorted by flight date, to a stream."""

    def processing_message(self, stream: TextIO) -> None:
        """Status line shown while the logbook is being checked."""

    def generate(self, violations_list: Sequence[FlightViolations], stream: TextIO) -> None:
        raise NotImplementedError
