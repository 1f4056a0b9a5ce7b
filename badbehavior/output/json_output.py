"""
Machine-readable violation report.

Shape:
    {
      "flights": [
        {"date": "...", "from": "SQL", "registration": "N12345",
         "to": "OAK", "violations": ["noPassengerCurrency"]}
      ],
      "totalViolations": 1
    }

Dates are ISO-8601 with the local UTC offset (logbook dates are naive
local time). Missing registration or airports are null.
"""

import json
from typing import Any, Dict, Sequence, TextIO

from badbehavior.output.base import OutputGenerator
from badbehavior.validation import FlightViolations


def flight_to_dict(entry: FlightViolations) -> Dict[str, Any]:
    flight = entry.flight
    return {
        'date': flight.date.astimezone().isoformat(),
        'registration': flight.aircraft.registration if flight.aircraft else None,
        'from': flight.origin.identifier if flight.origin else None,
        'to': flight.destination.identifier if flight.destination else None,
        'violations': [violation.value for violation in entry.violations],
    }


class JSONOutputGenerator(OutputGenerator):

    def generate(self, violations_list: Sequence[FlightViolations], stream: TextIO) -> None:
        output = {
            'totalViolations': len(violations_list),
            'flights': [flight_to_dict(entry) for entry in violations_list],
        }
        json.dump(output, stream, indent=2, sort_keys=True, ensure_ascii=False)
        stream.write('\n')
