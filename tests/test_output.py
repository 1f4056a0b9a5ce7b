"""
Tests for the text and JSON reports.
"""

import io
import json
from datetime import datetime

import pytest

from badbehavior.output import JSONOutputGenerator, TextOutputGenerator, get_generator
from badbehavior.records import Place
from badbehavior.validation import FlightViolations, Violation


@pytest.fixture
def report(make_flight):
    """Two flights with violations, oldest first."""
    first = make_flight(
        datetime(2024, 3, 14, 19, 30),
        remarks='Night currency',
        passenger_count=2,
    )
    second = make_flight(
        datetime(2024, 4, 2, 8, 0),
        aircraft=None,
        origin=None,
        destination=Place('OAK'),
    )
    return [
        FlightViolations(first, (Violation.NO_FLIGHT_REVIEW, Violation.NO_NIGHT_PASSENGER_CURRENCY)),
        FlightViolations(second, (Violation.NO_IFR_CURRENCY,)),
    ]


def render(generator, violations_list):
    stream = io.StringIO()
    generator.generate(violations_list, stream)
    return stream.getvalue()


class TestTextOutput:
    """Tests for the human-readable report."""

    def test_report(self, report):
        """Test the full layout of a report."""
        assert render(TextOutputGenerator(), report) == (
            "2 violations total.\n"
            "\n"
            "03/14/24 N172SP SQL → OAK\n"
            "Night currency\n"
            "\n"
            "- Flight review not accomplished within prior 24 calendar months [61.56(c)]\n"
            "- Carried passengers at night without having completed required takeoffs "
            "and landings [61.57(b)]\n"
            "\n"
            "\n"
            "04/02/24 ???? ???? → OAK\n"
            "\n"
            "- Flew under IFR without having completed required approaches/holds or IPC "
            "[61.57(c)]\n"
            "\n"
            "\n"
        )

    def test_empty_report(self):
        """Test a clean logbook."""
        assert render(TextOutputGenerator(), []) == "0 violations total.\n\n"

    def test_processing_message(self):
        """Test the status line."""
        stream = io.StringIO()
        TextOutputGenerator().processing_message(stream)
        assert stream.getvalue() == "Processing…\n"


class TestJSONOutput:
    """Tests for the machine-readable report."""

    def test_report(self, report):
        """Test flights and violation identifiers."""
        output = json.loads(render(JSONOutputGenerator(), report))
        assert output['totalViolations'] == 2
        assert output['flights'] == [
            {
                'date': datetime(2024, 3, 14, 19, 30).astimezone().isoformat(),
                'registration': 'N172SP',
                'from': 'SQL',
                'to': 'OAK',
                'violations': ['noFlightReview', 'noNightPassengerCurrency'],
            },
            {
                'date': datetime(2024, 4, 2, 8, 0).astimezone().isoformat(),
                'registration': None,
                'from': None,
                'to': 'OAK',
                'violations': ['noIFRCurrency'],
            },
        ]

    def test_dates_carry_utc_offset(self, report):
        """Test dates are written with an explicit UTC offset."""
        output = json.loads(render(JSONOutputGenerator(), report))
        for flight in output['flights']:
            assert datetime.fromisoformat(flight['date']).utcoffset() is not None

    def test_no_processing_message(self):
        """Test JSON output keeps quiet so stdout stays parseable."""
        stream = io.StringIO()
        JSONOutputGenerator().processing_message(stream)
        assert stream.getvalue() == ''

    def test_ends_with_newline(self):
        """Test the document is newline-terminated."""
        assert render(JSONOutputGenerator(), []).endswith('}\n')


def test_get_generator():
    """Test generators are looked up by format name."""
    assert isinstance(get_generator('text'), TextOutputGenerator)
    assert isinstance(get_generator('json'), JSONOutputGenerator)
    with pytest.raises(KeyError):
        get_generator('xml')
