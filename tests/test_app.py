"""
Tests for the command line entry point.
"""

import json
from datetime import datetime

import pytest

from badbehavior import app


@pytest.fixture
def fake_reader(monkeypatch, make_flight):
    """Replace the LogTen reader with one returning an in-memory logbook."""
    flights = [
        make_flight(datetime(2024, 5, 1, 9, 0), passenger_count=1),
        make_flight(datetime(2024, 1, 10, 9, 0), is_flight_review=True, dual_received_time=60),
        make_flight(datetime(2024, 2, 1, 9, 0), passenger_count=3),
    ]
    opened = []

    class FakeReader:
        def __init__(self, path, echo=False):
            opened.append(path)

        def read(self):
            return list(flights)

    monkeypatch.setattr(app, 'LogbookReader', FakeReader)
    return opened


class TestMain:
    """Tests for badbehavior.app.main."""

    def test_missing_logbook(self, tmp_path, caplog):
        """Test a missing logbook exits 1 with an error message."""
        path = str(tmp_path / 'missing.sql')
        assert app.main(['--logten-file', path]) == 1
        assert 'not found' in caplog.text

    def test_text_report(self, fake_reader, capsys):
        """Test the text report goes to stdout and the status line to stderr."""
        assert app.main(['--logten-file', '/logbooks/test.sql', '--format', 'text']) == 0
        captured = capsys.readouterr()
        assert captured.out.startswith('2 violations total.\n')
        assert 'Processing…' in captured.err
        assert fake_reader == ['/logbooks/test.sql']

    def test_json_report_sorted_by_date(self, fake_reader, capsys):
        """Test JSON output lists violating flights oldest first."""
        assert app.main(['--format', 'json', '--workers', '2']) == 0
        output = json.loads(capsys.readouterr().out)
        assert output['totalViolations'] == 2
        assert [f['date'] for f in output['flights']] == [
            datetime(2024, 2, 1, 9, 0).astimezone().isoformat(),
            datetime(2024, 5, 1, 9, 0).astimezone().isoformat(),
        ]
        assert output['flights'][0]['violations'] == ['noPassengerCurrency']

    def test_invalid_workers(self, fake_reader):
        """Test a non-positive worker count is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            app.main(['--workers', '0'])
        assert exc_info.value.code == 2

    def test_invalid_format(self):
        """Test unknown formats are rejected by the parser."""
        with pytest.raises(SystemExit) as exc_info:
            app.main(['--format', 'xml'])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            app.main(['--version'])
        assert exc_info.value.code == 0
        assert 'badbehavior 1.0.0' in capsys.readouterr().out
