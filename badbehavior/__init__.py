"""
badbehavior package.

Finds flights in a LogTen Pro logbook that were flown without meeting
FAR recency ("currency") requirements.

Modules:
    models/       SQLAlchemy ORM mapping of the LogTen Pro Core Data store
    ingestion/    Logbook reader producing immutable flight records
    validation/   Currency rules, flight index and the concurrent validator
    output/       Text and JSON violation reports
    records.py    Flight, Aircraft and AircraftType value types
    exceptions.py Error hierarchy
    config.py     Centralized configuration from environment variables
    app.py        Command line entry point
"""

__version__ = '1.0.0'
