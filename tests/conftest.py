"""
Shared fixtures for badbehavior tests.

Flights are built through the make_flight factory so each test only
spells out the fields it cares about.
"""

import itertools
from datetime import datetime

import pytest

from badbehavior.records import (
    Aircraft,
    AircraftClass,
    AircraftType,
    Category,
    EngineType,
    Flight,
    Place,
    SimulatorCategoryClass,
    SimulatorType,
)
from badbehavior.validation import FlightIndex


# ============================================================================
# Aircraft
# ============================================================================

@pytest.fixture
def c172():
    """Single-engine land piston airplane."""
    return Aircraft(
        registration='N172SP',
        type=AircraftType(
            id='C172S',
            type_code='C172',
            category=Category.AIRPLANE,
            aircraft_class=AircraftClass.SINGLE_ENGINE_LAND,
            engine_type=EngineType.RECIPROCATING,
        ),
    )


@pytest.fixture
def cub():
    """Tailwheel single-engine land airplane."""
    return Aircraft(
        registration='N3CUB',
        type=AircraftType(
            id='J3',
            type_code='J3',
            category=Category.AIRPLANE,
            aircraft_class=AircraftClass.SINGLE_ENGINE_LAND,
            engine_type=EngineType.RECIPROCATING,
        ),
        tailwheel=True,
    )


@pytest.fixture
def baron():
    """Multi-engine land piston airplane, no type rating."""
    return Aircraft(
        registration='N58BE',
        type=AircraftType(
            id='BE58',
            type_code='BE58',
            category=Category.AIRPLANE,
            aircraft_class=AircraftClass.MULTI_ENGINE_LAND,
            engine_type=EngineType.RECIPROCATING,
        ),
    )


@pytest.fixture
def citation():
    """Type-rated multi-engine jet."""
    return Aircraft(
        registration='N525CJ',
        type=AircraftType(
            id='C525',
            type_code='C525',
            category=Category.AIRPLANE,
            aircraft_class=AircraftClass.MULTI_ENGINE_LAND,
            engine_type=EngineType.TURBOFAN,
        ),
        weight=10700,
    )


@pytest.fixture
def challenger():
    """A different type-rated jet."""
    return Aircraft(
        registration='N650CL',
        type=AircraftType(
            id='CL65',
            type_code='CL65',
            category=Category.AIRPLANE,
            aircraft_class=AircraftClass.MULTI_ENGINE_LAND,
            engine_type=EngineType.TURBOFAN,
        ),
    )


@pytest.fixture
def citation_sim():
    """Full flight simulator for the C525."""
    return Aircraft(
        registration='FSI-C525',
        type=AircraftType(
            id='C525 FFS',
            type_code='C525',
            category=Category.SIMULATOR,
            sim_type=SimulatorType.FFS,
            sim_category_class=SimulatorCategoryClass.AMEL,
        ),
    )


@pytest.fixture
def batd():
    """Basic training device simulating a single-engine airplane."""
    return Aircraft(
        registration='REDBIRD',
        type=AircraftType(
            id='BATD',
            type_code='BATD',
            category=Category.SIMULATOR,
            sim_type=SimulatorType.BATD,
            sim_category_class=SimulatorCategoryClass.ASEL,
        ),
    )


@pytest.fixture
def r44():
    """Piston helicopter."""
    return Aircraft(
        registration='N44RH',
        type=AircraftType(
            id='R44',
            type_code='R44',
            category=Category.ROTORCRAFT,
            aircraft_class=AircraftClass.HELICOPTER,
            engine_type=EngineType.RECIPROCATING,
        ),
    )


# ============================================================================
# Flights
# ============================================================================

@pytest.fixture
def make_flight(c172):
    """
    Factory for flights. Defaults to a one-hour PIC flight in the C172 with
    one day takeoff and landing.
    """
    ids = itertools.count(1)

    def factory(date: datetime, **fields) -> Flight:
        values = {
            'aircraft': c172,
            'origin': Place('SQL'),
            'destination': Place('OAK'),
            'pic_time': 60,
            'day_takeoffs': 1,
            'day_landings': 1,
            'full_stop_landings': 1,
        }
        values.update(fields)
        return Flight(id=str(next(ids)), date=date, **values)

    return factory


@pytest.fixture
def run_checker():
    """Build an index over flights, set the checker up and check target."""

    def runner(checker_class, flights, target):
        checker = checker_class(FlightIndex(flights))
        checker.setup()
        return checker.check(target)

    return runner
