"""
ORM models for the LogTen Pro Core Data store.

Only the tables and columns the currency checks need are mapped. Core
Data names every table Z<ENTITY> and every column Z<ENTITY>_<ATTRIBUTE>;
the models expose them under Python names.
"""

from badbehavior.models.base import Base, create_logbook_engine, get_session
from badbehavior.models.property import LogTenCustomizationProperty
from badbehavior.models.aircraft import LogTenAircraft, LogTenAircraftType
from badbehavior.models.place import LogTenPerson, LogTenPlace
from badbehavior.models.flight import (
    LogTenApproach,
    LogTenFlight,
    LogTenFlightApproaches,
    LogTenFlightCrew,
    LogTenFlightPassengers,
    from_core_data_timestamp,
    to_core_data_timestamp,
)

__all__ = [
    'Base',
    'create_logbook_engine',
    'get_session',
    'LogTenCustomizationProperty',
    'LogTenAircraft',
    'LogTenAircraftType',
    'LogTenPerson',
    'LogTenPlace',
    'LogTenApproach',
    'LogTenFlight',
    'LogTenFlightApproaches',
    'LogTenFlightCrew',
    'LogTenFlightPassengers',
    'from_core_data_timestamp',
    'to_core_data_timestamp',
]
