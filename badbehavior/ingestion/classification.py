"""
LogTen Pro classification codes.

LogTen identifies categories, classes and engine types by property keys
('flight_category1', 'flight_aircraftClass9', ...) and simulator details
by whatever the user typed into the configured custom attributes. These
tables translate both into record enums. An unknown code is an error:
currency rules cannot be trusted with a misclassified aircraft.
"""

from typing import Dict, Optional, Type, TypeVar

from badbehavior.exceptions import UnrecognizedCodeError
from badbehavior.records import (
    AircraftClass,
    Category,
    EngineType,
    SimulatorCategoryClass,
    SimulatorType,
)

E = TypeVar('E')


CATEGORY_CODES: Dict[str, Category] = {
    'flight_category1': Category.AIRPLANE,
    'flight_category2': Category.ROTORCRAFT,
    'flight_category3': Category.POWERED_LIFT,
    'flight_category4': Category.GLIDER,
    'flight_category5': Category.LIGHTER_THAN_AIR,
    'flight_category6': Category.SIMULATOR,
    'flight_category7': Category.TRAINING_DEVICE,
    'flight_category8': Category.PC_ATD,
    'flight_category9': Category.POWERED_PARACHUTE,
    'flight_category10': Category.WEIGHT_SHIFT_CONTROL,
    'flight_category11': Category.UAV,
    'flight_category12': Category.OTHER,
}

CLASS_CODES: Dict[str, AircraftClass] = {
    'flight_aircraftClass1': AircraftClass.MULTI_ENGINE_LAND,
    'flight_aircraftClass2': AircraftClass.SINGLE_ENGINE_LAND,
    'flight_aircraftClass3': AircraftClass.MULTI_ENGINE_SEA,
    'flight_aircraftClass4': AircraftClass.SINGLE_ENGINE_SEA,
    'flight_aircraftClass5': AircraftClass.OTHER,
    'flight_aircraftClass6': AircraftClass.GYROPLANE,
    'flight_aircraftClass7': AircraftClass.AIRSHIP,
    'flight_aircraftClass8': AircraftClass.FREE_BALLOON,
    'flight_aircraftClass9': AircraftClass.HELICOPTER,
}

ENGINE_TYPE_CODES: Dict[str, EngineType] = {
    'flight_engineType1': EngineType.JET,
    'flight_engineType2': EngineType.TURBINE,
    'flight_engineType3': EngineType.TURBOPROP,
    'flight_engineType4': EngineType.RECIPROCATING,
    'flight_engineType5': EngineType.NONPOWERED,
    'flight_engineType6': EngineType.TURBOSHAFT,
    'flight_engineType7': EngineType.TURBOFAN,
    'flight_engineType8': EngineType.RAMJET,
    'flight_engineType9': EngineType.TWO_CYCLE,
    'flight_engineType10': EngineType.FOUR_CYCLE,
    'flight_engineType11': EngineType.OTHER,
    'flight_engineType12': EngineType.ELECTRIC,
}


def _lookup(table: Dict[str, E], kind: str, code: Optional[str], type_id: str) -> E:
    try:
        return table[code]
    except KeyError:
        raise UnrecognizedCodeError(kind, code, type_id) from None


def _parse_enum(enum: Type[E], kind: str, value: Optional[str], type_id: str) -> Optional[E]:
    """Parse a free-form custom attribute; blank means not set."""
    if value is None or not value.strip():
        return None
    try:
        return enum(value.strip())
    except ValueError:
        raise UnrecognizedCodeError(kind, value, type_id) from None


def parse_category(code: Optional[str], type_id: str) -> Category:
    """Category is mandatory: a missing code is reported like an unknown one."""
    return _lookup(CATEGORY_CODES, 'category', code, type_id)


def parse_class(code: Optional[str], type_id: str) -> Optional[AircraftClass]:
    if code is None:
        return None
    return _lookup(CLASS_CODES, 'class', code, type_id)


def parse_engine_type(code: Optional[str], type_id: str) -> Optional[EngineType]:
    if code is None:
        return None
    return _lookup(ENGINE_TYPE_CODES, 'engine type', code, type_id)


def parse_simulator_type(value: Optional[str], type_id: str) -> Optional[SimulatorType]:
    return _parse_enum(SimulatorType, 'simulator type', value, type_id)


def parse_simulator_category_class(value: Optional[str], type_id: str) -> Optional[SimulatorCategoryClass]:
    return _parse_enum(SimulatorCategoryClass, 'simulator category/class', value, type_id)
