"""
Immutable logbook records used by the validation engine.

These are plain value types built once per logbook load by the reader
(see badbehavior.ingestion) and never modified afterwards. Everything the
currency rules ask about a flight that can be computed from stored
counters (total takeoffs, whether the flight was at night, etc.) is a
read-only property rather than a stored field.

Flight times are kept in minutes, as LogTen Pro stores them; the *_hours
properties convert for rules that reason in hours.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """FAA aircraft categories (14 CFR 1.1), plus LogTen's device categories."""
    AIRPLANE = 'airplane'
    ROTORCRAFT = 'rotorcraft'
    POWERED_LIFT = 'powered_lift'
    GLIDER = 'glider'
    LIGHTER_THAN_AIR = 'lighter_than_air'
    SIMULATOR = 'simulator'
    TRAINING_DEVICE = 'training_device'
    PC_ATD = 'pc_atd'
    POWERED_PARACHUTE = 'powered_parachute'
    WEIGHT_SHIFT_CONTROL = 'weight_shift_control'
    UAV = 'uav'
    OTHER = 'other'


class AircraftClass(str, Enum):
    """FAA aircraft classes (14 CFR 1.1)."""
    MULTI_ENGINE_LAND = 'multi_engine_land'
    SINGLE_ENGINE_LAND = 'single_engine_land'
    MULTI_ENGINE_SEA = 'multi_engine_sea'
    SINGLE_ENGINE_SEA = 'single_engine_sea'
    OTHER = 'other'
    GYROPLANE = 'gyroplane'
    AIRSHIP = 'airship'
    FREE_BALLOON = 'free_balloon'
    HELICOPTER = 'helicopter'


class EngineType(str, Enum):
    """Powerplant types."""
    JET = 'jet'
    TURBINE = 'turbine'
    TURBOPROP = 'turboprop'
    RECIPROCATING = 'reciprocating'
    NONPOWERED = 'nonpowered'
    TURBOSHAFT = 'turboshaft'
    TURBOFAN = 'turbofan'
    RAMJET = 'ramjet'
    TWO_CYCLE = 'two_cycle'
    FOUR_CYCLE = 'four_cycle'
    OTHER = 'other'
    ELECTRIC = 'electric'


# Engines that make an aircraft turbine-powered (and type-rated)
TURBINE_ENGINES = frozenset({
    EngineType.TURBOSHAFT,
    EngineType.TURBOPROP,
    EngineType.TURBOFAN,
    EngineType.TURBINE,
    EngineType.RAMJET,
    EngineType.JET,
})

MULTI_ENGINE_CLASSES = frozenset({
    AircraftClass.MULTI_ENGINE_LAND,
    AircraftClass.MULTI_ENGINE_SEA,
})

TYPE_RATING_WEIGHT_LBS = 12500


class SimulatorType(str, Enum):
    """Flight simulation device levels, lowest fidelity first."""
    BATD = 'BATD'
    AATD = 'AATD'
    FTD = 'FTD'
    FFS = 'FFS'


class SimulatorCategoryClass(str, Enum):
    """Category and class a simulator represents, in FAA shorthand."""
    ASEL = 'ASEL'
    ASES = 'ASES'
    AMEL = 'AMEL'
    AMES = 'AMES'
    GLIDER = 'GL'

    @property
    def category(self) -> Category:
        if self is SimulatorCategoryClass.GLIDER:
            return Category.GLIDER
        return Category.AIRPLANE

    @property
    def aircraft_class(self) -> Optional[AircraftClass]:
        return _SIM_CLASSES.get(self)


_SIM_CLASSES = {
    SimulatorCategoryClass.ASEL: AircraftClass.SINGLE_ENGINE_LAND,
    SimulatorCategoryClass.ASES: AircraftClass.SINGLE_ENGINE_SEA,
    SimulatorCategoryClass.AMEL: AircraftClass.MULTI_ENGINE_LAND,
    SimulatorCategoryClass.AMES: AircraftClass.MULTI_ENGINE_SEA,
}


@dataclass(frozen=True)
class AircraftType:
    """
    Make and model of an aircraft or training device.

    Fields:
        id: LogTen's type identifier (e.g. 'C172S')
        type_code: Type designator used for type matching (e.g. 'C172', 'CL65').
            For a simulator this is the designator of the simulated type.
        category / aircraft_class / engine_type: FAA classification
        sim_type: Device level, for simulators and training devices
        sim_category_class: What the device simulates
    """
    id: str
    type_code: str
    category: Category
    aircraft_class: Optional[AircraftClass] = None
    engine_type: Optional[EngineType] = None
    sim_type: Optional[SimulatorType] = None
    sim_category_class: Optional[SimulatorCategoryClass] = None

    @property
    def sim_category(self) -> Optional[Category]:
        """Category this device simulates, or None for real aircraft."""
        if self.sim_category_class is None:
            return None
        return self.sim_category_class.category

    @property
    def sim_class(self) -> Optional[AircraftClass]:
        """Class this device simulates (None for gliders and real aircraft)."""
        if self.sim_category_class is None:
            return None
        return self.sim_category_class.aircraft_class

    @property
    def is_full_flight_simulator(self) -> bool:
        return self.category == Category.SIMULATOR and self.sim_type == SimulatorType.FFS

    @property
    def is_turbine_powered(self) -> bool:
        return self.engine_type in TURBINE_ENGINES

    @property
    def effective_category(self) -> Optional[Category]:
        """Simulated category for simulators, actual category otherwise."""
        if self.category == Category.SIMULATOR:
            return self.sim_category
        return self.category


@dataclass(frozen=True)
class Aircraft:
    """A specific airframe, identified by registration."""
    registration: str
    type: AircraftType
    weight: Optional[float] = None  # max gross weight, lbs
    tailwheel: bool = False

    @property
    def requires_type_rating(self) -> bool:
        """
        True for powered-lift, turbine-powered, or 12,500 lb and heavier aircraft.

        These are the aircraft subject to FAR 61.58 and type-specific
        currency matching.
        """
        if self.type.category == Category.POWERED_LIFT:
            return True
        if self.type.is_turbine_powered:
            return True
        if self.weight is None:
            return False
        return self.weight >= TYPE_RATING_WEIGHT_LBS


@dataclass(frozen=True)
class Place:
    """An airport or other landing site."""
    identifier: str
    icao: Optional[str] = None


@dataclass(frozen=True, eq=False)
class Flight:
    """
    One logbook entry.

    Flights compare and hash by identity: two entries with identical
    contents are still two different flights.
    """
    id: str
    date: datetime
    aircraft: Optional[Aircraft] = None
    origin: Optional[Place] = None
    destination: Optional[Place] = None
    remarks: Optional[str] = None

    # Crew
    has_pic: bool = False
    has_sic: bool = False
    safety_pilot_onboard: bool = False
    passenger_count: int = 0

    # Times, in minutes
    pic_time: int = 0
    sic_time: int = 0
    night_time: int = 0
    actual_instrument_time: int = 0
    dual_given_time: int = 0
    dual_received_time: int = 0
    solo_time: int = 0
    nvg_time: int = 0

    # Takeoffs and landings
    day_takeoffs: int = 0
    day_landings: int = 0
    night_takeoffs: int = 0
    night_landings: int = 0
    full_stop_landings: int = 0
    night_full_stop_landings: int = 0
    nvg_takeoffs: int = 0
    nvg_landings: int = 0

    # Instrument
    approach_count: int = 0
    holds: int = 0

    # Checks
    is_flight_review: bool = False
    is_checkride: bool = False
    is_ipc: bool = False
    is_proficiency_check: bool = False  # FAR 61.58
    is_nvg_proficiency_check: bool = False  # FAR 61.31(k)

    def __repr__(self) -> str:
        registration = self.aircraft.registration if self.aircraft else None
        return f"<Flight {self.id} {self.date:%Y-%m-%d %H:%M} {registration}>"

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def is_pic(self) -> bool:
        return self.pic_time > 0

    @property
    def is_sic(self) -> bool:
        return self.sic_time > 0

    @property
    def is_dual_received(self) -> bool:
        return self.dual_received_time > 0

    @property
    def is_dual_given(self) -> bool:
        return self.dual_given_time > 0

    @property
    def is_student_solo(self) -> bool:
        return self.solo_time > 0

    @property
    def is_night(self) -> bool:
        return self.night_time > 0

    @property
    def is_ifr(self) -> bool:
        """Actual instrument conditions were logged."""
        return self.actual_instrument_time > 0

    @property
    def has_passengers(self) -> bool:
        return self.passenger_count > 0

    @property
    def has_approaches(self) -> bool:
        return self.approach_count > 0

    @property
    def has_holds(self) -> bool:
        return self.holds > 0

    @property
    def total_takeoffs(self) -> int:
        return self.day_takeoffs + self.night_takeoffs

    @property
    def total_landings(self) -> int:
        return self.day_landings + self.night_landings

    @property
    def is_tailwheel(self) -> bool:
        return self.aircraft is not None and self.aircraft.tailwheel

    @property
    def type_code(self) -> Optional[str]:
        return self.aircraft.type.type_code if self.aircraft else None

    @property
    def pic_hours(self) -> float:
        return self.pic_time / 60.0

    @property
    def sic_hours(self) -> float:
        return self.sic_time / 60.0

    @property
    def dual_given_hours(self) -> float:
        return self.dual_given_time / 60.0
