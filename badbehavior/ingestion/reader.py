"""
LogTen Pro logbook reader.

Reads every flight from a LogTen Pro Core Data store and normalizes it
into the immutable records the validator works on.

Several facts the currency rules need are not built-in LogTen fields but
custom fields the pilot has to configure (a "FAR 61.58" custom note, a
"Safety Pilot" crew role, ...). Which numbered slot each one lives in is
looked up by title in ZLOGTENCUSTOMIZATIONPROPERTY before any flight is
read; a missing field stops the read with MissingPropertyError.

Usage:
    from badbehavior.ingestion import LogbookReader

    flights = LogbookReader('/path/to/LogTenCoreDataStore.sql').read()
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from badbehavior.exceptions import LogbookNotFoundError, LogbookReadError, MissingPropertyError
from badbehavior.ingestion.classification import (
    parse_category,
    parse_class,
    parse_engine_type,
    parse_simulator_category_class,
    parse_simulator_type,
)
from badbehavior.models import (
    LogTenAircraft,
    LogTenAircraftType,
    LogTenCustomizationProperty,
    LogTenFlight,
    LogTenPlace,
    create_logbook_engine,
    get_session,
)
from badbehavior.records import Aircraft, AircraftType, Flight, Place

logger = logging.getLogger(__name__)


# Custom field titles the pilot must configure in LogTen Pro
NIGHT_FULL_STOP_FIELD = 'Night Full Stops'
PROFICIENCY_FIELD = 'FAR 61.58'
CHECKRIDE_FIELD = 'Checkride'
NVG_PROFICIENCY_FIELD = 'FAR 61.31(k)'
SAFETY_PILOT_FIELD = 'Safety Pilot'
TYPE_CODE_FIELD = 'Type Code'
SIM_TYPE_FIELD = 'Sim Type'
SIM_CATEGORY_FIELD = 'Sim A/C Cat'


@dataclass(frozen=True)
class CustomFieldSlots:
    """Which numbered LogTen slot holds each custom field."""
    night_full_stops: int
    proficiency_check: int
    checkride: int
    nvg_proficiency_check: int
    safety_pilot: int
    type_code: int
    sim_type: int
    sim_category: int


def _is_present(note: Optional[str]) -> bool:
    return bool(note and note.strip())


class LogbookReader:
    """
    Loads flights from a LogTen Pro store.

    The store is opened read-only for the duration of read() and closed
    afterwards.
    """

    def __init__(self, path: str, echo: bool = False):
        self.path = path
        self.echo = echo
        self._aircraft_types: Dict[int, AircraftType] = {}
        self._aircraft: Dict[int, Optional[Aircraft]] = {}
        self._places: Dict[int, Place] = {}

    def read(self) -> List[Flight]:
        """All flights in the logbook, oldest first."""
        if not os.path.isfile(self.path):
            raise LogbookNotFoundError(self.path)

        engine = create_logbook_engine(self.path, echo=self.echo)
        try:
            with get_session(engine) as session:
                slots = self.resolve_custom_fields(session)
                rows = session.scalars(select(LogTenFlight)).unique().all()
                flights = [self._flight(row, slots) for row in rows]
        except SQLAlchemyError as e:
            raise LogbookReadError(self.path, str(e)) from e
        finally:
            engine.dispose()

        flights.sort(key=lambda f: f.date)
        logger.info(
            f'Loaded {len(flights)} flights ({len(self._aircraft)} aircraft) from {self.path}'
        )
        return flights

    # ------------------------------------------------------------------
    # Custom fields
    # ------------------------------------------------------------------

    def resolve_custom_fields(self, session: Session) -> CustomFieldSlots:
        slots = CustomFieldSlots(
            night_full_stops=self._slot(session, NIGHT_FULL_STOP_FIELD, 'flight_customLanding', 'Flight', 10),
            proficiency_check=self._slot(session, PROFICIENCY_FIELD, 'flight_customNote', 'Flight', 10),
            checkride=self._slot(session, CHECKRIDE_FIELD, 'flight_customNote', 'Flight', 10),
            nvg_proficiency_check=self._slot(session, NVG_PROFICIENCY_FIELD, 'flight_customNote', 'Flight', 10),
            safety_pilot=self._slot(session, SAFETY_PILOT_FIELD, 'flight_selectedCrewCustom', 'Flight', 10),
            type_code=self._slot(session, TYPE_CODE_FIELD, 'aircraftType_customAttribute', 'Aircraft Type', 5),
            sim_type=self._slot(session, SIM_TYPE_FIELD, 'aircraftType_customAttribute', 'Aircraft Type', 5),
            sim_category=self._slot(session, SIM_CATEGORY_FIELD, 'aircraftType_customAttribute', 'Aircraft Type', 5),
        )
        logger.debug(f'Custom field slots: {slots}')
        return slots

    @staticmethod
    def _slot(session: Session, title: str, key_prefix: str, model: str, slot_count: int) -> int:
        """Slot number of the single custom field titled title under key_prefix."""
        stmt = select(LogTenCustomizationProperty).where(
            LogTenCustomizationProperty.title == title,
            LogTenCustomizationProperty.key.startswith(key_prefix, autoescape=True),
        )
        matches = session.scalars(stmt).all()
        if len(matches) != 1:
            raise MissingPropertyError(title, model)

        match = re.fullmatch(re.escape(key_prefix) + r'(\d+)', matches[0].key)
        if not match or not 1 <= int(match.group(1)) <= slot_count:
            raise MissingPropertyError(title, model)
        return int(match.group(1))

    # ------------------------------------------------------------------
    # Row conversion
    # ------------------------------------------------------------------

    def _flight(self, row: LogTenFlight, slots: CustomFieldSlots) -> Flight:
        crew = row.crew
        safety_pilot = crew is not None and crew.custom_person_id(slots.safety_pilot) is not None

        return Flight(
            id=str(row.id),
            date=row.date,
            aircraft=self._aircraft_for(row.aircraft, slots),
            origin=self._place(row.from_place),
            destination=self._place(row.to_place),
            remarks=row.remarks or None,
            has_pic=crew is not None and crew.pic_id is not None,
            has_sic=crew is not None and crew.sic_id is not None,
            safety_pilot_onboard=safety_pilot,
            passenger_count=row.passengers.count if row.passengers else 0,
            pic_time=row.pic or 0,
            sic_time=row.sic or 0,
            night_time=row.night or 0,
            actual_instrument_time=row.actual_instrument or 0,
            dual_given_time=row.dual_given or 0,
            dual_received_time=row.dual_received or 0,
            solo_time=row.solo or 0,
            nvg_time=row.night_vision_goggle or 0,
            day_takeoffs=row.day_takeoffs or 0,
            day_landings=row.day_landings or 0,
            night_takeoffs=row.night_takeoffs or 0,
            night_landings=row.night_landings or 0,
            full_stop_landings=row.full_stops or 0,
            night_full_stop_landings=row.custom_landing(slots.night_full_stops) or 0,
            nvg_takeoffs=row.nvg_takeoffs or 0,
            nvg_landings=row.nvg_landings or 0,
            approach_count=row.approaches.count if row.approaches else 0,
            holds=row.holds or 0,
            is_flight_review=bool(row.review),
            is_checkride=_is_present(row.custom_note(slots.checkride)),
            is_ipc=bool(row.instrument_proficiency_check),
            is_proficiency_check=_is_present(row.custom_note(slots.proficiency_check)),
            is_nvg_proficiency_check=_is_present(row.custom_note(slots.nvg_proficiency_check)),
        )

    def _aircraft_for(self, row: Optional[LogTenAircraft], slots: CustomFieldSlots) -> Optional[Aircraft]:
        if row is None:
            return None
        if row.id in self._aircraft:
            return self._aircraft[row.id]

        if row.aircraft_type is None:
            logger.warning(f'Aircraft {row.registration} has no aircraft type; its flights will not be checked')
            aircraft = None
        else:
            aircraft = Aircraft(
                registration=row.registration,
                type=self._aircraft_type(row.aircraft_type, slots),
                weight=row.weight,
                tailwheel=bool(row.tailwheel),
            )
        self._aircraft[row.id] = aircraft
        return aircraft

    def _aircraft_type(self, row: LogTenAircraftType, slots: CustomFieldSlots) -> AircraftType:
        if row.id in self._aircraft_types:
            return self._aircraft_types[row.id]

        def attribute(slot: int) -> Optional[str]:
            return getattr(row, f'custom_attribute{slot}')

        type_code = attribute(slots.type_code)
        aircraft_type = AircraftType(
            id=row.type,
            type_code=type_code.strip() if _is_present(type_code) else row.type,
            category=parse_category(row.category.key if row.category else None, row.type),
            aircraft_class=parse_class(row.aircraft_class.key if row.aircraft_class else None, row.type),
            engine_type=parse_engine_type(row.engine_type.key if row.engine_type else None, row.type),
            sim_type=parse_simulator_type(attribute(slots.sim_type), row.type),
            sim_category_class=parse_simulator_category_class(attribute(slots.sim_category), row.type),
        )
        self._aircraft_types[row.id] = aircraft_type
        return aircraft_type

    def _place(self, row: Optional[LogTenPlace]) -> Optional[Place]:
        if row is None:
            return None
        if row.id not in self._places:
            self._places[row.id] = Place(identifier=row.identifier, icao=row.icao)
        return self._places[row.id]
