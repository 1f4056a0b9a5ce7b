"""
Flight model and the per-flight crew, passenger and approach records.

Core Data stores dates as seconds since 2001-01-01 00:00 UTC; times as
integer minutes; counters as integers. Everything optional in LogTen is
nullable here: the reader decides what a missing value means.

Design notes:
- LogTen has a fixed number of numbered slots (custom notes, custom
  landings, crew custom roles, passengers, approaches). They are mapped
  one column each and read through the slot helpers below, since which
  slot means what is user configuration.
- Crew, passengers and approaches live in one-to-one side tables keyed by
  the flight, loaded eagerly with selectin loads.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from badbehavior.models.aircraft import LogTenAircraft
from badbehavior.models.base import Base
from badbehavior.models.place import LogTenPlace

# 2001-01-01T00:00:00Z as a Unix timestamp
CORE_DATA_EPOCH = 978307200


def from_core_data_timestamp(value: float) -> datetime:
    """Core Data timestamp to a naive datetime in local time."""
    utc = datetime.fromtimestamp(value + CORE_DATA_EPOCH, tz=timezone.utc)
    return utc.astimezone().replace(tzinfo=None)


def to_core_data_timestamp(value: datetime) -> float:
    """Inverse of from_core_data_timestamp (naive datetimes are local time)."""
    return value.timestamp() - CORE_DATA_EPOCH


class LogTenFlight(Base):
    """One logbook entry."""

    __tablename__ = 'ZFLIGHT'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)

    timestamp: Mapped[float] = mapped_column(
        'ZFLIGHT_FLIGHTDATE',
        Float,
        index=True,
        comment='Seconds since 2001-01-01 UTC'
    )

    aircraft_id: Mapped[Optional[int]] = mapped_column(
        'ZFLIGHT_AIRCRAFT', ForeignKey('ZAIRCRAFT.Z_PK'), nullable=True
    )
    from_place_id: Mapped[Optional[int]] = mapped_column(
        'ZFLIGHT_FROMPLACE', ForeignKey('ZPLACE.Z_PK'), nullable=True
    )
    to_place_id: Mapped[Optional[int]] = mapped_column(
        'ZFLIGHT_TOPLACE', ForeignKey('ZPLACE.Z_PK'), nullable=True
    )

    # Times (minutes)
    pic: Mapped[Optional[int]] = mapped_column('ZFLIGHT_PIC', Integer)
    sic: Mapped[Optional[int]] = mapped_column('ZFLIGHT_SIC', Integer)
    night: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHT', Integer)
    actual_instrument: Mapped[Optional[int]] = mapped_column('ZFLIGHT_ACTUALINSTRUMENT', Integer)
    dual_given: Mapped[Optional[int]] = mapped_column('ZFLIGHT_DUALGIVEN', Integer)
    dual_received: Mapped[Optional[int]] = mapped_column('ZFLIGHT_DUALRECEIVED', Integer)
    solo: Mapped[Optional[int]] = mapped_column('ZFLIGHT_SOLO', Integer)
    night_vision_goggle: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHTVISIONGOGGLE', Integer)

    # Takeoffs and landings
    day_takeoffs: Mapped[Optional[int]] = mapped_column('ZFLIGHT_DAYTAKEOFFS', Integer)
    day_landings: Mapped[Optional[int]] = mapped_column('ZFLIGHT_DAYLANDINGS', Integer)
    night_takeoffs: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHTTAKEOFFS', Integer)
    night_landings: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHTLANDINGS', Integer)
    full_stops: Mapped[Optional[int]] = mapped_column('ZFLIGHT_FULLSTOPS', Integer)
    nvg_takeoffs: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHTVISIONGOGGLETAKEOFFS', Integer)
    nvg_landings: Mapped[Optional[int]] = mapped_column('ZFLIGHT_NIGHTVISIONGOGGLELANDINGS', Integer)

    holds: Mapped[Optional[int]] = mapped_column('ZFLIGHT_HOLDS', Integer)

    # Checks
    review: Mapped[Optional[bool]] = mapped_column('ZFLIGHT_REVIEW', Boolean)
    instrument_proficiency_check: Mapped[Optional[bool]] = mapped_column(
        'ZFLIGHT_INSTRUMENTPROFICIENCYCHECK', Boolean
    )

    remarks: Mapped[Optional[str]] = mapped_column('ZFLIGHT_REMARKS', String)

    # Numbered custom landing counters
    custom_landing1: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING1', Integer)
    custom_landing2: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING2', Integer)
    custom_landing3: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING3', Integer)
    custom_landing4: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING4', Integer)
    custom_landing5: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING5', Integer)
    custom_landing6: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING6', Integer)
    custom_landing7: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING7', Integer)
    custom_landing8: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING8', Integer)
    custom_landing9: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING9', Integer)
    custom_landing10: Mapped[Optional[int]] = mapped_column('ZFLIGHT_CUSTOMLANDING10', Integer)

    # Numbered custom notes
    custom_note1: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE1', String)
    custom_note2: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE2', String)
    custom_note3: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE3', String)
    custom_note4: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE4', String)
    custom_note5: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE5', String)
    custom_note6: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE6', String)
    custom_note7: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE7', String)
    custom_note8: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE8', String)
    custom_note9: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE9', String)
    custom_note10: Mapped[Optional[str]] = mapped_column('ZFLIGHT_CUSTOMNOTE10', String)

    aircraft: Mapped[Optional[LogTenAircraft]] = relationship(lazy='joined')
    from_place: Mapped[Optional[LogTenPlace]] = relationship(
        foreign_keys=[from_place_id], lazy='joined'
    )
    to_place: Mapped[Optional[LogTenPlace]] = relationship(
        foreign_keys=[to_place_id], lazy='joined'
    )
    crew: Mapped[Optional['LogTenFlightCrew']] = relationship(lazy='selectin')
    passengers: Mapped[Optional['LogTenFlightPassengers']] = relationship(lazy='selectin')
    approaches: Mapped[Optional['LogTenFlightApproaches']] = relationship(lazy='selectin')

    @property
    def date(self) -> datetime:
        return from_core_data_timestamp(self.timestamp)

    def custom_landing(self, slot: int) -> Optional[int]:
        return getattr(self, f'custom_landing{slot}')

    def custom_note(self, slot: int) -> Optional[str]:
        return getattr(self, f'custom_note{slot}')

    def __repr__(self) -> str:
        return f"<LogTenFlight {self.id} @ {self.timestamp}>"


class LogTenFlightCrew(Base):
    """Who was aboard in which role. Custom roles are user-configured."""

    __tablename__ = 'ZFLIGHTCREW'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    flight_id: Mapped[int] = mapped_column('ZFLIGHTCREW_FLIGHT', ForeignKey('ZFLIGHT.Z_PK'), index=True)

    pic_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_PIC', ForeignKey('ZPERSON.Z_PK'))
    sic_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_SIC', ForeignKey('ZPERSON.Z_PK'))
    custom1_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM1', ForeignKey('ZPERSON.Z_PK'))
    custom2_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM2', ForeignKey('ZPERSON.Z_PK'))
    custom3_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM3', ForeignKey('ZPERSON.Z_PK'))
    custom4_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM4', ForeignKey('ZPERSON.Z_PK'))
    custom5_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM5', ForeignKey('ZPERSON.Z_PK'))
    custom6_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM6', ForeignKey('ZPERSON.Z_PK'))
    custom7_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM7', ForeignKey('ZPERSON.Z_PK'))
    custom8_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM8', ForeignKey('ZPERSON.Z_PK'))
    custom9_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM9', ForeignKey('ZPERSON.Z_PK'))
    custom10_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTCREW_CUSTOM10', ForeignKey('ZPERSON.Z_PK'))

    def custom_person_id(self, slot: int) -> Optional[int]:
        return getattr(self, f'custom{slot}_id')


class LogTenFlightPassengers(Base):
    """Passenger slots for a flight."""

    __tablename__ = 'ZFLIGHTPASSENGERS'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    flight_id: Mapped[int] = mapped_column(
        'ZFLIGHTPASSENGERS_FLIGHT', ForeignKey('ZFLIGHT.Z_PK'), index=True
    )
    pax1_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX1', ForeignKey('ZPERSON.Z_PK'))
    pax2_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX2', ForeignKey('ZPERSON.Z_PK'))
    pax3_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX3', ForeignKey('ZPERSON.Z_PK'))
    pax4_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX4', ForeignKey('ZPERSON.Z_PK'))
    pax5_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX5', ForeignKey('ZPERSON.Z_PK'))
    pax6_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX6', ForeignKey('ZPERSON.Z_PK'))
    pax7_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX7', ForeignKey('ZPERSON.Z_PK'))
    pax8_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX8', ForeignKey('ZPERSON.Z_PK'))
    pax9_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX9', ForeignKey('ZPERSON.Z_PK'))
    pax10_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTPASSENGERS_PAX10', ForeignKey('ZPERSON.Z_PK'))

    @property
    def count(self) -> int:
        return sum(1 for slot in range(1, 11) if getattr(self, f'pax{slot}_id') is not None)


class LogTenApproach(Base):
    """A single instrument approach."""

    __tablename__ = 'ZAPPROACH'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    type: Mapped[Optional[str]] = mapped_column('ZAPPROACH_TYPE', String)
    quantity: Mapped[Optional[int]] = mapped_column('ZAPPROACH_QUANTITY', Integer)


class LogTenFlightApproaches(Base):
    """Approach slots for a flight."""

    __tablename__ = 'ZFLIGHTAPPROACHES'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    flight_id: Mapped[int] = mapped_column(
        'ZFLIGHTAPPROACHES_FLIGHT', ForeignKey('ZFLIGHT.Z_PK'), index=True
    )
    approach1_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH1', ForeignKey('ZAPPROACH.Z_PK'))
    approach2_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH2', ForeignKey('ZAPPROACH.Z_PK'))
    approach3_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH3', ForeignKey('ZAPPROACH.Z_PK'))
    approach4_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH4', ForeignKey('ZAPPROACH.Z_PK'))
    approach5_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH5', ForeignKey('ZAPPROACH.Z_PK'))
    approach6_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH6', ForeignKey('ZAPPROACH.Z_PK'))
    approach7_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH7', ForeignKey('ZAPPROACH.Z_PK'))
    approach8_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH8', ForeignKey('ZAPPROACH.Z_PK'))
    approach9_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH9', ForeignKey('ZAPPROACH.Z_PK'))
    approach10_id: Mapped[Optional[int]] = mapped_column('ZFLIGHTAPPROACHES_APPROACH10', ForeignKey('ZAPPROACH.Z_PK'))

    @property
    def count(self) -> int:
        return sum(1 for slot in range(1, 11) if getattr(self, f'approach{slot}_id') is not None)
