"""
Aircraft and AircraftType models.

An aircraft type carries the FAA classification (as references into
ZLOGTENCUSTOMIZATIONPROPERTY) and five free-form custom attributes, which
users configure to hold the type designator and simulator details.
"""

from typing import Optional

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from badbehavior.models.base import Base
from badbehavior.models.property import LogTenCustomizationProperty


class LogTenAircraftType(Base):
    """Make and model (or simulator device) as configured in LogTen Pro."""

    __tablename__ = 'ZAIRCRAFTTYPE'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)

    type: Mapped[str] = mapped_column(
        'ZAIRCRAFTTYPE_TYPE',
        String,
        comment='LogTen type identifier, e.g. C172S'
    )

    # Classification (foreign keys into the customization property table)
    category_id: Mapped[Optional[int]] = mapped_column(
        'ZAIRCRAFTTYPE_CATEGORY',
        ForeignKey('ZLOGTENCUSTOMIZATIONPROPERTY.Z_PK'),
        nullable=True
    )
    class_id: Mapped[Optional[int]] = mapped_column(
        'ZAIRCRAFTTYPE_AIRCRAFTCLASS',
        ForeignKey('ZLOGTENCUSTOMIZATIONPROPERTY.Z_PK'),
        nullable=True
    )
    engine_type_id: Mapped[Optional[int]] = mapped_column(
        'ZAIRCRAFTTYPE_ENGINETYPE',
        ForeignKey('ZLOGTENCUSTOMIZATIONPROPERTY.Z_PK'),
        nullable=True
    )

    # User-defined attributes
    custom_attribute1: Mapped[Optional[str]] = mapped_column('ZAIRCRAFTTYPE_CUSTOMATTRIBUTE1', String)
    custom_attribute2: Mapped[Optional[str]] = mapped_column('ZAIRCRAFTTYPE_CUSTOMATTRIBUTE2', String)
    custom_attribute3: Mapped[Optional[str]] = mapped_column('ZAIRCRAFTTYPE_CUSTOMATTRIBUTE3', String)
    custom_attribute4: Mapped[Optional[str]] = mapped_column('ZAIRCRAFTTYPE_CUSTOMATTRIBUTE4', String)
    custom_attribute5: Mapped[Optional[str]] = mapped_column('ZAIRCRAFTTYPE_CUSTOMATTRIBUTE5', String)

    category: Mapped[Optional[LogTenCustomizationProperty]] = relationship(
        foreign_keys=[category_id], lazy='joined'
    )
    aircraft_class: Mapped[Optional[LogTenCustomizationProperty]] = relationship(
        foreign_keys=[class_id], lazy='joined'
    )
    engine_type: Mapped[Optional[LogTenCustomizationProperty]] = relationship(
        foreign_keys=[engine_type_id], lazy='joined'
    )

    def __repr__(self) -> str:
        return f"<LogTenAircraftType {self.type}>"


class LogTenAircraft(Base):
    """An individual airframe."""

    __tablename__ = 'ZAIRCRAFT'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)

    registration: Mapped[str] = mapped_column(
        'ZAIRCRAFT_AIRCRAFTID',
        String,
        comment='Registration (tail number)'
    )

    aircraft_type_id: Mapped[Optional[int]] = mapped_column(
        'ZAIRCRAFT_AIRCRAFTTYPE',
        ForeignKey('ZAIRCRAFTTYPE.Z_PK'),
        nullable=True
    )

    weight: Mapped[Optional[float]] = mapped_column(
        'ZAIRCRAFT_WEIGHT',
        Float,
        nullable=True,
        comment='Max gross weight, lbs'
    )

    tailwheel: Mapped[Optional[bool]] = mapped_column(
        'ZAIRCRAFT_TAILWHEEL',
        Boolean,
        nullable=True
    )

    aircraft_type: Mapped[Optional[LogTenAircraftType]] = relationship(lazy='joined')

    def __repr__(self) -> str:
        return f"<LogTenAircraft {self.registration}>"
