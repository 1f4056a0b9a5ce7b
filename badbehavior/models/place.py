"""
Place and Person models. Flights reference these for airports and crew.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from badbehavior.models.base import Base


class LogTenPlace(Base):
    """An airport or landing site."""

    __tablename__ = 'ZPLACE'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    identifier: Mapped[str] = mapped_column('ZPLACE_IDENTIFIER', String, comment='e.g. SQL')
    icao: Mapped[Optional[str]] = mapped_column('ZPLACE_ICAOID', String, nullable=True)

    def __repr__(self) -> str:
        return f"<LogTenPlace {self.identifier}>"


class LogTenPerson(Base):
    """A crew member or passenger."""

    __tablename__ = 'ZPERSON'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)
    name: Mapped[Optional[str]] = mapped_column('ZPERSON_NAME', String, nullable=True)
