"""
LogTenCustomizationProperty model - user-facing names for LogTen fields.

LogTen Pro lets users rename its generic columns ("Custom Note 3",
"Custom Attribute 1", ...). Each row maps a storage key such as
'flight_customNote3' to the title the user gave it. The same table also
holds the classification codes aircraft types point at: the key of the
row an aircraft type's category references is e.g. 'flight_category1'.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from badbehavior.models.base import Base


class LogTenCustomizationProperty(Base):
    """A configurable field or classification value."""

    __tablename__ = 'ZLOGTENCUSTOMIZATIONPROPERTY'

    id: Mapped[int] = mapped_column('Z_PK', Integer, primary_key=True)

    key: Mapped[str] = mapped_column(
        'ZLOGTENPROPERTY_KEY',
        String,
        comment='Storage key, e.g. flight_customNote3 or flight_category1'
    )

    title: Mapped[Optional[str]] = mapped_column(
        'ZLOGTENCUSTOMIZATIONPROPERTY_TITLE',
        String,
        nullable=True,
        comment='Title shown in LogTen Pro'
    )

    def __repr__(self) -> str:
        return f"<LogTenCustomizationProperty {self.key}={self.title!r}>"
