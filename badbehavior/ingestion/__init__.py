"""
Logbook ingestion for badbehavior.

Reads a LogTen Pro Core Data store into immutable Flight records.
"""

from badbehavior.ingestion.reader import CustomFieldSlots, LogbookReader

__all__ = [
    'CustomFieldSlots',
    'LogbookReader',
]
