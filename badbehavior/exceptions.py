"""
Errors raised while reading a logbook.

Everything the reader can fail with derives from BadBehaviorError so the
command line can report it uniformly. Errors raised by currency rules are
not wrapped: they propagate out of the validator unchanged.
"""

from typing import Any, Dict, Optional


class BadBehaviorError(Exception):
    """Base exception for badbehavior errors."""

    def __init__(
        self,
        message: str,
        code: str = 'BADBEHAVIOR_ERROR',
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON output."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details,
        }


class LogbookNotFoundError(BadBehaviorError):
    """Raised when the LogTen Pro store does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            message=f"LogTen Pro logbook not found at {path}",
            code='LOGBOOK_NOT_FOUND',
            details={'path': path}
        )


class LogbookReadError(BadBehaviorError):
    """Raised when the store exists but cannot be opened or queried."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            message=f"Couldn't read LogTen Pro logbook at {path}: {reason}",
            code='LOGBOOK_UNREADABLE',
            details={'path': path, 'reason': reason}
        )


class MissingPropertyError(BadBehaviorError):
    """
    Raised when a required LogTen Pro custom field is not configured.

    The user has to add a custom field with this exact title in LogTen Pro
    before the logbook can be checked.
    """

    def __init__(self, title: str, model: str):
        self.title = title
        self.model = model
        super().__init__(
            message=f"Add a custom field named “{title}” to the {model} entity in LogTen Pro",
            code='MISSING_PROPERTY',
            details={'title': title, 'model': model}
        )


class UnrecognizedCodeError(BadBehaviorError):
    """
    Raised when a classification code in the logbook is not one we know.

    kind is what was being classified ('category', 'class', 'engine type',
    'simulator type' or 'simulator category/class'); type_id identifies the
    aircraft type carrying the bad code.
    """

    def __init__(self, kind: str, code: Optional[str], type_id: str):
        self.kind = kind
        self.code = code
        self.type_id = type_id
        super().__init__(
            message=f"Unknown aircraft {kind} '{code}' for type {type_id}",
            code='UNRECOGNIZED_CODE',
            details={'kind': kind, 'code': code, 'type_id': type_id}
        )
