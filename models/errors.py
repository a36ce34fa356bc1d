"""
models/errors.py
----------------
Error taxonomy shared by every repository and importer.

Each failure has an ``ErrorKind`` and a matching exception class. Repository
operations report the kind through a ``Result``; ``Result.unwrap()`` raises
the exception for callers that want exception flow.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """The four failure kinds a repository or importer can report."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MALFORMED_RECORD = "malformed_record"


class RecordError(Exception):
    """Base class for all record/repository failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateKeyError(RecordError):
    """Insert with an identifier that is already in use."""

    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(RecordError):
    """Lookup, removal or update of an unknown identifier."""

    kind = ErrorKind.NOT_FOUND


class InvalidValueError(RecordError):
    """A proposed mutation violates a domain constraint."""

    kind = ErrorKind.INVALID_VALUE


class MalformedRecordError(RecordError):
    """
    An externally supplied record is missing fields or has a field
    of the wrong shape.

    Attributes:
        line_number: 1-based line number in the source, if known.
        reason: What was wrong with the record.
    """

    kind = ErrorKind.MALFORMED_RECORD

    def __init__(self, reason: str, line_number: Optional[int] = None):
        message = f"Line {line_number}: {reason}" if line_number is not None else reason
        super().__init__(message)
        self.reason = reason
        self.line_number = line_number


_ERRORS_BY_KIND: dict[ErrorKind, type[RecordError]] = {
    cls.kind: cls
    for cls in (DuplicateKeyError, NotFoundError, InvalidValueError, MalformedRecordError)
}


def error_for(kind: ErrorKind, message: str) -> RecordError:
    """Build the exception instance that corresponds to an error kind."""
    return _ERRORS_BY_KIND[kind](message)
