"""
models/result.py
----------------
Explicit success-or-failure return value for repository and service
operations.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from models.errors import ErrorKind, error_for

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation that can fail in an expected way.

    Attributes:
        value: The produced value (None on failure, or for operations
            that produce nothing).
        error: The failure kind, or None on success.
        message: Human-readable description, always set on failure.
    """
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def ok(cls, value: Optional[T] = None, message: str = "") -> "Result[T]":
        return cls(value=value, message=message)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=kind, message=message)

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value, or raise the typed exception for the failure.

        Raises:
            RecordError: The subclass matching ``self.error``.
        """
        if self.error is not None:
            raise error_for(self.error, self.message)
        return self.value

    def __bool__(self) -> bool:
        return self.success
