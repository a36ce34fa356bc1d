"""
repositories/keyed_repo.py
---------------------------
Repository of records indexed by a unique key.
Used by the inventory and warehouse systems for stock items.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from models.errors import ErrorKind
from models.result import Result
from utils.logger import get_logger

logger = get_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")

# Returns a reason string when the candidate value is rejected, else None.
Validator = Callable[[Any], Optional[str]]


def non_negative(value: int) -> Optional[str]:
    """Validator for quantities."""
    if value < 0:
        return "Quantity cannot be negative"
    return None


class KeyedRepository(Generic[K, V]):
    """
    Unique-key mapping from K to V.

    ``list_all()`` returns values in insertion order. Stored values are
    handed out by reference, so in-place changes are visible to the
    repository.
    """

    def __init__(self, label: str = "Item"):
        self.label = label
        self._items: dict[K, V] = {}

    # ── CREATE ────────────────────────────────────────────

    def add(self, key: K, value: V) -> Result[V]:
        """
        Insert a value under a new key.

        Returns:
            Result carrying the stored value, or DUPLICATE_KEY if the key is
            already in use (the existing value is left untouched).
        """
        if key in self._items:
            return Result.fail(
                ErrorKind.DUPLICATE_KEY, f"{self.label} with ID {key} already exists"
            )
        self._items[key] = value
        logger.debug(f"Added {self.label} #{key}")
        return Result.ok(value)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, key: K) -> Result[V]:
        """Fetch the stored value for a key, or NOT_FOUND."""
        if key not in self._items:
            return Result.fail(ErrorKind.NOT_FOUND, f"{self.label} with ID {key} not found")
        return Result.ok(self._items[key])

    def list_all(self) -> list[V]:
        """Snapshot of all values, in insertion order."""
        return list(self._items.values())

    # ── UPDATE ────────────────────────────────────────────

    def update_field(
        self, key: K, field: str, new_value: Any, validate: Optional[Validator] = None
    ) -> Result[V]:
        """
        Set one attribute of a stored value in place.

        The validator runs before the key is looked up, so an invalid value
        is reported as INVALID_VALUE even for unknown keys and nothing is
        modified.

        Args:
            key: Identifier of the stored value.
            field: Attribute name to set.
            new_value: Candidate value.
            validate: Optional domain check returning a rejection reason.

        Returns:
            Result carrying the updated value, or INVALID_VALUE / NOT_FOUND.
        """
        if validate is not None:
            reason = validate(new_value)
            if reason:
                return Result.fail(ErrorKind.INVALID_VALUE, reason)

        found = self.get_by_id(key)
        if not found.success:
            return found

        setattr(found.value, field, new_value)
        logger.debug(f"Updated {self.label} #{key}: {field}={new_value!r}")
        return found

    def update_quantity(self, key: K, new_quantity: int) -> Result[V]:
        """Set the quantity of a stored item; negative quantities are rejected."""
        return self.update_field(key, "quantity", new_quantity, non_negative)

    # ── DELETE ────────────────────────────────────────────

    def remove(self, key: K) -> Result[V]:
        """
        Delete the value stored under a key.

        Returns:
            Result carrying the removed value, or NOT_FOUND.
        """
        if key not in self._items:
            return Result.fail(ErrorKind.NOT_FOUND, f"{self.label} with ID {key} not found")
        value = self._items.pop(key)
        logger.debug(f"Removed {self.label} #{key}")
        return Result.ok(value)

    # ── HELPERS ───────────────────────────────────────────

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
