"""
models/inventory.py
-------------------
Domain models for stock items held by the inventory and warehouse systems.
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class InventoryItem(Protocol):
    """Anything that can live in an inventory repository."""

    id: int
    name: str
    quantity: int


@dataclass
class ElectronicItem:
    """
    An electronic product kept in stock.

    Attributes:
        id: Unique item number within its repository.
        name: Product name.
        quantity: Units currently in stock (never negative).
        brand: Manufacturer.
        warranty_months: Length of the warranty.
    """
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"{self.id}: {self.name} ({self.brand}) - Qty: {self.quantity}, "
            f"Warranty: {self.warranty_months} months"
        )


@dataclass
class GroceryItem:
    """
    A perishable grocery product kept in stock.

    Attributes:
        id: Unique item number within its repository.
        name: Product name.
        quantity: Units currently in stock (never negative).
        expiry_date: Last day the product may be sold.
    """
    id: int
    name: str
    quantity: int
    expiry_date: date

    def is_expired(self, today: date | None = None) -> bool:
        """Returns True once the expiry date has passed."""
        return self.expiry_date < (today or date.today())

    def __str__(self) -> str:
        return f"{self.id}: {self.name} - Qty: {self.quantity}, Expires: {self.expiry_date}"
