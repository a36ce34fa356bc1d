"""
services/inventory_service.py
------------------------------
Business logic for the inventory and warehouse systems.
Owns one keyed repository per item type.
"""

from datetime import date
from typing import Optional, TypeVar

from dateutil.relativedelta import relativedelta

from models.inventory import ElectronicItem, GroceryItem, InventoryItem
from models.result import Result
from repositories.keyed_repo import KeyedRepository
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=InventoryItem)


class InventoryManager:
    """
    Manages electronic and grocery stock.

    Every operation returns a Result; failures are logged here and left to
    the caller to render.
    """

    def __init__(self):
        self.electronics: KeyedRepository[int, ElectronicItem] = KeyedRepository("ElectronicItem")
        self.groceries: KeyedRepository[int, GroceryItem] = KeyedRepository("GroceryItem")

    def seed_data(self, today: Optional[date] = None) -> None:
        """Load the demonstration stock (electronics 1-3, groceries 101-103)."""
        today = today or date.today()
        for item in (
            ElectronicItem(1, "Laptop", 10, "Dell", 24),
            ElectronicItem(2, "Smartphone", 15, "Samsung", 12),
            ElectronicItem(3, "Headphones", 25, "Sony", 6),
        ):
            self.add_item(self.electronics, item)

        for item in (
            GroceryItem(101, "Milk", 50, today + relativedelta(days=7)),
            GroceryItem(102, "Bread", 30, today + relativedelta(days=3)),
            GroceryItem(103, "Eggs", 100, today + relativedelta(weeks=2)),
        ):
            self.add_item(self.groceries, item)
        logger.info(
            f"Seeded {len(self.electronics)} electronic and {len(self.groceries)} grocery items"
        )

    def add_item(self, repo: KeyedRepository[int, T], item: T) -> Result[T]:
        """Add an item under its own id."""
        result = repo.add(item.id, item)
        if not result.success:
            logger.warning(f"Add rejected: {result.message}")
        return result

    def list_items(self, repo: KeyedRepository[int, T]) -> list[T]:
        """All items of one type, in the order they were added."""
        return repo.list_all()

    def increase_stock(self, repo: KeyedRepository[int, T], item_id: int, quantity: int) -> Result[T]:
        """
        Add ``quantity`` units to an item.

        Args:
            repo: The repository holding the item.
            item_id: Item to restock.
            quantity: Units to add (a negative amount that would drive the
                stock below zero is rejected as INVALID_VALUE).

        Returns:
            Result carrying the updated item, or NOT_FOUND / INVALID_VALUE.
        """
        found = repo.get_by_id(item_id)
        if not found.success:
            logger.warning(f"Error increasing stock: {found.message}")
            return found

        result = repo.update_quantity(item_id, found.value.quantity + quantity)
        if result.success:
            logger.info(f"Increased {repo.label} {item_id} quantity by {quantity}")
        else:
            logger.warning(f"Error increasing stock: {result.message}")
        return result

    def remove_item(self, repo: KeyedRepository[int, T], item_id: int) -> Result[T]:
        """Remove an item by id."""
        result = repo.remove(item_id)
        if result.success:
            logger.info(f"Removed {repo.label} with ID {item_id}")
        else:
            logger.warning(f"Error removing item: {result.message}")
        return result

    def run_error_scenarios(self) -> list[Result]:
        """
        Exercise the three expected failure paths against the current stock:
        a duplicate electronic id 1, removal of an unknown grocery (999, or
        the next free id above it), and a negative electronic quantity.

        The stock is left as it was. If electronic id 1 does not exist the
        duplicate add succeeds; that item is removed again and the
        successful result is returned as-is.

        Returns:
            The three results, in that order.
        """
        duplicate = self.add_item(self.electronics, ElectronicItem(1, "Duplicate Laptop", 5, "HP", 12))
        if duplicate.success:
            self.electronics.remove(1)
            logger.warning("No electronic item with ID 1 to duplicate; scenario item removed")

        missing_id = 999
        while missing_id in self.groceries:
            missing_id += 1

        return [
            duplicate,
            self.remove_item(self.groceries, missing_id),
            self.electronics.update_quantity(1, -5),
        ]
