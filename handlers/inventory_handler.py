"""
handlers/inventory_handler.py
------------------------------
Console flows for the two stock systems: the seeded inventory demo and
the warehouse, where the stock is typed in by the user.
"""

from datetime import date
from pathlib import Path

from config import EXPORT_DIR
from models.inventory import ElectronicItem, GroceryItem
from repositories.keyed_repo import KeyedRepository
from services.export_service import ExportService
from services.inventory_service import InventoryManager
from utils.console import Console


_SCENARIO_TITLES = (
    "Attempting to add duplicate electronic item...",
    "Attempting to remove non-existent grocery item...",
    "Attempting to update with negative quantity...",
)


def print_items(console: Console, title: str, repo: KeyedRepository) -> None:
    console.say(f"\n--- {title} ---")
    items = repo.list_all()
    if not items:
        console.say("No items found.")
    for item in items:
        console.say(str(item))


def print_stock(console: Console, manager: InventoryManager) -> None:
    print_items(console, "Grocery Items", manager.groceries)
    print_items(console, "Electronic Items", manager.electronics)


def run_error_scenarios(console: Console, manager: InventoryManager) -> None:
    console.say("\nTesting error scenarios:")
    for title, result in zip(_SCENARIO_TITLES, manager.run_error_scenarios()):
        console.say(f"\n{title}")
        if result.success:
            console.say("No error raised; the change was undone.")
        else:
            console.say(f"Expected error: {result.message}")


def _choose_repo(console: Console, manager: InventoryManager) -> KeyedRepository | None:
    type_choice = console.ask_int("Enter item type (1-Electronics, 2-Groceries): ")
    return {1: manager.electronics, 2: manager.groceries}.get(type_choice)


def run_interactive_operation(console: Console, manager: InventoryManager) -> None:
    """One restock or removal chosen by the user."""
    console.say("\nInteractive Operations:")
    console.say("1. Increase stock quantity")
    console.say("2. Remove an item")
    choice = console.ask_int("Select an operation (1-2): ", accept=lambda v: v in (1, 2))

    repo = _choose_repo(console, manager)
    if repo is None:
        console.say("Unknown item type.")
        return

    item_id = console.ask_int(f"Enter {repo.label} ID: ")
    if choice == 1:
        quantity = console.ask_int("Enter quantity to add: ")
        result = manager.increase_stock(repo, item_id, quantity)
        console.report(
            result,
            f"Stock updated for {result.value.name}. New quantity: {result.value.quantity}"
            if result.success else "",
        )
    else:
        console.report(manager.remove_item(repo, item_id), f"Item with ID {item_id} removed.")


def offer_export(console: Console, manager: InventoryManager) -> Path | None:
    """Write the stock snapshot to Excel if the user asks for it."""
    if console.ask("\nExport stock to Excel? (y/N): ").lower() != "y":
        return None
    buffer = ExportService().export_inventory_excel(
        manager.electronics.list_all(), manager.groceries.list_all()
    )
    path = Path(EXPORT_DIR) / f"inventory_{date.today():%Y%m%d}.xlsx"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(buffer.getvalue())
    console.say(f"Exported stock to {path}")
    return path


def run_inventory(console: Console) -> InventoryManager:
    """Seeded stock, error scenarios, one interactive operation, final listing."""
    console.say("=== Inventory Record System ===")
    manager = InventoryManager()
    manager.seed_data()

    print_stock(console, manager)
    run_error_scenarios(console, manager)
    run_interactive_operation(console, manager)

    console.say("\nFinal Inventory Status:")
    print_stock(console, manager)
    offer_export(console, manager)
    return manager


def _enter_electronics(console: Console, manager: InventoryManager) -> None:
    count = console.ask_int("\nHow many electronic items to add? ", accept=lambda v: v >= 0)
    for i in range(1, count + 1):
        console.say(f"\nElectronic Item {i}:")
        item = ElectronicItem(
            id=console.ask_int("ID: "),
            name=console.ask("Name: "),
            quantity=console.ask_int("Quantity: ", accept=lambda v: v >= 0),
            brand=console.ask("Brand: "),
            warranty_months=console.ask_int("Warranty (months): ", accept=lambda v: v >= 0),
        )
        console.report(manager.add_item(manager.electronics, item))


def _ask_date(console: Console, prompt: str) -> date:
    while True:
        answer = console.ask(prompt, default=date.today().isoformat())
        try:
            return date.fromisoformat(answer)
        except ValueError:
            console.say("Invalid date. Use yyyy-mm-dd.")


def _enter_groceries(console: Console, manager: InventoryManager) -> None:
    count = console.ask_int("\nHow many grocery items to add? ", accept=lambda v: v >= 0)
    for i in range(1, count + 1):
        console.say(f"\nGrocery Item {i}:")
        item = GroceryItem(
            id=console.ask_int("ID: "),
            name=console.ask("Name: "),
            quantity=console.ask_int("Quantity: ", accept=lambda v: v >= 0),
            expiry_date=_ask_date(console, "Expiry date (yyyy-mm-dd): "),
        )
        console.report(manager.add_item(manager.groceries, item))


def run_warehouse(console: Console) -> InventoryManager:
    """Stock typed in by the user, then the error scenarios and listings."""
    console.say("=== Warehouse Inventory System ===")
    manager = InventoryManager()
    _enter_electronics(console, manager)
    _enter_groceries(console, manager)

    print_stock(console, manager)
    run_error_scenarios(console, manager)
    return manager
