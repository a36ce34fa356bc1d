"""
main.py
-------
Entry point for the RecordKeeper console suite.

Responsibilities:
    - Show the top-level menu and dispatch to the selected system.
    - Keep the menu alive when a system fails: every error is logged and
      reported, then control returns to the menu.
"""

from typing import Callable

from handlers.finance_handler import run_finance
from handlers.grading_handler import run_grading
from handlers.healthcare_handler import run_healthcare
from handlers.inventory_handler import run_inventory, run_warehouse
from utils.console import Console
from utils.logger import get_logger

logger = get_logger(__name__)

MENU: dict[str, tuple[str, Callable[[Console], object]]] = {
    "1": ("Finance Management System", run_finance),
    "2": ("Healthcare System", run_healthcare),
    "3": ("Warehouse Inventory System", run_warehouse),
    "4": ("School Grading System", run_grading),
    "5": ("Inventory Record System", run_inventory),
}
EXIT_CHOICE = "6"


def show_menu(console: Console) -> None:
    console.say("\n=== RecordKeeper ===")
    for key, (title, _) in MENU.items():
        console.say(f"{key}. {title}")
    console.say(f"{EXIT_CHOICE}. Exit")


def run_menu(console: Console) -> None:
    """Loop over the menu until the user exits or input ends."""
    while True:
        show_menu(console)
        choice = console.ask(f"Select an option (1-{EXIT_CHOICE}): ", default=EXIT_CHOICE)

        if choice == EXIT_CHOICE:
            console.say("Exiting program...")
            return

        entry = MENU.get(choice)
        if entry is None:
            console.say("Invalid choice. Please try again.")
            continue

        title, run = entry
        logger.info(f"Starting {title}")
        try:
            run(console)
        except EOFError:
            console.say("\nInput closed. Exiting program...")
            return
        except Exception as e:
            logger.exception(f"{title} failed")
            console.say(f"Unexpected error: {e}")

        console.ask("\nPress Enter to return to main menu...")


def main() -> None:
    """Run the console suite on stdin/stdout."""
    try:
        run_menu(Console())
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")


if __name__ == "__main__":
    main()
