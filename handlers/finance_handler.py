"""
handlers/finance_handler.py
----------------------------
Console flow for the finance system.
"""

from config import CURRENCY
from services.finance_service import DEFAULT_PROCESSORS, FinanceService
from utils.console import Console


def run_finance(console: Console) -> FinanceService:
    """Open an account, take three transactions and print the summary."""
    console.say("=== Finance Management System ===")
    service = FinanceService()

    account_number = console.ask("Enter account number: ", default="ACC001")
    initial_balance = console.ask_decimal(
        f"Enter initial balance ({CURRENCY}): ", accept=lambda v: v >= 0
    )
    console.report(service.open_account(account_number, initial_balance))

    entries = []
    for i in range(1, len(DEFAULT_PROCESSORS) + 1):
        console.say(f"\nEnter details for Transaction {i}:")
        amount = console.ask_decimal(f"Amount ({CURRENCY}): ", accept=lambda v: v > 0)
        category = console.ask(
            "Category (e.g., Groceries, Utilities, Entertainment): ", default="Miscellaneous"
        )
        entries.append((amount, category))

    console.say("\nProcessing transactions:")
    for i, ((amount, category), processor) in enumerate(zip(entries, DEFAULT_PROCESSORS), start=1):
        console.say(f"\nTransaction {i}:")
        result = service.record_transaction(amount, category, processor)
        console.say(result.message)

    console.say()
    for line in service.summary_lines():
        console.say(line)
    return service
