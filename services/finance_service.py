"""
services/finance_service.py
----------------------------
Business logic for the finance system: payment processors, the savings
account and the transaction history.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol

from config import CURRENCY
from models.errors import ErrorKind
from models.result import Result
from models.transaction import Account, SavingsAccount, Transaction
from repositories.linear_repo import LinearRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class TransactionProcessor(Protocol):
    def process(self, transaction: Transaction) -> str: ...


class BankTransferProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"Processing bank transfer of {CURRENCY}{transaction.amount} "
            f"for {transaction.category}"
        )


class MobileMoneyProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"Processing mobile money payment of {CURRENCY}{transaction.amount} "
            f"for {transaction.category}"
        )


class CryptoWalletProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"Processing crypto transaction of {CURRENCY}{transaction.amount} "
            f"for {transaction.category}"
        )


# Order in which the console demo routes its three transactions.
DEFAULT_PROCESSORS: tuple[TransactionProcessor, ...] = (
    MobileMoneyProcessor(),
    BankTransferProcessor(),
    CryptoWalletProcessor(),
)


class FinanceService:
    """
    Handles one account and the history of transactions charged to it.

    Workflow:
        1. Open the account with an initial balance.
        2. Record transactions; each is processed, applied to the account
           and kept in the history even if the account refuses it.
        3. Report the summary.
    """

    def __init__(self):
        self.account: Optional[Account] = None
        self.transactions: LinearRepository[Transaction] = LinearRepository()
        self._next_id = 1

    def open_account(self, account_number: str, initial_balance: Decimal) -> Result[Account]:
        """Open a savings account; a negative initial balance is rejected."""
        if initial_balance < 0:
            return Result.fail(ErrorKind.INVALID_VALUE, "Initial balance cannot be negative")
        self.account = SavingsAccount(account_number, initial_balance)
        logger.info(f"Opened account {account_number} with {CURRENCY}{initial_balance}")
        return Result.ok(self.account, f"Account created with balance: {CURRENCY}{initial_balance}")

    def record_transaction(
        self,
        amount: Decimal,
        category: str,
        processor: TransactionProcessor,
        when: Optional[datetime] = None,
    ) -> Result[Transaction]:
        """
        Create, process and apply a transaction.

        Returns:
            Result carrying the transaction and the processor/account message,
            or INVALID_VALUE for a non-positive amount, a missing account, or
            insufficient funds. Refused transactions are still in the history.
        """
        if self.account is None:
            return Result.fail(ErrorKind.INVALID_VALUE, "No account is open")
        if amount <= 0:
            return Result.fail(ErrorKind.INVALID_VALUE, "Amount must be a positive number")

        transaction = Transaction(self._next_id, when or datetime.now(), amount, category)
        self._next_id += 1

        processed = processor.process(transaction)
        logger.info(processed)
        applied = self.account.apply_transaction(transaction)
        self.transactions.add(transaction)

        if not applied.success:
            logger.warning(f"Transaction #{transaction.id} refused: {applied.message}")
            return Result.fail(applied.error, f"{processed}\n{applied.message}")
        return Result.ok(
            transaction,
            f"{processed}\nTransaction successful. New balance: {CURRENCY}{self.account.balance}",
        )

    def find_transaction(self, transaction_id: int) -> Optional[Transaction]:
        return self.transactions.find_first(lambda t: t.id == transaction_id)

    def remove_transaction(self, transaction_id: int) -> bool:
        """Drop a transaction from the history. The balance is not restored."""
        return self.transactions.remove_first(lambda t: t.id == transaction_id)

    def history(self) -> list[Transaction]:
        """Snapshot of every recorded transaction, oldest first."""
        return list(self.transactions.list_all())

    def summary_lines(self) -> list[str]:
        """Account summary followed by the transaction history."""
        if self.account is None:
            return ["No account is open."]
        lines = [
            "Transaction Summary:",
            f"Account: {self.account.account_number}",
            f"Final Balance: {CURRENCY}{self.account.balance}",
            "",
            "Transaction History:",
        ]
        for t in self.transactions:
            lines.append(f"{t.date:%Y-%m-%d %H:%M}: {CURRENCY}{t.amount} for {t.category}")
        return lines
