"""
models/transaction.py
---------------------
Domain models for payments and the accounts they are charged to.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from models.errors import ErrorKind
from models.result import Result


@dataclass(frozen=True)
class Transaction:
    """
    A single outgoing payment.

    Attributes:
        id: Sequence number within the session.
        date: When the transaction was recorded.
        amount: Positive amount in the configured currency.
        category: Spending category (e.g. Groceries, Utilities).
    """
    id: int
    date: datetime
    amount: Decimal
    category: str


@dataclass
class Account:
    """A plain account; every transaction is deducted unconditionally."""
    account_number: str
    balance: Decimal = field(default=Decimal("0"))

    def apply_transaction(self, transaction: Transaction) -> Result[Decimal]:
        """
        Deduct the transaction amount from the balance.

        Returns:
            A successful Result carrying the new balance.
        """
        self.balance -= transaction.amount
        return Result.ok(self.balance, f"New balance: {self.balance}")


@dataclass
class SavingsAccount(Account):
    """An account that refuses to go below zero."""

    def apply_transaction(self, transaction: Transaction) -> Result[Decimal]:
        if transaction.amount > self.balance:
            return Result.fail(
                ErrorKind.INVALID_VALUE, "Insufficient funds - transaction cancelled"
            )
        return super().apply_transaction(transaction)
