"""Mini README: Transaction record types for the personal ledger.

Structure:
    * TransactionKind - closed enum tagging an entry as income or expense.
    * Transaction - immutable dataclass holding one ledger entry.

Income and expense entries share a single record type; the ``kind`` tag
decides whether the amount adds to or subtracts from the balance. Enum
values double as the labels written to the ledger file.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict

from .validation import check_amount


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "Income"
    EXPENSE = "Expense"

    def signed(self, amount: Decimal) -> Decimal:
        """Return ``amount`` with the sign this kind applies to a balance."""

        return amount if self is TransactionKind.INCOME else -amount


def format_amount(amount: Decimal, currency_symbol: str) -> str:
    """Render an amount in plain positional notation behind its symbol."""

    return f"{currency_symbol}{amount:f}"


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry.

    ``occurred_on`` keeps the dd-MM-yyyy text exactly as entered or loaded;
    entries read back from disk are not re-validated.
    """

    kind: TransactionKind
    amount: Decimal
    category: str
    occurred_on: str

    def __post_init__(self) -> None:
        check_amount(self.amount)

    @property
    def signed_amount(self) -> Decimal:
        return self.kind.signed(self.amount)

    def describe(self, currency_symbol: str = "₹") -> str:
        """Human readable one-line summary, e.g. ``Income: ₹100 (Salary) on 01-01-2024``."""

        return (
            f"{self.kind.value}: {format_amount(self.amount, currency_symbol)}"
            f" ({self.category}) on {self.occurred_on}"
        )

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with serialisable values."""

        return {
            "kind": self.kind.value,
            "amount": f"{self.amount:f}",
            "category": self.category,
            "occurred_on": self.occurred_on,
        }
