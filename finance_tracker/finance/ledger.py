"""Mini README: In-memory personal ledger supporting income and expenses.

Structure:
    * sort_by_date - stable ascending date order used before persisting.
    * Ledger - ordered collection of transactions with aggregate views.

The ledger keeps transactions in insertion order for the current session.
Aggregates are computed on demand from that sequence, so there is no cached
state to keep in sync. Category checks use the catalogue passed in at
construction time; transactions loaded from disk bypass them via ``add``.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from functools import cmp_to_key
from typing import Dict, Iterable, Iterator, List, Optional

from ..logging_utils import get_logger
from .categories import CategoryCatalogue
from .transactions import Transaction, TransactionKind
from .validation import LEDGER_CONTEXT, parse_ledger_date, validate_date

LOGGER = get_logger(__name__)


def _compare_dates(first: Transaction, second: Transaction) -> int:
    """Order two transactions by date, treating unparsable dates as equal."""

    try:
        left = parse_ledger_date(first.occurred_on)
        right = parse_ledger_date(second.occurred_on)
    except ValueError:
        return 0
    return (left > right) - (left < right)


def sort_by_date(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Return a new list sorted ascending by date, keeping ties in input order."""

    return sorted(transactions, key=cmp_to_key(_compare_dates))


class Ledger:
    """Manage the session's transactions and compute savings."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        catalogue: Optional[CategoryCatalogue] = None,
    ) -> None:
        self.catalogue = catalogue or CategoryCatalogue()
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def add(self, transaction: Transaction) -> None:
        """Append an already constructed transaction."""

        self._transactions.append(transaction)

    def record(
        self,
        kind: TransactionKind,
        amount: Decimal,
        category: str,
        occurred_on: str,
    ) -> Transaction:
        """Validate and append a new entry, returning the stored transaction."""

        if not self.catalogue.is_allowed(kind, category):
            raise ValueError(f"Category '{category}' is not allowed for {kind.value.lower()}")
        transaction = Transaction(
            kind=kind,
            amount=amount,
            category=category,
            occurred_on=validate_date(occurred_on),
        )
        self.add(transaction)
        LOGGER.info(
            "Recorded %s of %s in %s on %s",
            kind.value.lower(),
            amount,
            category,
            occurred_on,
        )
        return transaction

    def list_transactions(self) -> List[Transaction]:
        """Return transactions in the order they were added."""

        return list(self._transactions)

    def by_category(self) -> Dict[str, List[Transaction]]:
        """Group transactions by category, preserving first-seen order."""

        grouped: Dict[str, List[Transaction]] = {}
        for transaction in self._transactions:
            grouped.setdefault(transaction.category, []).append(transaction)
        return grouped

    def _total(self, kind: TransactionKind) -> Decimal:
        with localcontext(LEDGER_CONTEXT):
            return sum(
                (transaction.amount for transaction in self._transactions if transaction.kind is kind),
                Decimal("0"),
            )

    def total_income(self) -> Decimal:
        return self._total(TransactionKind.INCOME)

    def total_expense(self) -> Decimal:
        return self._total(TransactionKind.EXPENSE)

    def savings(self) -> Decimal:
        """Income minus expenses; negative when spending exceeds earnings."""

        with localcontext(LEDGER_CONTEXT):
            return self.total_income() - self.total_expense()
