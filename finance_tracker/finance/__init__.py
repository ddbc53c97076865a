"""Mini README: Ledger domain for the personal finance tracker.

This package holds the transaction record, the category catalogue, input
validators and the in-memory ledger that aggregates income, expenses and
savings. Persistence lives in ``finance_tracker.storage``.
"""

from .categories import CategoryCatalogue
from .ledger import Ledger, sort_by_date
from .transactions import Transaction, TransactionKind, format_amount
from .validation import LEDGER_CONTEXT, check_amount, parse_ledger_date, validate_amount, validate_date

__all__ = [
    "LEDGER_CONTEXT",
    "CategoryCatalogue",
    "Ledger",
    "Transaction",
    "TransactionKind",
    "check_amount",
    "format_amount",
    "parse_ledger_date",
    "sort_by_date",
    "validate_amount",
    "validate_date",
]
