"""Mini README: Flat text persistence for the personal ledger.

Structure:
    * FlatFileStore - renders transactions into dated blocks and parses them back.

File layout, one block per date in ascending order::

    Date: 01-01-2024
    Serial No | Category | Type | Amount
    --------------------------------------
    1 | Salary | Income | ₹100
    2 | Food | Expense | ₹40

    Closing Balance: ₹60

The closing balance is a running total across the whole file, not a per-day
figure. When reading, only lines inside a date block that split into exactly
four fields become transactions. Closing balance and blank lines are never
matched explicitly; they fall outside the block or fail the field count, and
existing files depend on exactly that behaviour.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..finance import (
    LEDGER_CONTEXT,
    CategoryCatalogue,
    Ledger,
    Transaction,
    TransactionKind,
    format_amount,
    sort_by_date,
    validate_amount,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DATE_PREFIX = "Date: "
CLOSING_BALANCE_PREFIX = "Closing Balance: "
FIELD_DELIMITER = " | "
TABLE_HEADER = ("Serial No | Category | Type | Amount", "-" * 38)


class FlatFileStore:
    """Read and write a ledger file grouped by date with closing balances."""

    def __init__(self, path: Union[str, Path], *, currency_symbol: str = "₹") -> None:
        self.path = Path(path)
        self.currency_symbol = currency_symbol

    def render(self, transactions: Iterable[Transaction]) -> str:
        """Return the file contents for ``transactions`` without touching disk."""

        buckets: Dict[str, List[Transaction]] = {}
        for transaction in sort_by_date(transactions):
            buckets.setdefault(transaction.occurred_on, []).append(transaction)

        balance = Decimal("0")
        lines: List[str] = []
        for occurred_on, entries in buckets.items():
            lines.append(f"{DATE_PREFIX}{occurred_on}")
            lines.extend(TABLE_HEADER)
            for serial, transaction in enumerate(entries, start=1):
                lines.append(
                    FIELD_DELIMITER.join(
                        (
                            str(serial),
                            transaction.category,
                            transaction.kind.value,
                            format_amount(transaction.amount, self.currency_symbol),
                        )
                    )
                )
                with localcontext(LEDGER_CONTEXT):
                    balance += transaction.signed_amount
            lines.append("")
            lines.append(f"{CLOSING_BALANCE_PREFIX}{format_amount(balance, self.currency_symbol)}")
            lines.append("")
        return "\n".join(lines) + "\n" if lines else ""

    def write(self, transactions: Iterable[Transaction]) -> None:
        """Overwrite the ledger file. ``OSError`` is logged and re-raised."""

        contents = self.render(transactions)
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(contents)
        except OSError as error:
            LOGGER.error("Error saving transactions to %s: %s", self.path, error)
            raise
        LOGGER.info("Saved ledger to %s", self.path)

    def parse(self, lines: Iterable[str]) -> List[Transaction]:
        """Rebuild transactions from file lines, dropping malformed entries."""

        transactions: List[Transaction] = []
        remaining = iter(lines)
        for line in remaining:
            if not line.startswith(DATE_PREFIX):
                continue
            occurred_on = line[len(DATE_PREFIX):]
            # table header and separator are not validated
            next(remaining, None)
            next(remaining, None)
            for entry in remaining:
                if not entry:
                    break
                transaction = self._parse_entry(entry, occurred_on)
                if transaction is not None:
                    transactions.append(transaction)
        return transactions

    def _parse_entry(self, entry: str, occurred_on: str) -> Optional[Transaction]:
        fields = entry.split(FIELD_DELIMITER)
        if len(fields) != 4:
            LOGGER.debug("Skipping line with %s fields: %r", len(fields), entry)
            return None
        _, category, label, raw_amount = fields
        if raw_amount.startswith(self.currency_symbol):
            raw_amount = raw_amount[len(self.currency_symbol):]
        try:
            amount = validate_amount(raw_amount)
        except ValueError:
            LOGGER.warning("Skipping line with unreadable amount: %r", entry)
            return None
        # anything not labelled Income is treated as an expense
        kind = TransactionKind.INCOME if label == TransactionKind.INCOME.value else TransactionKind.EXPENSE
        return Transaction(kind=kind, amount=amount, category=category, occurred_on=occurred_on)

    def read(self) -> List[Transaction]:
        """Load transactions, returning an empty list when the file is unreadable."""

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                transactions = self.parse(line.rstrip("\r\n") for line in handle)
        except FileNotFoundError:
            LOGGER.info("No ledger at %s yet; starting empty", self.path)
            return []
        except (OSError, UnicodeDecodeError) as error:
            LOGGER.warning("Error loading transactions from %s: %s", self.path, error)
            return []
        LOGGER.info("Loaded %s transactions from %s", len(transactions), self.path)
        return transactions

    def load_ledger(self, catalogue: Optional[CategoryCatalogue] = None) -> Ledger:
        return Ledger(self.read(), catalogue=catalogue)

    def save_ledger(self, ledger: Ledger) -> None:
        self.write(ledger.list_transactions())
