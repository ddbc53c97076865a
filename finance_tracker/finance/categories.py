"""Mini README: Category catalogue shared by the ledger and the console.

Structure:
    * DEFAULT_INCOME_CATEGORIES / DEFAULT_EXPENSE_CATEGORIES - stock lists
      used when configuration does not override them.
    * CategoryCatalogue - immutable pair of allowed category lists with
      lookup helpers keyed by transaction kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .transactions import TransactionKind

DEFAULT_INCOME_CATEGORIES: Tuple[str, ...] = ("Salary", "Freelance", "Investments", "Other")
DEFAULT_EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Utilities",
    "Rent",
    "Entertainment",
    "Transport",
    "Other",
)


@dataclass(frozen=True, slots=True)
class CategoryCatalogue:
    """Allowed category names for each transaction kind, in menu order."""

    income: Tuple[str, ...] = DEFAULT_INCOME_CATEGORIES
    expense: Tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES

    def for_kind(self, kind: TransactionKind) -> Tuple[str, ...]:
        """Return the categories offered for ``kind``."""

        return self.income if kind is TransactionKind.INCOME else self.expense

    def is_allowed(self, kind: TransactionKind, category: str) -> bool:
        return category in self.for_kind(kind)

    def select(self, kind: TransactionKind, choice: int) -> str:
        """Resolve a 1-based menu choice into a category name.

        Raises ``ValueError`` when the choice falls outside the list so the
        caller can abandon the current entry.
        """

        categories = self.for_kind(kind)
        if choice < 1 or choice > len(categories):
            raise ValueError(f"Invalid category choice: {choice}")
        return categories[choice - 1]
