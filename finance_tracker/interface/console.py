"""Mini README: Interactive menu loop for recording income and expenses.

Structure:
    * ConsoleSession - drives the numbered menu, prompts for input and hands
      validated values to the ledger. Saving happens only on exit.

Invalid amounts and dates are re-prompted; an out-of-range category number
abandons the entry being added and returns to the menu. Storage errors raised
while saving propagate to the caller, which decides how to report them.
"""

from __future__ import annotations

from typing import Callable, Dict

import typer

from ..finance import Ledger, TransactionKind, format_amount, validate_amount, validate_date
from ..logging_utils import get_logger
from ..storage import FlatFileStore

LOGGER = get_logger(__name__)

MENU_OPTIONS = (
    "1. Add Income",
    "2. Add Expense",
    "3. View Savings",
    "4. View Transactions",
    "5. Exit",
)
EXIT_CHOICE = "5"


class ConsoleSession:
    """Run the tracker menu against a ledger and the store it came from."""

    def __init__(self, ledger: Ledger, store: FlatFileStore) -> None:
        self.ledger = ledger
        self.store = store
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.add_income,
            "2": self.add_expense,
            "3": self.show_savings,
            "4": self.show_transactions,
        }

    @property
    def currency_symbol(self) -> str:
        return self.store.currency_symbol

    def run(self) -> None:
        """Loop until the user exits, then persist the ledger."""

        while True:
            typer.echo("\nWelcome to Personal Finance Tracker")
            for option in MENU_OPTIONS:
                typer.echo(option)
            choice = typer.prompt("Enter your choice").strip()
            if choice == EXIT_CHOICE:
                self.store.save_ledger(self.ledger)
                typer.echo("Exiting the program...")
                return
            action = self._actions.get(choice)
            if action is None:
                typer.echo("Invalid choice, please try again.")
                continue
            action()

    def add_income(self) -> None:
        self._add_entry(TransactionKind.INCOME)

    def add_expense(self) -> None:
        self._add_entry(TransactionKind.EXPENSE)

    def _add_entry(self, kind: TransactionKind) -> None:
        label = kind.value.lower()
        amount = self._prompt_valid(f"Enter {label} amount", validate_amount)

        typer.echo(f"Select {label} category: ")
        categories = self.ledger.catalogue.for_kind(kind)
        for number, category in enumerate(categories, start=1):
            typer.echo(f"{number}. {category}")
        raw_choice = typer.prompt("Enter category number").strip()
        try:
            category = self.ledger.catalogue.select(kind, int(raw_choice))
        except ValueError:
            LOGGER.debug("Abandoning %s entry after category choice %r", label, raw_choice)
            typer.echo("Invalid category choice.")
            return

        occurred_on = self._prompt_valid("Enter date (dd-MM-yyyy)", validate_date)
        transaction = self.ledger.record(kind, amount, category, occurred_on)
        typer.echo(f"Added {transaction.describe(self.currency_symbol)}")

    @staticmethod
    def _prompt_valid(text: str, validator: Callable[[str], object]):
        """Prompt until ``validator`` accepts the answer, echoing its complaint."""

        while True:
            answer = typer.prompt(text).strip()
            try:
                return validator(answer)
            except ValueError as error:
                typer.echo(str(error))

    def show_savings(self) -> None:
        savings = format_amount(self.ledger.savings(), self.currency_symbol)
        typer.echo(f"Your total savings: {savings}")

    def show_transactions(self) -> None:
        typer.echo("\nTransactions:")
        if not len(self.ledger):
            typer.echo("No transactions recorded yet.")
            return
        for transaction in self.ledger:
            typer.echo(transaction.describe(self.currency_symbol))
