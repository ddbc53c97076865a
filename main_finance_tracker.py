"""Mini README: Entry point CLI for the personal finance tracker.

This script exposes a Typer CLI. ``run`` starts the interactive menu, while
``savings`` and ``transactions`` report on the saved ledger without
prompting. Settings come from environment variables when available and the
ledger location can be overridden per invocation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Tuple

import typer

from finance_tracker.configuration import get_settings
from finance_tracker.finance import Ledger, format_amount
from finance_tracker.interface import ConsoleSession
from finance_tracker.logging_utils import configure_root_logger
from finance_tracker.storage import FlatFileStore

cli = typer.Typer(help="Track personal income, expenses and savings in a flat file.")


def _open_ledger(ledger_path: Optional[Path]) -> Tuple[Ledger, FlatFileStore]:
    """Load the configured ledger, honouring an explicit path override."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = FlatFileStore(
        ledger_path or settings.ledger_path,
        currency_symbol=settings.currency_symbol,
    )
    return store.load_ledger(settings.catalogue()), store


@cli.command()
def run(
    ledger_path: Optional[Path] = typer.Option(None, help="Ledger file to load and save."),
) -> None:
    """Start the interactive menu; the ledger is saved on exit."""

    ledger, store = _open_ledger(ledger_path)
    try:
        ConsoleSession(ledger, store).run()
    except OSError as error:
        typer.echo(f"Error saving transactions: {error}", err=True)
        raise typer.Exit(code=1) from error


@cli.command()
def savings(
    ledger_path: Optional[Path] = typer.Option(None, help="Ledger file to report on."),
) -> None:
    """Print total income, total expense and savings for the saved ledger."""

    ledger, store = _open_ledger(ledger_path)
    symbol = store.currency_symbol
    typer.echo(f"Total income: {format_amount(ledger.total_income(), symbol)}")
    typer.echo(f"Total expense: {format_amount(ledger.total_expense(), symbol)}")
    typer.echo(f"Your total savings: {format_amount(ledger.savings(), symbol)}")


@cli.command()
def transactions(
    ledger_path: Optional[Path] = typer.Option(None, help="Ledger file to list."),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array instead of text."),
) -> None:
    """List saved transactions in file order."""

    ledger, store = _open_ledger(ledger_path)
    if as_json:
        payload = [transaction.as_dict() for transaction in ledger]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for transaction in ledger:
        typer.echo(transaction.describe(store.currency_symbol))


if __name__ == "__main__":
    cli()
