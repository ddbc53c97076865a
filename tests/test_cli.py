"""Mini README: End-to-end tests for the Typer CLI and the console menu.

Structure:
    * run - scripted menu sessions feeding answers through stdin.
    * savings / transactions - one-shot reports over a saved ledger.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from typer.testing import CliRunner

from finance_tracker.finance import Transaction, TransactionKind
from finance_tracker.storage import FlatFileStore
from main_finance_tracker import cli

runner = CliRunner()


def _run(path: Path, answers: list[str]):
    return runner.invoke(cli, ["run", "--ledger-path", str(path)], input="\n".join(answers) + "\n")


def test_menu_session_saves_on_exit(tmp_path: Path) -> None:
    """Entries added through the menu are written grouped by date on exit."""

    path = tmp_path / "transactions.txt"
    result = _run(
        path,
        [
            "1", "100", "1", "01-01-2024",
            "2", "40", "1", "01-01-2024",
            "1", "50", "2", "02-01-2024",
            "3",
            "5",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Your total savings: ₹110" in result.output
    assert "Exiting the program..." in result.output
    text = path.read_text(encoding="utf-8")
    assert "Closing Balance: ₹60\n" in text
    assert text.endswith("1 | Freelance | Income | ₹50\n\nClosing Balance: ₹110\n\n")


def test_invalid_amount_and_date_are_reprompted(tmp_path: Path) -> None:
    path = tmp_path / "transactions.txt"
    result = _run(path, ["1", "abc", "-5", "100", "1", "31-02-2024", "01-01-2024", "5"])

    assert result.exit_code == 0, result.output
    assert "Invalid amount entered" in result.output
    assert "Amount cannot be negative" in result.output
    assert "Invalid date format" in result.output
    assert FlatFileStore(path).read() == [
        Transaction(TransactionKind.INCOME, Decimal("100"), "Salary", "01-01-2024")
    ]


def test_oversized_amount_is_reprompted_without_ending_session(tmp_path: Path) -> None:
    """An amount beyond the ledger range is refused and the session keeps going."""

    path = tmp_path / "transactions.txt"
    result = _run(path, ["1", "1e1000000", "100", "1", "01-01-2024", "3", "5"])

    assert result.exit_code == 0, result.output
    assert "Amount is too large" in result.output
    assert "Your total savings: ₹100" in result.output
    assert len(FlatFileStore(path).read()) == 1


def test_out_of_range_category_abandons_entry(tmp_path: Path) -> None:
    """A bad category number returns to the menu without recording anything."""

    path = tmp_path / "transactions.txt"
    result = _run(path, ["2", "40", "9", "2", "40", "x", "5"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid category choice.") == 2
    assert FlatFileStore(path).read() == []


def test_unknown_menu_choice_loops(tmp_path: Path) -> None:
    result = _run(tmp_path / "transactions.txt", ["7", "4", "5"])

    assert result.exit_code == 0, result.output
    assert "Invalid choice, please try again." in result.output
    assert "No transactions recorded yet." in result.output


def test_save_failure_is_reported(tmp_path: Path) -> None:
    """Saving into a missing directory reports the error and exits non-zero."""

    result = _run(tmp_path / "missing" / "transactions.txt", ["5"])

    assert result.exit_code == 1
    assert "Error saving transactions" in result.output


def test_existing_ledger_is_loaded_before_menu(tmp_path: Path) -> None:
    path = tmp_path / "transactions.txt"
    FlatFileStore(path).write(
        [Transaction(TransactionKind.INCOME, Decimal("500"), "Salary", "01-01-2024")]
    )

    result = _run(path, ["2", "200", "3", "02-01-2024", "3", "5"])

    assert "Your total savings: ₹300" in result.output
    assert len(FlatFileStore(path).read()) == 2


def test_savings_command_reports_totals(tmp_path: Path) -> None:
    path = tmp_path / "transactions.txt"
    FlatFileStore(path).write(
        [
            Transaction(TransactionKind.INCOME, Decimal("500"), "Salary", "01-01-2024"),
            Transaction(TransactionKind.EXPENSE, Decimal("200"), "Rent", "01-01-2024"),
            Transaction(TransactionKind.EXPENSE, Decimal("50"), "Food", "02-01-2024"),
        ]
    )

    result = runner.invoke(cli, ["savings", "--ledger-path", str(path)])

    assert result.exit_code == 0, result.output
    assert "Total income: ₹500" in result.output
    assert "Total expense: ₹250" in result.output
    assert "Your total savings: ₹250" in result.output


def test_transactions_command_lists_as_json(tmp_path: Path) -> None:
    path = tmp_path / "transactions.txt"
    FlatFileStore(path).write(
        [Transaction(TransactionKind.EXPENSE, Decimal("12.50"), "Transport", "03-02-2024")]
    )

    text_result = runner.invoke(cli, ["transactions", "--ledger-path", str(path)])
    json_result = runner.invoke(cli, ["transactions", "--ledger-path", str(path), "--json"])

    assert "Expense: ₹12.50 (Transport) on 03-02-2024" in text_result.output
    assert json.loads(json_result.stdout) == [
        {"kind": "Expense", "amount": "12.50", "category": "Transport", "occurred_on": "03-02-2024"}
    ]
