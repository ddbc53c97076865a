"""Mini README: Tests for settings defaults, overrides and category checks."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from finance_tracker.configuration import TrackerSettings
from finance_tracker.finance import TransactionKind


def test_defaults_match_classic_tracker(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FINANCE_TRACKER_CURRENCY_SYMBOL", raising=False)
    settings = TrackerSettings()

    assert settings.ledger_path == Path("transactions.txt")
    assert settings.currency_symbol == "₹"
    catalogue = settings.catalogue()
    assert catalogue.for_kind(TransactionKind.INCOME) == ("Salary", "Freelance", "Investments", "Other")
    assert catalogue.for_kind(TransactionKind.EXPENSE)[-1] == "Other"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables replace the defaults."""

    monkeypatch.setenv("FINANCE_TRACKER_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("FINANCE_TRACKER_EXPENSE_CATEGORIES", '["Groceries", "Fuel"]')

    settings = TrackerSettings()

    assert settings.currency_symbol == "$"
    assert settings.catalogue().select(TransactionKind.EXPENSE, 2) == "Fuel"


def test_ledger_path_expands_user_directory() -> None:
    settings = TrackerSettings(ledger_path="~/ledger.txt")

    assert settings.ledger_path == Path("~/ledger.txt").expanduser()


@pytest.mark.parametrize(
    "categories",
    [[], ["Food", "Food"], ["Food", " "], ["Food | Drink"], ["Food\nDrink"], ["Food\rDrink"]],
)
def test_invalid_category_lists_are_rejected(categories: list[str]) -> None:
    with pytest.raises(ValidationError):
        TrackerSettings(expense_categories=categories)


def test_delimiter_category_from_environment_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """A category that would split into extra file fields never reaches the ledger."""

    monkeypatch.setenv("FINANCE_TRACKER_EXPENSE_CATEGORIES", '["Food | Drink", "Rent"]')

    with pytest.raises(ValidationError):
        TrackerSettings()


def test_log_level_is_normalised() -> None:
    assert TrackerSettings(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINANCE_TRACKER_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        TrackerSettings()
