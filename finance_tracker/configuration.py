"""Mini README: Centralised configuration for the finance tracker.

Structure:
    * TrackerSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The defaults reproduce the classic tracker: a ``transactions.txt`` file in
    the working directory, rupee amounts and the fixed income/expense category
    lists. Any value can be overridden with ``FINANCE_TRACKER_*`` environment
    variables or a ``.env`` file. Category lists are handed to the ledger and
    console through ``TrackerSettings.catalogue`` rather than read globally.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .finance.categories import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    CategoryCatalogue,
)
from .storage.flat_file import FIELD_DELIMITER


class TrackerSettings(BaseSettings):
    """Runtime configuration for the finance tracker."""

    ledger_path: Path = Field(
        Path("transactions.txt"),
        description="Flat file the ledger is loaded from and saved to.",
    )
    currency_symbol: str = Field(
        "₹",
        description="Symbol prefixed to every amount written to the ledger file.",
        min_length=1,
    )
    income_categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_INCOME_CATEGORIES),
        description="Categories offered when recording income, in menu order.",
    )
    expense_categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXPENSE_CATEGORIES),
        description="Categories offered when recording expenses, in menu order.",
    )
    log_level: str = Field(
        "WARNING",
        description="Console logging level; kept quiet so prompts stay readable.",
    )

    class Config:
        env_prefix = "FINANCE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("ledger_path", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories in the configured ledger location."""

        return Path(value).expanduser()

    @validator("income_categories", "expense_categories")
    def _check_categories(cls, value: List[str]) -> List[str]:
        """Reject empty or duplicated lists and names the ledger file cannot hold."""

        cleaned = [category.strip() for category in value]
        if not cleaned or any(not category for category in cleaned):
            raise ValueError("Category lists must contain non-empty names.")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Category names must be unique within a list.")
        for category in cleaned:
            if FIELD_DELIMITER in category or "\n" in category or "\r" in category:
                raise ValueError(f"Category {category!r} may not contain a line break or {FIELD_DELIMITER!r}.")
        return cleaned

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Accept standard logging level names in any case."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def catalogue(self) -> CategoryCatalogue:
        """Build the category catalogue handed to the ledger and console."""

        return CategoryCatalogue(
            income=tuple(self.income_categories),
            expense=tuple(self.expense_categories),
        )


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
