"""Mini README: Input validators used before a transaction is recorded.

Structure:
    * validate_amount - parse free text into a non-negative ``Decimal``.
    * validate_date - accept only real calendar dates written as dd-MM-yyyy.
    * parse_ledger_date - strict parse shared by validation and sorting.

Validators raise ``ValueError`` with a message suitable for showing to the
user so the console can simply echo it and prompt again.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Context, Decimal, DivisionByZero, InvalidOperation, Overflow, localcontext

DATE_FORMAT = "%d-%m-%Y"
DATE_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4}")

MAX_WHOLE_DIGITS = 18
MAX_DECIMAL_PLACES = 9
SMALLEST_UNIT = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)

# Bounded amounts need at most 27 digits each, so totals stay exact here.
LEDGER_CONTEXT = Context(prec=100, traps=[InvalidOperation, DivisionByZero, Overflow])


def check_amount(amount: Decimal) -> Decimal:
    """Ensure ``amount`` is a non-negative value the ledger can total exactly."""

    if not amount.is_finite():
        raise ValueError("Invalid amount entered")
    if amount < 0:
        raise ValueError("Amount cannot be negative")
    if amount and amount.adjusted() >= MAX_WHOLE_DIGITS:
        raise ValueError(f"Amount is too large, use at most {MAX_WHOLE_DIGITS} whole digits")
    with localcontext(LEDGER_CONTEXT):
        if amount.quantize(SMALLEST_UNIT) != amount:
            raise ValueError(f"Amount has more than {MAX_DECIMAL_PLACES} decimal places")
    return amount


def validate_amount(text: str) -> Decimal:
    """Parse an amount, rejecting non-numeric, non-finite, negative and oversized input."""

    try:
        amount = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as error:
        raise ValueError("Invalid amount entered") from error
    return check_amount(amount)


def parse_ledger_date(value: str) -> date:
    """Parse a strict dd-MM-yyyy string without rolling over bad days or months."""

    # strptime alone accepts single digit fields such as "1-1-2024"
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid date '{value}', expected dd-MM-yyyy")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as error:
        raise ValueError(f"Invalid date '{value}', expected dd-MM-yyyy") from error


def validate_date(text: str) -> str:
    """Return ``text`` unchanged when it is a real dd-MM-yyyy calendar date."""

    try:
        parse_ledger_date(text)
    except ValueError as error:
        raise ValueError(
            "Invalid date format, please enter date in dd-MM-yyyy format."
        ) from error
    return text
